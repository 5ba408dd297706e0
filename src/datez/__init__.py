"""Calendar dates from year 0 through year 4,294,967,295."""

from __future__ import annotations

from importlib import metadata

from datez.domain.model import (
    CompactDate,
    DateComparison,
    DateError,
    DateValue,
    ExtendedDate,
    Month,
)
from datez.domain.parsing import parse_date

try:
    __version__ = metadata.version("datez")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "CompactDate",
    "DateComparison",
    "DateError",
    "DateValue",
    "ExtendedDate",
    "Month",
    "__version__",
    "parse_date",
]

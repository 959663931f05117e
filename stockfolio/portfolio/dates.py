"""dd/mm/yy date parsing and formatting."""

from __future__ import annotations

from datetime import date, datetime

from stockfolio.config.defaults import DATE_FORMAT
from stockfolio.errors import BadDateFormatError


def parse_date(text: str) -> date:
    """Parse a ``dd/mm/yy`` string into a :class:`date`."""
    try:
        return datetime.strptime(text.strip(), DATE_FORMAT).date()
    except (ValueError, AttributeError):
        raise BadDateFormatError(str(text)) from None


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def is_representable(value: date) -> bool:
    """Whether *value* survives a ``dd/mm/yy`` round trip (years 1969-2068)."""
    return parse_date(format_date(value)) == value

"""Query string and URL path helpers"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Mapping
from urllib.parse import quote

QUERY_DATE_FORMAT = "%Y-%m-%d"


def format_query_date(value: date) -> str:
    """Format a date (or the date part of a datetime) the way list filters expect"""
    if isinstance(value, datetime):
        value = value.date()
    return value.strftime(QUERY_DATE_FORMAT)


def build_query(values: Mapping[str, Any]) -> Dict[str, str]:
    """
    Turn filter values into query parameters.

    None and empty strings are dropped, dates use YYYY-MM-DD, booleans are
    lowercased and enums contribute their value.
    """
    params: Dict[str, str] = {}
    for key, value in values.items():
        if value is None or value == "":
            continue
        if isinstance(value, date):
            params[key] = format_query_date(value)
        elif isinstance(value, bool):
            params[key] = "true" if value else "false"
        elif isinstance(value, Enum):
            params[key] = str(value.value)
        else:
            params[key] = str(value)
    return params


def path_segment(value: Any) -> str:
    """Escape a caller-supplied value for use as a single path segment"""
    text = str(value)
    if not text.strip():
        raise ValueError("path segment must not be empty")
    return quote(text, safe="")

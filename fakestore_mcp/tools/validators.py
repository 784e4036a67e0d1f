"""
Input validation utilities for tool arguments
"""

import math
import re
from typing import Any, Dict
from urllib.parse import quote, urlparse

from fakestore_mcp.services.fakestore.errors import ValidationError

SORT_ORDERS = ("asc", "desc")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

WHITESPACE_PATTERN = re.compile(r"\s")

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_.~"
_PATH_SAFE = "!*'()"


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_positive_integer(value: Any, field_name: str) -> None:
    if not _is_integer(value) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer")


def validate_positive_number(value: Any, field_name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field_name} must be a positive number")
    # NaN and infinities cannot be encoded as JSON
    if (isinstance(value, float) and not math.isfinite(value)) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive number")


def validate_sort_order(value: Any) -> None:
    if value is not None and value not in SORT_ORDERS:
        raise ValidationError('Sort order must be "asc" or "desc"')


def validate_limit(value: Any) -> None:
    if value is not None and (not _is_integer(value) or value <= 0):
        raise ValidationError("Limit must be a positive integer")


def validate_string(value: Any, field_name: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")


def validate_email(value: Any) -> None:
    if not isinstance(value, str) or not EMAIL_PATTERN.match(value):
        raise ValidationError("Invalid email format")


def validate_url(value: Any, field_name: str) -> None:
    if not isinstance(value, str) or WHITESPACE_PATTERN.search(value):
        raise ValidationError(f"{field_name} must be a valid http(s) URL")
    parsed = urlparse(value)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValidationError(f"{field_name} must be a valid http(s) URL")


def sanitize_path_segment(value: str) -> str:
    """Percent-encode a value so it stays a single path segment"""
    return quote(value, safe=_PATH_SAFE)


def build_list_params(args: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the optional limit/sort pair and return the query parameters"""
    limit = args.get("limit")
    sort = args.get("sort")
    validate_limit(limit)
    validate_sort_order(sort)

    params: Dict[str, Any] = {}
    if limit is not None:
        params["limit"] = limit
    if sort is not None:
        params["sort"] = sort
    return params

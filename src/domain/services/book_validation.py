"""Validation rules for book payloads.

Checks run in a fixed order and the first failing one is reported, so the
message a client sees is deterministic for any payload.
"""

from enum import Enum
from typing import Any, Mapping, Optional

NUMERIC_FIELDS = ("year", "pageCount", "readPage")
TEXT_FIELDS = ("author", "summary", "publisher")


class ValidationFailure(str, Enum):
    """Reason a book payload was rejected."""
    MISSING_NAME = "missing_name"
    INVALID_NUMBER = "invalid_number"
    NEGATIVE_NUMBER = "negative_number"
    INVALID_READING = "invalid_reading"
    INVALID_TEXT = "invalid_text"
    READ_PAGE_EXCEEDS_PAGE_COUNT = "read_page_exceeds_page_count"
    
    @property
    def detail(self) -> str:
        """Human-readable explanation, without the operation prefix."""
        return _DETAILS[self]


_DETAILS = {
    ValidationFailure.MISSING_NAME: "Please provide the book name",
    ValidationFailure.INVALID_NUMBER: "Please provide valid numbers for year, pageCount and readPage",
    ValidationFailure.NEGATIVE_NUMBER: "year, pageCount and readPage must not be negative",
    ValidationFailure.INVALID_READING: "Please provide reading as true or false",
    ValidationFailure.INVALID_TEXT: "author, summary and publisher must be text",
    ValidationFailure.READ_PAGE_EXCEEDS_PAGE_COUNT: "readPage cannot be greater than pageCount",
}


def whole_number(value: Any) -> Optional[int]:
    """Return ``value`` as an int if it is a whole JSON number, else None.
    
    Booleans are rejected even though ``bool`` subclasses ``int``. Floats are
    accepted only when they carry no fractional part (``100.0``).
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def validate_book_payload(payload: Mapping[str, Any]) -> Optional[ValidationFailure]:
    """Check a book payload and return the first failure, or None if it is valid.
    
    The ``readPage <= pageCount`` rule is not part of this pass; callers run
    :func:`check_read_progress` once this returns None.
    
    Args:
        payload: Decoded JSON request body, keyed by wire field names.
        
    Returns:
        The first applicable ValidationFailure, or None.
    """
    name = payload.get("name")
    if not isinstance(name, str) or not name:
        return ValidationFailure.MISSING_NAME
    
    numbers = [whole_number(payload.get(field)) for field in NUMERIC_FIELDS]
    if any(number is None for number in numbers):
        return ValidationFailure.INVALID_NUMBER
    
    if any(number < 0 for number in numbers):
        return ValidationFailure.NEGATIVE_NUMBER
    
    if not isinstance(payload.get("reading"), bool):
        return ValidationFailure.INVALID_READING
    
    for field in TEXT_FIELDS:
        value = payload.get(field)
        if value is not None and not isinstance(value, str):
            return ValidationFailure.INVALID_TEXT
    
    return None


def check_read_progress(payload: Mapping[str, Any]) -> Optional[ValidationFailure]:
    """Reject a payload whose ``readPage`` is past its ``pageCount``.
    
    Expects a payload that already passed :func:`validate_book_payload`.
    """
    if payload["readPage"] > payload["pageCount"]:
        return ValidationFailure.READ_PAGE_EXCEEDS_PAGE_COUNT
    return None


def normalize_numbers(payload: Mapping[str, Any]) -> dict:
    """Copy of a valid payload with ``year``, ``pageCount`` and ``readPage`` as ints.
    
    Whole floats of any size become exact ints here, so the model never has
    to parse a float itself.
    """
    normalized = dict(payload)
    for field in NUMERIC_FIELDS:
        normalized[field] = whole_number(payload[field])
    return normalized

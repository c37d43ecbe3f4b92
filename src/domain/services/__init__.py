"""Domain services for the bookshelf application."""

from .book_validation import ValidationFailure, check_read_progress, normalize_numbers, validate_book_payload

__all__ = ["ValidationFailure", "check_read_progress", "normalize_numbers", "validate_book_payload"]

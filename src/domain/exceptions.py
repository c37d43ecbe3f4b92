"""Errors raised by bookshelf operations."""

from enum import Enum
from typing import Optional

from .services.book_validation import ValidationFailure


class BookOperation(str, Enum):
    """Verb used in client-facing failure messages."""
    ADD = "add"
    UPDATE = "update"
    DELETE = "delete"


class BookshelfError(Exception):
    """Base class for errors a client can cause."""
    
    status_code = 400


class BookValidationError(BookshelfError):
    """The request payload broke a validation rule. Nothing was changed."""
    
    status_code = 400
    
    def __init__(self, failure: ValidationFailure, operation: BookOperation):
        self.failure = failure
        self.operation = operation
        super().__init__(f"Failed to {operation.value} book. {failure.detail}")


class BookNotFoundError(BookshelfError):
    """No book with the requested id exists. Nothing was changed."""
    
    status_code = 404
    
    def __init__(self, book_id: str, operation: Optional[BookOperation] = None):
        self.book_id = book_id
        self.operation = operation
        if operation is None:
            message = "Book not found"
        else:
            message = f"Failed to {operation.value} book. Id not found"
        super().__init__(message)

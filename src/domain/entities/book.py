"""Book entities for the bookshelf application."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class BookPayload(BaseModel):
    """The client-editable fields of a book.
    
    Built from a request body after it has passed validation. Field names
    are snake_case in Python and camelCase on the wire.
    """
    
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    name: str = Field(min_length=1, description="Title of the book")
    year: int = Field(ge=0, description="Publication year")
    author: Optional[str] = Field(None, description="Author of the book")
    summary: Optional[str] = Field(None, description="Short summary")
    publisher: Optional[str] = Field(None, description="Publisher name")
    page_count: int = Field(ge=0, alias="pageCount", description="Total number of pages")
    read_page: int = Field(ge=0, alias="readPage", description="Last page read")
    reading: bool = Field(description="Whether the book is currently being read")
    
    @model_validator(mode="after")
    def check_read_page(self):
        if self.read_page > self.page_count:
            raise ValueError("readPage cannot be greater than pageCount")
        return self


class Book(BookPayload):
    """Book record as held by the store.
    
    ``finished`` is derived from the page counters on every read, so it is
    always consistent with ``read_page`` and ``page_count``.
    """
    
    id: str = Field(default_factory=lambda: str(uuid.uuid4()), description="Unique identifier for the book")
    inserted_at: datetime = Field(alias="insertedAt")
    updated_at: datetime = Field(alias="updatedAt")
    
    @computed_field
    @property
    def finished(self) -> bool:
        return self.read_page == self.page_count
    
    def to_response(self) -> dict:
        """JSON-ready representation using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)


class BookSummary(BaseModel):
    """Reduced projection of a book used by the list endpoint."""
    
    id: str
    name: str
    publisher: Optional[str] = None
    
    @classmethod
    def from_book(cls, book: Book) -> "BookSummary":
        return cls(id=book.id, name=book.name, publisher=book.publisher)

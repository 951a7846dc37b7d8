"""Pydantic schemas for Book API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from booklens.domain.library.entities.book import MAX_COUNTER
from booklens.domain.library.entities.book import Book as BookEntity


class BookBase(BaseModel):
    """Optional descriptive fields shared by requests and responses."""

    publisher: str | None = Field(None, max_length=500, description="Publisher")
    publish_date: str | None = Field(None, max_length=50, description="Free-form publish date")
    start_date: str | None = Field(None, max_length=50, description="Free-form start date")
    completed_date: str | None = Field(
        None, max_length=50, description="Free-form completion date"
    )
    memo: str | None = Field(None, description="Personal notes")
    thumbnail: str | None = Field(None, max_length=1000, description="Cover image URL")
    isbn: str | None = Field(None, max_length=20, description="Book ISBN")


class BookCreate(BookBase):
    """Schema for creating a Book."""

    title: str = Field(..., min_length=1, max_length=500, description="Book title")
    author: str = Field(..., min_length=1, max_length=500, description="Book author")
    total_page: int = Field(..., ge=0, le=MAX_COUNTER, description="Total page count")
    read_page: int = Field(0, ge=0, le=MAX_COUNTER, description="Pages already read")
    progress: float | None = Field(
        None, ge=0, le=100, description="Only used when total_page is 0"
    )
    status: str | None = Field(None, description="reading | completed | not_started")


class BookUpdate(BookBase):
    """Schema for a partial Book edit. Omitted fields stay unchanged."""

    title: str | None = Field(None, min_length=1, max_length=500)
    author: str | None = Field(None, min_length=1, max_length=500)
    total_page: int | None = Field(None, ge=0, le=MAX_COUNTER)
    read_page: int | None = Field(None, ge=0, le=MAX_COUNTER)
    progress: float | None = Field(None, ge=0, le=100, description="Overrides the computed value")
    status: str | None = Field(None, description="reading | completed | not_started")
    total_reading_time: int | None = Field(None, ge=0, le=MAX_COUNTER, description="Seconds")


class Book(BookBase):
    """Schema for Book response."""

    id: int
    user_id: int
    title: str
    author: str
    total_page: int
    read_page: int
    progress: float
    status: str
    total_reading_time: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, book: BookEntity) -> "Book":
        return cls(
            id=book.id.value,
            user_id=book.user_id.value,
            title=book.title,
            author=book.author,
            publisher=book.publisher,
            publish_date=book.publish_date,
            total_page=book.total_page,
            read_page=book.read_page,
            progress=book.progress,
            status=book.status.to_api(),
            start_date=book.start_date,
            completed_date=book.completed_date,
            total_reading_time=book.total_reading_time,
            memo=book.memo,
            thumbnail=book.thumbnail,
            isbn=book.isbn,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

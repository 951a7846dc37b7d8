from .book import Book, BookStatus, compute_progress

__all__ = [
    "Book",
    "BookStatus",
    "compute_progress",
]

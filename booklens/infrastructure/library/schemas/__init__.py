from .book_schemas import Book, BookCreate, BookUpdate

__all__ = ["Book", "BookCreate", "BookUpdate"]

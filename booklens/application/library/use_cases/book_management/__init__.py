from .create_book_use_case import BookCreateData, CreateBookUseCase
from .delete_book_use_case import DeleteBookUseCase
from .update_book_use_case import BookUpdateData, UpdateBookUseCase

__all__ = [
    "BookCreateData",
    "BookUpdateData",
    "CreateBookUseCase",
    "DeleteBookUseCase",
    "UpdateBookUseCase",
]

from .get_books_use_case import GetBooksUseCase

__all__ = ["GetBooksUseCase"]

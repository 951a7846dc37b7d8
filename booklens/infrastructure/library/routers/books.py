import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path
from starlette import status

from booklens.application.library.use_cases.book_management import (
    BookCreateData,
    BookUpdateData,
    CreateBookUseCase,
    DeleteBookUseCase,
    UpdateBookUseCase,
)
from booklens.application.library.use_cases.book_queries import GetBooksUseCase
from booklens.core import container
from booklens.exceptions import BookNotFoundError
from booklens.infrastructure.common.di import inject_use_case
from booklens.infrastructure.identity.dependencies import CurrentUser
from booklens.infrastructure.library.schemas import Book, BookCreate, BookUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/books", tags=["books"])

BookIdPath = Annotated[int, Path(gt=0, le=2_147_483_647, description="Book ID")]


@router.get(
    "",
    response_model=list[Book],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def list_books(
    current_user: CurrentUser,
    use_case: GetBooksUseCase = Depends(inject_use_case(container.get_books_use_case)),
) -> list[Book]:
    """List the caller's books, most recently updated first."""
    return [Book.from_entity(book) for book in use_case.list_books(current_user.value)]


@router.post(
    "",
    response_model=Book,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_book(
    request: BookCreate,
    current_user: CurrentUser,
    use_case: CreateBookUseCase = Depends(inject_use_case(container.create_book_use_case)),
) -> Book:
    """
    Add a book to the caller's library.

    Progress is derived from read_page and total_page. Status defaults to
    reading.
    """
    book = use_case.create_book(BookCreateData(**request.model_dump()), current_user.value)
    return Book.from_entity(book)


@router.get(
    "/{book_id}",
    response_model=Book,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def get_book(
    book_id: BookIdPath,
    current_user: CurrentUser,
    use_case: GetBooksUseCase = Depends(inject_use_case(container.get_books_use_case)),
) -> Book:
    """Get one of the caller's books."""
    book = use_case.get_book(book_id, current_user.value)
    if book is None:
        raise BookNotFoundError(message="Book not found")
    return Book.from_entity(book)


@router.put(
    "/{book_id}",
    response_model=Book,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
def update_book(
    book_id: BookIdPath,
    request: BookUpdate,
    current_user: CurrentUser,
    use_case: UpdateBookUseCase = Depends(inject_use_case(container.update_book_use_case)),
) -> Book:
    """
    Update book information.

    Only supplied fields change. Progress is recomputed from the page
    counts unless it is supplied.

    Raises:
        BookNotFoundError: If the book does not exist or belongs to someone else
    """
    book = use_case.update_book(
        book_id, BookUpdateData(**request.model_dump(exclude_none=True)), current_user.value
    )
    if book is None:
        raise BookNotFoundError(message="Book not found")
    return Book.from_entity(book)


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book(
    book_id: BookIdPath,
    current_user: CurrentUser,
    use_case: DeleteBookUseCase = Depends(inject_use_case(container.delete_book_use_case)),
) -> None:
    """
    Delete a book (hard delete).

    Its reading sessions are deleted with it. Postings about the book are
    kept but no longer point at it.
    """
    if not use_case.delete_book(book_id, current_user.value):
        raise BookNotFoundError(message="Book not found")
    logger.info("User %s deleted book %s", current_user.value, book_id)

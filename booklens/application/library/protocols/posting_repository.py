from typing import Protocol

from booklens.domain.common.value_objects.ids import BookId


class PostingRepositoryProtocol(Protocol):
    def clear_book_reference(self, book_id: BookId) -> int: ...

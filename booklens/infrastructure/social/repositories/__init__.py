from .posting_repository import PostingRepository

__all__ = ["PostingRepository"]

from .reading_session import ReadingSession

__all__ = [
    "ReadingSession",
]

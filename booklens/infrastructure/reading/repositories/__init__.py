from .reading_session_repository import ReadingSessionRepository

__all__ = ["ReadingSessionRepository"]

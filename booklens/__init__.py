"""BookLens: book progress tracking and reading session calendar API."""

__version__ = "0.1.0"

"""
Infrastructure layer.

SQLAlchemy repositories and mappers, the unit of work, authentication and
the FastAPI routers.
"""

"""
Application layer.

Use cases orchestrate domain objects inside a unit of work. Repository
protocols describe what the use cases need from persistence without tying
them to SQLAlchemy.
"""

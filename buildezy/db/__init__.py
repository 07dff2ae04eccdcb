"""Database package — async SQLAlchemy pool wrapper, Base, and FastAPI dependency."""
from buildezy.db.base import Base, Database, get_db

__all__ = ["Base", "Database", "get_db"]

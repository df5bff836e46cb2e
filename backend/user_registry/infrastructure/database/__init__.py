from .base import Base
from .session import Database, get_database, get_db_session
from .models import UserModel

__all__ = [
    "Base",
    "Database",
    "get_database",
    "get_db_session",
    "UserModel",
]

from .user import ID_MAX, ID_MIN, UserModel

__all__ = [
    "ID_MAX",
    "ID_MIN",
    "UserModel",
]

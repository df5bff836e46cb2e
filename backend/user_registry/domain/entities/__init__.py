from .user import Address, User

__all__ = [
    "Address",
    "User",
]

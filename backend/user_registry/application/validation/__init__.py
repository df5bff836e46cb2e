from .user_validators import (
    CreateUserValidator,
    UpdateUserValidator,
    UserDraft,
    ValidationResult,
    coerce_age,
)

__all__ = [
    "CreateUserValidator",
    "UpdateUserValidator",
    "UserDraft",
    "ValidationResult",
    "coerce_age",
]

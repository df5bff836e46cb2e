"""Application service (use case) for User operations."""

import logging
from collections.abc import Mapping
from typing import Any

from user_registry.application.interfaces import UserRepository
from user_registry.application.validation import (
    CreateUserValidator,
    UpdateUserValidator,
    ValidationResult,
    coerce_age,
)
from user_registry.domain.entities import User
from user_registry.domain.exceptions import (
    EntityNotFoundError,
    PersistenceError,
    RecordValidationError,
    StoreError,
)

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user CRUD logic. Depends on the repository port (DI).

    Validation always completes before the repository is touched, and store
    failures are surfaced immediately as ``PersistenceError`` without retry.
    """

    def __init__(
        self,
        repository: UserRepository,
        create_validator: CreateUserValidator | None = None,
        update_validator: UpdateUserValidator | None = None,
    ):
        self._repository = repository
        self._create_validator = create_validator or CreateUserValidator()
        self._update_validator = update_validator or UpdateUserValidator()

    async def list_users(self) -> list[User]:
        try:
            return await self._repository.get_all()
        except StoreError as e:
            logger.error("Error fetching users: %s", e.detail)
            raise PersistenceError("Failed to fetch users.", detail=e.detail) from e

    async def create_user(self, payload: Mapping[str, Any]) -> User:
        logger.debug("Received payload: %s", payload)
        draft = self._check(self._create_validator.validate(payload)).draft

        user = User(
            name=draft.name,
            email=draft.email,
            age=draft.age,
            address=draft.address,
        )
        try:
            return await self._repository.create(user)
        except StoreError as e:
            logger.error("Database error: %s", e.detail)
            raise PersistenceError(
                "An error occurred while saving the user.", detail=e.detail
            ) from e

    async def update_user(self, user_id: int, payload: Mapping[str, Any]) -> None:
        draft = self._check(self._update_validator.validate(payload)).draft

        # Update only checks presence; the integer column still rejects non-numeric
        # ages and rounds fractional ones.
        age = coerce_age(draft.age, round_fractions=True)
        if age is None:
            logger.error("Error updating user %s: age %r is not an integer", user_id, draft.age)
            raise PersistenceError(
                "Failed to update user.",
                detail=f"Incorrect integer value {draft.age!r} for column 'age'",
            )

        user = User(
            id=user_id,
            name=draft.name,
            email=draft.email,
            age=age,
            address=draft.address,
        )
        try:
            matched = await self._repository.update(user)
        except StoreError as e:
            logger.error("Error updating user %s: %s", user_id, e.detail)
            raise PersistenceError("Failed to update user.", detail=e.detail) from e
        if not matched:
            raise EntityNotFoundError("User", user_id)

    async def delete_user(self, user_id: int) -> None:
        try:
            deleted = await self._repository.delete(user_id)
        except StoreError as e:
            logger.error("Error deleting user %s: %s", user_id, e.detail)
            raise PersistenceError("Failed to delete user.", detail=e.detail) from e
        if not deleted:
            raise EntityNotFoundError("User", user_id)

    @staticmethod
    def _check(result: ValidationResult) -> ValidationResult:
        if not result.ok:
            logger.info("Rejected payload: %s (%s)", result.message, result.field)
            raise RecordValidationError(result.field, result.message)
        return result

"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from user_registry.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer.

    Implementations raise ``StoreError`` when the store rejects an operation.
    """

    @abstractmethod
    async def get_all(self) -> list[User]:
        """Retrieve every record in store-native order."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new record and return it with its assigned id."""
        ...

    @abstractmethod
    async def update(self, user: User) -> bool:
        """Replace every field of the record with ``user.id``. Returns False if not found."""
        ...

    @abstractmethod
    async def delete(self, user_id: int) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

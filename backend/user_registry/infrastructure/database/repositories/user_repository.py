"""Concrete repository implementation for User backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from user_registry.application.interfaces import UserRepository
from user_registry.domain.entities import User
from user_registry.domain.exceptions import StoreError
from user_registry.infrastructure.database.address_codec import decode_address, encode_address
from user_registry.infrastructure.database.models import ID_MAX, ID_MIN, UserModel

# Drivers raise OverflowError, not a DBAPI error, for ints wider than the column.
_STORE_ERRORS = (SQLAlchemyError, OverflowError)


class SQLAlchemyUserRepository(UserRepository):
    """Implements the UserRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: UserModel) -> User:
        """Map ORM model → domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            age=model.age,
            address=decode_address(model.address, user_id=model.id),
        )

    def _to_model(self, entity: User) -> UserModel:
        """Map domain entity → ORM model (for creation)."""
        return UserModel(
            name=entity.name,
            email=entity.email,
            age=entity.age,
            address=encode_address(entity.address),
        )

    async def _get_model(self, user_id: int) -> UserModel | None:
        # No row can carry an id the column cannot represent.
        if not ID_MIN <= user_id <= ID_MAX:
            return None
        return await self._session.get(UserModel, user_id)

    async def get_all(self) -> list[User]:
        stmt = select(UserModel).order_by(UserModel.id)
        try:
            result = await self._session.execute(stmt)
            models = result.scalars().all()
        except _STORE_ERRORS as e:
            raise StoreError(str(e)) from e
        return [self._to_entity(row) for row in models]

    async def create(self, user: User) -> User:
        model = self._to_model(user)
        self._session.add(model)
        try:
            await self._session.flush()
        except _STORE_ERRORS as e:
            raise StoreError(str(e)) from e
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            age=model.age,
            address=user.address,
        )

    async def update(self, user: User) -> bool:
        try:
            model = await self._get_model(user.id)
            if model is None:
                return False
            model.name = user.name
            model.email = user.email
            model.age = user.age
            model.address = encode_address(user.address)
            await self._session.flush()
        except _STORE_ERRORS as e:
            raise StoreError(str(e)) from e
        return True

    async def delete(self, user_id: int) -> bool:
        try:
            model = await self._get_model(user_id)
            if model is None:
                return False
            await self._session.delete(model)
            await self._session.flush()
        except _STORE_ERRORS as e:
            raise StoreError(str(e)) from e
        return True

"""SQLAlchemy ORM model for the User entity."""

from sqlalchemy import BigInteger, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from user_registry.infrastructure.database.base import Base

# Signed 64-bit identity range; SQLite keeps INTEGER so the id aliases rowid.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


class UserModel(Base):
    """ORM model — maps to the 'users' table.

    ``address`` holds the JSON serialization of ``{city, house}``; encoding
    and decoding happen in ``address_codec`` so that reads never fail on a
    malformed value.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)

    # Never reuse the id of a deleted row on SQLite.
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email='{self.email}')>"

"""Per-operation payload validators for user records.

Each validator inspects a raw JSON payload and returns a ``ValidationResult``
— either ``ok`` with a normalised ``UserDraft`` or the first rule that failed.
Create is stricter than Update: Create checks types and coerces ``age`` to an
integer, Update only requires every field to be truthy.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from user_registry.domain.entities import Address

NAME_MESSAGE = "Invalid or missing name. Name must be a string."
EMAIL_MESSAGE = "Invalid or missing email. Email must be a string."
AGE_MESSAGE = "Invalid or missing age. Age must be a number."
ADDRESS_MESSAGE = (
    'Invalid or missing address. Address must include "city" and "house", both as strings.'
)
ADDRESS_FORMAT_MESSAGE = 'Invalid address format. Both "city" and "house" must be strings.'
UPDATE_MESSAGE = "Invalid or missing fields in the request."


@dataclass(frozen=True)
class UserDraft:
    """Validated field values ready to be turned into a ``User``.

    ``age`` is an ``int`` for create drafts; update drafts carry the caller's
    value unchanged.
    """

    name: str
    email: str
    age: Any
    address: Address


@dataclass(frozen=True)
class ValidationResult:
    """Tagged outcome of a validation pass."""

    ok: bool
    draft: UserDraft | None = None
    field: str | None = None
    message: str | None = None

    @classmethod
    def success(cls, draft: UserDraft) -> "ValidationResult":
        return cls(ok=True, draft=draft)

    @classmethod
    def failure(cls, field: str, message: str) -> "ValidationResult":
        return cls(ok=False, field=field, message=message)


def coerce_age(value: Any, *, round_fractions: bool = False) -> int | None:
    """Coerce a caller-supplied age to an integer, or None if it is not numeric.

    Fractional values are rejected unless ``round_fractions`` is set, in which
    case they are rounded half away from zero like an integer SQL column.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer():
            return int(value)
        if round_fractions:
            return int(math.copysign(math.floor(abs(value) + 0.5), value))
    return None


class CreateUserValidator:
    """Strict rules for new records; the first failing rule wins."""

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        name = payload.get("name")
        if not name or not isinstance(name, str):
            return ValidationResult.failure("name", NAME_MESSAGE)

        email = payload.get("email")
        if not email or not isinstance(email, str):
            return ValidationResult.failure("email", EMAIL_MESSAGE)

        age = coerce_age(payload.get("age"))
        if age is None:
            return ValidationResult.failure("age", AGE_MESSAGE)

        address = payload.get("address")
        if (
            not isinstance(address, Mapping)
            or not address.get("city")
            or not address.get("house")
        ):
            return ValidationResult.failure("address", ADDRESS_MESSAGE)
        if not isinstance(address["city"], str) or not isinstance(address["house"], str):
            return ValidationResult.failure("address", ADDRESS_FORMAT_MESSAGE)

        return ValidationResult.success(
            UserDraft(
                name=name,
                email=email,
                age=age,
                address=Address(city=address["city"], house=address["house"]),
            )
        )


class UpdateUserValidator:
    """Presence-only rules for full replacement: every field must be truthy."""

    def validate(self, payload: Mapping[str, Any]) -> ValidationResult:
        for field in ("name", "email", "age", "address"):
            if not payload.get(field):
                return ValidationResult.failure(field, UPDATE_MESSAGE)

        address = payload["address"]
        if not isinstance(address, Mapping):
            return ValidationResult.failure("address", UPDATE_MESSAGE)
        for field in ("city", "house"):
            if not address.get(field):
                return ValidationResult.failure(f"address.{field}", UPDATE_MESSAGE)

        return ValidationResult.success(
            UserDraft(
                name=str(payload["name"]),
                email=str(payload["email"]),
                age=payload["age"],
                address=Address(city=str(address["city"]), house=str(address["house"])),
            )
        )

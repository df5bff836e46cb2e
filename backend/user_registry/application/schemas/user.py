"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from typing import Any

from pydantic import BaseModel

USER_PAYLOAD_EXAMPLE: dict[str, Any] = {
    "name": "Ann",
    "email": "ann@x.com",
    "age": 30,
    "address": {"city": "Lyon", "house": "12"},
}


class AddressSchema(BaseModel):
    """Structured address as returned to the client."""

    city: str
    house: str

    model_config = {"from_attributes": True}


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    email: str
    age: int
    address: AddressSchema

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Acknowledgement body for update and delete."""

    message: str

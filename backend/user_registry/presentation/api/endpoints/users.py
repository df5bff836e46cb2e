"""User CRUD endpoints."""

from typing import Any

from fastapi import APIRouter, Body, Depends, status

from user_registry.application.schemas import (
    USER_PAYLOAD_EXAMPLE,
    MessageResponse,
    UserResponse,
)
from user_registry.application.services import UserService
from user_registry.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """Retrieve every user record."""
    users = await service.list_users()
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: dict[str, Any] = Body(..., examples=[USER_PAYLOAD_EXAMPLE]),
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user record."""
    user = await service.create_user(payload)
    return UserResponse.model_validate(user, from_attributes=True)


@router.put("/{user_id}", response_model=MessageResponse)
async def update_user(
    user_id: int,
    payload: dict[str, Any] = Body(..., examples=[USER_PAYLOAD_EXAMPLE]),
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Replace every field of an existing user record."""
    await service.update_user(user_id, payload)
    return MessageResponse(message="User updated successfully.")


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> MessageResponse:
    """Delete a user record by ID."""
    await service.delete_user(user_id)
    return MessageResponse(message="User deleted successfully.")

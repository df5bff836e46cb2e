from .user import USER_PAYLOAD_EXAMPLE, AddressSchema, MessageResponse, UserResponse

__all__ = [
    "USER_PAYLOAD_EXAMPLE",
    "AddressSchema",
    "MessageResponse",
    "UserResponse",
]

"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RecordValidationError(Exception):
    """Raised when a caller-supplied payload fails a field rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(message)


class StoreError(Exception):
    """Raised by the store-access layer when the store rejects an operation.

    Covers constraint violations, connectivity loss and query failures.
    """

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class PersistenceError(Exception):
    """Raised by the application layer when an operation could not be persisted."""

    def __init__(self, message: str, detail: str | None = None):
        self.message = message
        self.detail = detail
        super().__init__(message if detail is None else f"{message} ({detail})")

from __future__ import annotations

from typing import Iterable, Optional

from .enums import ErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def details(self) -> dict:
        return {}


class ValidationError(DomainError):
    """Raised when required fields are missing or malformed."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, *, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields = tuple(fields)

    def details(self) -> dict:
        return {"fields": list(self.fields)} if self.fields else {}


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: Optional[object] = None, message: Optional[str] = None):
        if message is None:
            message = f"{entity.capitalize()} not found" if entity_id is None else f"{entity.capitalize()} {entity_id} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id

    def details(self) -> dict:
        return {"entity": self.entity, "id": self.entity_id}


class ConflictError(DomainError):
    """Raised when a write would break a uniqueness rule."""

    kind = ErrorKind.CONFLICT


class InvalidOperationError(DomainError):
    """Raised when an operation is not allowed for the target entity."""

    kind = ErrorKind.INVALID_OPERATION


class StorageError(DomainError):
    """Raised when the backing store fails. The message stays opaque to callers."""

    kind = ErrorKind.STORAGE

    def __init__(self, message: str = "Storage error"):
        super().__init__(message)

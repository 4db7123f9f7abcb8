from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Stable error kinds exposed to API callers."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INVALID_OPERATION = "invalid_operation"
    STORAGE = "storage"
    INTERNAL = "internal"


class EnrollmentOutcome(str, Enum):
    """Result of the guarded enrollment insert, decided inside one transaction."""

    CREATED = "CREATED"
    SUBJECT_MISSING = "SUBJECT_MISSING"
    STUDENT_MISSING = "STUDENT_MISSING"
    NOT_BASKET = "NOT_BASKET"
    DUPLICATE = "DUPLICATE"

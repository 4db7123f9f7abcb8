from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student, StudentPatch


class StudentRepository(Protocol):
    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_class(self, class_name: str) -> Sequence[Student]:
        """Students of one class, ordered by name then id."""

        raise NotImplementedError

    def create(self, *, name: str, grade: str, class_name: str) -> int:
        raise NotImplementedError

    def update(self, student_id: int, patch: StudentPatch) -> bool:
        raise NotImplementedError

    def delete(self, student_id: int) -> bool:
        raise NotImplementedError

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: a student belonging to one class (e.g. "10A")."""

    student_id: int
    name: str
    grade: str
    class_name: str


@dataclass(frozen=True)
class StudentPatch:
    name: Optional[str] = None
    grade: Optional[str] = None
    class_name: Optional[str] = None

    def is_empty(self) -> bool:
        return self.name is None and self.grade is None and self.class_name is None

from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student, StudentPatch
from .repository import StudentRepository

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository):
        self._students = students

    def create(self, *, name: str, grade: str, class_name: str) -> Student:
        name = require_non_empty(name, "name")
        grade = require_non_empty(str(grade) if grade is not None else None, "grade")
        class_name = require_non_empty(class_name, "class")

        student_id = self._students.create(name=name, grade=grade, class_name=class_name)
        logger.info("Created student %s in class %s", student_id, class_name)
        return Student(student_id=student_id, name=name, grade=grade, class_name=class_name)

    def get(self, student_id: int) -> Student:
        student_id = require_positive_int(student_id, "student_id")
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("student", student_id)
        return student

    def list_all(self) -> Sequence[Student]:
        return self._students.list_all()

    def update(self, student_id: int, patch: StudentPatch) -> Student:
        student_id = require_positive_int(student_id, "student_id")
        if patch.is_empty():
            raise ValidationError("Nothing to update", fields=["name", "grade", "class"])

        patch = StudentPatch(
            name=require_non_empty(patch.name, "name") if patch.name is not None else None,
            grade=require_non_empty(str(patch.grade), "grade") if patch.grade is not None else None,
            class_name=require_non_empty(patch.class_name, "class") if patch.class_name is not None else None,
        )
        if not self._students.update(student_id, patch):
            raise NotFoundError("student", student_id)
        return self.get(student_id)

    def delete(self, student_id: int) -> None:
        student_id = require_positive_int(student_id, "student_id")
        if not self._students.delete(student_id):
            raise NotFoundError("student", student_id)
        logger.info("Deleted student %s", student_id)

from __future__ import annotations

from typing import Protocol, Sequence

from ..students.model import Student
from .model import EnrollmentDetail, EnrollmentResult, StudentSubject


class EnrollmentRepository(Protocol):
    def create_if_basket(self, *, student_id: int, subject_id: int) -> EnrollmentResult:
        """Insert an enrollment only if the subject exists and is a basket subject.

        The subject check and the insert run in one transaction so a concurrent
        change of the basket flag cannot let a core-subject enrollment through.
        Duplicates are detected by the (student_id, subject_id) unique key.
        """

        raise NotImplementedError

    def list_for_student(self, student_id: int) -> Sequence[StudentSubject]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EnrollmentDetail]:
        raise NotImplementedError

    def delete(self, enrollment_id: int) -> bool:
        raise NotImplementedError

    def list_enrolled_students(self, *, class_name: str, subject_id: int) -> Sequence[Student]:
        """Students of ``class_name`` holding an enrollment for ``subject_id``, ordered by name."""

        raise NotImplementedError

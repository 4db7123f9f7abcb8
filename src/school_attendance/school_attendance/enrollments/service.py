from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import require_fields, require_positive_int
from ..core.enums import EnrollmentOutcome
from ..core.exceptions import ConflictError, InvalidOperationError, NotFoundError, StorageError
from .model import Enrollment, EnrollmentDetail, StudentSubject
from .repository import EnrollmentRepository

logger = logging.getLogger(__name__)


class EnrollmentService:
    """Use case: enroll students into basket (elective) subjects."""

    def __init__(self, enrollments: EnrollmentRepository):
        self._enrollments = enrollments

    def create(self, *, student_id: Any, subject_id: Any) -> Enrollment:
        require_fields({"student_id": student_id, "subject_id": subject_id}, ["student_id", "subject_id"])
        student_id = require_positive_int(student_id, "student_id")
        subject_id = require_positive_int(subject_id, "subject_id")

        result = self._enrollments.create_if_basket(student_id=student_id, subject_id=subject_id)

        if result.outcome == EnrollmentOutcome.CREATED and result.enrollment is not None:
            logger.info(
                "Enrolled student %s in basket subject %s (enrollment %s)",
                student_id,
                subject_id,
                result.enrollment.enrollment_id,
            )
            return result.enrollment

        logger.warning("Enrollment of student %s in subject %s rejected: %s", student_id, subject_id, result.outcome.value)
        if result.outcome == EnrollmentOutcome.SUBJECT_MISSING:
            raise NotFoundError("subject", subject_id)
        if result.outcome == EnrollmentOutcome.STUDENT_MISSING:
            raise NotFoundError("student", student_id)
        if result.outcome == EnrollmentOutcome.NOT_BASKET:
            raise InvalidOperationError("Only basket subjects can be assigned to students")
        if result.outcome == EnrollmentOutcome.DUPLICATE:
            raise ConflictError("This subject is already assigned to the student")
        raise StorageError(f"Unexpected enrollment outcome: {result.outcome.value}")

    def list_for_student(self, student_id: Any) -> Sequence[StudentSubject]:
        student_id = require_positive_int(student_id, "student_id")
        return self._enrollments.list_for_student(student_id)

    def list_all(self) -> Sequence[EnrollmentDetail]:
        return self._enrollments.list_all()

    def remove(self, enrollment_id: Any) -> None:
        enrollment_id = require_positive_int(enrollment_id, "enrollment_id")
        if not self._enrollments.delete(enrollment_id):
            raise NotFoundError("enrollment", enrollment_id, message="Assignment not found")
        logger.info("Removed enrollment %s", enrollment_id)

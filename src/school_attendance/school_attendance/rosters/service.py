from __future__ import annotations

import logging
from typing import Any, List

from ..common.validators import require_non_empty, require_positive_int
from ..core.exceptions import NotFoundError
from ..enrollments.repository import EnrollmentRepository
from ..students.model import Student
from ..students.repository import StudentRepository
from ..subjects.repository import SubjectRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: which students of a class are expected to attend a subject.

    Core subjects are mandatory for the whole class, so every student of the
    class is on the roster and enrollment rows are ignored. For basket subjects
    an enrollment row is the only way onto the roster.
    """

    def __init__(self, subjects: SubjectRepository, students: StudentRepository, enrollments: EnrollmentRepository):
        self._subjects = subjects
        self._students = students
        self._enrollments = enrollments

    def resolve(self, *, class_name: Any, subject_id: Any) -> List[Student]:
        class_name = require_non_empty(class_name, "class")
        subject_id = require_positive_int(subject_id, "subject_id")

        subject = self._subjects.get_by_id(subject_id)
        if not subject:
            raise NotFoundError("subject", subject_id)

        if subject.is_basket:
            students = self._enrollments.list_enrolled_students(class_name=class_name, subject_id=subject_id)
        else:
            students = self._students.list_by_class(class_name)

        logger.debug(
            "Roster for class %s, subject %s (basket=%s): %s students",
            class_name,
            subject_id,
            subject.is_basket,
            len(students),
        )
        return list(students)

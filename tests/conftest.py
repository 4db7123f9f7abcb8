from __future__ import annotations

import dataclasses
from datetime import date
from typing import Optional

import pytest

from src.school_attendance.school_attendance.attendance.model import AttendanceListRow, AttendanceRecord, AttendanceWrite
from src.school_attendance.school_attendance.container import build_services
from src.school_attendance.school_attendance.core.enums import EnrollmentOutcome
from src.school_attendance.school_attendance.core.exceptions import NotFoundError
from src.school_attendance.school_attendance.enrollments.model import (
    Enrollment,
    EnrollmentDetail,
    EnrollmentResult,
    StudentSubject,
)
from src.school_attendance.school_attendance.students.model import Student, StudentPatch
from src.school_attendance.school_attendance.subjects.model import Subject, SubjectPatch


class SchoolData:
    """Shared in-memory tables behind the fake repositories."""

    def __init__(self):
        self.subjects: dict[int, Subject] = {}
        self.students: dict[int, Student] = {}
        self.enrollments: dict[int, Enrollment] = {}
        self.attendance: dict[int, AttendanceRecord] = {}
        self._ids: dict[str, int] = {}

    def next_id(self, table: str) -> int:
        self._ids[table] = self._ids.get(table, 0) + 1
        return self._ids[table]

    # Test helpers (bypass the services on purpose).
    def add_subject(self, name: str, *, is_basket: bool) -> Subject:
        subject = Subject(subject_id=self.next_id("subjects"), name=name, is_basket=is_basket)
        self.subjects[subject.subject_id] = subject
        return subject

    def add_student(self, name: str, class_name: str, grade: str = "10") -> Student:
        student = Student(student_id=self.next_id("students"), name=name, grade=grade, class_name=class_name)
        self.students[student.student_id] = student
        return student

    def add_enrollment(self, student: Student, subject: Subject) -> Enrollment:
        enrollment = Enrollment(
            enrollment_id=self.next_id("enrollments"),
            student_id=student.student_id,
            subject_id=subject.subject_id,
        )
        self.enrollments[enrollment.enrollment_id] = enrollment
        return enrollment

    def drop_references(self, *, student_id: Optional[int] = None, subject_id: Optional[int] = None) -> None:
        for table in (self.enrollments, self.attendance):
            for key, row in list(table.items()):
                if row.student_id == student_id or row.subject_id == subject_id:
                    del table[key]


def _by_name(students):
    return sorted(students, key=lambda s: (s.name, s.student_id))


class InMemorySubjects:
    def __init__(self, data: SchoolData):
        self._data = data

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        return self._data.subjects.get(subject_id)

    def list_all(self):
        return sorted(self._data.subjects.values(), key=lambda s: (s.name, s.subject_id))

    def create(self, *, name: str, is_basket: bool) -> int:
        return self._data.add_subject(name, is_basket=is_basket).subject_id

    def update(self, subject_id: int, patch: SubjectPatch) -> bool:
        current = self._data.subjects.get(subject_id)
        if not current:
            return False
        changes = {k: v for k, v in dataclasses.asdict(patch).items() if v is not None}
        self._data.subjects[subject_id] = dataclasses.replace(current, **changes)
        return True

    def delete(self, subject_id: int) -> bool:
        if self._data.subjects.pop(subject_id, None) is None:
            return False
        self._data.drop_references(subject_id=subject_id)
        return True


class InMemoryStudents:
    def __init__(self, data: SchoolData):
        self._data = data

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._data.students.get(student_id)

    def list_all(self):
        return sorted(self._data.students.values(), key=lambda s: (s.class_name, s.name, s.student_id))

    def list_by_class(self, class_name: str):
        return _by_name(s for s in self._data.students.values() if s.class_name == class_name)

    def create(self, *, name: str, grade: str, class_name: str) -> int:
        return self._data.add_student(name, class_name, grade).student_id

    def update(self, student_id: int, patch: StudentPatch) -> bool:
        current = self._data.students.get(student_id)
        if not current:
            return False
        changes = {k: v for k, v in dataclasses.asdict(patch).items() if v is not None}
        self._data.students[student_id] = dataclasses.replace(current, **changes)
        return True

    def delete(self, student_id: int) -> bool:
        if self._data.students.pop(student_id, None) is None:
            return False
        self._data.drop_references(student_id=student_id)
        return True


class InMemoryEnrollments:
    def __init__(self, data: SchoolData):
        self._data = data

    def create_if_basket(self, *, student_id: int, subject_id: int) -> EnrollmentResult:
        subject = self._data.subjects.get(subject_id)
        if not subject:
            return EnrollmentResult(EnrollmentOutcome.SUBJECT_MISSING)
        if not subject.is_basket:
            return EnrollmentResult(EnrollmentOutcome.NOT_BASKET)
        if student_id not in self._data.students:
            return EnrollmentResult(EnrollmentOutcome.STUDENT_MISSING)
        for e in self._data.enrollments.values():
            if (e.student_id, e.subject_id) == (student_id, subject_id):
                return EnrollmentResult(EnrollmentOutcome.DUPLICATE)

        enrollment = self._data.add_enrollment(self._data.students[student_id], subject)
        return EnrollmentResult(EnrollmentOutcome.CREATED, enrollment)

    def list_for_student(self, student_id: int):
        out = []
        for e in sorted(self._data.enrollments.values(), key=lambda e: e.enrollment_id):
            if e.student_id != student_id:
                continue
            subject = self._data.subjects[e.subject_id]
            out.append(StudentSubject(e.enrollment_id, e.subject_id, subject.name, subject.is_basket))
        return out

    def list_all(self):
        return [
            EnrollmentDetail(
                enrollment_id=e.enrollment_id,
                student_id=e.student_id,
                student_name=self._data.students[e.student_id].name,
                subject_id=e.subject_id,
                subject_name=self._data.subjects[e.subject_id].name,
            )
            for e in sorted(self._data.enrollments.values(), key=lambda e: e.enrollment_id)
        ]

    def delete(self, enrollment_id: int) -> bool:
        return self._data.enrollments.pop(enrollment_id, None) is not None

    def list_enrolled_students(self, *, class_name: str, subject_id: int):
        enrolled = {e.student_id for e in self._data.enrollments.values() if e.subject_id == subject_id}
        return _by_name(
            s for s in self._data.students.values() if s.class_name == class_name and s.student_id in enrolled
        )


class InMemoryAttendance:
    def __init__(self, data: SchoolData):
        self._data = data

    def upsert(self, *, student_id: int, subject_id: int, attendance_date: date, status: str) -> AttendanceWrite:
        if student_id not in self._data.students or subject_id not in self._data.subjects:
            raise NotFoundError("student or subject", message="Student or subject not found")

        for rec in self._data.attendance.values():
            if (rec.student_id, rec.subject_id, rec.attendance_date) == (student_id, subject_id, attendance_date):
                updated = dataclasses.replace(rec, status=status)
                self._data.attendance[rec.attendance_id] = updated
                return AttendanceWrite(record=updated, created=False)

        rec = AttendanceRecord(
            attendance_id=self._data.next_id("attendance"),
            student_id=student_id,
            subject_id=subject_id,
            attendance_date=attendance_date,
            status=status,
        )
        self._data.attendance[rec.attendance_id] = rec
        return AttendanceWrite(record=rec, created=True)

    def update_status(self, *, attendance_id: int, status: str) -> bool:
        rec = self._data.attendance.get(attendance_id)
        if not rec:
            return False
        self._data.attendance[attendance_id] = dataclasses.replace(rec, status=status)
        return True

    def delete(self, attendance_id: int) -> bool:
        return self._data.attendance.pop(attendance_id, None) is not None

    def list_records(self, *, subject_id=None, attendance_date=None):
        rows = [
            AttendanceListRow(
                attendance_id=r.attendance_id,
                student_id=r.student_id,
                student_name=self._data.students[r.student_id].name,
                subject_id=r.subject_id,
                subject_name=self._data.subjects[r.subject_id].name,
                attendance_date=r.attendance_date,
                status=r.status,
            )
            for r in self._data.attendance.values()
            if (subject_id is None or r.subject_id == subject_id)
            and (attendance_date is None or r.attendance_date == attendance_date)
        ]
        rows.sort(key=lambda r: (r.student_name, r.attendance_id))
        rows.sort(key=lambda r: r.attendance_date, reverse=True)
        return rows


@pytest.fixture
def school() -> SchoolData:
    return SchoolData()


@pytest.fixture
def container(school):
    return build_services(
        subjects=InMemorySubjects(school),
        students=InMemoryStudents(school),
        enrollments=InMemoryEnrollments(school),
        attendance=InMemoryAttendance(school),
    )

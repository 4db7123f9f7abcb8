from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_POOL_NAME, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .enrollments.mysql_enrollment_repository import MySQLEnrollmentRepository
from .enrollments.service import EnrollmentService
from .rosters.service import RosterService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.service import StudentService
from .subjects.mysql_subject_repository import MySQLSubjectRepository
from .subjects.service import SubjectService


@dataclass(frozen=True)
class Container:
    subject_service: SubjectService
    student_service: StudentService
    enrollment_service: EnrollmentService
    roster_service: RosterService
    attendance_service: AttendanceService


def build_services(*, subjects, students, enrollments, attendance) -> Container:
    """Wire services over any repository implementations (MySQL or in-memory)."""

    return Container(
        subject_service=SubjectService(subjects),
        student_service=StudentService(students),
        enrollment_service=EnrollmentService(enrollments),
        roster_service=RosterService(subjects, students, enrollments),
        attendance_service=AttendanceService(attendance),
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_name=str(db_config.get("pool_name", DEFAULT_POOL_NAME)),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )
    conn = DatabaseConnection(config)

    return build_services(
        subjects=MySQLSubjectRepository(conn),
        students=MySQLStudentRepository(conn),
        enrollments=MySQLEnrollmentRepository(conn),
        attendance=MySQLAttendanceRepository(conn),
    )

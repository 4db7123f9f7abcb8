"""Example: use the service layer without Flask.

Resolve who is expected in a class for a subject, then mark each of them
present for today. Running it twice leaves one record per student.
"""

import importlib
import sys

from dotenv import load_dotenv

from config import get_settings_module

from src.school_attendance.school_attendance.common.datetime_utils import today_local
from src.school_attendance.school_attendance.container import build_container


def main(class_name: str = "10A", subject_id: int = 3, status: str = "present"):
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)

    today = today_local()
    roster = container.roster_service.resolve(class_name=class_name, subject_id=subject_id)
    for student in roster:
        result = container.attendance_service.record(
            student_id=student.student_id,
            subject_id=subject_id,
            attendance_date=today,
            status=status,
        )
        action = "created" if result.created else "updated"
        print(f"{student.name}: {status} ({action}, id={result.record.attendance_id})")


if __name__ == "__main__":
    main(*sys.argv[1:2])

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.school_attendance.school_attendance.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def lesson(school):
    math = school.add_subject("Mathematics", is_basket=False)
    alice = school.add_student("Alice", "10A")
    bob = school.add_student("Bob", "10A")
    return math, alice, bob


def test_recording_twice_is_idempotent(school, container, lesson):
    math, alice, _ = lesson
    service = container.attendance_service

    first = service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="present")
    second = service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="present")

    assert first.created is True
    assert second.created is False
    assert second.record == first.record
    assert len(school.attendance) == 1


def test_last_write_wins_and_keeps_record_id(school, container, lesson):
    math, alice, _ = lesson
    service = container.attendance_service

    first = service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date=date(2024, 3, 4), status="present")
    second = service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date=date(2024, 3, 4), status="absent")

    assert second.record.attendance_id == first.record.attendance_id
    assert [r.status for r in school.attendance.values()] == ["absent"]


def test_times_on_the_same_day_share_one_record(school, container, lesson):
    math, alice, _ = lesson
    service = container.attendance_service

    first = service.record(
        student_id=alice.student_id, subject_id=math.subject_id, attendance_date=datetime(2024, 1, 10, 9), status="present"
    )
    second = service.record(
        student_id=alice.student_id, subject_id=math.subject_id, attendance_date=datetime(2024, 1, 10, 14), status="absent"
    )

    assert len(school.attendance) == 1
    assert second.created is False
    assert second.record.attendance_id == first.record.attendance_id
    assert type(second.record.attendance_date) is date
    assert second.record.attendance_date == date(2024, 1, 10)


def test_float_id_is_rejected_not_truncated(school, container, lesson):
    math, alice, _ = lesson

    with pytest.raises(ValidationError) as exc:
        container.attendance_service.record(
            student_id=alice.student_id + 0.9, subject_id=math.subject_id, attendance_date="2024-01-10", status="present"
        )

    assert exc.value.fields == ("student_id",)
    assert school.attendance == {}


def test_each_day_gets_its_own_record(school, container, lesson):
    math, alice, _ = lesson

    for day in ("2024-03-04", "2024-03-05"):
        container.attendance_service.record(
            student_id=alice.student_id, subject_id=math.subject_id, attendance_date=day, status="present"
        )

    assert sorted(r.attendance_date for r in school.attendance.values()) == [date(2024, 3, 4), date(2024, 3, 5)]


def test_status_is_trimmed_and_otherwise_opaque(container, lesson):
    math, alice, _ = lesson

    result = container.attendance_service.record(
        student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="  late  "
    )

    assert result.record.status == "late"


def test_missing_fields_are_reported_together(container):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.record(student_id=None, subject_id="", attendance_date=None, status=" ")

    assert exc.value.fields == ("student_id", "subject_id", "date", "status")


@pytest.mark.parametrize("bad_date", ["2024-13-01", "04/03/2024", "yesterday", 20240304])
def test_malformed_date_is_rejected(container, lesson, bad_date):
    math, alice, _ = lesson

    with pytest.raises(ValidationError) as exc:
        container.attendance_service.record(
            student_id=alice.student_id, subject_id=math.subject_id, attendance_date=bad_date, status="present"
        )
    assert exc.value.fields == ("date",)


def test_overlong_status_is_rejected(container, lesson):
    math, alice, _ = lesson

    with pytest.raises(ValidationError):
        container.attendance_service.record(
            student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="x" * 33
        )


def test_unknown_student_is_not_found(container, lesson):
    math, _, _ = lesson

    with pytest.raises(NotFoundError):
        container.attendance_service.record(student_id=999, subject_id=math.subject_id, attendance_date="2024-03-04", status="present")


def test_write_is_not_gated_on_roster(school, container):
    art = school.add_subject("Art", is_basket=True)
    alice = school.add_student("Alice", "10A")

    result = container.attendance_service.record(
        student_id=alice.student_id, subject_id=art.subject_id, attendance_date="2024-03-04", status="present"
    )

    assert result.created is True


def test_update_status(school, container, lesson):
    math, alice, _ = lesson
    rec = container.attendance_service.record(
        student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="present"
    ).record

    container.attendance_service.update_status(rec.attendance_id, "excused")

    updated = school.attendance[rec.attendance_id]
    assert updated.status == "excused"
    assert (updated.student_id, updated.subject_id, updated.attendance_date) == (
        rec.student_id,
        rec.subject_id,
        rec.attendance_date,
    )


def test_update_status_requires_status_and_existing_record(container):
    with pytest.raises(ValidationError) as exc:
        container.attendance_service.update_status(1, None)
    assert exc.value.fields == ("status",)

    with pytest.raises(NotFoundError) as exc:
        container.attendance_service.update_status(77, "present")
    assert exc.value.message == "Attendance record not found"


def test_delete(school, container, lesson):
    math, alice, _ = lesson
    rec = container.attendance_service.record(
        student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="present"
    ).record

    container.attendance_service.delete(rec.attendance_id)

    assert school.attendance == {}
    with pytest.raises(NotFoundError):
        container.attendance_service.delete(rec.attendance_id)


def test_list_records_filters_and_orders(school, container, lesson):
    math, alice, bob = lesson
    art = school.add_subject("Art", is_basket=True)
    service = container.attendance_service
    service.record(student_id=bob.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="absent")
    service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-04", status="present")
    service.record(student_id=alice.student_id, subject_id=math.subject_id, attendance_date="2024-03-05", status="present")
    service.record(student_id=alice.student_id, subject_id=art.subject_id, attendance_date="2024-03-05", status="late")

    rows = service.list_records(subject_id=math.subject_id)
    assert [(r.attendance_date.isoformat(), r.student_name) for r in rows] == [
        ("2024-03-05", "Alice"),
        ("2024-03-04", "Alice"),
        ("2024-03-04", "Bob"),
    ]

    rows = service.list_records(subject_id=str(math.subject_id), attendance_date="2024-03-04")
    assert [r.student_name for r in rows] == ["Alice", "Bob"]

    assert len(service.list_records()) == 4


def test_list_records_rejects_bad_filters(container):
    with pytest.raises(ValidationError):
        container.attendance_service.list_records(attendance_date="March 4th")
    with pytest.raises(ValidationError):
        container.attendance_service.list_records(subject_id="-3")

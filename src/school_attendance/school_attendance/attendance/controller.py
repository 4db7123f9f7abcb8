from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date
from ..common.http import json_body
from ..container import Container
from .model import AttendanceListRow


def _row_json(r: AttendanceListRow) -> dict:
    return {
        "id": r.attendance_id,
        "student_id": r.student_id,
        "student_name": r.student_name,
        "subject_id": r.subject_id,
        "subject_name": r.subject_name,
        "date": format_iso_date(r.attendance_date),
        "status": r.status,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        rows = container.attendance_service.list_records(
            subject_id=request.args.get("subject_id") or None,
            attendance_date=request.args.get("date") or None,
        )
        return jsonify([_row_json(r) for r in rows])

    @app.route("/api/attendance/subject/<int:subject_id>", methods=["GET"], endpoint="list_subject_attendance")
    def list_subject_attendance(subject_id: int):
        rows = container.attendance_service.list_records(subject_id=subject_id)
        return jsonify([_row_json(r) for r in rows])

    @app.route(
        "/api/attendance/subject/<int:subject_id>/date/<date_s>",
        methods=["GET"],
        endpoint="list_subject_date_attendance",
    )
    def list_subject_date_attendance(subject_id: int, date_s: str):
        rows = container.attendance_service.list_records(subject_id=subject_id, attendance_date=date_s)
        return jsonify([_row_json(r) for r in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        data = json_body()
        result = container.attendance_service.record(
            student_id=data.get("student_id"),
            subject_id=data.get("subject_id"),
            attendance_date=data.get("date"),
            status=data.get("status"),
        )
        rec = result.record
        body = {
            "message": "Attendance recorded successfully" if result.created else "Attendance updated successfully",
            "id": rec.attendance_id,
            "student_id": rec.student_id,
            "subject_id": rec.subject_id,
            "date": format_iso_date(rec.attendance_date),
            "status": rec.status,
        }
        return jsonify(body), 201 if result.created else 200

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(attendance_id: int):
        data = json_body()
        container.attendance_service.update_status(attendance_id, data.get("status"))
        return jsonify({"message": "Attendance updated successfully"})

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="delete_attendance")
    def delete_attendance(attendance_id: int):
        container.attendance_service.delete(attendance_id)
        return jsonify({"message": "Attendance record deleted successfully"})

from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/student-subjects", methods=["GET"], endpoint="list_enrollments")
    def list_enrollments():
        rows = container.enrollment_service.list_all()
        return jsonify(
            [
                {
                    "id": r.enrollment_id,
                    "student_id": r.student_id,
                    "student_name": r.student_name,
                    "subject_id": r.subject_id,
                    "subject_name": r.subject_name,
                }
                for r in rows
            ]
        )

    @app.route("/api/student-subjects/student/<int:student_id>", methods=["GET"], endpoint="list_student_subjects")
    def list_student_subjects(student_id: int):
        rows = container.enrollment_service.list_for_student(student_id)
        return jsonify(
            [
                {
                    "id": r.enrollment_id,
                    "subject_id": r.subject_id,
                    "subject_name": r.subject_name,
                    "is_basket": r.is_basket,
                }
                for r in rows
            ]
        )

    @app.route("/api/student-subjects", methods=["POST"], endpoint="create_enrollment")
    def create_enrollment():
        data = json_body()
        enrollment = container.enrollment_service.create(
            student_id=data.get("student_id"),
            subject_id=data.get("subject_id"),
        )
        return (
            jsonify(
                {
                    "id": enrollment.enrollment_id,
                    "student_id": enrollment.student_id,
                    "subject_id": enrollment.subject_id,
                }
            ),
            201,
        )

    @app.route("/api/student-subjects/<int:enrollment_id>", methods=["DELETE"], endpoint="delete_enrollment")
    def delete_enrollment(enrollment_id: int):
        container.enrollment_service.remove(enrollment_id)
        return jsonify({"message": "Subject assignment removed successfully"})

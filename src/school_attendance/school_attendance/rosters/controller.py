from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..students.controller import student_json


def register(app: Flask, container: Container) -> None:
    @app.route(
        "/api/class-subject-students/<class_name>/<subject_id>",
        methods=["GET"],
        endpoint="class_subject_students",
    )
    def class_subject_students(class_name: str, subject_id: str):
        students = container.roster_service.resolve(class_name=class_name, subject_id=subject_id)
        return jsonify([student_json(s) for s in students])

from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..container import Container
from .model import Student, StudentPatch


def student_json(s: Student) -> dict:
    return {"id": s.student_id, "name": s.name, "grade": s.grade, "class": s.class_name}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    def list_students():
        return jsonify([student_json(s) for s in container.student_service.list_all()])

    @app.route("/api/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: int):
        return jsonify(student_json(container.student_service.get(student_id)))

    @app.route("/api/students", methods=["POST"], endpoint="create_student")
    def create_student():
        data = json_body()
        student = container.student_service.create(
            name=data.get("name"),
            grade=data.get("grade"),
            class_name=data.get("class"),
        )
        return jsonify(student_json(student)), 201

    @app.route("/api/students/<int:student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: int):
        data = json_body()
        patch = StudentPatch(name=data.get("name"), grade=data.get("grade"), class_name=data.get("class"))
        student = container.student_service.update(student_id, patch)
        return jsonify({"message": "Student updated successfully", "student": student_json(student)})

    @app.route("/api/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        container.student_service.delete(student_id)
        return jsonify({"message": "Student deleted successfully"})

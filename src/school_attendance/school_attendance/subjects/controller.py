from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_body
from ..common.validators import optional_bool
from ..container import Container
from .model import Subject, SubjectPatch


def subject_json(s: Subject) -> dict:
    return {"id": s.subject_id, "name": s.name, "is_basket": s.is_basket}


def register(app: Flask, container: Container) -> None:
    @app.route("/api/subjects", methods=["GET"], endpoint="list_subjects")
    def list_subjects():
        return jsonify([subject_json(s) for s in container.subject_service.list_all()])

    @app.route("/api/subjects/<int:subject_id>", methods=["GET"], endpoint="get_subject")
    def get_subject(subject_id: int):
        return jsonify(subject_json(container.subject_service.get(subject_id)))

    @app.route("/api/subjects", methods=["POST"], endpoint="create_subject")
    def create_subject():
        data = json_body()
        subject = container.subject_service.create(
            name=data.get("name"),
            is_basket=bool(optional_bool(data.get("is_basket"), "is_basket")),
        )
        return jsonify(subject_json(subject)), 201

    @app.route("/api/subjects/<int:subject_id>", methods=["PUT"], endpoint="update_subject")
    def update_subject(subject_id: int):
        data = json_body()
        patch = SubjectPatch(
            name=data.get("name"),
            is_basket=optional_bool(data.get("is_basket"), "is_basket"),
        )
        subject = container.subject_service.update(subject_id, patch)
        return jsonify({"message": "Subject updated successfully", "subject": subject_json(subject)})

    @app.route("/api/subjects/<int:subject_id>", methods=["DELETE"], endpoint="delete_subject")
    def delete_subject(subject_id: int):
        container.subject_service.delete(subject_id)
        return jsonify({"message": "Subject deleted successfully"})

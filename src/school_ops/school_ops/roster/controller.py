from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..container import Container
from .classifier import ClassLevelClassifier, parse_level
from .model import Student


def _student_dict(s: Student, classifier: ClassLevelClassifier) -> dict:
    return {
        "id": s.member_id,
        "name": s.name,
        "class": s.class_code,
        "level": classifier.classify(s.class_code).value,
        "photo_url": s.photo_url,
        "is_aee": s.is_aee,
        "disorder": s.disorder,
        "report_url": s.report_url,
    }


def register(app: Flask, container: Container) -> None:
    classifier = container.classifier

    @app.route("/aee/students", methods=["GET"], endpoint="aee_students")
    @json_endpoint
    def aee_students():
        level = parse_level(request.args.get("level"))
        query = request.args.get("q")
        only_aee = request.args.get("only_aee") in {"1", "true", "yes"}

        students = container.aee_service.list_roster(level=level, query=query, only_aee=only_aee)
        return jsonify({"success": True, "students": [_student_dict(s, classifier) for s in students]})

    @app.route("/aee/disorders", methods=["GET"], endpoint="aee_disorders")
    def aee_disorders():
        return jsonify({"success": True, "disorders": list(container.aee_service.disorders)})

    @app.route("/aee/students/<student_id>/enroll", methods=["POST"], endpoint="aee_enroll")
    @json_endpoint
    def aee_enroll(student_id: str):
        payload = request.get_json(silent=True) or request.form
        student = container.aee_service.enroll(
            student_id,
            disorder=payload.get("disorder") or "",
            report_url=payload.get("report_url"),
        )
        return jsonify({"success": True, "student": _student_dict(student, classifier)})

    @app.route("/aee/students/<student_id>/unenroll", methods=["POST"], endpoint="aee_unenroll")
    @json_endpoint
    def aee_unenroll(student_id: str):
        student = container.aee_service.unenroll(student_id)
        return jsonify({"success": True, "student": _student_dict(student, classifier)})

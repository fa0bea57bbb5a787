from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import day_arg, json_endpoint, json_error
from ..container import Container
from ..core.enums import EventKind, RecordOutcome
from ..core.exceptions import ValidationError
from ..roster.classifier import parse_level
from .export import presence_csv, presence_csv_filename


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/presence", methods=["GET"], endpoint="attendance_presence")
    @json_endpoint
    def attendance_presence():
        day = day_arg(request.args.get("day"))
        class_filter = request.args.get("class") or None
        level = parse_level(request.args.get("level"))

        snapshot = container.student_presence.snapshot_for(day=day, class_filter=class_filter, level=level)
        return jsonify({"success": True, "day": day, "class": class_filter, **snapshot.as_dict()})

    @app.route("/attendance/presence.csv", methods=["GET"], endpoint="attendance_presence_csv")
    @json_endpoint
    def attendance_presence_csv():
        day = day_arg(request.args.get("day"))
        class_filter = request.args.get("class") or None
        level = parse_level(request.args.get("level"))

        snapshot = container.student_presence.snapshot_for(day=day, class_filter=class_filter, level=level)
        csv_bytes = presence_csv(snapshot, day).encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={presence_csv_filename(day, class_filter)}"},
        )

    @app.route("/attendance/events", methods=["POST"], endpoint="attendance_record")
    @json_endpoint
    def attendance_record():
        payload = request.get_json(silent=True) or request.form
        student_id = str(payload.get("student_id") or "").strip()
        if not student_id:
            raise ValidationError("student_id is required")

        kind_s = payload.get("kind") or EventKind.ENTRY.value
        try:
            kind = EventKind(kind_s)
        except ValueError:
            raise ValidationError(f"Unknown event kind: {kind_s}") from None

        student = container.students_repo.get_by_id(student_id)
        if not student:
            return json_error("Student does not exist", 404)

        outcome = container.student_recorder.record(student, kind=kind)
        if outcome == RecordOutcome.TOO_SOON:
            return jsonify({"success": False, "outcome": outcome.value, "message": "Already recorded, wait a few minutes"}), 409
        return jsonify({"success": True, "outcome": outcome.value, "student": student.name}), 201

    @app.route("/staff/presence", methods=["GET"], endpoint="staff_presence")
    @json_endpoint
    def staff_presence():
        day = day_arg(request.args.get("day"))
        period = request.args.get("period") or None

        snapshot = container.staff_presence.snapshot_for(day=day, class_filter=period)
        return jsonify({"success": True, "day": day, "period": period, **snapshot.as_dict()})

    @app.route("/staff/events", methods=["POST"], endpoint="staff_record")
    @json_endpoint
    def staff_record():
        payload = request.get_json(silent=True) or request.form
        staff_id = str(payload.get("staff_id") or "").strip()
        if not staff_id:
            raise ValidationError("staff_id is required")

        member = next((m for m in container.staff_repo.list_all() if m.member_id == staff_id), None)
        if not member:
            return json_error("Staff member does not exist", 404)

        outcome = container.staff_recorder.record(member)
        if outcome == RecordOutcome.TOO_SOON:
            return jsonify({"success": False, "outcome": outcome.value, "message": "Already recorded, wait 2 minutes"}), 409
        return jsonify({"success": True, "outcome": outcome.value, "staff": member.name}), 201

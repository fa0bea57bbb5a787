from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import day_arg, int_arg, json_endpoint
from ..container import Container
from ..core.enums import Period
from .model import Appointment


def draft_from_payload(payload) -> Appointment:
    """Build a draft appointment (empty id) from form/JSON input; validation happens in the service."""
    return Appointment(
        appointment_id="",
        subject_id=str(payload.get("subject_id") or "").strip(),
        subject_name=str(payload.get("subject_name") or "").strip(),
        date=str(payload.get("date") or "").strip(),
        time=str(payload.get("time") or "").strip(),
        period=payload.get("period") or Period.MORNING.value,
        description=str(payload.get("description") or ""),
    )


def register(app: Flask, container: Container) -> None:
    def _refresh() -> None:
        # Pick up appointments written by other processes before answering.
        refresh = getattr(container.appointment_store, "refresh", None)
        if refresh:
            refresh()

    @app.route("/aee/appointments/calendar", methods=["GET"], endpoint="aee_calendar")
    @json_endpoint
    def aee_calendar():
        service = container.scheduling_service
        # Each request names its own month; the service cursor is not moved.
        cursor = service.resolve_month(
            int_arg(request.args.get("year"), None, field_name="year"),
            int_arg(request.args.get("month"), None, field_name="month"),
            request.args.get("step"),
        )

        _refresh()
        view = service.month_view(cursor)
        return jsonify({"success": True, **view.as_dict()})

    @app.route("/aee/appointments", methods=["GET"], endpoint="aee_appointments")
    @json_endpoint
    def aee_appointments():
        date = day_arg(request.args.get("date"), field_name="date")
        _refresh()
        items = container.scheduling_service.list_for_day(date)
        return jsonify({"success": True, "date": date, "appointments": [a.as_dict() for a in items]})

    @app.route("/aee/appointments", methods=["POST"], endpoint="aee_appointments_create")
    @json_endpoint
    def aee_appointments_create():
        payload = request.get_json(silent=True) or request.form
        appointment = container.scheduling_service.create(draft_from_payload(payload))
        return jsonify({"success": True, "appointment": appointment.as_dict()}), 201

    @app.route("/aee/appointments/<appointment_id>/delete", methods=["POST"], endpoint="aee_appointments_delete")
    @json_endpoint
    def aee_appointments_delete(appointment_id: str):
        removed = container.scheduling_service.delete(appointment_id)
        return jsonify({"success": True, "removed": removed})

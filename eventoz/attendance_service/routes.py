"""
Attendance service routes.

Public routes used by the event sign-up form and the check-in desk:
sign-up, registration/attendance counts and lists, and marking attendance.
"""

import logging
from typing import Any, Tuple

from flask import Blueprint, Response, current_app, jsonify, request

from eventoz.errors import NotFound, StoreError

attendance_bp = Blueprint("attendance", __name__)


def _tracker():
    return current_app.extensions["eventoz"].attendance


def _is_registration_id(value: Any) -> bool:
    # Only scalar ids; an object or array would match by JSONB containment.
    if isinstance(value, bool):
        return False
    return isinstance(value, int) or (isinstance(value, str) and value != "")


@attendance_bp.before_request
def before_request() -> None:
    logging.info(f"[Attendance] Incoming {request.method} {request.path}")


@attendance_bp.route("/eventregistereduser", methods=["POST"])
def register_for_event() -> Tuple[Response, int]:
    """
    Register an attendee for an event.

    The JSON body is stored as sent (it should carry `id` and `formId`);
    the registration starts as registered and not attended.

    Returns:
        201: The stored registration.
        500: Store error.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        registration = _tracker().register(data)
    except StoreError:
        logging.exception("[Attendance] Error registering user for the event")
        return jsonify({"message": "Error registering user for the event"}), 500

    return jsonify({
        "message": "User registered successfully for the event",
        "registration": registration,
    }), 201


@attendance_bp.route("/event/<event_id>/registrations", methods=["GET"])
def registration_count(event_id: str) -> Tuple[Response, int]:
    try:
        count = _tracker().count_registered(event_id)
    except StoreError:
        logging.exception("[Attendance] Error fetching registration count")
        return jsonify({"message": "Error fetching registration count"}), 500

    return jsonify({
        "message": "Registration count fetched successfully",
        "registrationCount": count,
    }), 200


@attendance_bp.route("/event/<event_id>/attended", methods=["GET"])
def attended_count(event_id: str) -> Tuple[Response, int]:
    try:
        count = _tracker().count_attended(event_id)
    except StoreError:
        logging.exception("[Attendance] Error fetching attended count")
        return jsonify({"message": "Error fetching attended count"}), 500

    return jsonify({
        "message": "Attended count fetched successfully",
        "attendedCount": count,
    }), 200


@attendance_bp.route("/registeredusers/<form_id>", methods=["GET"])
def registered_users(form_id: str) -> Tuple[Response, int]:
    try:
        users = _tracker().list_registered(form_id)
    except StoreError:
        logging.exception("[Attendance] Error fetching registered users")
        return jsonify({"message": "Error fetching registered users"}), 500

    return jsonify({
        "message": "Registered users fetched successfully",
        "registeredUsers": users,
    }), 200


@attendance_bp.route("/attendedusers/<form_id>", methods=["GET"])
def attended_users(form_id: str) -> Tuple[Response, int]:
    try:
        users = _tracker().list_attended(form_id)
    except StoreError:
        logging.exception("[Attendance] Error fetching attended users")
        return jsonify({"message": "Error fetching attended users"}), 500

    return jsonify({
        "message": "Attended users fetched successfully",
        "attendedUsers": users,
    }), 200


@attendance_bp.route("/updateAttendance", methods=["POST"])
def update_attendance() -> Tuple[Response, int]:
    """
    Mark a registration as attended.

    Expects JSON: { "id": <registration id> }

    Returns:
        200: Success message and the attendee's name.
        400: No id supplied, or the id is not a string or integer.
        404: No registered record with that id.
        500: Store error.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    registration_id = data.get("id")

    if not _is_registration_id(registration_id):
        return jsonify({"message": "Registration id required"}), 400

    try:
        registration = _tracker().mark_attended(registration_id)
    except NotFound as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        logging.exception("[Attendance] Error updating attendance")
        return jsonify({"message": "Error updating attendance"}), 500

    return jsonify({
        "message": "Attendance updated successfully",
        "name": registration.get("name"),
    }), 200

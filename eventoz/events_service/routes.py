"""
Events service routes: create events and list the caller's own events.
Both routes require a bearer token; the owner is taken from it.
"""

import logging
from typing import Tuple

from flask import Blueprint, Response, current_app, g, jsonify, request

from eventoz.auth_service.utils import login_required
from eventoz.errors import StoreError

events_bp = Blueprint("events", __name__)


@events_bp.route("/createevent", methods=["POST"])
@login_required
def create_event() -> Tuple[Response, int]:
    """
    Create an event owned by the authenticated user.

    Expects JSON with: id, eventName, eventDesc, date, banner.

    Returns:
        201: The stored event.
        401: Missing or invalid token.
        500: Store error.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        event = current_app.extensions["eventoz"].events.create(g.user_id, data)
    except StoreError:
        logging.exception("[Events] Error creating event")
        return jsonify({"message": "Error creating event"}), 500

    return jsonify({"message": "Event Created Successfully", "event": event}), 201


@events_bp.route("/myevents", methods=["GET"])
@login_required
def my_events() -> Tuple[Response, int]:
    try:
        events = current_app.extensions["eventoz"].events.list_by_owner(g.user_id)
    except StoreError:
        logging.exception("[Events] Error fetching events")
        return jsonify({"message": "Error fetching events"}), 500

    return jsonify({"message": "Events fetched successfully", "events": events}), 200

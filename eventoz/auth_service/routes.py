"""
Authentication service route handlers.

Provides routes for:
- User registration
- User login
- A public and a token-protected probe endpoint

Hashing lives in `auth_service.credentials`, JWT logic in `auth_service.utils`.
"""

import logging
from typing import Any, Tuple

from flask import Blueprint, Response, current_app, g, jsonify, request

from eventoz.auth_service.utils import login_required
from eventoz.errors import Conflict, NotFound, StoreError, Unauthorized

auth_bp = Blueprint("auth", __name__)


def _services():
    return current_app.extensions["eventoz"]


def _is_credential(value: Any) -> bool:
    return isinstance(value, str) and bool(value)


# --- REQUEST LOGGING ---
@auth_bp.before_request
def before_request() -> None:
    """
    Log method and path of every request to the authentication service.
    Headers are left out since they carry bearer tokens.
    """
    logging.info(f"[Auth] Incoming {request.method} {request.path}")


@auth_bp.after_request
def after_request(response: Response) -> Response:
    logging.info(f"[Auth] Response {response.status}")
    return response


# --- REGISTER ---
@auth_bp.route("/register", methods=["POST"])
def register() -> Tuple[Response, int]:
    """
    Register a new user.

    Expects a JSON body with:
    - email (str): Unique email address, stored as given.
    - password (str)

    Returns:
        201: JSON with the created user (id and email).
        400: Missing email or password.
        409: Email already registered.
        500: Store error.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    email = data.get("email")
    password = data.get("password")

    if not _is_credential(email) or not _is_credential(password):
        return jsonify({"message": "Email and password required"}), 400

    try:
        user_id = _services().credentials.register(email, password)
    except Conflict as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        logging.exception("[Auth] Error creating user")
        return jsonify({"message": "Error creating user"}), 500

    return jsonify({
        "message": "User Created Successfully",
        "user": {"_id": user_id, "email": email},
    }), 201


# --- LOGIN ---
@auth_bp.route("/login", methods=["POST"])
def login() -> Tuple[Response, int]:
    """
    Authenticate a user and return a JWT valid for 24 hours.

    Returns:
        200: JSON with the user's email and token.
        400: Missing credentials.
        404: Email not found.
        401: Invalid password.
        500: Store error.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    email = data.get("email")
    password = data.get("password")

    if not _is_credential(email) or not _is_credential(password):
        return jsonify({"message": "Email and password required"}), 400

    services = _services()
    try:
        user_id = services.credentials.verify(email, password)
    except (NotFound, Unauthorized) as e:
        return jsonify({"message": e.message}), e.status_code
    except StoreError:
        logging.exception("[Auth] Login failed")
        return jsonify({"message": "Login failed"}), 500

    token = services.tokens.issue(user_id, email)

    return jsonify({
        "message": "Login successful",
        "user": {"email": email, "token": token},
    }), 200


# --- PROBES ---
@auth_bp.route("/free-endpoint", methods=["GET"])
def free_endpoint() -> Tuple[Response, int]:
    return jsonify({"message": "You are free to access me anytime"}), 200


@auth_bp.route("/auth-endpoint", methods=["GET"])
@login_required
def auth_endpoint() -> Tuple[Response, int]:
    return jsonify({"message": "You are authorized to access me", "email": g.user_email}), 200

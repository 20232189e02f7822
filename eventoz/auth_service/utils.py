"""
Shared authentication helpers.
Provides token issuing/verification and the request gate for protected routes.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from functools import wraps
from typing import Any, Callable, Dict, Optional

import jwt
from flask import current_app, g, jsonify, request

from eventoz.errors import InvalidToken, TokenExpired, Unauthenticated

ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "email", "iat", "exp"]


@dataclass(frozen=True)
class Identity:
    user_id: str
    email: str


class TokenService:
    """
    Issues and verifies signed, time-limited identity tokens (JWT, HS256).

    The signing key is static for the life of the process.
    """

    def __init__(self, secret: str, lifetime: timedelta = timedelta(hours=24)) -> None:
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self.lifetime = lifetime

    # --- JWT CREATION ---
    def issue(self, user_id: str, email: str, now: Optional[datetime] = None) -> str:
        """
        Generate a new JWT for a given user.

        Args:
            user_id (str): The unique ID of the user.
            email (str): The user's email address.
            now (datetime, optional): Issue time; defaults to the current UTC time.

        Returns:
            str: Encoded JWT string.
        """
        now = now or datetime.now(timezone.utc)

        payload = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": now + self.lifetime,
        }

        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    # --- JWT VALIDATION ---
    def verify(self, token: str) -> Identity:
        """
        Decode a JWT and return the identity it asserts.

        Only HS256 signatures made with this service's key are accepted.

        Raises:
            TokenExpired: The token is past its expiry time.
            InvalidToken: Bad signature, wrong algorithm, or malformed payload.
        """
        try:
            payload: Dict[str, Any] = jwt.decode(
                token,
                self._secret,
                algorithms=[ALGORITHM],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpired("token expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidToken("invalid token") from e

        email = payload.get("email")
        if not isinstance(email, str):
            raise InvalidToken("invalid token")

        return Identity(user_id=payload["sub"], email=email)


def authenticate(authorization: Optional[str], tokens: TokenService) -> Identity:
    """
    Resolve the identity behind an Authorization header value.

    Args:
        authorization (str): Raw header value, expected as "Bearer <token>".
        tokens (TokenService): Verifier for the token.

    Returns:
        Identity: The authenticated user.

    Raises:
        Unauthenticated: Header absent or malformed, or token rejected.
    """
    auth = authorization or ""

    if not auth.startswith("Bearer "):
        raise Unauthenticated("missing token")

    token = auth.split(" ", 1)[1].strip()
    if not token:
        raise Unauthenticated("missing token")

    return tokens.verify(token)


def login_required(view: Callable) -> Callable:
    """
    Route decorator: reject the request with 401 unless it carries a valid token.

    On success the identity is attached as `g.user_id` and `g.user_email`.
    """

    @wraps(view)
    def wrapper(*args, **kwargs):
        tokens = current_app.extensions["eventoz"].tokens
        try:
            identity = authenticate(request.headers.get("Authorization"), tokens)
        except Unauthenticated as e:
            logging.info(f"[Auth] Rejected {request.method} {request.path}: {e.message}")
            return jsonify({"message": "Unauthenticated", "error": e.message}), e.status_code

        g.user_id = identity.user_id
        g.user_email = identity.email
        return view(*args, **kwargs)

    return wrapper

"""
Credential store: user identities and their password hashes.
"""

import logging
from typing import Optional

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from eventoz.errors import Conflict, DuplicateKeyError, NotFound, Unauthorized

USERS = "users"


class CredentialStore:
    """
    Registers users and checks their passwords.

    Passwords are hashed with Argon2 (random salt per hash); only the hash
    is stored. Email addresses are compared exactly as supplied.
    """

    def __init__(self, store, hasher: Optional[PasswordHasher] = None) -> None:
        self._store = store
        self._hasher = hasher or PasswordHasher()

    def register(self, email: str, password: str) -> str:
        """
        Create a user and return its id.

        Raises:
            Conflict: A user with this email already exists.
            StoreError: The document store failed.
        """
        if self._store.find_one(USERS, {"email": email}):
            raise Conflict("User with this email already exists")

        user = {"email": email, "password": self._hasher.hash(password)}

        # The unique email index catches a concurrent registration that
        # slipped between the read above and this insert.
        try:
            user_id = self._store.insert(USERS, user)
        except DuplicateKeyError as e:
            raise Conflict("User with this email already exists") from e

        logging.info(f"[Auth] Registered user {user_id}")
        return user_id

    def verify(self, email: str, password: str) -> str:
        """
        Check a password and return the matching user's id.

        Raises:
            NotFound: No user has this email.
            Unauthorized: The password does not match.
        """
        user = self._store.find_one(USERS, {"email": email})
        if not user:
            raise NotFound("Email not found")

        try:
            self._hasher.verify(user["password"], password)
        except (VerificationError, InvalidHashError) as e:
            raise Unauthorized("Invalid password") from e

        return user["_id"]

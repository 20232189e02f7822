"""
Attendance tracker: sign-ups for an event and the registered -> attended step.

A registration enters the `registered` state when it is created and is
flagged `attended` by mark_attended(). Records are never deleted.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from eventoz.errors import NotFound

REGISTRATIONS = "eventRegisteredUsers"


class AttendanceTracker:
    def __init__(self, store) -> None:
        self._store = store

    def register(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a registration from the attendee's form fields.

        `registered`, `attended` and `createdAt` are always set here, whatever
        the caller sent. No duplicate check is made.
        """
        registration = dict(fields)
        registration.update(
            registered=True,
            attended=False,
            createdAt=datetime.now(timezone.utc).isoformat(),
        )
        self._store.insert(REGISTRATIONS, registration)
        return registration

    def count_registered(self, form_id: str) -> int:
        return self._store.count(REGISTRATIONS, {"formId": form_id, "registered": True})

    def count_attended(self, form_id: str) -> int:
        return self._store.count(
            REGISTRATIONS, {"formId": form_id, "registered": True, "attended": True}
        )

    def list_registered(self, form_id: str) -> List[Dict[str, Any]]:
        return self._store.find_many(REGISTRATIONS, {"formId": form_id, "registered": True})

    def list_attended(self, form_id: str) -> List[Dict[str, Any]]:
        return self._store.find_many(
            REGISTRATIONS, {"formId": form_id, "registered": True, "attended": True}
        )

    def mark_attended(self, registration_id: str) -> Dict[str, Any]:
        """
        Flag a registration as attended and return it.

        The lookup matches on id and registered=true only, so calling this on
        an already-attended registration succeeds again with no change.

        Raises:
            NotFound: No registered record has this id.
        """
        query = {"id": registration_id, "registered": True}

        registration = self._store.find_one(REGISTRATIONS, query)
        if not registration:
            raise NotFound("User or registration not found")

        matched = self._store.update_one(REGISTRATIONS, query, {"attended": True})
        if matched == 0:
            raise NotFound("User or registration not found")

        logging.info(f"[Attendance] Registration {registration_id} marked attended")
        return dict(registration, attended=True)

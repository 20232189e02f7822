"""
Event registry: events owned by an authenticated user.
"""

from typing import Any, Dict, List

EVENTS = "events"

# Client-settable fields; the owner is always taken from the token.
EVENT_FIELDS = ("id", "eventName", "eventDesc", "date", "banner")


class EventRegistry:
    def __init__(self, store) -> None:
        self._store = store

    def create(self, owner_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a new event for `owner_id` and return the stored document.

        The client-supplied `id` is not checked for uniqueness; submitting
        the same id twice yields two documents.
        """
        event = {key: fields.get(key) for key in EVENT_FIELDS}
        event["userId"] = owner_id
        self._store.insert(EVENTS, event)
        return event

    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        return self._store.find_many(EVENTS, {"userId": owner_id})

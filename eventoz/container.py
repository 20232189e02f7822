from dataclasses import dataclass
from datetime import timedelta

from eventoz.attendance_service.tracker import AttendanceTracker
from eventoz.auth_service.credentials import CredentialStore
from eventoz.auth_service.utils import TokenService
from eventoz.config import Settings
from eventoz.events_service.registry import EventRegistry


@dataclass(frozen=True)
class Services:
    store: object

    credentials: CredentialStore
    tokens: TokenService
    events: EventRegistry
    attendance: AttendanceTracker


def build_services(settings: Settings, store) -> Services:
    """Wire every component to the one process-wide document store."""
    return Services(
        store=store,
        credentials=CredentialStore(store),
        tokens=TokenService(
            settings.jwt_secret,
            lifetime=timedelta(minutes=settings.token_expiration_minutes),
        ),
        events=EventRegistry(store),
        attendance=AttendanceTracker(store),
    )

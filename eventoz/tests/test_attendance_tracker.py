import pytest

from eventoz.attendance_service.tracker import AttendanceTracker
from eventoz.errors import NotFound


@pytest.fixture
def tracker(store):
    return AttendanceTracker(store)


def test_register_sets_initial_state(tracker):
    registration = tracker.register({"id": "r1", "formId": "f1", "name": "Ada"})

    assert registration["registered"] is True
    assert registration["attended"] is False
    assert registration["createdAt"]
    assert registration["_id"]
    assert registration["name"] == "Ada"


def test_register_overrides_client_state(tracker):
    registration = tracker.register({"id": "r1", "formId": "f1", "registered": False, "attended": True})
    assert registration["registered"] is True
    assert registration["attended"] is False


def test_register_allows_duplicates(tracker):
    tracker.register({"id": "r1", "formId": "f1"})
    tracker.register({"id": "r1", "formId": "f1"})
    assert tracker.count_registered("f1") == 2


def test_counts_and_lists_are_per_form(tracker):
    tracker.register({"id": "r1", "formId": "f1"})
    tracker.register({"id": "r2", "formId": "f1"})
    tracker.register({"id": "r3", "formId": "f2"})

    assert tracker.count_registered("f1") == 2
    assert tracker.count_registered("f2") == 1
    assert tracker.count_attended("f1") == 0
    assert {r["id"] for r in tracker.list_registered("f1")} == {"r1", "r2"}
    assert tracker.list_attended("f1") == []


def test_mark_attended(tracker):
    tracker.register({"id": "r1", "formId": "f1", "name": "Ada"})

    registration = tracker.mark_attended("r1")

    assert registration["attended"] is True
    assert registration["name"] == "Ada"
    assert tracker.count_attended("f1") == 1
    assert [r["id"] for r in tracker.list_attended("f1")] == ["r1"]


def test_mark_attended_twice_succeeds_without_double_count(tracker):
    tracker.register({"id": "r1", "formId": "f1"})
    tracker.mark_attended("r1")
    tracker.mark_attended("r1")
    assert tracker.count_attended("f1") == 1


def test_mark_attended_unknown_id(tracker):
    with pytest.raises(NotFound):
        tracker.mark_attended("unknown")


def test_mark_attended_requires_registered_record(tracker, store):
    store.insert("eventRegisteredUsers", {"id": "r9", "formId": "f1", "registered": False, "attended": False})

    with pytest.raises(NotFound):
        tracker.mark_attended("r9")

    assert store.find_one("eventRegisteredUsers", {"id": "r9"})["attended"] is False


def test_mark_attended_update_miss_is_not_found(mocker):
    store = mocker.Mock()
    store.find_one.return_value = {"id": "r1", "registered": True}
    store.update_one.return_value = 0

    with pytest.raises(NotFound):
        AttendanceTracker(store).mark_attended("r1")

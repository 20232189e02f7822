import pytest

from eventoz.auth_service.credentials import CredentialStore
from eventoz.errors import Conflict, DuplicateKeyError, NotFound, Unauthorized


@pytest.fixture
def credentials(store):
    return CredentialStore(store)


def test_register_stores_hash_not_plaintext(credentials, store):
    user_id = credentials.register("a@x.com", "pw")

    users = store.find_many("users", {})
    assert len(users) == 1
    assert users[0]["_id"] == user_id
    assert users[0]["email"] == "a@x.com"
    assert users[0]["password"] != "pw"
    assert users[0]["password"].startswith("$argon2")


def test_register_same_email_twice_conflicts(credentials, store):
    credentials.register("a@x.com", "pw")

    with pytest.raises(Conflict):
        credentials.register("a@x.com", "other")

    assert store.count("users", {"email": "a@x.com"}) == 1


def test_email_is_case_sensitive(credentials, store):
    credentials.register("a@x.com", "pw")
    credentials.register("A@x.com", "pw")
    assert store.count("users", {}) == 2


def test_register_maps_store_duplicate_to_conflict(mocker):
    # Simulates a concurrent registration winning between the read and the insert.
    store = mocker.Mock()
    store.find_one.return_value = None
    store.insert.side_effect = DuplicateKeyError("Duplicate key in users")

    with pytest.raises(Conflict):
        CredentialStore(store).register("a@x.com", "pw")


def test_verify_returns_user_id(credentials):
    user_id = credentials.register("a@x.com", "pw")
    assert credentials.verify("a@x.com", "pw") == user_id


def test_verify_unknown_email(credentials):
    with pytest.raises(NotFound):
        credentials.verify("nobody@x.com", "pw")


def test_verify_wrong_password(credentials):
    credentials.register("a@x.com", "pw")
    with pytest.raises(Unauthorized):
        credentials.verify("a@x.com", "wrong")


def test_verify_corrupt_hash_is_unauthorized(store):
    store.insert("users", {"email": "a@x.com", "password": "not-a-hash"})
    with pytest.raises(Unauthorized):
        CredentialStore(store).verify("a@x.com", "pw")

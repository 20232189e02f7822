import copy
import uuid

import pytest

from eventoz.config import Settings
from eventoz.errors import DuplicateKeyError
from eventoz.gateway.server import create_app

TEST_SECRET = "test-secret-with-at-least-32-bytes-of-key"


class InMemoryDocumentStore:
    """
    Dict-backed stand-in for PostgresDocumentStore.

    Matches queries by equality on top-level fields and enforces the same
    unique email index on `users`.
    """

    UNIQUE = {"users": "email"}

    def __init__(self):
        self.collections = {}

    def _docs(self, collection):
        return self.collections.setdefault(collection, [])

    @staticmethod
    def _matches(doc, query):
        return all(key in doc and doc[key] == value for key, value in query.items())

    def insert(self, collection, document):
        key = self.UNIQUE.get(collection)
        if key and any(d.get(key) == document.get(key) for d in self._docs(collection)):
            raise DuplicateKeyError(f"Duplicate key in {collection}")
        doc_id = uuid.uuid4().hex
        self._docs(collection).append(copy.deepcopy(dict(document, _id=doc_id)))
        document["_id"] = doc_id
        return doc_id

    def find_one(self, collection, query):
        for doc in self._docs(collection):
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find_many(self, collection, query):
        return [copy.deepcopy(d) for d in self._docs(collection) if self._matches(d, query)]

    def count(self, collection, query):
        return len(self.find_many(collection, query))

    def update_one(self, collection, query, changes):
        for doc in self._docs(collection):
            if self._matches(doc, query):
                doc.update(changes)
                return 1
        return 0


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET)


@pytest.fixture
def app(settings, store):
    app = create_app(settings, store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions["eventoz"]


@pytest.fixture
def auth_headers(services):
    """
    Registers a user directly through the credential store and returns
    headers carrying a token for them.
    """
    user_id = services.credentials.register("owner@example.com", "password123")
    token = services.tokens.issue(user_id, "owner@example.com")
    return {"Authorization": f"Bearer {token}"}

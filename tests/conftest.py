"""
Shared fixtures: an in-memory store, services bound to it and a test client
"""

import os

# Settings are read at import time
os.environ.setdefault("USE_FIREBASE", "false")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret_for_the_suite")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_store
from app.models import CallerContext
from app.services.access_control import AccessControl
from app.services.attendance_service import AttendanceLedger
from app.services.comment_service import CommentService
from app.services.document_store import MemoryStore
from app.services.event_service import EventService
from app.services.identity_service import IdentityService
from main import app

PASSWORD = "StrongPass123"


@pytest.fixture
def store():
    return MemoryStore()

@pytest.fixture
def access(store):
    return AccessControl(store)

@pytest.fixture
def identity(store, access):
    return IdentityService(store, access)

@pytest.fixture
def events(store, access):
    return EventService(store, access)

@pytest.fixture
def comments(store, access):
    return CommentService(store, access)

@pytest.fixture
def ledger(store, access):
    return AttendanceLedger(store, access)

@pytest.fixture
def make_user(identity):
    """Register a user and return its caller context"""
    def _make(username: str, admin: bool = False) -> CallerContext:
        email = f"{username}@example.com"
        uid, _ = identity.register(username, email, PASSWORD)
        if admin:
            identity.promote_to_admin(uid)
        return CallerContext(user_id=uid, email=email)
    return _make

@pytest.fixture
def owner(make_user):
    return make_user("olivia")

@pytest.fixture
def other(make_user):
    return make_user("oscar")

@pytest.fixture
def admin(make_user):
    return make_user("ada", admin=True)

@pytest.fixture
def event(events, owner):
    return events.create_event(
        creator_uid=owner.user_id,
        title="Conference A",
        date="2030-05-01",
        location="Main hall",
        description="Yearly conference",
    )

@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()

"""
Tests for the in-memory document store and Firestore error mapping
"""

from unittest.mock import MagicMock

import pytest
from google.api_core import exceptions as google_exceptions

from app.services.document_store import FirestoreStore, MemoryStore
from app.services.exceptions import InternalError


def test_add_and_get_injects_id():
    """Documents come back with their id"""
    store = MemoryStore()
    doc_id = store.add("users", {"email": "a@example.com"})

    doc = store.get("users", doc_id)
    assert doc == {"id": doc_id, "email": "a@example.com"}
    assert store.get("users", "missing") is None

def test_returned_documents_are_copies():
    """Test mutating a returned document does not touch the store"""
    store = MemoryStore()
    store.set("events", "e1", {"title": "Original"})

    doc = store.get("events", "e1")
    doc["title"] = "Changed"

    assert store.get("events", "e1")["title"] == "Original"

def test_query_filters_and_ordering():
    """Test range and equality filters with ordering"""
    store = MemoryStore()
    store.set("events", "a", {"date": "2030-01-01", "kind": "talk"})
    store.set("events", "b", {"date": "2020-01-01", "kind": "talk"})
    store.set("events", "c", {"date": "2031-01-01", "kind": "party"})

    upcoming = store.query("events", [("date", ">=", "2025-01-01")], order_by="date")
    assert [d["id"] for d in upcoming] == ["a", "c"]

    talks = store.query("events", [("kind", "==", "talk")], order_by="date", descending=True)
    assert [d["id"] for d in talks] == ["a", "b"]

def test_query_skips_documents_without_order_field():
    """Test ordering drops documents missing the field"""
    store = MemoryStore()
    store.set("events", "a", {"createdAt": "2024-01-01"})
    store.set("events", "b", {})

    assert [d["id"] for d in store.query("events", order_by="createdAt")] == ["a"]

def test_update_merges_and_requires_existing_document():
    """Test update merges fields and fails on missing documents"""
    store = MemoryStore()
    store.set("users", "u1", {"username": "old", "email": "u@example.com"})
    store.update("users", "u1", {"username": "new"})

    assert store.get("users", "u1") == {"id": "u1", "username": "new", "email": "u@example.com"}

    with pytest.raises(InternalError):
        store.update("users", "ghost", {"username": "x"})

def test_delete_absent_document_is_noop():
    """Test deleting a missing document"""
    store = MemoryStore()
    store.delete("users", "nobody")
    assert store.count("users") == 0

def test_subcollections_are_independent_paths():
    """Test sub-collections are counted separately from their parent"""
    store = MemoryStore()
    store.set("events", "e1", {"title": "Event"})
    store.add("events/e1/comments", {"comment": "hi"})
    store.add("events/e2/comments", {"comment": "other"})

    assert store.count("events/e1/comments") == 1
    assert store.count("events") == 1

def test_batch_commit_applies_all_writes():
    """Test a successful batch applies every write"""
    store = MemoryStore()
    store.set("events", "e1", {"title": "Event"})
    store.set("events/e1/comments", "c1", {"comment": "hi"})

    batch = store.batch()
    batch.delete("events/e1/comments", "c1")
    batch.delete("events", "e1")
    batch.commit()

    assert store.get("events", "e1") is None
    assert store.count("events/e1/comments") == 0

def test_failed_batch_leaves_no_partial_state():
    """One failing write aborts the whole batch"""
    store = MemoryStore()
    store.set("events", "e1", {"title": "Event"})
    store.set("events/e1/comments", "c1", {"comment": "hi"})

    batch = store.batch()
    batch.delete("events/e1/comments", "c1")
    batch.delete("events", "e1")
    batch.update("events", "does-not-exist", {"title": "boom"})

    with pytest.raises(InternalError):
        batch.commit()

    assert store.get("events", "e1") is not None
    assert store.get("events/e1/comments", "c1") is not None

def test_firestore_errors_become_internal_errors():
    """Test Firestore API failures surface as InternalError"""
    client = MagicMock()
    client.collection.return_value.document.return_value.get.side_effect = (
        google_exceptions.ServiceUnavailable("down")
    )
    store = FirestoreStore(client=client)

    with pytest.raises(InternalError):
        store.get("events", "e1")

def test_firestore_batch_commit_failure_becomes_internal_error():
    """Test a failed Firestore batch commit surfaces as InternalError"""
    client = MagicMock()
    client.batch.return_value.commit.side_effect = google_exceptions.ServiceUnavailable("down")
    store = FirestoreStore(client=client)

    with pytest.raises(InternalError):
        store.batch().delete("events", "e1").commit()

"""
Tests for the attendance ledger
"""

import pytest

from app.services.exceptions import NotFoundError


def test_repeated_confirm_keeps_one_record(ledger, store, event, other):
    """Test confirming twice leaves a single refreshed record"""
    first = ledger.confirm(other, event.id)
    second = ledger.confirm(other, event.id)

    assert ledger.count(event.id) == 1
    records = ledger.list_attendees(event.id)
    assert [r.uid for r in records] == [other.user_id]
    assert records[0].username == "oscar"
    assert second.updated_at >= first.updated_at
    assert store.get(f"events/{event.id}/attendees", other.user_id)["updatedAt"] == second.updated_at

def test_confirm_unknown_event(ledger, other):
    """Test confirming attendance to a missing event"""
    with pytest.raises(NotFoundError):
        ledger.confirm(other, "missing")

def test_cancel_removes_record(ledger, event, other):
    """Test cancel deletes the attendance record"""
    ledger.confirm(other, event.id)
    ledger.cancel(other, event.id)

    assert ledger.count(event.id) == 0
    assert ledger.status(event.id, other.user_id) == {"confirmed": False}

def test_cancel_without_confirmation_is_noop(ledger, event, other):
    """Test cancel without a prior confirmation"""
    ledger.cancel(other, event.id)
    assert ledger.count(event.id) == 0

def test_status(ledger, event, owner, other):
    """Test status for confirmed and unconfirmed users"""
    assert ledger.status(event.id, other.user_id) == {"confirmed": False}

    ledger.confirm(other, event.id)
    status = ledger.status(event.id, other.user_id)
    assert status["confirmed"] is True
    assert status["uid"] == other.user_id
    assert status["username"] == "oscar"
    assert "updatedAt" in status

    assert ledger.status(event.id, owner.user_id) == {"confirmed": False}

def test_count_per_event(ledger, events, event, owner, other):
    """Test attendee counts are kept per event"""
    second = events.create_event(owner.user_id, "Workshop", "2030-06-01", "Lab", "Hands-on")
    ledger.confirm(owner, event.id)
    ledger.confirm(other, event.id)
    ledger.confirm(other, second.id)

    assert ledger.count(event.id) == 2
    assert ledger.count(second.id) == 1

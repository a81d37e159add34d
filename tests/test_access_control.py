"""
Tests for caller identity and the owner-or-admin policy
"""

from datetime import timedelta

import pytest

from app.models import CallerContext
from app.services.access_control import COMMENT_OWNER, EVENT_OWNER
from app.services.exceptions import AuthError, ForbiddenError
from app.utils.security import create_access_token


def test_current_identity_from_valid_token(access):
    """Test a signed token resolves to its user id and email"""
    token = create_access_token("u1", "u1@example.com")
    caller = access.current_identity(token)
    assert caller == CallerContext(user_id="u1", email="u1@example.com")

@pytest.mark.parametrize("token", [None, "", "not-a-jwt", "a.b.c"])
def test_current_identity_rejects_bad_tokens(access, token):
    """Test missing or malformed tokens are rejected"""
    with pytest.raises(AuthError):
        access.current_identity(token)

def test_current_identity_rejects_expired_token(access):
    """Test tokens past their expiry are rejected"""
    token = create_access_token("u1", "u1@example.com", expires_delta=timedelta(seconds=-10))
    with pytest.raises(AuthError):
        access.current_identity(token)

def test_require_admin(access, owner, admin):
    """Test admin check for admins, plain users and unknown ids"""
    assert access.require_admin(admin.user_id).is_admin
    with pytest.raises(ForbiddenError):
        access.require_admin(owner.user_id)
    with pytest.raises(ForbiddenError):
        access.require_admin("missing-user")

def test_owner_or_admin_matrix(access, owner, other, admin):
    """Test owner and admin pass while other users are refused"""
    access.require_owner_or_admin(owner.user_id, owner.user_id)
    access.require_owner_or_admin(admin.user_id, owner.user_id)
    with pytest.raises(ForbiddenError):
        access.require_owner_or_admin(other.user_id, owner.user_id)

def test_authorize_uses_owner_extractor(access, event, comments, owner, other):
    """Test each resource kind is checked against its own owner field"""
    access.authorize(owner, event, EVENT_OWNER)
    with pytest.raises(ForbiddenError):
        access.authorize(other, event, EVENT_OWNER)

    comment = comments.add_comment(other, event.id, "Nice")
    access.authorize(other, comment, COMMENT_OWNER)
    # Event creator has no rights over someone else's comment
    with pytest.raises(ForbiddenError):
        access.authorize(owner, comment, COMMENT_OWNER)

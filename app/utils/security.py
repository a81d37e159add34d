"""
Security utilities: password hashing, token signing and bearer extraction
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import bcrypt
import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.config import settings

# auto_error=False so a missing header becomes our 401, not FastAPI's 403
security = HTTPBearer(auto_error=False)

# bcrypt only looks at the first 72 bytes and newer releases reject longer input
BCRYPT_MAX_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(password: str) -> str:
    """Hash a password with bcrypt"""
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Compare a plain password against a stored bcrypt hash"""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(_password_bytes(password), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_access_token(uid: str, email: str, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a bearer token binding the user id and email"""
    now = datetime.now(timezone.utc)
    expires = now + (expires_delta or timedelta(days=settings.JWT_EXPIRES_DAYS))
    payload = {
        "uid": uid,
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(expires.timestamp()),
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Dict:
    """Verify signature and expiry; raises ``jwt.PyJWTError`` on failure"""
    return jwt.decode(token, settings.JWT_SECRET, algorithms=[settings.JWT_ALGORITHM])


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[str]:
    """Extract the raw bearer token, if any"""
    if credentials is None:
        return None
    return credentials.credentials

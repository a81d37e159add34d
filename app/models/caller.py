"""
Authenticated caller passed explicitly into service operations
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CallerContext:
    user_id: str
    email: str

"""
Session Auth Domain Entities

All domain entities organized by model.
"""

from .user import User
from .session import Session

__all__ = [
    "User",
    "Session",
]

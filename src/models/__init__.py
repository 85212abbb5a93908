"""SQLAlchemy models."""

from src.models.user import IssuedToken, User

__all__ = [
    "IssuedToken",
    "User",
]

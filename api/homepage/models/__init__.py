"""Database models for the homepage API."""

from homepage.models.account import AdminAccountRow
from homepage.models.document import DocumentRow

__all__ = [
    "AdminAccountRow",
    "DocumentRow",
]

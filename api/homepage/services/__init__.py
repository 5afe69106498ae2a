"""Services for the homepage API."""

from homepage.services.auth import AuthService
from homepage.services.bootstrap import ensure_defaults
from homepage.services.profile import ProfileService

__all__ = ["AuthService", "ProfileService", "ensure_defaults"]

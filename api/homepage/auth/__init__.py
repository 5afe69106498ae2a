"""Authentication utilities for the homepage API."""

from homepage.auth.jwt import create_session_token, decode_session_token
from homepage.auth.password import hash_password, validate_password_strength, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "validate_password_strength",
    "create_session_token",
    "decode_session_token",
]

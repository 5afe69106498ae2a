"""JWT session token creation and validation."""

from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from homepage.config import settings
from homepage.errors import ExpiredSessionError, InvalidToken
from homepage.schemas.account import Identity


def create_session_token(username: str, role: str) -> str:
    """Create a session token valid for ``token_expire_days`` (7 by default)."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": username,
        "username": username,
        "role": role,
        "iat": now,
        "exp": now + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_session_token(token: str) -> Identity:
    """
    Decode and validate a session token.

    Raises:
        ExpiredSessionError: the token's expiry has passed
        InvalidToken: anything else wrong with the token
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise ExpiredSessionError() from exc
    except JWTError as exc:
        raise InvalidToken() from exc

    username = payload.get("username")
    role = payload.get("role")
    if not isinstance(username, str) or not isinstance(role, str) or "exp" not in payload:
        raise InvalidToken()
    return Identity(username=username, role=role)

"""Password hashing and complexity policy."""

from passlib.context import CryptContext

from homepage.errors import WeakPasswordError

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

MIN_PASSWORD_LENGTH = 8
PASSWORD_SYMBOLS = frozenset("!@#$%^&*()_+-=[]{};':\"\\|,.<>/?")


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt."""
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash. Unknown hash formats never verify."""
    try:
        return pwd_context.verify(password, password_hash)
    except ValueError:
        return False


def validate_password_strength(password: str) -> None:
    """
    Enforce the password policy.

    Raises:
        WeakPasswordError: naming the first rule the password breaks
            (``length``, ``uppercase``, ``lowercase`` or ``symbol``).
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPasswordError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters", rule="length"
        )
    if not any("A" <= c <= "Z" for c in password):
        raise WeakPasswordError("Password must contain at least one uppercase letter", rule="uppercase")
    if not any("a" <= c <= "z" for c in password):
        raise WeakPasswordError("Password must contain at least one lowercase letter", rule="lowercase")
    if not any(c in PASSWORD_SYMBOLS for c in password):
        raise WeakPasswordError("Password must contain at least one special symbol", rule="symbol")

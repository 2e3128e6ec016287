import bcrypt

from scholarfolio.core.config import get_settings


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Salted bcrypt hash of a plaintext password."""
    if rounds is None:
        rounds = get_settings().password_hash_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False

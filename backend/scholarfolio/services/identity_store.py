"""Account registration and credential checks.

Emails are lowercased and trimmed before every write and lookup, so identity
is case-insensitive. Login failures are deliberately uniform.
"""
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from scholarfolio.core.errors import AuthError, ConflictError, StoreError, ValidationError
from scholarfolio.core.security import get_password_hash, verify_password
from scholarfolio.models import User

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
INVALID_CREDENTIALS = "Invalid credentials."


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def register(
    db: AsyncSession, email: str | None, password: str | None, *, rounds: int | None = None
) -> User:
    if not email or not password:
        raise ValidationError("Email and password are required.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long.")

    # bcrypt is CPU-bound; keep it off the event loop
    hashed = await run_in_threadpool(get_password_hash, password, rounds)
    user = User(email=normalize_email(email), password=hashed)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError as exc:
        await db.rollback()
        raise ConflictError("User already exists.") from exc
    except SQLAlchemyError as exc:
        logger.exception("Signup error")
        await db.rollback()
        raise StoreError("Server error during signup.") from exc

    await db.refresh(user)
    logger.info("Registered user id=%s", user.id)
    return user


async def login(db: AsyncSession, email: str | None, password: str | None) -> User:
    if not email or not password:
        raise ValidationError("Email and password are required.")

    try:
        result = await db.execute(select(User).where(User.email == normalize_email(email)))
        user = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        logger.exception("Login error")
        raise StoreError("Login failed.") from exc

    if user is None:
        raise AuthError(INVALID_CREDENTIALS)
    if not await run_in_threadpool(verify_password, password, user.password):
        raise AuthError(INVALID_CREDENTIALS)
    return user

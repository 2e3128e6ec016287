"""Researcher profiles: one row per user email, written with a single upsert."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from scholarfolio.core.errors import StoreError
from scholarfolio.models import Profile, utc_now_iso
from scholarfolio.schemas import ProfileUpsert
from scholarfolio.services.resource_store import store_errors

logger = logging.getLogger(__name__)

_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def _insert_for(db: AsyncSession):
    dialect = db.bind.dialect.name
    try:
        return _INSERTS[dialect]
    except KeyError:
        logger.error("Profile upsert is not supported on %s", dialect)
        raise StoreError("Error saving profile.") from None


async def get_profile(db: AsyncSession, user_email: str) -> Profile | None:
    async with store_errors(db, "Error fetching profile."):
        result = await db.execute(select(Profile).where(Profile.user_email == user_email))
        return result.scalar_one_or_none()


async def upsert_profile(db: AsyncSession, data: ProfileUpsert) -> tuple[int, bool]:
    """Insert or overwrite the profile for data.user_email.

    Returns (profile id, created). The write itself is one atomic statement
    keyed on the unique user_email; the preceding lookup only picks the
    response message.
    """
    values = data.model_dump()
    now = utc_now_iso()
    insert = _insert_for(db)

    stmt = insert(Profile).values(**values, created_date=now, modified_date=now)
    overwrite = {key: stmt.excluded[key] for key in values if key != "user_email"}
    overwrite["modified_date"] = now
    stmt = stmt.on_conflict_do_update(index_elements=["user_email"], set_=overwrite).returning(
        Profile.id
    )

    async with store_errors(db, "Error saving profile."):
        existing = await db.scalar(select(Profile.id).where(Profile.user_email == data.user_email))
        profile_id = (await db.execute(stmt)).scalar_one()
        await db.commit()

    created = existing is None
    logger.info("Saved profile id=%s created=%s", profile_id, created)
    return profile_id, created


async def delete_profile(db: AsyncSession, user_email: str) -> int:
    async with store_errors(db, "Error deleting profile."):
        result = await db.execute(delete(Profile).where(Profile.user_email == user_email))
        await db.commit()
    return result.rowcount

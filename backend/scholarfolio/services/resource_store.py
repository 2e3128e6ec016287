"""Owner-scoped CRUD over a single table.

Every resource family (ideas, notes, deadlines, ...) is one ``ResourceStore``
instance configured with its model, owner column and listing order. Each
operation is a single statement committed on its own; database failures are
logged and surface as ``StoreError`` with a generic message.
"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Sequence, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from scholarfolio.core.database import Base
from scholarfolio.core.errors import StoreError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@asynccontextmanager
async def store_errors(db: AsyncSession, message: str) -> AsyncIterator[None]:
    """Roll back and re-raise database failures as StoreError(message)."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception(message)
        await db.rollback()
        raise StoreError(message) from exc


def without_nulls(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset fields so column defaults apply on insert."""
    return {key: value for key, value in values.items() if value is not None}


class ResourceStore(Generic[ModelT]):
    def __init__(
        self,
        model: type[ModelT],
        *,
        owner: InstrumentedAttribute,
        order_by: Sequence[Any] = (),
        noun: str,
        plural: str,
    ) -> None:
        self.model = model
        self.owner = owner
        self.order_by = tuple(order_by) or (model.id.asc(),)
        self.noun = noun
        self.plural = plural

    async def list_for_owner(self, db: AsyncSession, owner_key: str) -> list[ModelT]:
        async with store_errors(db, f"Error fetching {self.plural}."):
            result = await db.execute(
                select(self.model).where(self.owner == owner_key).order_by(*self.order_by)
            )
            return list(result.scalars().all())

    async def get(self, db: AsyncSession, item_id: int) -> ModelT | None:
        async with store_errors(db, f"Error fetching {self.noun}."):
            return await db.get(self.model, item_id)

    async def create(self, db: AsyncSession, values: dict[str, Any]) -> ModelT:
        async with store_errors(db, f"Error creating {self.noun}."):
            item = self.model(**without_nulls(values))
            db.add(item)
            await db.commit()
            await db.refresh(item)
        logger.info("Created %s id=%s", self.noun, item.id)
        return item

    async def update(self, db: AsyncSession, item_id: int, values: dict[str, Any]) -> int:
        """Overwrite the given columns; returns the affected-row count."""
        async with store_errors(db, f"Error updating {self.noun}."):
            result = await db.execute(
                update(self.model).where(self.model.id == item_id).values(**values)
            )
            await db.commit()
        return result.rowcount

    async def delete(self, db: AsyncSession, item_id: int) -> int:
        async with store_errors(db, f"Error deleting {self.noun}."):
            result = await db.execute(delete(self.model).where(self.model.id == item_id))
            await db.commit()
        return result.rowcount

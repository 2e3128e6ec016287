import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from scholarfolio.models import CareerGoal, StageHistory
from scholarfolio.services.resource_store import ResourceStore, store_errors

logger = logging.getLogger(__name__)


class CareerGoalStore(ResourceStore[CareerGoal]):
    """Career goals plus their append-only stage history."""

    def __init__(self) -> None:
        super().__init__(
            CareerGoal,
            owner=CareerGoal.user_email,
            order_by=(CareerGoal.created_date.desc(),),
            noun="career goal",
            plural="career goals",
        )

    async def delete(self, db: AsyncSession, item_id: int) -> int:
        """Remove the goal and its history rows in one transaction."""
        async with store_errors(db, "Error deleting career goal."):
            await db.execute(delete(StageHistory).where(StageHistory.goal_id == item_id))
            result = await db.execute(delete(CareerGoal).where(CareerGoal.id == item_id))
            await db.commit()
        logger.info("Deleted career goal id=%s rows=%s", item_id, result.rowcount)
        return result.rowcount

    async def list_history(self, db: AsyncSession, goal_id: int) -> list[StageHistory]:
        async with store_errors(db, "Error fetching stage history."):
            result = await db.execute(
                select(StageHistory)
                .where(StageHistory.goal_id == goal_id)
                .order_by(StageHistory.stage.asc(), StageHistory.updated_date.desc())
            )
            return list(result.scalars().all())

    async def add_history(
        self, db: AsyncSession, goal_id: int, stage: int, description: str | None
    ) -> StageHistory:
        async with store_errors(db, "Error adding stage history."):
            entry = StageHistory(goal_id=goal_id, stage=stage, description=description)
            db.add(entry)
            await db.commit()
            await db.refresh(entry)
        return entry

    async def delete_history(self, db: AsyncSession, goal_id: int, history_id: int) -> int:
        async with store_errors(db, "Error deleting history entry."):
            result = await db.execute(
                delete(StageHistory).where(
                    StageHistory.id == history_id, StageHistory.goal_id == goal_id
                )
            )
            await db.commit()
        return result.rowcount

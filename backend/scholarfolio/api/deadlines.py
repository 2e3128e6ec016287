from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import DeadlineCreate, DeadlineUpdate
from scholarfolio.services import deadlines

router = APIRouter()


@router.get("/{email}")
async def list_deadlines(email: str, db: DbSession):
    """Soonest due date first."""
    return [deadline.to_dict() for deadline in await deadlines.list_for_owner(db, email)]


@router.post("")
async def create_deadline(data: DeadlineCreate, db: DbSession):
    deadline = await deadlines.create(db, data.model_dump())
    return deadline.to_dict()


@router.put("/{deadline_id}")
async def update_deadline(deadline_id: int, data: DeadlineUpdate, db: DbSession):
    return {"updated": await deadlines.update(db, deadline_id, data.model_dump())}


@router.delete("/{deadline_id}")
async def delete_deadline(deadline_id: int, db: DbSession):
    return {"deleted": await deadlines.delete(db, deadline_id)}

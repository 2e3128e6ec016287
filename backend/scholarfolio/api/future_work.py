from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import FutureWorkCreate, FutureWorkUpdate
from scholarfolio.services import future_work

router = APIRouter()
alias_router = APIRouter()


@router.get("/{email}")
async def list_future_work(email: str, db: DbSession):
    return [item.to_dict() for item in await future_work.list_for_owner(db, email)]


alias_router.add_api_route("/{email}", list_future_work, methods=["GET"])


@router.post("")
async def create_future_work(data: FutureWorkCreate, db: DbSession):
    item = await future_work.create(db, data.model_dump())
    return item.to_dict()


@router.put("/{item_id}")
async def update_future_work(item_id: int, data: FutureWorkUpdate, db: DbSession):
    return {"updated": await future_work.update(db, item_id, data.model_dump())}


@router.delete("/{item_id}")
async def delete_future_work(item_id: int, db: DbSession):
    return {"deleted": await future_work.delete(db, item_id)}

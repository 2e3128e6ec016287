from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import IdeaCreate, IdeaUpdate
from scholarfolio.services import ideas

router = APIRouter()


@router.get("/{email}")
async def list_ideas(email: str, db: DbSession):
    return [idea.to_dict() for idea in await ideas.list_for_owner(db, email)]


@router.post("")
async def create_idea(data: IdeaCreate, db: DbSession):
    idea = await ideas.create(db, data.model_dump())
    return idea.to_dict()


@router.put("/{idea_id}")
async def update_idea(idea_id: int, data: IdeaUpdate, db: DbSession):
    return {"updated": await ideas.update(db, idea_id, data.model_dump())}


@router.delete("/{idea_id}")
async def delete_idea(idea_id: int, db: DbSession):
    return {"deleted": await ideas.delete(db, idea_id)}

from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import CareerGoalCreate, CareerGoalUpdate, StageHistoryCreate
from scholarfolio.services import career_goals

router = APIRouter()
alias_router = APIRouter()


@router.get("/{email}")
async def list_career_goals(email: str, db: DbSession):
    return [goal.to_dict() for goal in await career_goals.list_for_owner(db, email)]


alias_router.add_api_route("/{email}", list_career_goals, methods=["GET"])


@router.post("")
async def create_career_goal(data: CareerGoalCreate, db: DbSession):
    goal = await career_goals.create(db, data.model_dump())
    return goal.to_dict()


@router.put("/{goal_id}")
async def update_career_goal(goal_id: int, data: CareerGoalUpdate, db: DbSession):
    return {"updated": await career_goals.update(db, goal_id, data.model_dump())}


@router.delete("/{goal_id}")
async def delete_career_goal(goal_id: int, db: DbSession):
    return {"deleted": await career_goals.delete(db, goal_id)}


@router.get("/{goal_id}/history")
async def list_stage_history(goal_id: int, db: DbSession):
    return [entry.to_dict() for entry in await career_goals.list_history(db, goal_id)]


@router.post("/{goal_id}/history")
async def add_stage_history(goal_id: int, data: StageHistoryCreate, db: DbSession):
    entry = await career_goals.add_history(db, goal_id, data.stage, data.description)
    return entry.to_dict()


@router.delete("/{goal_id}/history/{history_id}")
async def delete_stage_history(goal_id: int, history_id: int, db: DbSession):
    return {"deleted": await career_goals.delete_history(db, goal_id, history_id)}

from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import MeetingCreate, MeetingUpdate
from scholarfolio.services import meetings

router = APIRouter()


@router.post("")
async def create_meeting(data: MeetingCreate, db: DbSession):
    meeting = await meetings.create(db, data.model_dump())
    return meeting.to_dict()


@router.get("/{email}")
async def list_meetings(email: str, db: DbSession):
    """Meetings are keyed by the colleague's email, not the owner's."""
    return [meeting.to_dict() for meeting in await meetings.list_for_owner(db, email)]


@router.put("/{meeting_id}")
async def update_meeting(meeting_id: int, data: MeetingUpdate, db: DbSession):
    return {"updated": await meetings.update(db, meeting_id, data.model_dump())}


@router.delete("/{meeting_id}")
async def delete_meeting(meeting_id: int, db: DbSession):
    return {"deleted": await meetings.delete(db, meeting_id)}

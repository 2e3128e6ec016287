"""Calendar events.

Two routers share the ``calendar_events`` table: ``router`` speaks the
camelCase shape used by the calendar page (``date``, ``start``, ``end``,
``isAllDay`` ...), ``legacy_router`` keeps the original snake_case columns
for older clients.
"""
from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.models import CalendarEvent, utc_now_iso
from scholarfolio.schemas import (
    EventCreate,
    EventFields,
    EventResponse,
    LegacyEventCreate,
    LegacyEventUpdate,
)
from scholarfolio.services import events

router = APIRouter()
legacy_router = APIRouter()


def _camel(event: CalendarEvent) -> dict:
    return EventResponse.model_validate(event).model_dump(by_alias=True)


@router.get("/{email}")
async def list_events(email: str, db: DbSession):
    return [_camel(event) for event in await events.list_for_owner(db, email)]


@router.post("")
async def create_event(data: EventCreate, db: DbSession):
    event = await events.create(db, data.model_dump())
    return _camel(event)


@router.put("/{event_id}")
async def update_event(event_id: int, data: EventFields, db: DbSession):
    values = data.model_dump()
    values["modified_date"] = utc_now_iso()
    return {"updated": await events.update(db, event_id, values)}


@router.delete("/{event_id}")
async def delete_event(event_id: int, db: DbSession):
    return {"deleted": await events.delete(db, event_id)}


@legacy_router.get("/{email}")
async def list_legacy_events(email: str, db: DbSession):
    return [event.to_dict() for event in await events.list_for_owner(db, email)]


@legacy_router.post("")
async def create_legacy_event(data: LegacyEventCreate, db: DbSession):
    event = await events.create(db, data.model_dump())
    return event.to_dict()


@legacy_router.put("/{event_id}")
async def update_legacy_event(event_id: int, data: LegacyEventUpdate, db: DbSession):
    values = data.model_dump()
    values["modified_date"] = utc_now_iso()
    return {"updated": await events.update(db, event_id, values)}


@legacy_router.delete("/{event_id}")
async def delete_legacy_event(event_id: int, db: DbSession):
    return {"deleted": await events.delete(db, event_id)}

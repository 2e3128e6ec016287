from fastapi import APIRouter

from scholarfolio.api.deps import DbSession
from scholarfolio.schemas import NoteCreate, NoteUpdate
from scholarfolio.services import notes

router = APIRouter()


@router.get("/{email}")
async def list_notes(email: str, db: DbSession):
    return [note.to_dict() for note in await notes.list_for_owner(db, email)]


@router.post("")
async def create_note(data: NoteCreate, db: DbSession):
    note = await notes.create(db, data.model_dump())
    return note.to_dict()


@router.put("/{note_id}")
async def update_note(note_id: int, data: NoteUpdate, db: DbSession):
    return {"updated": await notes.update(db, note_id, data.model_dump())}


@router.delete("/{note_id}")
async def delete_note(note_id: int, db: DbSession):
    return {"deleted": await notes.delete(db, note_id)}

from fastapi import APIRouter

from scholarfolio.api import (
    auth,
    career,
    deadlines,
    events,
    future_work,
    ideas,
    meetings,
    notes,
    profile,
    projects,
)

router = APIRouter()

router.include_router(auth.router, tags=["auth"])
router.include_router(projects.router, prefix="/projects", tags=["projects"])
router.include_router(meetings.router, prefix="/meetings", tags=["meetings"])
router.include_router(ideas.router, prefix="/ideas", tags=["ideas"])
router.include_router(notes.router, prefix="/notes", tags=["notes"])
router.include_router(career.router, prefix="/career_goals", tags=["career"])
router.include_router(career.alias_router, prefix="/career", tags=["career"])
router.include_router(future_work.router, prefix="/future_work", tags=["future work"])
router.include_router(future_work.alias_router, prefix="/future", tags=["future work"])
router.include_router(deadlines.router, prefix="/deadlines", tags=["deadlines"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(events.legacy_router, prefix="/calendar_events", tags=["events"])
router.include_router(profile.router, tags=["profile"])

from scholarfolio.schemas.schemas import (
    Credentials,
    ProjectCreate, ProjectUpdate, ProjectDescription,
    MeetingCreate, MeetingUpdate,
    IdeaCreate, IdeaUpdate,
    NoteCreate, NoteUpdate,
    CareerGoalCreate, CareerGoalUpdate, StageHistoryCreate,
    FutureWorkCreate, FutureWorkUpdate,
    DeadlineCreate, DeadlineUpdate,
    EventCreate, EventFields, EventResponse,
    LegacyEventCreate, LegacyEventUpdate,
    ProfileUpsert, ProfileResponse,
)

__all__ = [
    "Credentials",
    "ProjectCreate", "ProjectUpdate", "ProjectDescription",
    "MeetingCreate", "MeetingUpdate",
    "IdeaCreate", "IdeaUpdate",
    "NoteCreate", "NoteUpdate",
    "CareerGoalCreate", "CareerGoalUpdate", "StageHistoryCreate",
    "FutureWorkCreate", "FutureWorkUpdate",
    "DeadlineCreate", "DeadlineUpdate",
    "EventCreate", "EventFields", "EventResponse",
    "LegacyEventCreate", "LegacyEventUpdate",
    "ProfileUpsert", "ProfileResponse",
]

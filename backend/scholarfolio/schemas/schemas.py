import json
from typing import Annotated, Any
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def _coerce_json_list(value: Any) -> list | None:
    """Accept a list or its JSON-encoded text; blank text means an empty list."""
    if value is None or isinstance(value, list):
        return value
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as exc:
            raise ValueError("must be a JSON array") from exc
        if not isinstance(decoded, list):
            raise ValueError("must be a JSON array")
        return decoded
    raise ValueError("must be a list")


JsonList = Annotated[list | None, BeforeValidator(_coerce_json_list)]
RequiredStr = Annotated[str, Field(min_length=1)]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True, validate_default=True
    )


# Auth

class Credentials(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


# Projects

class ProjectCreate(BaseModel):
    name: RequiredStr
    owner_email: RequiredStr
    colleagues: JsonList = None
    progress: int | None = None


class ProjectUpdate(BaseModel):
    model_config = ConfigDict(validate_default=True)

    name: str | None = None
    colleagues: JsonList = None
    progress: int | None = None

    @field_validator("progress", mode="after")
    @classmethod
    def default_progress(cls, v: int | None) -> int:
        return 0 if v is None else v


class ProjectDescription(CamelModel):
    project_title: str | None = None
    notes: str | None = None
    colleague_name: str | None = None
    colleague_phone: str | None = None
    colleague_email: str | None = None
    colleague_address1: str | None = None
    colleague_address2: str | None = None
    colleague_address3: str | None = None
    your_name: str | None = None
    your_phone: str | None = None
    your_email: str | None = None
    your_address1: str | None = None
    your_address2: str | None = None
    your_address3: str | None = None
    objectives: str | None = None
    timeline: str | None = None
    primary_audience: str | None = None
    secondary_audience: str | None = None
    call_action: str | None = None
    competition: str | None = None
    graphics: str | None = None
    photography: str | None = None
    multimedia: str | None = None
    other_info: str | None = None
    client_name: str | None = None
    client_comments: str | None = None
    approval_date: str | None = None
    approval_signature: str | None = None


# Meetings

class MeetingCreate(BaseModel):
    colleague_email: RequiredStr
    date: str | None = None
    description: str | None = None


class MeetingUpdate(BaseModel):
    date: str | None = None
    description: str | None = None


# Ideas

class IdeaCreate(BaseModel):
    user_email: RequiredStr
    title: str | None = None
    content: str | None = None
    category: str | None = None
    created_date: str | None = None


class IdeaUpdate(BaseModel):
    title: str | None = None
    content: str | None = None
    category: str | None = None


# Notes

class NoteCreate(BaseModel):
    user_email: RequiredStr
    title: str | None = None
    content: str | None = None
    created_date: str | None = None


class NoteUpdate(BaseModel):
    title: str | None = None
    content: str | None = None


# Career goals

class CareerGoalUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    progress: int | None = None
    goal_type: str | None = None
    target_date: str | None = None
    total_stages: int | None = None
    current_stage: int | None = None
    start_date: str | None = None
    stage_description: str | None = None


class CareerGoalCreate(CareerGoalUpdate):
    user_email: RequiredStr
    created_date: str | None = None


class StageHistoryCreate(BaseModel):
    stage: int
    description: str | None = None


# Future work

class FutureWorkUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    timeline: str | None = None


class FutureWorkCreate(FutureWorkUpdate):
    user_email: RequiredStr
    created_date: str | None = None


# Deadlines

class DeadlineUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    due_date: str | None = None
    priority: str | None = None
    status: str | None = None


class DeadlineCreate(DeadlineUpdate):
    user_email: RequiredStr
    created_date: str | None = None


# Calendar events, current camelCase API

class EventFields(CamelModel):
    title: str | None = None
    description: str | None = None
    event_date: str | None = Field(default=None, alias="date")
    start_time: str | None = Field(default=None, alias="start")
    end_time: str | None = Field(default=None, alias="end")
    location: str | None = None
    category: str | None = None
    attendees: str | None = None
    reminder: int | None = None
    is_all_day: bool | None = None
    recurrence: str | None = None
    recurrence_end: str | None = None
    show_as: str | None = None
    priority: str | None = None
    is_online: bool | None = None
    meeting_link: str | None = None
    attachments: str | None = None
    repeat_weekly: bool | None = None

    @field_validator("is_all_day", "is_online", "repeat_weekly", mode="before")
    @classmethod
    def truthy_flag(cls, v: Any) -> bool:
        # Older clients send 0/1 or omit the flag entirely
        return bool(v)


class EventCreate(EventFields):
    user_email: RequiredStr
    created_date: str | None = None


class EventResponse(EventFields):
    id: int
    created_date: str | None = None
    modified_date: str | None = None


# Calendar events, legacy snake_case API

class LegacyEventUpdate(BaseModel):
    model_config = ConfigDict(validate_default=True)

    title: str | None = None
    description: str | None = None
    event_date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    repeat_weekly: bool | None = None

    @field_validator("repeat_weekly", mode="before")
    @classmethod
    def truthy_flag(cls, v: Any) -> bool:
        return bool(v)


class LegacyEventCreate(LegacyEventUpdate):
    user_email: RequiredStr
    created_date: str | None = None


# Researcher profile

class ProfileFields(CamelModel):
    full_name: str | None = None
    designation: str | None = None
    department: str | None = None
    institution: str | None = None
    office_address: str | None = None
    official_email: str | None = None
    alternate_email: str | None = None
    phone: str | None = None
    website: str | None = None
    degrees: JsonList = None
    employment: JsonList = None
    research_keywords: str | None = None
    research_description: str | None = None
    scholar_link: str | None = None
    courses: JsonList = None
    grants: JsonList = None
    professional_activities: str | None = None
    awards: JsonList = None
    skills: str | None = None
    outreach_service: str | None = None

    @field_validator("degrees", "employment", "courses", "grants", "awards", mode="after")
    @classmethod
    def empty_list(cls, v: list | None) -> list:
        return [] if v is None else v


class ProfileUpsert(ProfileFields):
    user_email: RequiredStr


class ProfileResponse(ProfileFields):
    user_email: str

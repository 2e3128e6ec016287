from datetime import datetime, timezone
from sqlalchemy import Text, Boolean, Integer, ForeignKey, Index, JSON
from sqlalchemy.orm import Mapped, mapped_column, relationship
from scholarfolio.core.database import Base


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2024-05-01T09:30:00.000Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)


class Project(Base):
    __tablename__ = "projects"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text)
    owner_email: Mapped[str | None] = mapped_column(Text)
    colleagues: Mapped[list | None] = mapped_column(JSON, default=list)
    progress: Mapped[int | None] = mapped_column(Integer, default=0)

    # Project description sheet
    project_title: Mapped[str | None] = mapped_column(Text)
    notes: Mapped[str | None] = mapped_column(Text)
    colleague_name: Mapped[str | None] = mapped_column(Text)
    colleague_phone: Mapped[str | None] = mapped_column(Text)
    colleague_email: Mapped[str | None] = mapped_column(Text)
    colleague_address1: Mapped[str | None] = mapped_column(Text)
    colleague_address2: Mapped[str | None] = mapped_column(Text)
    colleague_address3: Mapped[str | None] = mapped_column(Text)
    your_name: Mapped[str | None] = mapped_column(Text)
    your_phone: Mapped[str | None] = mapped_column(Text)
    your_email: Mapped[str | None] = mapped_column(Text)
    your_address1: Mapped[str | None] = mapped_column(Text)
    your_address2: Mapped[str | None] = mapped_column(Text)
    your_address3: Mapped[str | None] = mapped_column(Text)
    objectives: Mapped[str | None] = mapped_column(Text)
    timeline: Mapped[str | None] = mapped_column(Text)
    primary_audience: Mapped[str | None] = mapped_column(Text)
    secondary_audience: Mapped[str | None] = mapped_column(Text)
    call_action: Mapped[str | None] = mapped_column(Text)
    competition: Mapped[str | None] = mapped_column(Text)
    graphics: Mapped[str | None] = mapped_column(Text)
    photography: Mapped[str | None] = mapped_column(Text)
    multimedia: Mapped[str | None] = mapped_column(Text)
    other_info: Mapped[str | None] = mapped_column(Text)
    client_name: Mapped[str | None] = mapped_column(Text)
    client_comments: Mapped[str | None] = mapped_column(Text)
    approval_date: Mapped[str | None] = mapped_column(Text)
    approval_signature: Mapped[str | None] = mapped_column(Text)

    # Free-text columns kept from the first dashboard release
    idea: Mapped[str | None] = mapped_column(Text)
    career_goals: Mapped[str | None] = mapped_column(Text)
    future_work: Mapped[str | None] = mapped_column(Text)
    deadlines: Mapped[str | None] = mapped_column(Text)

    colleague_entries: Mapped[list["Colleague"]] = relationship(
        back_populates="project",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (Index("idx_projects_owner", "owner_email"),)


class Colleague(Base):
    __tablename__ = "colleagues"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE")
    )
    name: Mapped[str | None] = mapped_column(Text)
    email: Mapped[str | None] = mapped_column(Text)

    project: Mapped["Project"] = relationship(back_populates="colleague_entries")


class Meeting(Base):
    __tablename__ = "meetings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    colleague_email: Mapped[str | None] = mapped_column(Text, index=True)
    date: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)


class Idea(Base):
    __tablename__ = "ideas"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(Text, default="general")
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    content: Mapped[str | None] = mapped_column(Text)
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)


class CareerGoal(Base):
    __tablename__ = "career_goals"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    progress: Mapped[int | None] = mapped_column(Integer, default=0)
    goal_type: Mapped[str | None] = mapped_column(Text, default="general")
    target_date: Mapped[str | None] = mapped_column(Text)
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)
    total_stages: Mapped[int | None] = mapped_column(Integer, default=5)
    current_stage: Mapped[int | None] = mapped_column(Integer, default=0)
    start_date: Mapped[str | None] = mapped_column(Text)
    stage_description: Mapped[str | None] = mapped_column(Text)

    history: Mapped[list["StageHistory"]] = relationship(
        back_populates="goal",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class StageHistory(Base):
    __tablename__ = "career_stage_history"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    goal_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("career_goals.id", ondelete="CASCADE"), index=True
    )
    stage: Mapped[int | None] = mapped_column(Integer)
    description: Mapped[str | None] = mapped_column(Text)
    updated_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)

    goal: Mapped["CareerGoal"] = relationship(back_populates="history")


class FutureWork(Base):
    __tablename__ = "future_work"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    priority: Mapped[str | None] = mapped_column(Text, default="medium")
    timeline: Mapped[str | None] = mapped_column(Text)
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)


class Deadline(Base):
    __tablename__ = "deadlines"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    due_date: Mapped[str | None] = mapped_column(Text)
    priority: Mapped[str | None] = mapped_column(Text, default="medium")
    status: Mapped[str | None] = mapped_column(Text, default="pending")
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)


class CalendarEvent(Base):
    __tablename__ = "calendar_events"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str | None] = mapped_column(Text, ForeignKey("users.email"), index=True)
    title: Mapped[str | None] = mapped_column(Text)
    description: Mapped[str | None] = mapped_column(Text)
    event_date: Mapped[str | None] = mapped_column(Text)
    start_time: Mapped[str | None] = mapped_column(Text)
    end_time: Mapped[str | None] = mapped_column(Text)
    location: Mapped[str | None] = mapped_column(Text)
    category: Mapped[str | None] = mapped_column(Text, default="Work")
    attendees: Mapped[str | None] = mapped_column(Text)
    reminder: Mapped[int | None] = mapped_column(Integer, default=15)
    is_all_day: Mapped[bool] = mapped_column(Boolean, default=False)
    recurrence: Mapped[str | None] = mapped_column(Text, default="none")
    recurrence_end: Mapped[str | None] = mapped_column(Text)
    show_as: Mapped[str | None] = mapped_column(Text, default="busy")
    priority: Mapped[str | None] = mapped_column(Text, default="normal")
    is_online: Mapped[bool] = mapped_column(Boolean, default=False)
    meeting_link: Mapped[str | None] = mapped_column(Text)
    attachments: Mapped[str | None] = mapped_column(Text)
    repeat_weekly: Mapped[bool] = mapped_column(Boolean, default=False)
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)
    modified_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)


class Profile(Base):
    __tablename__ = "profiles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_email: Mapped[str] = mapped_column(Text, ForeignKey("users.email"), unique=True, nullable=False)
    full_name: Mapped[str | None] = mapped_column(Text)
    designation: Mapped[str | None] = mapped_column(Text)
    department: Mapped[str | None] = mapped_column(Text)
    institution: Mapped[str | None] = mapped_column(Text)
    office_address: Mapped[str | None] = mapped_column(Text)
    official_email: Mapped[str | None] = mapped_column(Text)
    alternate_email: Mapped[str | None] = mapped_column(Text)
    phone: Mapped[str | None] = mapped_column(Text)
    website: Mapped[str | None] = mapped_column(Text)
    degrees: Mapped[list | None] = mapped_column(JSON, default=list)
    employment: Mapped[list | None] = mapped_column(JSON, default=list)
    research_keywords: Mapped[str | None] = mapped_column(Text)
    research_description: Mapped[str | None] = mapped_column(Text)
    scholar_link: Mapped[str | None] = mapped_column(Text)
    courses: Mapped[list | None] = mapped_column(JSON, default=list)
    grants: Mapped[list | None] = mapped_column(JSON, default=list)
    professional_activities: Mapped[str | None] = mapped_column(Text)
    awards: Mapped[list | None] = mapped_column(JSON, default=list)
    skills: Mapped[str | None] = mapped_column(Text)
    outreach_service: Mapped[str | None] = mapped_column(Text)
    created_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)
    modified_date: Mapped[str | None] = mapped_column(Text, default=utc_now_iso)

from scholarfolio.models.models import (
    User, Project, Colleague, Meeting,
    Idea, Note, CareerGoal, StageHistory,
    FutureWork, Deadline, CalendarEvent, Profile,
    utc_now_iso,
)

__all__ = [
    "User", "Project", "Colleague", "Meeting",
    "Idea", "Note", "CareerGoal", "StageHistory",
    "FutureWork", "Deadline", "CalendarEvent", "Profile",
    "utc_now_iso",
]

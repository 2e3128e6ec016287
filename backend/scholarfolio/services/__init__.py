from scholarfolio.models import Idea, Note, FutureWork, Deadline, CalendarEvent, Meeting
from scholarfolio.services.resource_store import ResourceStore
from scholarfolio.services.career_store import CareerGoalStore
from scholarfolio.services.project_store import ProjectStore

projects = ProjectStore()
career_goals = CareerGoalStore()

meetings = ResourceStore(
    Meeting, owner=Meeting.colleague_email, noun="meeting", plural="meetings"
)
ideas = ResourceStore(
    Idea, owner=Idea.user_email, order_by=(Idea.created_date.desc(),), noun="idea", plural="ideas"
)
notes = ResourceStore(
    Note, owner=Note.user_email, order_by=(Note.created_date.desc(),), noun="note", plural="notes"
)
future_work = ResourceStore(
    FutureWork,
    owner=FutureWork.user_email,
    order_by=(FutureWork.created_date.desc(),),
    noun="future work",
    plural="future work",
)
deadlines = ResourceStore(
    Deadline,
    owner=Deadline.user_email,
    order_by=(Deadline.due_date.asc(),),
    noun="deadline",
    plural="deadlines",
)
events = ResourceStore(
    CalendarEvent,
    owner=CalendarEvent.user_email,
    order_by=(CalendarEvent.event_date.asc(), CalendarEvent.start_time.asc()),
    noun="event",
    plural="events",
)

__all__ = [
    "ResourceStore",
    "CareerGoalStore",
    "ProjectStore",
    "projects",
    "career_goals",
    "meetings",
    "ideas",
    "notes",
    "future_work",
    "deadlines",
    "events",
]

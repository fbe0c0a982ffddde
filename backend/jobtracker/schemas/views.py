from datetime import datetime

from jobtracker.schemas.job import CamelModel, JobResponse


class DeadlineBadge(CamelModel):
    label: str
    date: datetime
    days_left: int
    urgency: str


class ReminderEntry(CamelModel):
    label: str
    date: datetime
    days_left: int


class UpcomingReminder(CamelModel):
    job: JobResponse
    entries: list[ReminderEntry]


class TableView(CamelModel):
    total: int
    counts: dict[str, int]
    jobs: list[JobResponse]
    upcoming: list[UpcomingReminder]


class BoardCard(CamelModel):
    job: JobResponse
    deadlines: list[DeadlineBadge]


class BoardColumn(CamelModel):
    status: str
    label: str
    count: int
    jobs: list[BoardCard]


class BoardView(CamelModel):
    columns: list[BoardColumn]


class StatusSlice(CamelModel):
    status: str
    label: str
    count: int


class WeekCount(CamelModel):
    label: str
    count: int


class DayCount(CamelModel):
    date: str
    count: int


class StatsView(CamelModel):
    total: int
    offers: int
    rejections: int
    offer_rate: int
    rejection_rate: int
    status_distribution: list[StatusSlice]
    applications_per_week: list[WeekCount]
    cumulative: list[DayCount]


class Choice(CamelModel):
    value: str
    label: str


class Vocabulary(CamelModel):
    statuses: list[Choice]
    priorities: list[Choice]

"""Deadline urgency and reminder policy.

Two separate computations over the same ``days_left`` value:

* ``classify_urgency`` bands a deadline for the board badges.
* ``is_upcoming`` decides whether a deadline belongs in the reminder summary,
  using the application's own reminder window and a one-day grace period
  after the deadline passes.
"""
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from jobtracker.services.lifecycle import parse_datetime, utcnow

DEFAULT_REMINDER_DAYS = 2
GRACE_DAYS = 1

DEADLINE_FIELDS = (
    ("OA", "oa_deadline"),
    ("Interview", "interview_date"),
)


class Urgency(str, Enum):
    OVERDUE = "overdue"
    CRITICAL = "critical"
    SOON = "soon"
    NORMAL = "normal"


@dataclass(frozen=True)
class Deadline:
    label: str
    date: datetime


def days_left(target: datetime, now: datetime) -> int:
    return math.ceil((target - now).total_seconds() / 86400)


def classify_urgency(days: int) -> Urgency:
    if days <= 0:
        return Urgency.OVERDUE
    if days <= 2:
        return Urgency.CRITICAL
    if days <= 7:
        return Urgency.SOON
    return Urgency.NORMAL


def effective_reminder_window(reminder_days_before: int | None) -> int:
    if reminder_days_before is None:
        return DEFAULT_REMINDER_DAYS
    return reminder_days_before


def is_upcoming(days: int, window: int) -> bool:
    return -GRACE_DAYS <= days <= window


def deadlines_for(job) -> list[Deadline]:
    deadlines = []
    for label, attr in DEADLINE_FIELDS:
        parsed = parse_datetime(getattr(job, attr, None))
        if parsed is not None:
            deadlines.append(Deadline(label=label, date=parsed))
    return deadlines


def deadline_badges(job, now: datetime | None = None) -> list[dict]:
    now = now or utcnow()
    badges = []
    for d in deadlines_for(job):
        left = days_left(d.date, now)
        badges.append({
            "label": d.label,
            "date": d.date,
            "days_left": left,
            "urgency": classify_urgency(left).value,
        })
    return badges


def upcoming_reminders(jobs, now: datetime | None = None) -> list[dict]:
    """Jobs with at least one deadline inside their reminder window."""
    now = now or utcnow()
    reminders = []
    for job in jobs:
        window = effective_reminder_window(job.reminder_days_before)
        entries = []
        for d in deadlines_for(job):
            left = days_left(d.date, now)
            if is_upcoming(left, window):
                entries.append({"label": d.label, "date": d.date, "days_left": left})
        if entries:
            reminders.append({"job": job, "entries": entries})
    return reminders

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from jobtracker.services.deadline_service import deadline_badges
from jobtracker.services.lifecycle import STATUS_LABELS, STATUS_ORDER, parse_datetime, parse_status

logger = logging.getLogger("jobtracker.board")


def build_columns(jobs, now: datetime | None = None) -> list[dict]:
    """Group jobs into one column per status, oldest application first."""
    grouped = {s: [] for s in STATUS_ORDER}
    for job in jobs:
        grouped[job.status].append(job)

    columns = []
    for status in STATUS_ORDER:
        items = sorted(grouped[status], key=lambda j: parse_datetime(j.date_applied))
        columns.append({
            "status": status,
            "label": STATUS_LABELS[status],
            "count": len(items),
            "jobs": [{"job": j, "deadlines": deadline_badges(j, now)} for j in items],
        })
    return columns


@dataclass
class BoardItem:
    id: str
    status: str
    company: str = ""
    role: str = ""
    date_applied: str = ""


@dataclass
class BoardState:
    """Client-side board state with optimistic status moves.

    ``move`` applies the new status locally before ``commit`` persists it and
    puts the old status back if ``commit`` raises. The failed call is not
    retried.
    """

    cards: list[BoardItem] = field(default_factory=list)

    def find(self, job_id: str) -> BoardItem:
        for card in self.cards:
            if card.id == job_id:
                return card
        raise KeyError(job_id)

    def column(self, status: str) -> list[BoardItem]:
        return [c for c in self.cards if c.status == status]

    def move(self, job_id: str, dest_status: str, commit: Callable[[str, str], object]) -> bool:
        dest_status = parse_status(dest_status)
        card = self.find(job_id)
        previous = card.status
        if previous == dest_status:
            return False

        card.status = dest_status
        try:
            commit(job_id, dest_status)
        except Exception:
            logger.warning("Status update for %s failed; reverting to %s", job_id, previous)
            card.status = previous
            raise
        return True

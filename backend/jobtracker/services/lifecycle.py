"""Application status/priority vocabulary and input normalisation.

Status is plain data: any status may follow any other. Only unknown values
are rejected. The declaration order of ``JobStatus`` is the display order
shared by the table, board, stats and export.
"""
from datetime import datetime, timezone
from enum import Enum

class JobStatus(str, Enum):
    APPLIED = "applied"
    SHORTLISTED = "shortlisted"
    OA_ASSIGNED = "oa_assigned"
    INTERVIEW = "interview"
    SELECTED = "selected"
    REJECTED = "rejected"


class JobPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


STATUS_ORDER: tuple[str, ...] = tuple(s.value for s in JobStatus)

STATUS_LABELS: dict[str, str] = {
    "applied": "Applied",
    "shortlisted": "Shortlisted",
    "oa_assigned": "OA Assigned",
    "interview": "Interview",
    "selected": "Selected",
    "rejected": "Rejected",
}

PRIORITY_ORDER: tuple[str, ...] = tuple(p.value for p in JobPriority)

PRIORITY_LABELS: dict[str, str] = {
    "low": "Low",
    "medium": "Medium",
    "high": "High",
}

# Outcome statuses; excluded from the deadline calendar.
TERMINAL_STATUSES = frozenset({"selected", "rejected"})

DEFAULT_STATUS = JobStatus.APPLIED.value
DEFAULT_PRIORITY = JobPriority.MEDIUM.value


def parse_status(value: str) -> str:
    try:
        return JobStatus(value).value
    except ValueError:
        raise ValueError(f"Invalid status. Must be one of: {', '.join(STATUS_ORDER)}") from None


def parse_priority(value: str) -> str:
    try:
        return JobPriority(value).value
    except ValueError:
        raise ValueError(f"Invalid priority. Must be one of: {', '.join(PRIORITY_ORDER)}") from None


def normalize_optional_text(value: str | None) -> str | None:
    if value is None:
        return None
    return value if value != "" else None


def parse_tags(value: str | list[str] | None) -> list[str]:
    """Split a comma-separated tag string into trimmed, non-empty tags.

    Order and duplicates are kept as typed; case is left alone.
    """
    if value is None:
        return []
    if not isinstance(value, (str, list, tuple)):
        raise ValueError("Tags must be a list or a comma-separated string")
    parts = value.split(",") if isinstance(value, str) else value
    if not all(isinstance(p, str) for p in parts):
        raise ValueError("Tags must be text")
    return [p.strip() for p in parts if p and p.strip()]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def parse_datetime(value) -> datetime | None:
    """Parse an ISO date or datetime into an aware UTC datetime.

    Bare dates are midnight UTC and naive datetimes are taken as UTC.
    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError:
            return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except OverflowError:
        # Offsets that push past year 1 or 9999
        return None


def format_timestamp(dt: datetime) -> str:
    """``YYYY-MM-DDTHH:MM:SSZ`` with a four-digit year."""
    dt = dt.astimezone(timezone.utc).replace(microsecond=0, tzinfo=None)
    return dt.isoformat() + "Z"


def parse_date_or_now(value, now: datetime | None = None) -> str:
    parsed = parse_datetime(value)
    return format_timestamp(parsed or now or utcnow())


def parse_optional_date(value) -> str | None:
    """Deadline fields: empty clears, a value must parse."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid date: {value!r}")
    return format_timestamp(parsed)

import csv
import io
from datetime import date

from jobtracker.services.lifecycle import utcnow

CSV_MEDIA_TYPE = "text/csv;charset=utf-8"

CSV_HEADERS = [
    "Company", "Role", "Status", "Priority", "DateApplied", "OADeadline",
    "InterviewDate", "Tags", "Notes", "CreatedAt", "LastUpdated", "URL",
]


class NothingToExport(Exception):
    pass


def _day(value: str | None) -> str:
    return value[:10] if value else ""


def _row(job) -> list[str]:
    return [
        job.company,
        job.role,
        job.status,
        job.priority,
        _day(job.date_applied),
        _day(job.oa_deadline),
        _day(job.interview_date),
        "; ".join(job.tags or []),
        job.notes or "",
        _day(job.created_at),
        _day(job.last_updated),
        job.url or "",
    ]


def jobs_to_csv(jobs) -> str:
    """Serialise applications as CSV: every cell quoted, CRLF between rows."""
    jobs = list(jobs)
    if not jobs:
        raise NothingToExport("No jobs to export")

    output = io.StringIO()
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\r\n")
    writer.writerow(CSV_HEADERS)
    for job in jobs:
        writer.writerow(_row(job))
    # Rows are joined, not terminated
    return output.getvalue()[:-2]


def export_filename(today: date | None = None) -> str:
    today = today or utcnow().date()
    return f"job_applications_{today.isoformat()}.csv"

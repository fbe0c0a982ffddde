from datetime import datetime, timedelta

from jobtracker.services.lifecycle import STATUS_LABELS, parse_datetime, utcnow
from jobtracker.services.view_service import status_counts

WEEKS_SHOWN = 8


def _pct(num: int, denom: int) -> int:
    # Half-up rounding; round() would give banker's rounding
    return int(num / denom * 100 + 0.5) if denom > 0 else 0


def week_label(d: datetime) -> str:
    # Calendar year paired with the ISO week number
    return f"{d.year}-W{d.isocalendar()[1]}"


def applications_per_week(jobs, now: datetime | None = None) -> list[dict]:
    now = now or utcnow()
    weeks = []
    for i in range(WEEKS_SHOWN - 1, -1, -1):
        weeks.append({"label": week_label(now - timedelta(days=i * 7)), "count": 0})

    by_label = {w["label"]: w for w in weeks}
    for job in jobs:
        target = by_label.get(week_label(parse_datetime(job.date_applied)))
        if target:
            target["count"] += 1
    return weeks


def cumulative_by_day(jobs) -> list[dict]:
    running = 0
    by_day: dict[str, int] = {}
    for job in sorted(jobs, key=lambda j: parse_datetime(j.date_applied)):
        running += 1
        by_day[job.date_applied[:10]] = running
    return [{"date": day, "count": count} for day, count in by_day.items()]


def build_stats(jobs, now: datetime | None = None) -> dict:
    jobs = list(jobs)
    total = len(jobs)
    counts = status_counts(jobs)
    offers = counts["selected"]
    rejections = counts["rejected"]

    return {
        "total": total,
        "offers": offers,
        "rejections": rejections,
        "offer_rate": _pct(offers, total),
        "rejection_rate": _pct(rejections, total),
        "status_distribution": [
            {"status": s, "label": STATUS_LABELS[s], "count": n}
            for s, n in counts.items()
        ],
        "applications_per_week": applications_per_week(jobs, now),
        "cumulative": cumulative_by_day(jobs),
    }

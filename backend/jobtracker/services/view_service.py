from jobtracker.services.lifecycle import STATUS_ORDER, parse_datetime, parse_priority, parse_status

ALL = "all"


def status_counts(jobs) -> dict[str, int]:
    counts = {s: 0 for s in STATUS_ORDER}
    for job in jobs:
        counts[job.status] += 1
    return counts


def _sort_key(job):
    return parse_datetime(job.date_applied)


def filter_jobs(jobs, status: str = ALL, priority: str = ALL, search: str = ""):
    """Project the full job list onto the rows visible in the table view.

    Status and priority match exactly unless ``"all"``; ``search`` is a
    case-insensitive substring of company or role. Newest application first.
    """
    if status != ALL:
        status = parse_status(status)
    if priority != ALL:
        priority = parse_priority(priority)
    q = search.lower() if search and search.strip() else ""

    visible = [
        job for job in jobs
        if (status == ALL or job.status == status)
        and (priority == ALL or job.priority == priority)
        and (not q or q in job.company.lower() or q in job.role.lower())
    ]
    return sorted(visible, key=_sort_key, reverse=True)

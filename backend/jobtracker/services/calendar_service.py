from datetime import date, timedelta
from icalendar import Calendar, Event, Alarm

from jobtracker.services.deadline_service import deadlines_for, effective_reminder_window


def _new_calendar() -> Calendar:
    cal = Calendar()
    cal.add("prodid", "-//JobTracker//EN")
    cal.add("version", "2.0")
    return cal


def job_deadline_events(job) -> list[Event]:
    events = []
    window = effective_reminder_window(job.reminder_days_before)
    for deadline in deadlines_for(job):
        event = Event()
        event.add("uid", f"{job.id}-{deadline.label.lower()}@jobtracker")
        event.add("summary", f"{deadline.label}: {job.role} at {job.company}")
        day = deadline.date.date()
        event.add("dtstart", day)
        # A DATE start with no end already spans one day
        if day < date.max:
            event.add("dtend", day + timedelta(days=1))

        description_parts = []
        if job.url:
            description_parts.append(f"Job URL: {job.url}")
        if job.notes:
            description_parts.append(f"Notes: {job.notes}")
        if description_parts:
            event.add("description", "\n".join(description_parts))

        alarm = Alarm()
        alarm.add("action", "DISPLAY")
        alarm.add("trigger", -timedelta(days=window))
        alarm.add("description", f"{deadline.label} reminder: {job.company}")
        event.add_component(alarm)
        events.append(event)
    return events


def generate_deadlines_ics(jobs) -> bytes | None:
    """One all-day event per deadline; None when no job has any."""
    cal = _new_calendar()
    count = 0
    for job in jobs:
        for event in job_deadline_events(job):
            cal.add_component(event)
            count += 1
    if not count:
        return None
    return cal.to_ical()

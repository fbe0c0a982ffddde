from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from jobtracker.services.deadline_service import (
    Urgency,
    classify_urgency,
    days_left,
    deadline_badges,
    effective_reminder_window,
    is_upcoming,
    upcoming_reminders,
)

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def _job(oa=None, interview=None, reminder=None, company="Acme"):
    return SimpleNamespace(
        company=company,
        oa_deadline=oa,
        interview_date=interview,
        reminder_days_before=reminder,
    )


def _iso(dt):
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


class TestDaysLeft:
    def test_rounds_partial_days_up(self):
        assert days_left(NOW + timedelta(hours=1), NOW) == 1
        assert days_left(NOW + timedelta(days=2, hours=1), NOW) == 3

    def test_exact_days(self):
        assert days_left(NOW + timedelta(days=2), NOW) == 2
        assert days_left(NOW, NOW) == 0

    def test_past_deadlines_are_negative(self):
        assert days_left(NOW - timedelta(hours=1), NOW) == 0
        assert days_left(NOW - timedelta(days=1, hours=1), NOW) == -1


class TestUrgency:
    @pytest.mark.parametrize("days,expected", [
        (-5, Urgency.OVERDUE),
        (0, Urgency.OVERDUE),
        (1, Urgency.CRITICAL),
        (2, Urgency.CRITICAL),
        (3, Urgency.SOON),
        (7, Urgency.SOON),
        (8, Urgency.NORMAL),
        (30, Urgency.NORMAL),
    ])
    def test_bands(self, days, expected):
        assert classify_urgency(days) is expected

    def test_badges_per_deadline(self):
        job = _job(oa=_iso(NOW + timedelta(days=1)), interview=_iso(NOW + timedelta(days=10)))
        badges = deadline_badges(job, NOW)
        assert [(b["label"], b["days_left"], b["urgency"]) for b in badges] == [
            ("OA", 1, "critical"),
            ("Interview", 10, "normal"),
        ]

    def test_no_deadlines_no_badges(self):
        assert deadline_badges(_job(), NOW) == []


class TestReminderWindow:
    def test_default_window(self):
        assert effective_reminder_window(None) == 2
        assert effective_reminder_window(5) == 5
        assert effective_reminder_window(0) == 0

    @pytest.mark.parametrize("days,window,expected", [
        (-1, 2, True),
        (-2, 2, False),
        (0, 2, True),
        (2, 2, True),
        (3, 2, False),
        (5, 5, True),
        (6, 5, False),
    ])
    def test_inclusion(self, days, window, expected):
        assert is_upcoming(days, window) is expected

    def test_upcoming_uses_per_job_window(self):
        in_four_days = _iso(NOW + timedelta(days=4))
        jobs = [
            _job(oa=in_four_days, company="Default"),
            _job(oa=in_four_days, reminder=5, company="Wide"),
        ]
        result = upcoming_reminders(jobs, NOW)
        assert [r["job"].company for r in result] == ["Wide"]
        assert result[0]["entries"][0]["days_left"] == 4

    def test_grace_day_after_deadline(self):
        yesterday = _iso(NOW - timedelta(days=1))
        two_days_ago = _iso(NOW - timedelta(days=2))
        assert len(upcoming_reminders([_job(interview=yesterday)], NOW)) == 1
        assert upcoming_reminders([_job(interview=two_days_ago)], NOW) == []

    def test_only_matching_deadlines_are_listed(self):
        job = _job(oa=_iso(NOW + timedelta(days=1)), interview=_iso(NOW + timedelta(days=20)))
        entries = upcoming_reminders([job], NOW)[0]["entries"]
        assert [e["label"] for e in entries] == ["OA"]

    def test_differs_from_urgency(self):
        # Five days out is "soon" on the board but outside the default reminder window
        job = _job(oa=_iso(NOW + timedelta(days=5)))
        assert deadline_badges(job, NOW)[0]["urgency"] == "soon"
        assert upcoming_reminders([job], NOW) == []

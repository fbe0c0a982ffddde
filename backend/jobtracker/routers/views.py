from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import require_user_id
from jobtracker.models.job_application import JobApplication
from jobtracker.routers.jobs import owned_jobs_query
from jobtracker.schemas.views import BoardView, Choice, StatsView, TableView, Vocabulary
from jobtracker.services.board_service import build_columns
from jobtracker.services.deadline_service import upcoming_reminders
from jobtracker.services.lifecycle import (
    PRIORITY_LABELS,
    PRIORITY_ORDER,
    STATUS_LABELS,
    STATUS_ORDER,
    utcnow,
)
from jobtracker.services.stats_service import build_stats
from jobtracker.services.view_service import ALL, filter_jobs, status_counts

router = APIRouter(prefix="/views", tags=["views"])


@router.get("/table", response_model=TableView)
async def table_view(
    status: str = ALL,
    priority: str = ALL,
    q: str = "",
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    jobs = (
        owned_jobs_query(db, user_id)
        .order_by(JobApplication.date_applied.desc(), JobApplication.created_at.desc())
        .all()
    )
    try:
        visible = filter_jobs(jobs, status=status, priority=priority, search=q)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    # Counts and reminders cover every job, not just the filtered rows
    return TableView.model_validate({
        "total": len(jobs),
        "counts": status_counts(jobs),
        "jobs": visible,
        "upcoming": upcoming_reminders(jobs, utcnow()),
    })


@router.get("/board", response_model=BoardView)
async def board_view(user_id: str = Depends(require_user_id), db: Session = Depends(get_db)):
    jobs = owned_jobs_query(db, user_id).order_by(JobApplication.created_at.asc()).all()
    return BoardView.model_validate({"columns": build_columns(jobs, utcnow())})


@router.get("/stats", response_model=StatsView)
async def stats_view(user_id: str = Depends(require_user_id), db: Session = Depends(get_db)):
    jobs = owned_jobs_query(db, user_id).order_by(JobApplication.date_applied.asc()).all()
    return StatsView.model_validate(build_stats(jobs, utcnow()))


@router.get("/vocabulary", response_model=Vocabulary)
async def vocabulary():
    """Statuses and priorities in display order, with their labels."""
    return Vocabulary(
        statuses=[Choice(value=s, label=STATUS_LABELS[s]) for s in STATUS_ORDER],
        priorities=[Choice(value=p, label=PRIORITY_LABELS[p]) for p in PRIORITY_ORDER],
    )

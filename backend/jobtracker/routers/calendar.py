from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import require_user_id
from jobtracker.models.job_application import JobApplication
from jobtracker.routers.jobs import get_owned_job, owned_jobs_query
from jobtracker.services.calendar_service import generate_deadlines_ics
from jobtracker.services.lifecycle import TERMINAL_STATUSES

router = APIRouter(tags=["calendar"])


@router.get("/jobs/{job_id}/calendar")
async def job_calendar(
    job_id: str,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    job = get_owned_job(db, job_id, user_id)
    ics_data = generate_deadlines_ics([job])
    if ics_data is None:
        raise HTTPException(status_code=400, detail="Job has no deadlines set")

    return Response(
        content=ics_data,
        media_type="text/calendar",
        headers={"Content-Disposition": f'attachment; filename="deadlines_{job_id[:8]}.ics"'},
    )


@router.get("/calendar/deadlines")
async def all_deadlines(user_id: str = Depends(require_user_id), db: Session = Depends(get_db)):
    jobs = (
        owned_jobs_query(db, user_id)
        .filter(JobApplication.status.notin_(sorted(TERMINAL_STATUSES)))
        .order_by(JobApplication.created_at.asc())
        .all()
    )
    ics_data = generate_deadlines_ics(jobs)
    if ics_data is None:
        raise HTTPException(status_code=404, detail="No upcoming deadlines")

    return Response(
        content=ics_data,
        media_type="text/calendar",
        headers={"Content-Disposition": 'attachment; filename="all_deadlines.ics"'},
    )

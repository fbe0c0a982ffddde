import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import require_user_id
from jobtracker.models.job_application import JobApplication
from jobtracker.schemas.job import JobCreate, JobUpdate, JobResponse
from jobtracker.services.lifecycle import (
    format_timestamp,
    normalize_optional_text,
    parse_date_or_now,
    parse_datetime,
    parse_optional_date,
    utcnow,
)
from jobtracker.services.view_service import ALL, filter_jobs

logger = logging.getLogger("jobtracker.jobs")

router = APIRouter(prefix="/jobs", tags=["jobs"])

_OPTIONAL_TEXT_FIELDS = ("url", "notes")
_DEADLINE_FIELDS = ("oa_deadline", "interview_date")


def _job_to_response(job: JobApplication) -> JobResponse:
    return JobResponse(
        id=job.id,
        user_id=job.user_id,
        company=job.company,
        role=job.role,
        url=job.url,
        status=job.status,
        priority=job.priority,
        date_applied=job.date_applied,
        oa_deadline=job.oa_deadline,
        interview_date=job.interview_date,
        reminder_days_before=job.reminder_days_before,
        tags=list(job.tags or []),
        notes=job.notes,
        created_at=job.created_at,
        last_updated=job.last_updated,
    )


def owned_jobs_query(db: Session, user_id: str):
    return db.query(JobApplication).filter(JobApplication.user_id == user_id)


def get_owned_job(db: Session, job_id: str, user_id: str) -> JobApplication:
    job = owned_jobs_query(db, user_id).filter(JobApplication.id == job_id).first()
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


def _parse_deadline(value):
    try:
        return parse_optional_date(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


def _update_values(changes: dict) -> dict:
    values = {}
    for key, value in changes.items():
        if key == "date_applied":
            # Unparseable dates leave the stored value alone
            parsed = parse_datetime(value)
            if parsed is not None:
                values[key] = format_timestamp(parsed)
        elif key in _DEADLINE_FIELDS:
            values[key] = _parse_deadline(value)
        elif key in _OPTIONAL_TEXT_FIELDS:
            values[key] = normalize_optional_text(value)
        else:
            values[key] = value
    return values


@router.get("", response_model=list[JobResponse])
async def list_jobs(
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
    if status != ALL or priority != ALL or q:
        try:
            jobs = filter_jobs(jobs, status=status, priority=priority, search=q)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
    return [_job_to_response(j) for j in jobs]


@router.post("", response_model=JobResponse, status_code=201)
async def create_job(
    req: JobCreate,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    now = utcnow()
    timestamp = format_timestamp(now)

    job = JobApplication(
        id=str(uuid.uuid4()),
        user_id=user_id,
        company=req.company,
        role=req.role,
        url=normalize_optional_text(req.url),
        status=req.status,
        priority=req.priority,
        date_applied=parse_date_or_now(req.date_applied, now),
        oa_deadline=_parse_deadline(req.oa_deadline),
        interview_date=_parse_deadline(req.interview_date),
        reminder_days_before=req.reminder_days_before,
        tags=req.tags,
        notes=normalize_optional_text(req.notes),
        created_at=timestamp,
        last_updated=timestamp,
    )
    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info("Created job %s for user %s", job.id, user_id)
    return _job_to_response(job)


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(
    job_id: str,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    return _job_to_response(get_owned_job(db, job_id, user_id))


@router.patch("", include_in_schema=False)
@router.delete("", include_in_schema=False)
async def missing_job_id(user_id: str = Depends(require_user_id)):
    raise HTTPException(status_code=400, detail="Missing job id")


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
    job_id: str,
    req: JobUpdate,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    job = get_owned_job(db, job_id, user_id)

    values = _update_values(req.model_dump(exclude_unset=True))
    values["last_updated"] = format_timestamp(utcnow())

    # Scoped write: a row deleted since the check above stays deleted.
    updated = (
        owned_jobs_query(db, user_id)
        .filter(JobApplication.id == job_id)
        .update(values, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        raise HTTPException(status_code=404, detail="Job not found")
    db.commit()
    db.refresh(job)

    logger.info("Updated job %s (%s)", job_id, ", ".join(sorted(values)))
    return _job_to_response(job)


@router.delete("/{job_id}")
async def delete_job(
    job_id: str,
    user_id: str = Depends(require_user_id),
    db: Session = Depends(get_db),
):
    get_owned_job(db, job_id, user_id)

    deleted = (
        owned_jobs_query(db, user_id)
        .filter(JobApplication.id == job_id)
        .delete(synchronize_session=False)
    )
    if not deleted:
        db.rollback()
        raise HTTPException(status_code=404, detail="Job not found")
    db.commit()

    logger.info("Deleted job %s", job_id)
    return {"ok": True}

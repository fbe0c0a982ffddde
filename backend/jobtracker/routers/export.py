from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import require_user_id
from jobtracker.models.job_application import JobApplication
from jobtracker.routers.jobs import owned_jobs_query
from jobtracker.services.export_service import (
    CSV_MEDIA_TYPE,
    NothingToExport,
    export_filename,
    jobs_to_csv,
)

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/csv")
async def csv_export(user_id: str = Depends(require_user_id), db: Session = Depends(get_db)):
    jobs = (
        owned_jobs_query(db, user_id)
        .order_by(JobApplication.date_applied.desc(), JobApplication.created_at.desc())
        .all()
    )
    try:
        csv_data = jobs_to_csv(jobs)
    except NothingToExport as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc

    return Response(
        content=csv_data.encode("utf-8"),
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )

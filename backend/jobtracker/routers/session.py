from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobtracker.database import get_db
from jobtracker.dependencies import require_user, session_token
from jobtracker.models.user import User
from jobtracker.schemas.session import SessionResponse
from jobtracker.services.session_service import session_service

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionResponse)
async def current_session(user: User = Depends(require_user)):
    return SessionResponse(user_id=user.id, name=user.name, email=user.email)


@router.delete("")
async def sign_out(
    _user: User = Depends(require_user),
    token: str = Depends(session_token),
    db: Session = Depends(get_db),
):
    session_service.revoke_session(db, token)
    return {"ok": True}

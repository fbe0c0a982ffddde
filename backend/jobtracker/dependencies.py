import logging

from fastapi import Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from jobtracker.config import settings
from jobtracker.database import get_db
from jobtracker.models.user import User
from jobtracker.services.session_service import session_service

logger = logging.getLogger("jobtracker.auth")


def session_token(request: Request, authorization: str | None = Header(None)) -> str | None:
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:]
    return request.cookies.get(settings.session_cookie_name)


async def require_user(
    token: str | None = Depends(session_token),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise HTTPException(status_code=401, detail="Unauthorized")
    user = session_service.resolve_user(db, token)
    if not user:
        logger.debug("Rejected unknown or expired session token")
        raise HTTPException(status_code=401, detail="Unauthorized")
    return user


async def require_user_id(user: User = Depends(require_user)) -> str:
    return user.id

import logging
import uuid
from datetime import timedelta

from sqlalchemy.orm import Session

from jobtracker.config import settings
from jobtracker.models.user import AuthSession, User
from jobtracker.services.lifecycle import format_timestamp, utcnow
from jobtracker.utils.security import generate_token, hash_token

logger = logging.getLogger("jobtracker.session")


class SessionService:
    """Bridge to the identity provider's database sessions.

    Sign-in happens elsewhere; this service only records the users and
    sessions it hands over and resolves a session token to a user id.
    """

    def get_or_create_user(self, db: Session, email: str, name: str | None = None) -> User:
        user = db.query(User).filter(User.email == email).first()
        if user:
            return user
        user = User(
            id=str(uuid.uuid4()),
            name=name,
            email=email,
            created_at=format_timestamp(utcnow()),
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        logger.info("Registered user %s", user.id)
        return user

    def create_session(self, db: Session, user_id: str, ttl_seconds: int | None = None) -> str:
        now = utcnow()
        ttl = ttl_seconds if ttl_seconds is not None else settings.session_ttl_seconds
        token = generate_token()
        db.add(AuthSession(
            id=str(uuid.uuid4()),
            session_token_hash=hash_token(token),
            user_id=user_id,
            expires=format_timestamp(now + timedelta(seconds=ttl)),
            created_at=format_timestamp(now),
        ))
        db.commit()
        return token

    def resolve_user(self, db: Session, token: str) -> User | None:
        now = format_timestamp(utcnow())
        row = (
            db.query(AuthSession)
            .filter(AuthSession.session_token_hash == hash_token(token))
            .filter(AuthSession.expires > now)
            .first()
        )
        if not row:
            return None
        return row.user

    def revoke_session(self, db: Session, token: str) -> bool:
        deleted = (
            db.query(AuthSession)
            .filter(AuthSession.session_token_hash == hash_token(token))
            .delete(synchronize_session=False)
        )
        db.commit()
        return deleted > 0


session_service = SessionService()

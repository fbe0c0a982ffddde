from sqlalchemy import Column, ForeignKey, Text
from sqlalchemy.orm import relationship
from jobtracker.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Text, primary_key=True)
    name = Column(Text)
    email = Column(Text, unique=True)
    created_at = Column(Text, nullable=False)

    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")
    job_applications = relationship("JobApplication", back_populates="user", cascade="all, delete-orphan")


class AuthSession(Base):
    __tablename__ = "sessions"

    id = Column(Text, primary_key=True)
    session_token_hash = Column(Text, nullable=False, unique=True)
    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    expires = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False)

    user = relationship("User", back_populates="sessions")

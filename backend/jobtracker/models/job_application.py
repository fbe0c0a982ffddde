from sqlalchemy import JSON, Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from jobtracker.database import Base


class JobApplication(Base):
    __tablename__ = "job_applications"

    id = Column(Text, primary_key=True)
    user_id = Column(Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    company = Column(Text, nullable=False)
    role = Column(Text, nullable=False)
    url = Column(Text)
    status = Column(Text, nullable=False, default="applied")
    priority = Column(Text, nullable=False, default="medium")
    date_applied = Column(Text, nullable=False)
    oa_deadline = Column(Text)
    interview_date = Column(Text)
    reminder_days_before = Column(Integer)
    tags = Column(JSON, nullable=False, default=list)
    notes = Column(Text)
    created_at = Column(Text, nullable=False)
    last_updated = Column(Text, nullable=False)

    user = relationship("User", back_populates="job_applications")

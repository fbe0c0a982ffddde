from jobtracker.models.user import User, AuthSession
from jobtracker.models.job_application import JobApplication

__all__ = ["User", "AuthSession", "JobApplication"]

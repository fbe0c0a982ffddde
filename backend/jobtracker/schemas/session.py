from jobtracker.schemas.job import CamelModel


class SessionResponse(CamelModel):
    user_id: str
    name: str | None
    email: str | None

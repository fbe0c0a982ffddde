from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from jobtracker.services.lifecycle import (
    DEFAULT_PRIORITY,
    DEFAULT_STATUS,
    JobPriority,
    JobStatus,
    parse_tags,
)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        from_attributes=True,
    )


class JobCreate(CamelModel):
    company: str = Field(min_length=1)
    role: str = Field(min_length=1)
    url: str | None = None
    status: JobStatus = DEFAULT_STATUS
    priority: JobPriority = DEFAULT_PRIORITY
    # Parsed leniently: an unparseable value falls back to "now"
    date_applied: str | None = None
    notes: str | None = None
    tags: list[str] = []
    oa_deadline: str | None = None
    interview_date: str | None = None
    reminder_days_before: int | None = Field(None, ge=0)

    @field_validator("status", "priority", mode="before")
    @classmethod
    def _null_means_default(cls, v, info):
        if v is None:
            return DEFAULT_STATUS if info.field_name == "status" else DEFAULT_PRIORITY
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        return parse_tags(v)


class JobUpdate(CamelModel):
    """Partial update. Keys absent from the body are left unchanged; for the
    nullable fields an explicit null clears the stored value."""

    company: str | None = Field(None, min_length=1)
    role: str | None = Field(None, min_length=1)
    url: str | None = None
    status: JobStatus | None = None
    priority: JobPriority | None = None
    date_applied: str | None = None
    notes: str | None = None
    tags: list[str] | None = None
    oa_deadline: str | None = None
    interview_date: str | None = None
    reminder_days_before: int | None = Field(None, ge=0)

    @field_validator("company", "role", "status", "priority", mode="before")
    @classmethod
    def _not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    @field_validator("tags", mode="before")
    @classmethod
    def _split_tags(cls, v):
        if v is None:
            raise ValueError("tags cannot be null")
        return parse_tags(v)


class JobResponse(CamelModel):
    id: str
    user_id: str
    company: str
    role: str
    url: str | None
    status: str
    priority: str
    date_applied: str
    oa_deadline: str | None
    interview_date: str | None
    reminder_days_before: int | None
    tags: list[str] = []
    notes: str | None
    created_at: str
    last_updated: str

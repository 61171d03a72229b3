"""
Background removal job schemas.

Request/response schemas for the createJob, updateJob and listJobs actions.
Wire names are camelCase; Python attributes are snake_case.

Dependencies: pydantic
System role: Job API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema accepting and emitting camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class JobRequest(CamelModel):
    """
    Base for job write requests.

    Optional fields may be omitted but never sent as null.
    """

    @model_validator(mode="after")
    def _reject_explicit_null(self):
        nulls = sorted(name for name in self.model_fields_set if getattr(self, name) is None)
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self


class CreateJobRequest(JobRequest):
    """
    Request schema for createJob.

    Has no user field: ownership always comes from the
    authenticated caller. Unknown keys (e.g. a client-sent userId) are ignored.
    """

    input_image_url: str = Field(..., min_length=1, description="Original image reference")
    mode: str | None = Field(None, description='Processing mode, e.g. "auto"')
    strength: str | None = Field(None, description='Effect strength, e.g. "medium"')
    keep_shadows: bool | None = Field(None, description="Keep subject shadows (default false)")
    add_background_color: str | None = Field(None, description="Replacement background colour")
    settings_json: str | None = Field(None, description="Extra serialized processing config")
    status: str | None = Field(None, description='Initial status (default "queued")')
    error_message: str | None = None
    output_image_url: str | None = None
    output_preview_url: str | None = None
    completed_at: datetime | None = None


class UpdateJobRequest(JobRequest):
    """
    Request schema for updateJob.

    Presence, not value, decides what is written: a field explicitly sent as
    false or "" is applied, an omitted field is left untouched. Explicit null
    is rejected.
    """

    status: str | None = None
    output_image_url: str | None = None
    output_preview_url: str | None = None
    error_message: str | None = None
    add_background_color: str | None = None
    strength: str | None = None
    keep_shadows: bool | None = None
    settings_json: str | None = None
    completed_at: datetime | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the explicitly supplied fields, keyed by column name."""
        return self.model_dump(include=self.model_fields_set)


class BgRemovalJobResponse(CamelModel):
    """A stored background removal job."""

    id: str
    user_id: str
    input_image_url: str
    output_image_url: str | None = None
    output_preview_url: str | None = None
    mode: str | None = None
    strength: str | None = None
    keep_shadows: bool = False
    add_background_color: str | None = None
    settings_json: str | None = None
    status: str | None = None
    error_message: str | None = None
    created_at: datetime
    completed_at: datetime | None = None


class JobPayload(CamelModel):
    """Payload for createJob/updateJob: {job}."""

    job: BgRemovalJobResponse


class JobListPayload(CamelModel):
    """Payload for listJobs: {items, total}."""

    items: list[BgRemovalJobResponse]
    total: int

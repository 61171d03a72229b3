"""
Background removal job ORM model.

Keeps the history of processed images together with the options they were
processed with, so results can be downloaded again or reprocessed later.

Dependencies: sqlalchemy, bg_remover.boundary.db.base
System role: Persistence of background removal requests and their outcome
"""

import enum
from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from bg_remover.boundary.db.base import Base, CreatedAtMixin, TextUUIDMixin


class JobStatus(str, enum.Enum):
    """
    Conventional job lifecycle labels.

    The status column is free-form text; these values are what the
    processing worker normally writes, not an enforced state machine.

    QUEUED: Job recorded, awaiting a worker
    PROCESSING: Worker is removing the background
    COMPLETED: Output image available
    FAILED: Processing failed; see error_message
    """

    QUEUED = "queued"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class BgRemovalJobModel(Base, TextUUIDMixin, CreatedAtMixin):
    """
    One request to remove the background from a user-supplied image.

    Attributes:
        id: Text UUID primary key
        user_id: Owning user; set at creation, never updated
        input_image_url: Original image reference (required)
        output_image_url: Background-removed image reference
        output_preview_url: Optional thumbnail of the output
        mode: Processing mode label ("auto", "manual-refine", ...)
        strength: Effect strength label ("low", "medium", "high")
        keep_shadows: Keep the subject's shadows (default False)
        add_background_color: Replacement background colour, e.g. "#FFFFFF"
        settings_json: Extra serialized processing configuration
        status: Lifecycle label, see JobStatus
        error_message: Failure detail when status is "failed"
        created_at: Creation timestamp (UTC, immutable)
        completed_at: Time the job reached a terminal state

    Fields never updated after creation:
        id, user_id, input_image_url, created_at
    """

    __tablename__ = "bg_removal_jobs"

    user_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        doc="Owning user identifier",
    )

    input_image_url: Mapped[str] = mapped_column(Text, nullable=False)
    output_image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    output_preview_url: Mapped[str | None] = mapped_column(Text, nullable=True)

    mode: Mapped[str | None] = mapped_column(String, nullable=True)
    strength: Mapped[str | None] = mapped_column(String, nullable=True)
    keep_shadows: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default=false(),
    )
    add_background_color: Mapped[str | None] = mapped_column(String, nullable=True)
    settings_json: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        doc="Opaque processing configuration, interpreted by the worker only",
    )

    status: Mapped[str | None] = mapped_column(
        String,
        nullable=True,
        default=JobStatus.QUEUED.value,
    )
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)

    completed_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    def __repr__(self) -> str:
        return f"<BgRemovalJobModel {self.id} [{self.status}]>"

"""
Background removal job service orchestrator.

Implements the createJob, updateJob and listJobs actions. Each action
authenticates the caller before touching the store, validates its input,
issues exactly one store operation and commits.

Dependencies: bg_remover.boundary.db.CRUD, bg_remover.models, sqlalchemy
System role: Job use case orchestration
"""

import logging
from datetime import datetime
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bg_remover.boundary.db.base import new_id, utc_now
from bg_remover.boundary.db.CRUD.bg_removal_job_crud import bg_removal_job_crud
from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel, JobStatus
from bg_remover.core.exceptions import InvalidInputError, JobNotFoundError, UnauthorizedError
from bg_remover.models.auth import AuthenticatedUser
from bg_remover.models.bg_removal_job import CreateJobRequest, UpdateJobRequest

logger = logging.getLogger(__name__)


def _require_user(user: AuthenticatedUser | None) -> AuthenticatedUser:
    """Return the caller or raise UnauthorizedError."""
    if user is None:
        raise UnauthorizedError()
    return user


def job_to_dict(job: BgRemovalJobModel) -> dict:
    """Flatten a job row into a plain dict keyed by column name."""
    return {
        "id": job.id,
        "user_id": job.user_id,
        "input_image_url": job.input_image_url,
        "output_image_url": job.output_image_url,
        "output_preview_url": job.output_preview_url,
        "mode": job.mode,
        "strength": job.strength,
        "keep_shadows": job.keep_shadows,
        "add_background_color": job.add_background_color,
        "settings_json": job.settings_json,
        "status": job.status,
        "error_message": job.error_message,
        "created_at": job.created_at,
        "completed_at": job.completed_at,
    }


class BgRemovalJobService:
    """
    Background removal job service orchestrator.

    Every read and write is scoped to the authenticated caller. The id
    generator and clock are injectable so tests can pin them.
    """

    def __init__(
        self,
        db: AsyncSession,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """
        Initialize job service.

        Args:
            db: AsyncSession for database operations
            id_factory: Returns a fresh unique job id
            clock: Returns the current timestamp
        """
        self.db = db
        self.id_factory = id_factory
        self.clock = clock

    async def create_job(
        self,
        user: AuthenticatedUser | None,
        request: CreateJobRequest,
    ) -> dict:
        """
        Record a new background removal job for the caller.

        Args:
            user: Authenticated caller, or None
            request: Validated createJob payload

        Returns:
            dict: The stored job

        Raises:
            UnauthorizedError: No authenticated user
            InvalidInputError: input_image_url missing or empty
        """
        user = _require_user(user)

        if not request.input_image_url:
            raise InvalidInputError("inputImageUrl is required.", field="inputImageUrl")

        keep_shadows = request.keep_shadows if request.keep_shadows is not None else False
        status = request.status if request.status is not None else JobStatus.QUEUED.value

        try:
            job = await bg_removal_job_crud.insert(
                self.db,
                id=self.id_factory(),
                user_id=user.id,
                input_image_url=request.input_image_url,
                output_image_url=request.output_image_url,
                output_preview_url=request.output_preview_url,
                mode=request.mode,
                strength=request.strength,
                keep_shadows=keep_shadows,
                add_background_color=request.add_background_color,
                settings_json=request.settings_json,
                status=status,
                error_message=request.error_message,
                created_at=self.clock(),
                completed_at=request.completed_at,
            )
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to create background removal job",
                extra={"error": str(e), "user_id": user.id},
            )
            raise

        logger.info(
            "Background removal job created",
            extra={"job_id": job.id, "user_id": user.id, "status": job.status},
        )
        return job_to_dict(job)

    async def update_job(
        self,
        user: AuthenticatedUser | None,
        job_id: str,
        request: UpdateJobRequest,
    ) -> dict:
        """
        Apply a sparse update to one of the caller's jobs.

        Args:
            user: Authenticated caller, or None
            job_id: Job to update
            request: Validated updateJob payload; only supplied fields are written

        Returns:
            dict: The updated job

        Raises:
            UnauthorizedError: No authenticated user
            InvalidInputError: Empty job id, or no fields supplied
            JobNotFoundError: Job unknown or owned by another user
        """
        user = _require_user(user)

        if not job_id:
            raise InvalidInputError("id is required.", field="id")

        changes = request.changes()
        if not changes:
            raise InvalidInputError("At least one field must be provided to update.")

        existing = await bg_removal_job_crud.get_for_user(self.db, job_id, user.id)
        if existing is None:
            logger.warning(
                "Background removal job not found",
                extra={"job_id": job_id, "user_id": user.id},
            )
            raise JobNotFoundError(job_id)

        try:
            job = await bg_removal_job_crud.update_fields(self.db, job_id, user.id, changes)
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Failed to update background removal job",
                extra={"error": str(e), "job_id": job_id, "user_id": user.id},
            )
            raise

        # Row vanished between the ownership check and the update.
        if job is None:
            raise JobNotFoundError(job_id)

        logger.info(
            "Background removal job updated",
            extra={"job_id": job_id, "user_id": user.id, "updates": sorted(changes)},
        )
        return job_to_dict(job)

    async def list_jobs(self, user: AuthenticatedUser | None) -> list[dict]:
        """
        List every job owned by the caller.

        Args:
            user: Authenticated caller, or None

        Returns:
            list[dict]: The caller's jobs, in no particular order

        Raises:
            UnauthorizedError: No authenticated user
        """
        user = _require_user(user)

        jobs = await bg_removal_job_crud.list_for_user(self.db, user.id)
        return [job_to_dict(job) for job in jobs]

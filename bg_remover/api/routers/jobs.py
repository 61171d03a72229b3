"""
Background removal job API endpoints.

Routes:
- POST /jobs - createJob
- PATCH /jobs/{job_id} - updateJob
- GET /jobs - listJobs

Every route resolves the caller via get_current_user and hands it to the
service, which rejects anonymous callers before touching the database.

Dependencies: bg_remover.application.services, bg_remover.models
System role: Job HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from bg_remover.api.deps import get_bg_removal_job_service, get_current_user
from bg_remover.application.services import BgRemovalJobService
from bg_remover.models.auth import AuthenticatedUser
from bg_remover.models.bg_removal_job import (
    BgRemovalJobResponse,
    CreateJobRequest,
    JobListPayload,
    JobPayload,
    UpdateJobRequest,
)
from bg_remover.models.common import SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=SuccessResponse[JobPayload], status_code=201)
async def create_job(
    request: CreateJobRequest,
    user: AuthenticatedUser | None = Depends(get_current_user),
    job_service: BgRemovalJobService = Depends(get_bg_removal_job_service),
) -> SuccessResponse[JobPayload]:
    """
    Submit a new background removal job for the current user.

    Args:
        request: CreateJobRequest; inputImageUrl is required
        user: Injected current user
        job_service: Injected BgRemovalJobService

    Returns:
        SuccessResponse[JobPayload]: {success: true, data: {job}}

    Raises:
        UnauthorizedError (401), InvalidInputError (400)
    """
    job = await job_service.create_job(user, request)
    return SuccessResponse(data=JobPayload(job=BgRemovalJobResponse.model_validate(job)))


@router.patch("/{job_id}", response_model=SuccessResponse[JobPayload])
async def update_job(
    job_id: str,
    request: UpdateJobRequest,
    user: AuthenticatedUser | None = Depends(get_current_user),
    job_service: BgRemovalJobService = Depends(get_bg_removal_job_service),
) -> SuccessResponse[JobPayload]:
    """
    Update fields of one of the current user's jobs.

    Only the fields present in the body are changed.

    Args:
        job_id: Job id
        request: UpdateJobRequest with at least one field
        user: Injected current user
        job_service: Injected BgRemovalJobService

    Returns:
        SuccessResponse[JobPayload]: {success: true, data: {job}}

    Raises:
        UnauthorizedError (401), InvalidInputError (400), JobNotFoundError (404)
    """
    job = await job_service.update_job(user, job_id, request)
    return SuccessResponse(data=JobPayload(job=BgRemovalJobResponse.model_validate(job)))


@router.get("", response_model=SuccessResponse[JobListPayload])
async def list_jobs(
    user: AuthenticatedUser | None = Depends(get_current_user),
    job_service: BgRemovalJobService = Depends(get_bg_removal_job_service),
) -> SuccessResponse[JobListPayload]:
    """
    List every job owned by the current user.

    Returns:
        SuccessResponse[JobListPayload]: {success: true, data: {items, total}}

    Raises:
        UnauthorizedError (401)
    """
    jobs = await job_service.list_jobs(user)
    items = [BgRemovalJobResponse.model_validate(job) for job in jobs]
    logger.info("Jobs listed", extra={"count": len(items)})
    return SuccessResponse(data=JobListPayload(items=items, total=len(items)))

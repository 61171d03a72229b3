"""
API request and response schemas.

Dependencies: pydantic
System role: Public API contracts
"""

from bg_remover.models.auth import AuthenticatedUser
from bg_remover.models.bg_removal_job import (
    BgRemovalJobResponse,
    CreateJobRequest,
    JobListPayload,
    JobPayload,
    UpdateJobRequest,
)
from bg_remover.models.common import ErrorResponse, SuccessResponse

__all__ = [
    "AuthenticatedUser",
    "BgRemovalJobResponse",
    "CreateJobRequest",
    "ErrorResponse",
    "JobListPayload",
    "JobPayload",
    "SuccessResponse",
    "UpdateJobRequest",
]

"""Service orchestrators."""

from .bg_removal_job_service import BgRemovalJobService

__all__ = [
    "BgRemovalJobService",
]

"""
Database models package.

Exports:
  - BgRemovalJobModel, JobStatus: Background removal job ORM model and status values

Dependencies: sqlalchemy, bg_remover.boundary.db.base
System role: Database model definitions for domain entities
"""

from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel, JobStatus

__all__ = [
    "BgRemovalJobModel",
    "JobStatus",
]

"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TextUUIDMixin, CreatedAtMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - BgRemovalJobModel, JobStatus: Background removal job entity
  - bg_removal_job_crud: CRUD operation singleton

Dependencies: sqlalchemy, bg_remover.configs
System role: Database adapter providing persistent storage for background removal jobs
"""

from bg_remover.boundary.db.base import Base, CreatedAtMixin, TextUUIDMixin
from bg_remover.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel, JobStatus
from bg_remover.boundary.db.CRUD import (
    BaseCRUD,
    BgRemovalJobCRUD,
    bg_removal_job_crud,
)

__all__ = [
    # Base classes
    "Base",
    "CreatedAtMixin",
    "TextUUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "BgRemovalJobModel",
    "JobStatus",
    # CRUD
    "BaseCRUD",
    "BgRemovalJobCRUD",
    "bg_removal_job_crud",
]

"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from bg_remover.boundary.db.CRUD import bg_removal_job_crud

    job = await bg_removal_job_crud.get_for_user(db, job_id, user_id)
"""

from bg_remover.boundary.db.CRUD.base_crud import BaseCRUD
from bg_remover.boundary.db.CRUD.bg_removal_job_crud import BgRemovalJobCRUD, bg_removal_job_crud

__all__ = [
    "BaseCRUD",
    "BgRemovalJobCRUD",
    "bg_removal_job_crud",
]

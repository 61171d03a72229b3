"""
Background removal job CRUD operations.

Owner-scoped queries for BgRemovalJobModel. Every read and write filters
on user_id in the SQL statement itself, so a job owned by someone else is
indistinguishable from a job that does not exist.

Dependencies: sqlalchemy, bg_remover.boundary.db.models
System role: Job persistence operations
"""

from typing import Any, Mapping, Sequence

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bg_remover.boundary.db.CRUD.base_crud import BaseCRUD
from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel

# Columns that are fixed once the row exists.
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "input_image_url", "created_at"})


class BgRemovalJobCRUD(BaseCRUD[BgRemovalJobModel]):
    """
    CRUD operations for BgRemovalJobModel.

    Extends BaseCRUD with ownership-scoped lookups, sparse updates and
    per-user listing.
    """

    def __init__(self) -> None:
        """Initialize BgRemovalJobCRUD with BgRemovalJobModel."""
        super().__init__(BgRemovalJobModel)

    async def insert(self, session: AsyncSession, **fields: Any) -> BgRemovalJobModel:
        """
        Insert a new job row.

        Args:
            session: Async database session
            **fields: Column values, including id and user_id

        Returns:
            The stored BgRemovalJobModel

        Raises:
            IntegrityError: If the id collides with an existing job
        """
        return await self.create(session, **fields)

    async def get_for_user(
        self,
        session: AsyncSession,
        job_id: str,
        user_id: str,
    ) -> BgRemovalJobModel | None:
        """
        Retrieve a job by id, only if it belongs to user_id.

        Args:
            session: Async database session
            job_id: Job id
            user_id: Owner id the job must match

        Returns:
            BgRemovalJobModel if found within the owner's scope, None otherwise
        """
        stmt = select(BgRemovalJobModel).where(
            BgRemovalJobModel.id == job_id,
            BgRemovalJobModel.user_id == user_id,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def update_fields(
        self,
        session: AsyncSession,
        job_id: str,
        user_id: str,
        fields: Mapping[str, Any],
    ) -> BgRemovalJobModel | None:
        """
        Apply a sparse update to a job owned by user_id.

        Only keys present in fields are written; every other column keeps
        its stored value.

        Args:
            session: Async database session
            job_id: Job id
            user_id: Owner id the job must match
            fields: Column name to new value

        Returns:
            Updated BgRemovalJobModel, or None if no owned job matched

        Raises:
            ValueError: If fields is empty or names an immutable column
        """
        if not fields:
            raise ValueError("No fields supplied for update")
        forbidden = IMMUTABLE_FIELDS.intersection(fields)
        if forbidden:
            raise ValueError(f"Cannot update immutable fields: {sorted(forbidden)}")

        stmt = (
            update(BgRemovalJobModel)
            .where(
                BgRemovalJobModel.id == job_id,
                BgRemovalJobModel.user_id == user_id,
            )
            .values(**fields)
            .returning(BgRemovalJobModel)
            .execution_options(synchronize_session="fetch")
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        session: AsyncSession,
        user_id: str,
    ) -> Sequence[BgRemovalJobModel]:
        """
        Retrieve every job owned by user_id.

        No pagination and no guaranteed order.

        Args:
            session: Async database session
            user_id: Owner id

        Returns:
            Sequence of the user's BgRemovalJobModels
        """
        stmt = select(BgRemovalJobModel).where(BgRemovalJobModel.user_id == user_id)
        result = await session.execute(stmt)
        return result.scalars().all()


bg_removal_job_crud = BgRemovalJobCRUD()

"""
Test suite for BgRemovalJobCRUD database operations.

Tests owner-scoped lookup, sparse updates and per-user listing, both with a
mocked AsyncSession and against an in-memory SQLite database.

System role: Verification of job persistence layer
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bg_remover.boundary.db.CRUD.bg_removal_job_crud import BgRemovalJobCRUD
from bg_remover.boundary.db.models.bg_removal_job_model import BgRemovalJobModel, JobStatus


@pytest.fixture
def job_crud() -> BgRemovalJobCRUD:
    """Provide BgRemovalJobCRUD instance for testing."""
    return BgRemovalJobCRUD()


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def mock_job_model() -> BgRemovalJobModel:
    """Provide an unsaved BgRemovalJobModel instance."""
    job = BgRemovalJobModel()
    job.id = "job-1"
    job.user_id = "user-alice"
    job.input_image_url = "https://x/in.png"
    job.keep_shadows = False
    job.status = JobStatus.QUEUED.value
    job.created_at = datetime.now(timezone.utc)
    return job


class TestBgRemovalJobCRUDInit:
    """Test suite for BgRemovalJobCRUD initialization."""

    def test_init_should_set_model_to_job_model(self) -> None:
        """Test BgRemovalJobCRUD initializes with BgRemovalJobModel."""
        crud = BgRemovalJobCRUD()

        assert crud.model == BgRemovalJobModel


class TestBgRemovalJobCRUDGetForUser:
    """Test suite for BgRemovalJobCRUD.get_for_user()."""

    async def test_get_for_user_should_return_job_when_found(
        self,
        job_crud: BgRemovalJobCRUD,
        mock_session: AsyncSession,
        mock_job_model: BgRemovalJobModel,
    ) -> None:
        """Test get_for_user returns the job when the owner matches."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=mock_job_model)
        mock_session.execute = AsyncMock(return_value=mock_result)

        result = await job_crud.get_for_user(mock_session, "job-1", "user-alice")

        assert result is mock_job_model

    async def test_get_for_user_should_filter_on_id_and_owner(
        self, job_crud: BgRemovalJobCRUD, mock_session: AsyncSession
    ) -> None:
        """Test the SELECT statement constrains both id and user_id."""
        mock_result = MagicMock()
        mock_result.scalar_one_or_none = MagicMock(return_value=None)
        mock_session.execute = AsyncMock(return_value=mock_result)

        await job_crud.get_for_user(mock_session, "job-1", "user-alice")

        stmt = mock_session.execute.await_args.args[0]
        compiled = stmt.compile()
        assert "bg_removal_jobs.id" in str(compiled)
        assert "bg_removal_jobs.user_id" in str(compiled)
        assert set(compiled.params.values()) == {"job-1", "user-alice"}


class TestBgRemovalJobCRUDUpdateFields:
    """Test suite for BgRemovalJobCRUD.update_fields()."""

    async def test_update_fields_should_reject_empty_fields(
        self, job_crud: BgRemovalJobCRUD, mock_session: AsyncSession
    ) -> None:
        """Test an empty update is refused before hitting the database."""
        with pytest.raises(ValueError):
            await job_crud.update_fields(mock_session, "job-1", "user-alice", {})

        mock_session.execute.assert_not_awaited()

    @pytest.mark.parametrize("field", ["id", "user_id", "input_image_url", "created_at"])
    async def test_update_fields_should_reject_immutable_fields(
        self, job_crud: BgRemovalJobCRUD, mock_session: AsyncSession, field: str
    ) -> None:
        """Test immutable columns cannot be written."""
        with pytest.raises(ValueError, match="immutable"):
            await job_crud.update_fields(mock_session, "job-1", "user-alice", {field: "x"})

        mock_session.execute.assert_not_awaited()


class TestBgRemovalJobCRUDWithDatabase:
    """Round trips against in-memory SQLite."""

    async def test_insert_should_apply_column_defaults(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test keep_shadows, status and created_at defaults."""
        job = await job_crud.insert(
            test_async_db, user_id="user-alice", input_image_url="a.png"
        )

        assert job.id
        assert job.keep_shadows is False
        assert job.status == "queued"
        assert job.created_at is not None
        assert job.completed_at is None

    async def test_insert_should_fail_on_duplicate_id(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test a colliding id raises IntegrityError."""
        first = await job_crud.insert(test_async_db, id="dup", user_id="u", input_image_url="a.png")
        test_async_db.expunge(first)

        with pytest.raises(IntegrityError):
            await job_crud.insert(test_async_db, id="dup", user_id="u", input_image_url="b.png")

    async def test_update_fields_should_leave_other_columns(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test a sparse update only writes the given columns."""
        job = await job_crud.insert(
            test_async_db,
            user_id="user-alice",
            input_image_url="a.png",
            mode="auto",
            strength="low",
        )

        updated = await job_crud.update_fields(
            test_async_db, job.id, "user-alice", {"strength": "high"}
        )

        assert updated is not None
        assert updated.strength == "high"
        assert updated.mode == "auto"
        assert updated.input_image_url == "a.png"

    async def test_update_fields_should_not_touch_foreign_job(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test the UPDATE is owner-scoped."""
        job = await job_crud.insert(test_async_db, user_id="user-alice", input_image_url="a.png")

        result = await job_crud.update_fields(
            test_async_db, job.id, "user-bob", {"status": "failed"}
        )

        assert result is None
        stored = await job_crud.get_for_user(test_async_db, job.id, "user-alice")
        assert stored.status == "queued"

    async def test_get_for_user_should_hide_foreign_job(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test another user's job reads as missing."""
        job = await job_crud.insert(test_async_db, user_id="user-alice", input_image_url="a.png")

        assert await job_crud.get_for_user(test_async_db, job.id, "user-bob") is None
        assert await job_crud.get_for_user(test_async_db, job.id, "user-alice") is not None

    async def test_list_for_user_should_scope_to_owner(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test listing returns only the owner's rows."""
        await job_crud.insert(test_async_db, user_id="user-alice", input_image_url="a.png")
        await job_crud.insert(test_async_db, user_id="user-alice", input_image_url="b.png")
        await job_crud.insert(test_async_db, user_id="user-bob", input_image_url="c.png")

        jobs = await job_crud.list_for_user(test_async_db, "user-alice")

        assert sorted(job.input_image_url for job in jobs) == ["a.png", "b.png"]
        assert await job_crud.list_for_user(test_async_db, "user-carol") == []

    async def test_get_by_id_should_ignore_owner(
        self, job_crud: BgRemovalJobCRUD, test_async_db: AsyncSession
    ) -> None:
        """Test the unscoped primary-key lookup from BaseCRUD."""
        job = await job_crud.insert(test_async_db, user_id="user-alice", input_image_url="a.png")

        found = await job_crud.get_by_id(test_async_db, job.id)

        assert found is not None
        assert found.user_id == "user-alice"
        assert await job_crud.get_by_id(test_async_db, "missing") is None

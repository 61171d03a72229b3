"""
Test suite for job request/response schemas.

System role: Verification of API contracts
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from bg_remover.models.bg_removal_job import (
    BgRemovalJobResponse,
    CreateJobRequest,
    JobListPayload,
    UpdateJobRequest,
)
from bg_remover.models.common import SuccessResponse


class TestCreateJobRequest:
    def test_accepts_camel_case_payload(self) -> None:
        request = CreateJobRequest.model_validate(
            {"inputImageUrl": "a.png", "keepShadows": True, "addBackgroundColor": "#000"}
        )

        assert request.input_image_url == "a.png"
        assert request.keep_shadows is True
        assert request.add_background_color == "#000"

    def test_requires_input_image_url(self) -> None:
        with pytest.raises(ValidationError):
            CreateJobRequest.model_validate({"mode": "auto"})

    def test_has_no_user_field(self) -> None:
        request = CreateJobRequest.model_validate({"inputImageUrl": "a.png", "userId": "x"})

        assert "user_id" not in request.model_dump()

    def test_rejects_explicit_null_optional_fields(self) -> None:
        with pytest.raises(ValidationError, match="keep_shadows, status"):
            CreateJobRequest.model_validate(
                {"inputImageUrl": "a.png", "keepShadows": None, "status": None}
            )


class TestUpdateJobRequest:
    def test_changes_contains_only_supplied_fields(self) -> None:
        request = UpdateJobRequest.model_validate({"keepShadows": False, "errorMessage": ""})

        assert request.changes() == {"keep_shadows": False, "error_message": ""}

    def test_changes_is_empty_when_nothing_supplied(self) -> None:
        assert UpdateJobRequest().changes() == {}

    def test_changes_keeps_timestamps(self) -> None:
        request = UpdateJobRequest.model_validate({"completedAt": "2025-03-01T12:30:00Z"})

        assert request.changes() == {
            "completed_at": datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
        }

    def test_rejects_explicit_null(self) -> None:
        with pytest.raises(ValidationError, match="cannot be null"):
            UpdateJobRequest.model_validate({"status": None})

    def test_ignores_immutable_fields(self) -> None:
        request = UpdateJobRequest.model_validate(
            {"status": "failed", "userId": "other", "inputImageUrl": "b.png"}
        )

        assert request.changes() == {"status": "failed"}


class TestEnvelopes:
    def test_list_payload_serializes_camel_case(self) -> None:
        job = BgRemovalJobResponse(
            id="job-1",
            user_id="user-alice",
            input_image_url="a.png",
            created_at=datetime(2025, 3, 1, tzinfo=timezone.utc),
        )

        body = SuccessResponse[JobListPayload](
            data=JobListPayload(items=[job], total=1)
        ).model_dump(by_alias=True)

        assert body["success"] is True
        assert body["data"]["total"] == 1
        item = body["data"]["items"][0]
        assert item["userId"] == "user-alice"
        assert item["inputImageUrl"] == "a.png"
        assert item["keepShadows"] is False

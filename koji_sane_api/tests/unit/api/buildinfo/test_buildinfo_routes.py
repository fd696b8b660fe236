# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


"""Unit tests for Build Info API routes."""

import pytest
from fastapi import HTTPException, status

from api.buildinfo.routes import _build_error_response, get_build_info
from api.buildinfo.schemas import BuildInfoResponse
from core.buildinfo.exceptions import (
    BuildNotFoundError,
    InvalidLeadingCharacterError,
    KojiTimeoutError,
)
from core.buildinfo.parser import scrape_koji_buildinfo
from core.buildinfo.value_objects import CorrelationId
from orchestrator.buildinfo.commands import GetBuildInfoCommand


class MockGetBuildInfoUseCase:
    """Mock use case for testing."""

    def __init__(self, result=None, error_to_raise=None):
        """Initialize mock with a result or a failure."""
        self.result = result
        self.error_to_raise = error_to_raise
        self.executed_commands = []

    def execute(self, command):
        """Mock execute method."""
        self.executed_commands.append(command)
        if self.error_to_raise:
            raise self.error_to_raise
        return self.result


class TestBuildInfoRoutes:
    """Test cases for build info routes."""

    def test_build_error_response(self):
        """Test error response builder."""
        response = _build_error_response("TEST_ERROR", "Test error message", "corr-123")

        assert response.error == "TEST_ERROR"
        assert response.message == "Test error message"
        assert response.correlation_id == "corr-123"
        assert "Z" in response.timestamp

    def test_get_build_info_success(self, minimal_report):
        """Test successful lookup."""
        use_case = MockGetBuildInfoUseCase(result=scrape_koji_buildinfo(minimal_report))

        response = get_build_info(
            build="foo-1.0-1.fc34",
            use_case=use_case,
            correlation_id=CorrelationId("corr-789"),
        )

        assert isinstance(response, BuildInfoResponse)
        assert response.nvr == "foo-1.0-1.fc34"
        assert response.id == 42
        assert response.rpms == {"noarch": ["foo-1.0-1.fc34.noarch.rpm"]}

        assert len(use_case.executed_commands) == 1
        command = use_case.executed_commands[0]
        assert isinstance(command, GetBuildInfoCommand)
        assert command.build == "foo-1.0-1.fc34"
        assert str(command.correlation_id) == "corr-789"

    @pytest.mark.parametrize(
        "error",
        [
            InvalidLeadingCharacterError("-"),
            BuildNotFoundError("Failed to find BUILD in koji output"),
            KojiTimeoutError("koji buildinfo foo timed out"),
            RuntimeError("unexpected"),
        ],
    )
    def test_every_failure_is_opaque_500(self, error):
        """Test that all failures map to the same internal error."""
        use_case = MockGetBuildInfoUseCase(error_to_raise=error)

        with pytest.raises(HTTPException) as exc_info:
            get_build_info(
                build="-foo",
                use_case=use_case,
                correlation_id=CorrelationId("corr-789"),
            )

        assert exc_info.value.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = exc_info.value.detail
        assert detail["error"] == "INTERNAL_ERROR"
        assert detail["message"] == "An internal server error occurred"
        assert detail["correlation_id"] == "corr-789"
        assert exc_info.value.__cause__ is error


class TestBuildInfoResponse:
    """Test cases for the response schema."""

    def test_serializes_kebab_case(self, minimal_report):
        """Test field aliases in the JSON form."""
        response = BuildInfoResponse.from_entity(scrape_koji_buildinfo(minimal_report))
        assert response.model_dump(by_alias=True) == {
            "nvr": "foo-1.0-1.fc34",
            "id": 42,
            "kojipkgs-url-prefix": (
                "https://kojipkgs.fedoraproject.org/packages/foo/1.0/1.fc34"
            ),
            "rpms": {"noarch": ["foo-1.0-1.fc34.noarch.rpm"]},
        }

    def test_populate_by_name(self):
        """Test building the schema with python field names."""
        response = BuildInfoResponse(
            nvr="foo-1-2", id=1, kojipkgs_url_prefix="https://x/foo/1/2", rpms={}
        )
        assert response.kojipkgs_url_prefix == "https://x/foo/1/2"

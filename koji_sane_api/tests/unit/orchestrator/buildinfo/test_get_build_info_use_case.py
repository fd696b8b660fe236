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


"""Unit tests for GetBuildInfoUseCase."""

import pytest

from core.buildinfo.exceptions import (
    ArtifactSectionMissingError,
    EmptyIdentifierError,
    InvalidLeadingCharacterError,
    KojiCommandFailedError,
)
from core.buildinfo.value_objects import CorrelationId
from infra.koji.in_memory import InMemoryBuildInfoSource
from orchestrator.buildinfo.commands import GetBuildInfoCommand
from orchestrator.buildinfo.use_cases import GetBuildInfoUseCase

NVR = "rpm-ostree-2020.10-1.fc34"


def _command(build: str) -> GetBuildInfoCommand:
    return GetBuildInfoCommand(build=build, correlation_id=CorrelationId("corr-789"))


class TestGetBuildInfoUseCase:
    """Test cases for the build info use case."""

    def test_resolves_nvr(self, koji_output):
        """Test resolving a build by nvr."""
        source = InMemoryBuildInfoSource({NVR: koji_output})
        use_case = GetBuildInfoUseCase(source=source)

        info = use_case.execute(_command(NVR))

        assert info.nvr == NVR
        assert info.build_id == 1657648
        assert source.requested == [NVR]

    def test_resolves_build_id_alias(self, koji_output):
        """Test that the canonical nvr comes from the report."""
        source = InMemoryBuildInfoSource({"1657648": koji_output})
        info = GetBuildInfoUseCase(source=source).execute(_command("1657648"))
        assert info.nvr == NVR

    def test_custom_kojipkgs_url(self, koji_output):
        """Test the configured kojipkgs URL is used."""
        source = InMemoryBuildInfoSource({NVR: koji_output})
        use_case = GetBuildInfoUseCase(
            source=source, kojipkgs_url="https://kojipkgs.example.org/packages"
        )
        info = use_case.execute(_command(NVR))
        assert info.kojipkgs_url_prefix == (
            "https://kojipkgs.example.org/packages/rpm-ostree/2020.10/1.fc34"
        )

    @pytest.mark.parametrize(
        "build,error",
        [("", EmptyIdentifierError), ("-foo", InvalidLeadingCharacterError),
         ("../bar.rpm", InvalidLeadingCharacterError)],
    )
    def test_invalid_identifier_never_reaches_source(self, build, error):
        """Test that validation runs before koji is queried."""
        source = InMemoryBuildInfoSource()
        with pytest.raises(error) as exc_info:
            GetBuildInfoUseCase(source=source).execute(_command(build))
        assert source.requested == []
        assert exc_info.value.correlation_id == "corr-789"

    def test_source_error_propagates(self):
        """Test koji failures are raised unchanged."""
        use_case = GetBuildInfoUseCase(source=InMemoryBuildInfoSource())
        with pytest.raises(KojiCommandFailedError) as exc_info:
            use_case.execute(_command("foo-1-2"))
        assert exc_info.value.correlation_id == "corr-789"

    def test_scrape_error_propagates(self):
        """Test report errors are raised unchanged."""
        source = InMemoryBuildInfoSource({"foo-1-2": "BUILD: foo-1-2 [1]\n"})
        with pytest.raises(ArtifactSectionMissingError):
            GetBuildInfoUseCase(source=source).execute(_command("foo-1-2"))

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


"""Unit tests for the in-memory buildinfo source."""

import pytest

from core.buildinfo.exceptions import KojiCommandFailedError
from core.buildinfo.value_objects import BuildIdentifier
from infra.koji.in_memory import InMemoryBuildInfoSource


class TestInMemoryBuildInfoSource:
    """Tests covering InMemoryBuildInfoSource behavior."""

    def test_returns_report(self) -> None:
        source = InMemoryBuildInfoSource({"foo-1-2": "report"})
        assert source.fetch_buildinfo(BuildIdentifier("foo-1-2")) == "report"
        assert source.requested == ["foo-1-2"]

    def test_add_report(self) -> None:
        source = InMemoryBuildInfoSource()
        source.add_report("42", "other")
        assert source.fetch_buildinfo(BuildIdentifier("42")) == "other"

    def test_unknown_build(self) -> None:
        source = InMemoryBuildInfoSource()
        with pytest.raises(KojiCommandFailedError, match="No such build"):
            source.fetch_buildinfo(BuildIdentifier("missing-1-1"))

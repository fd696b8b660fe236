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


"""Unit tests for the koji command line adapter."""

import subprocess
from unittest.mock import patch

import pytest

from core.buildinfo.exceptions import (
    KojiCommandFailedError,
    KojiOutputDecodeError,
    KojiTimeoutError,
)
from core.buildinfo.value_objects import BuildIdentifier
from infra.koji.koji_cli_source import KojiCliBuildInfoSource

RUN = "infra.koji.koji_cli_source.subprocess.run"


def _completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr
    )


class TestBuildCommand:
    """Tests for command construction."""

    def test_default(self):
        source = KojiCliBuildInfoSource()
        cmd = source.build_command(BuildIdentifier("foo-1-2"))
        assert cmd == ["koji", "buildinfo", "foo-1-2"]

    def test_with_profile_and_binary(self):
        source = KojiCliBuildInfoSource(koji_binary="/usr/bin/koji", profile="stream")
        cmd = source.build_command(BuildIdentifier("1657648"))
        assert cmd == ["/usr/bin/koji", "--profile", "stream", "buildinfo", "1657648"]


class TestFetchBuildinfo:
    """Tests for running koji."""

    def test_success(self):
        source = KojiCliBuildInfoSource(timeout_seconds=30)
        with patch(RUN, return_value=_completed(stdout=b"BUILD: x\n")) as mock_run:
            output = source.fetch_buildinfo(BuildIdentifier("foo-1-2"))

        assert output == "BUILD: x\n"
        args, kwargs = mock_run.call_args
        assert args[0] == ["koji", "buildinfo", "foo-1-2"]
        assert kwargs["timeout"] == 30
        assert kwargs["stdout"] == subprocess.PIPE
        assert "shell" not in kwargs

    def test_non_zero_exit(self):
        source = KojiCliBuildInfoSource()
        completed = _completed(returncode=1, stderr=b"No such build: foo-1-2")
        with patch(RUN, return_value=completed):
            with pytest.raises(KojiCommandFailedError) as exc_info:
                source.fetch_buildinfo(BuildIdentifier("foo-1-2"))
        assert exc_info.value.returncode == 1

    def test_missing_binary(self):
        source = KojiCliBuildInfoSource(koji_binary="/nonexistent/koji")
        with patch(RUN, side_effect=FileNotFoundError("/nonexistent/koji")):
            with pytest.raises(KojiCommandFailedError, match="Failed to run"):
                source.fetch_buildinfo(BuildIdentifier("foo-1-2"))

    def test_timeout(self):
        source = KojiCliBuildInfoSource(timeout_seconds=5)
        error = subprocess.TimeoutExpired(cmd=["koji"], timeout=5)
        with patch(RUN, side_effect=error):
            with pytest.raises(KojiTimeoutError, match="timed out after 5 seconds"):
                source.fetch_buildinfo(BuildIdentifier("foo-1-2"))

    def test_invalid_utf8(self):
        source = KojiCliBuildInfoSource()
        with patch(RUN, return_value=_completed(stdout=b"BUILD: \xff\xfe\n")):
            with pytest.raises(KojiOutputDecodeError):
                source.fetch_buildinfo(BuildIdentifier("foo-1-2"))

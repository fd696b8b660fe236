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


"""Shared pytest fixtures for koji-sane-api tests."""

# pylint: disable=redefined-outer-name

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"

RPM_OSTREE_NVR = "rpm-ostree-2020.10-1.fc34"


@pytest.fixture(scope="session")
def koji_output() -> str:
    """Real-world ``koji buildinfo rpm-ostree-2020.10-1.fc34`` output."""
    return (FIXTURES_DIR / "koji_buildinfo_rpm_ostree.txt").read_text(encoding="utf-8")


@pytest.fixture
def minimal_report() -> str:
    """Smallest report that scrapes successfully."""
    return (
        "BUILD: foo-1.0-1.fc34 [42]\n"
        "State: COMPLETE\n"
        "RPMs:\n"
        "/mnt/koji/packages/foo/1.0/1.fc34/noarch/foo-1.0-1.fc34.noarch.rpm\tSignatures: none\n"
    )

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


"""Shared fixtures for API integration tests."""

from typing import Generator

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from container import container
from infra.koji.in_memory import InMemoryBuildInfoSource
from main import app


@pytest.fixture
def buildinfo_source() -> Generator[InMemoryBuildInfoSource, None, None]:
    """In-memory koji replacing the subprocess adapter for one test."""
    source = InMemoryBuildInfoSource()
    with container.buildinfo_source.override(providers.Object(source)):
        yield source


@pytest.fixture
def client(buildinfo_source: InMemoryBuildInfoSource) -> TestClient:  # pylint: disable=unused-argument
    """Create test client backed by the in-memory source."""
    return TestClient(app)

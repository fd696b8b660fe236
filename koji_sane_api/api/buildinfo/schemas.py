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


"""Pydantic schemas for Build Info API responses."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from core.buildinfo.entities import KojiBuildInfo


class BuildInfoResponse(BaseModel):
    """Response model for a resolved koji build.

    Serialized with kebab-case keys (``kojipkgs-url-prefix``).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nvr: str = Field(..., description="Canonical name-version-release")
    id: int = Field(..., ge=0, lt=2**64, description="Numeric koji build id")
    kojipkgs_url_prefix: str = Field(
        ...,
        alias="kojipkgs-url-prefix",
        description="kojipkgs directory URL of the build",
    )
    rpms: Dict[str, List[str]] = Field(
        ..., description="RPM file names keyed by architecture, in koji order"
    )

    @classmethod
    def from_entity(cls, info: KojiBuildInfo) -> "BuildInfoResponse":
        """Build the response from the domain record."""
        return cls.model_validate(info.to_dict())


class BuildInfoErrorResponse(BaseModel):
    """Standard error response body for build info operations."""

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    correlation_id: str = Field(..., description="Request correlation ID")
    timestamp: str = Field(..., description="Error timestamp (ISO 8601)")

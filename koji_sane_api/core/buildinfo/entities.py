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


"""Domain entities for the Build Info module."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Sequence, Tuple

from core.buildinfo.value_objects import MAX_BUILD_ID


@dataclass(frozen=True)
class KojiBuildInfo:
    """Immutable record describing one koji build.

    Attributes:
        nvr: Canonical name-version-release as reported by koji.
        build_id: Numeric koji build id.
        kojipkgs_url_prefix: Directory URL of the build on kojipkgs.
        rpms: RPM file names keyed by architecture, in report order.

    Raises:
        ValueError: If a field is empty or out of range.
    """

    nvr: str
    build_id: int
    kojipkgs_url_prefix: str
    rpms: Mapping[str, Tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate fields and freeze the rpm mapping."""
        if not self.nvr:
            raise ValueError("Build nvr cannot be empty")
        if not 0 <= self.build_id <= MAX_BUILD_ID:
            raise ValueError(f"Build id out of range: {self.build_id}")
        if not self.kojipkgs_url_prefix:
            raise ValueError("kojipkgs URL prefix cannot be empty")
        frozen = {arch: tuple(names) for arch, names in self.rpms.items()}
        object.__setattr__(self, "rpms", MappingProxyType(frozen))

    @property
    def architectures(self) -> Sequence[str]:
        """Return architectures sorted by name."""
        return sorted(self.rpms)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the JSON wire form (kebab-case keys)."""
        return {
            "nvr": self.nvr,
            "id": self.build_id,
            "kojipkgs-url-prefix": self.kojipkgs_url_prefix,
            "rpms": {arch: list(self.rpms[arch]) for arch in self.architectures},
        }

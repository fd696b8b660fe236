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


"""In-memory buildinfo source.

It is used in testing and development."""

from typing import Dict, List, Optional

from core.buildinfo.exceptions import KojiCommandFailedError
from core.buildinfo.repositories import BuildInfoSource
from core.buildinfo.value_objects import BuildIdentifier


class InMemoryBuildInfoSource(BuildInfoSource):
    def __init__(self, reports: Optional[Dict[str, str]] = None) -> None:
        self._reports: Dict[str, str] = dict(reports or {})
        self.requested: List[str] = []

    def add_report(self, build: str, report: str) -> None:
        self._reports[build] = report

    def fetch_buildinfo(self, build: BuildIdentifier) -> str:
        self.requested.append(str(build))
        try:
            return self._reports[str(build)]
        except KeyError:
            raise KojiCommandFailedError(
                f"No such build: {build}", returncode=1
            ) from None

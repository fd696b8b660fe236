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


"""GetBuildInfo use case implementation."""

import logging

from core.buildinfo.entities import KojiBuildInfo
from core.buildinfo.exceptions import BuildInfoDomainError
from core.buildinfo.parser import scrape_koji_buildinfo
from core.buildinfo.repositories import BuildInfoSource
from core.buildinfo.value_objects import KOJIPKGS_URL, BuildIdentifier
from orchestrator.buildinfo.commands import GetBuildInfoCommand

logger = logging.getLogger(__name__)


class GetBuildInfoUseCase:
    """Use case resolving a build identifier into a :class:`KojiBuildInfo`.

    The identifier is validated before it reaches the source, the report is
    fetched once and scraped once. There is no retry and no caching.

    Attributes:
        source: Port returning raw ``koji buildinfo`` reports.
        kojipkgs_url: Base URL used for the kojipkgs URL prefix.
    """

    def __init__(
        self,
        source: BuildInfoSource,
        kojipkgs_url: str = KOJIPKGS_URL,
    ) -> None:
        """Initialize use case.

        Args:
            source: Buildinfo source implementation.
            kojipkgs_url: Base kojipkgs packages URL.
        """
        self._source = source
        self._kojipkgs_url = kojipkgs_url

    def execute(self, command: GetBuildInfoCommand) -> KojiBuildInfo:
        """Resolve the build.

        Args:
            command: Build identifier and correlation id.

        Returns:
            The scraped build record.

        Raises:
            InvalidBuildIdentifierError: If the identifier is rejected.
            KojiClientError: If koji cannot be queried.
            BuildInfoReportError: If the koji report cannot be scraped.
        """
        correlation_id = str(command.correlation_id)
        try:
            build = BuildIdentifier(command.build)
            report = self._source.fetch_buildinfo(build)
            info = scrape_koji_buildinfo(report, self._kojipkgs_url)
        except BuildInfoDomainError as exc:
            exc.correlation_id = correlation_id
            raise

        logger.info(
            "Resolved build: requested=%s, nvr=%s, id=%d, correlation_id=%s",
            build,
            info.nvr,
            info.build_id,
            correlation_id,
        )
        return info

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


"""Build Info domain module.

This module contains the identifier validation, nvr decomposition and
``koji buildinfo`` report scraping logic.
"""

from core.buildinfo.entities import KojiBuildInfo
from core.buildinfo.exceptions import (
    BuildInfoDomainError,
    BuildInfoReportError,
    InvalidBuildIdentifierError,
    InvalidNvrError,
    KojiClientError,
)
from core.buildinfo.parser import BuildInfoReportScanner, scrape_koji_buildinfo
from core.buildinfo.value_objects import (
    KOJIPKGS_URL,
    BuildIdentifier,
    CorrelationId,
    Nvr,
    ReportSection,
    kojipkgs_url_prefix,
    split_nvr,
    validate_build_identifier,
)

__all__ = [
    "KojiBuildInfo",
    "BuildInfoDomainError",
    "BuildInfoReportError",
    "InvalidBuildIdentifierError",
    "InvalidNvrError",
    "KojiClientError",
    "BuildInfoReportScanner",
    "scrape_koji_buildinfo",
    "KOJIPKGS_URL",
    "BuildIdentifier",
    "CorrelationId",
    "Nvr",
    "ReportSection",
    "kojipkgs_url_prefix",
    "split_nvr",
    "validate_build_identifier",
]

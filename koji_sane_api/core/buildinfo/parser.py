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


"""Scraper for the text report printed by ``koji buildinfo``.

The report has no schema. The lines that matter look like::

    BUILD: rpm-ostree-2020.10-1.fc34 [1657648]
    ...
    RPMs:
    /mnt/koji/packages/rpm-ostree/2020.10/1.fc34/src/rpm-ostree-2020.10-1.fc34.src.rpm	Signatures: ...

Every line after ``RPMs:`` is an RPM path whose parent directory names the
architecture. Anything else is ignored.
"""

import logging
import re
from pathlib import PurePosixPath
from typing import Dict, Iterator, List, Optional

from core.buildinfo.entities import KojiBuildInfo
from core.buildinfo.exceptions import (
    ArtifactSectionMissingError,
    BuildIdOverflowError,
    BuildNotFoundError,
    InvalidArtifactArchError,
    InvalidArtifactNameError,
    InvalidCanonicalNvrError,
    InvalidNvrError,
    MissingArtifactArchError,
    MissingArtifactNameError,
)
from core.buildinfo.value_objects import (
    KOJIPKGS_URL,
    MAX_BUILD_ID,
    ReportSection,
    kojipkgs_url_prefix,
)

logger = logging.getLogger(__name__)

BUILD_LINE_RE = re.compile(r"^BUILD: +([^ ]+) +\[([0-9]+)\]")
RPMS_HEADER = "RPMs:"


def _path_segment(segment: str) -> Optional[str]:
    """Return a usable path segment, or None for '', '.' and '..'."""
    if segment in ("", ".", ".."):
        return None
    return segment


def _is_valid_text(segment: str) -> bool:
    try:
        segment.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


class BuildInfoReportScanner:
    """Line by line scanner for a koji buildinfo report.

    Feed lines with :meth:`feed`, then call :meth:`finish` to get the record.
    A scanner is used for one report only.
    """

    def __init__(self, base_url: str = KOJIPKGS_URL) -> None:
        """Initialize scanner.

        Args:
            base_url: kojipkgs packages URL used for the URL prefix.
        """
        self._base_url = base_url
        self.section = ReportSection.HEADER
        self.nvr = ""
        self.build_id = 0
        self.rpms: Dict[str, List[str]] = {}

    @property
    def in_rpms(self) -> bool:
        """True once the ``RPMs:`` header was seen."""
        return self.section is ReportSection.RPMS

    def enter_rpms(self) -> None:
        """Switch to the RPM listing. Calling it again is a no-op."""
        self.section = ReportSection.RPMS

    def feed(self, line: str) -> None:
        """Consume one report line.

        Raises:
            BuildInfoReportError: If the line is malformed.
        """
        if self.in_rpms:
            self._add_rpm(line)
            return

        match = BUILD_LINE_RE.match(line)
        if match:
            self._set_build(match.group(1), match.group(2))
        elif line.startswith(RPMS_HEADER):
            self.enter_rpms()

    def _set_build(self, nvr: str, digits: str) -> None:
        build_id = int(digits)
        if build_id > MAX_BUILD_ID:
            raise BuildIdOverflowError(
                f"Build id {digits} of {nvr} does not fit in 64 bits"
            )
        self.nvr = nvr
        self.build_id = build_id

    def _add_rpm(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            raise MissingArtifactNameError("Missing RPM name on empty line")
        path = PurePosixPath(tokens[0])

        name = _path_segment(path.name)
        if name is None:
            raise MissingArtifactNameError(f"Missing RPM name in {tokens[0]!r}")
        if not _is_valid_text(name):
            raise InvalidArtifactNameError(f"Invalid RPM name in {tokens[0]!r}")

        arch = _path_segment(path.parent.name)
        if arch is None:
            raise MissingArtifactArchError(f"Missing RPM arch in {tokens[0]!r}")
        if not _is_valid_text(arch):
            raise InvalidArtifactArchError(f"Invalid RPM arch in {tokens[0]!r}")

        self.rpms.setdefault(arch, []).append(name)

    def finish(self) -> KojiBuildInfo:
        """Validate what was scanned and build the record.

        Raises:
            BuildNotFoundError: If no ``BUILD:`` line was seen.
            ArtifactSectionMissingError: If no ``RPMs:`` line was seen.
            InvalidCanonicalNvrError: If the reported nvr cannot be decomposed.
        """
        if not self.nvr:
            raise BuildNotFoundError("Failed to find BUILD in koji output")
        if not self.in_rpms:
            raise ArtifactSectionMissingError("Failed to find RPMs in koji output")
        try:
            url_prefix = kojipkgs_url_prefix(self.nvr, self._base_url)
        except InvalidNvrError as exc:
            raise InvalidCanonicalNvrError(
                f"Koji reported an invalid nvr: {exc.message}"
            ) from exc
        return KojiBuildInfo(
            nvr=self.nvr,
            build_id=self.build_id,
            kojipkgs_url_prefix=url_prefix,
            rpms=self.rpms,
        )


def iter_report_lines(output: str) -> Iterator[str]:
    """Yield the lines of a report.

    Only newlines separate lines. A trailing carriage return is dropped and a
    final newline does not produce an extra empty line.
    """
    lines = output.split("\n")
    if lines and not lines[-1]:
        lines.pop()
    for line in lines:
        yield line[:-1] if line.endswith("\r") else line


def scrape_koji_buildinfo(output: str, base_url: str = KOJIPKGS_URL) -> KojiBuildInfo:
    """Parse ``koji buildinfo`` output into a :class:`KojiBuildInfo`.

    Args:
        output: Complete stdout of ``koji buildinfo``.
        base_url: kojipkgs packages URL used for the URL prefix.

    Returns:
        The build record.

    Raises:
        BuildInfoReportError: If the report is malformed or incomplete.
    """
    scanner = BuildInfoReportScanner(base_url)
    for line in iter_report_lines(output):
        scanner.feed(line)
    info = scanner.finish()
    logger.debug(
        "Scraped koji build %s [%d] with %d architectures",
        info.nvr,
        info.build_id,
        len(info.rpms),
    )
    return info

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


"""Infrastructure adapter running ``koji buildinfo`` as a subprocess."""

import logging
import subprocess
from typing import List, Optional

from core.buildinfo.exceptions import (
    KojiCommandFailedError,
    KojiOutputDecodeError,
    KojiTimeoutError,
)
from core.buildinfo.repositories import BuildInfoSource
from core.buildinfo.value_objects import BuildIdentifier

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 120


class KojiCliBuildInfoSource(BuildInfoSource):
    """Fetch buildinfo reports with the koji command line client.

    The command is run from an argument list, never through a shell, and only
    with a :class:`BuildIdentifier` that already passed validation.
    """

    def __init__(
        self,
        koji_binary: str = "koji",
        profile: Optional[str] = None,
        timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize koji client adapter.

        Args:
            koji_binary: Name or path of the koji executable.
            profile: Optional koji profile (``koji --profile``).
            timeout_seconds: Seconds to wait for koji before giving up.
        """
        self.koji_binary = koji_binary
        self.profile = profile
        self.timeout_seconds = timeout_seconds

    def build_command(self, build: BuildIdentifier) -> List[str]:
        """Return the argument list used to query a build."""
        cmd = [self.koji_binary]
        if self.profile:
            cmd.extend(["--profile", self.profile])
        cmd.extend(["buildinfo", str(build)])
        return cmd

    def fetch_buildinfo(self, build: BuildIdentifier) -> str:
        """Run ``koji buildinfo`` and return its stdout.

        Raises:
            KojiCommandFailedError: If koji cannot be started or exits non-zero.
            KojiTimeoutError: If koji does not finish in time.
            KojiOutputDecodeError: If stdout is not valid UTF-8.
        """
        cmd = self.build_command(build)
        logger.debug("Executing command: %s", " ".join(cmd))

        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout_seconds,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            logger.error(
                "koji buildinfo timed out: build=%s, timeout=%ds",
                build,
                self.timeout_seconds,
            )
            raise KojiTimeoutError(
                f"koji buildinfo {build} timed out after {self.timeout_seconds} seconds"
            ) from exc
        except OSError as exc:
            raise KojiCommandFailedError(
                f"Failed to run {self.koji_binary}: {exc}"
            ) from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            logger.warning(
                "koji buildinfo failed: build=%s, exit_code=%d, stderr=%s",
                build,
                proc.returncode,
                stderr,
            )
            raise KojiCommandFailedError(
                f"koji buildinfo {build} failed with exit code {proc.returncode}",
                returncode=proc.returncode,
            )

        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise KojiOutputDecodeError(
                f"koji buildinfo {build} printed invalid UTF-8: {exc}"
            ) from exc

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


"""Build info domain exceptions.

Every exception carries a stable ``code`` so that failures can be told apart
in logs even though the API answers all of them with the same opaque error.
"""


class BuildInfoDomainError(Exception):
    """Base exception for build info domain errors."""

    code = "BUILD_INFO_ERROR"

    def __init__(self, message: str, correlation_id: str = ""):
        """Initialize domain error.

        Args:
            message: Error message.
            correlation_id: Request correlation ID for tracing.
        """
        super().__init__(message)
        self.message = message
        self.correlation_id = correlation_id


# ---------------------------------------------------------------------------
# Caller input
# ---------------------------------------------------------------------------
class InvalidBuildIdentifierError(BuildInfoDomainError):
    """Raised when a caller supplied build identifier is rejected."""

    code = "INVALID_BUILD_IDENTIFIER"


class EmptyIdentifierError(InvalidBuildIdentifierError):
    """Raised when the build identifier is empty."""

    code = "EMPTY_IDENTIFIER"


class NonAsciiCharacterError(InvalidBuildIdentifierError):
    """Raised when the build identifier contains a non-ASCII character."""

    code = "NON_ASCII_CHARACTER"

    def __init__(self, character: str, correlation_id: str = ""):
        super().__init__(
            f"Invalid non-ASCII character {character!r} in build identifier",
            correlation_id,
        )
        self.character = character


class InvalidLeadingCharacterError(InvalidBuildIdentifierError):
    """Raised when the build identifier does not start with [A-Za-z0-9]."""

    code = "INVALID_LEADING_CHARACTER"

    def __init__(self, character: str, correlation_id: str = ""):
        super().__init__(
            f"Invalid leading character {character!r} in build identifier, "
            "must be ASCII alphanumeric",
            correlation_id,
        )
        self.character = character


# ---------------------------------------------------------------------------
# Name-version-release decomposition
# ---------------------------------------------------------------------------
class InvalidNvrError(BuildInfoDomainError):
    """Raised when a string cannot be split into name, version and release."""

    code = "INVALID_NVR"


class MissingReleaseSeparatorError(InvalidNvrError):
    """Raised when the nvr contains no '-' at all."""

    code = "MISSING_RELEASE_SEPARATOR"


class EmptyReleaseError(InvalidNvrError):
    """Raised when nothing follows the last '-'."""

    code = "EMPTY_RELEASE"


class MissingVersionSeparatorError(InvalidNvrError):
    """Raised when the name-version part contains no '-'."""

    code = "MISSING_VERSION_SEPARATOR"


class EmptyNameError(InvalidNvrError):
    """Raised when the name component is empty."""

    code = "EMPTY_NAME"


class EmptyVersionError(InvalidNvrError):
    """Raised when the version component is empty."""

    code = "EMPTY_VERSION"


# ---------------------------------------------------------------------------
# koji buildinfo report content
# ---------------------------------------------------------------------------
class BuildInfoReportError(BuildInfoDomainError):
    """Raised when a koji buildinfo report cannot be scraped."""

    code = "BUILD_INFO_REPORT_ERROR"


class BuildNotFoundError(BuildInfoReportError):
    """Raised when the report has no ``BUILD:`` line."""

    code = "BUILD_NOT_FOUND"


class ArtifactSectionMissingError(BuildInfoReportError):
    """Raised when the report has no ``RPMs:`` section header."""

    code = "ARTIFACT_SECTION_MISSING"


class MissingArtifactNameError(BuildInfoReportError):
    """Raised when an RPM line has no file name."""

    code = "MISSING_ARTIFACT_NAME"


class InvalidArtifactNameError(BuildInfoReportError):
    """Raised when an RPM file name is not valid text."""

    code = "INVALID_ARTIFACT_NAME"


class MissingArtifactArchError(BuildInfoReportError):
    """Raised when an RPM path has no architecture directory."""

    code = "MISSING_ARTIFACT_ARCH"


class InvalidArtifactArchError(BuildInfoReportError):
    """Raised when an RPM architecture directory is not valid text."""

    code = "INVALID_ARTIFACT_ARCH"


class BuildIdOverflowError(BuildInfoReportError):
    """Raised when the build id does not fit an unsigned 64-bit integer."""

    code = "BUILD_ID_OVERFLOW"


class InvalidCanonicalNvrError(BuildInfoReportError):
    """Raised when the nvr reported by koji cannot be decomposed."""

    code = "INVALID_CANONICAL_NVR"


# ---------------------------------------------------------------------------
# koji client
# ---------------------------------------------------------------------------
class KojiClientError(BuildInfoDomainError):
    """Raised when fetching the report from koji fails."""

    code = "KOJI_CLIENT_ERROR"


class KojiCommandFailedError(KojiClientError):
    """Raised when the koji command cannot be run or exits non-zero."""

    code = "KOJI_COMMAND_FAILED"

    def __init__(
        self, message: str, returncode: int = -1, correlation_id: str = ""
    ):
        super().__init__(message, correlation_id)
        self.returncode = returncode


class KojiTimeoutError(KojiClientError):
    """Raised when the koji command exceeds its timeout."""

    code = "KOJI_TIMEOUT"


class KojiOutputDecodeError(KojiClientError):
    """Raised when koji output is not valid UTF-8."""

    code = "KOJI_OUTPUT_DECODE_ERROR"

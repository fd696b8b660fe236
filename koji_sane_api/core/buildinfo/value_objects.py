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


"""Value objects for the Build Info domain.

All value objects are immutable and defined by their values, not identity.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Tuple

from core.buildinfo.exceptions import (
    EmptyIdentifierError,
    EmptyNameError,
    EmptyReleaseError,
    EmptyVersionError,
    InvalidLeadingCharacterError,
    MissingReleaseSeparatorError,
    MissingVersionSeparatorError,
    NonAsciiCharacterError,
)

KOJIPKGS_URL = "https://kojipkgs.fedoraproject.org/packages"

MAX_BUILD_ID = 2**64 - 1


def validate_build_identifier(candidate: str) -> None:
    """Reject identifiers that are unsafe to hand to koji or put in a URL.

    This is a conservative gate, not a grammar check: the identifier must be
    non-empty, pure ASCII and start with an ASCII letter or digit, which rules
    out option-like (``-foo``) and traversal-like (``../foo``) values.

    Raises:
        EmptyIdentifierError: If candidate is empty.
        NonAsciiCharacterError: If candidate contains a non-ASCII character.
        InvalidLeadingCharacterError: If the first character is not alphanumeric.
    """
    if not candidate:
        raise EmptyIdentifierError("Invalid empty build identifier")
    for char in candidate:
        if not char.isascii():
            raise NonAsciiCharacterError(char)
    first = candidate[0]
    if not first.isalnum():
        raise InvalidLeadingCharacterError(first)


def split_nvr(nvr: str) -> Tuple[str, str, str]:
    """Split ``name-version-release`` into its three components.

    Splits from the right since the name may contain dashes. Versions or
    releases containing a dash are split wrongly; that matches how the
    identifiers have always been interpreted here.

    Raises:
        InvalidNvrError: One of its subclasses, naming the missing piece.
    """
    name_version, sep, release = nvr.rpartition("-")
    if not sep:
        raise MissingReleaseSeparatorError(
            f"Invalid nvr {nvr!r}, missing a '-'"
        )
    if not release:
        raise EmptyReleaseError(f"Invalid nvr {nvr!r} with empty release")
    name, sep, version = name_version.rpartition("-")
    if not sep:
        raise MissingVersionSeparatorError(
            f"Invalid nvr {nvr!r}, missing the '-' before the version"
        )
    if not name:
        raise EmptyNameError(f"Invalid nvr {nvr!r} with empty name")
    if not version:
        raise EmptyVersionError(f"Invalid nvr {nvr!r} with empty version")
    return name, version, release


@dataclass(frozen=True)
class BuildIdentifier:
    """Caller supplied build identifier that passed validation.

    Either an nvr or a numeric koji build id. Only instances of this type are
    ever passed to the koji client.

    Attributes:
        value: Identifier string.

    Raises:
        InvalidBuildIdentifierError: If the identifier is rejected.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate identifier."""
        validate_build_identifier(self.value)

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class Nvr:
    """Name, version and release of a build."""

    name: str
    version: str
    release: str

    @classmethod
    def parse(cls, nvr: str) -> "Nvr":
        """Decompose an nvr string, see :func:`split_nvr`."""
        return cls(*split_nvr(nvr))

    def kojipkgs_url_prefix(self, base_url: str = KOJIPKGS_URL) -> str:
        """Return the kojipkgs directory holding this build's files."""
        return f"{base_url.rstrip('/')}/{self.name}/{self.version}/{self.release}"

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name}-{self.version}-{self.release}"


def kojipkgs_url_prefix(nvr: str, base_url: str = KOJIPKGS_URL) -> str:
    """Return ``<base_url>/<name>/<version>/<release>`` for an nvr.

    Raises:
        InvalidNvrError: If the nvr cannot be decomposed.
    """
    return Nvr.parse(nvr).kojipkgs_url_prefix(base_url)


@dataclass(frozen=True)
class CorrelationId:
    """Request tracing identifier.

    Attributes:
        value: Correlation identifier string.

    Raises:
        ValueError: If empty or too long.
    """

    value: str

    MAX_LENGTH: ClassVar[int] = 128

    def __post_init__(self) -> None:
        """Validate correlation id."""
        if not self.value or not self.value.strip():
            raise ValueError("Correlation ID cannot be empty")
        if len(self.value) > self.MAX_LENGTH:
            raise ValueError(
                f"Correlation ID length cannot exceed {self.MAX_LENGTH} "
                f"characters, got {len(self.value)}"
            )

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


class ReportSection(str, Enum):
    """Section of a koji buildinfo report the scanner is in.

    The report starts in HEADER; the ``RPMs:`` line moves it to RPMS, and
    there is no way back.
    """

    HEADER = "header"
    RPMS = "rpms"

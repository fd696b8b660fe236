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


"""Configuration loader for koji-sane-api."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import configparser

DEFAULT_CONFIG_PATH = "/etc/koji-sane-api/koji-sane-api.ini"
DEFAULT_KOJIPKGS_URL = "https://kojipkgs.fedoraproject.org/packages"


@dataclass
class KojiConfig:
    """koji client configuration."""
    binary: str = "koji"
    profile: Optional[str] = None
    timeout_seconds: int = 120


@dataclass
class KojiPkgsConfig:
    """kojipkgs download server configuration."""
    url: str = DEFAULT_KOJIPKGS_URL


@dataclass
class KojiSaneApiConfig:
    """koji-sane-api configuration."""
    koji: KojiConfig = field(default_factory=KojiConfig)
    kojipkgs: KojiPkgsConfig = field(default_factory=KojiPkgsConfig)


def load_config(config_path: Optional[str] = None) -> KojiSaneApiConfig:
    """Load koji-sane-api configuration from INI file.

    Args:
        config_path: Path to configuration file. If None, uses
                    KOJI_SANE_API_CONFIG_PATH environment variable or default path.

    Returns:
        KojiSaneApiConfig instance.

    Raises:
        FileNotFoundError: If config file not found.
        ValueError: If config is invalid.
    """
    if config_path is None:
        config_path = os.getenv("KOJI_SANE_API_CONFIG_PATH", DEFAULT_CONFIG_PATH)

    config_file = Path(config_path)
    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_file}")

    parser = configparser.ConfigParser()
    parser.read(config_file)

    if not parser.sections():
        raise ValueError(f"Empty configuration file: {config_file}")

    koji_section = "koji"
    timeout_seconds = 120
    if parser.has_option(koji_section, "timeout_seconds"):
        timeout_seconds = parser.getint(koji_section, "timeout_seconds")
    if timeout_seconds <= 0:
        raise ValueError(
            f"koji timeout_seconds must be positive, got {timeout_seconds}"
        )

    binary = parser.get(koji_section, "binary", fallback="koji").strip()
    if not binary:
        raise ValueError("koji binary cannot be empty")

    koji = KojiConfig(
        binary=binary,
        profile=parser.get(koji_section, "profile", fallback="").strip() or None,
        timeout_seconds=timeout_seconds,
    )

    url = parser.get("kojipkgs", "url", fallback=DEFAULT_KOJIPKGS_URL).strip()
    if not url.startswith(("http://", "https://")):
        raise ValueError(f"kojipkgs url must be an http(s) URL, got: {url!r}")

    return KojiSaneApiConfig(
        koji=koji,
        kojipkgs=KojiPkgsConfig(url=url.rstrip("/")),
    )

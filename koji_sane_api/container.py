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


"""Dependency Injector container for koji-sane-api."""
# pylint: disable=c-extension-no-member

import logging

from dependency_injector import containers, providers

from common.config import KojiSaneApiConfig, load_config
from infra.id_generator import CorrelationIdGenerator, UUIDv4Generator
from infra.koji import KojiCliBuildInfoSource
from orchestrator.buildinfo.use_cases import GetBuildInfoUseCase

logger = logging.getLogger(__name__)


def _load_settings() -> KojiSaneApiConfig:
    """Load configuration, falling back to defaults when no file exists."""
    try:
        return load_config()
    except FileNotFoundError as exc:
        logger.info("%s, using default configuration", exc)
        return KojiSaneApiConfig()


class Container(containers.DeclarativeContainer):  # pylint: disable=R0903
    """Application container.

    Tests replace ``buildinfo_source`` with
    ``container.buildinfo_source.override(...)`` to avoid running koji.
    """

    settings = providers.Singleton(_load_settings)

    uuid_generator = providers.Singleton(UUIDv4Generator)
    correlation_id_generator = providers.Singleton(
        CorrelationIdGenerator,
        uuid_generator=uuid_generator,
    )

    # --- koji ---
    buildinfo_source = providers.Singleton(
        KojiCliBuildInfoSource,
        koji_binary=settings.provided.koji.binary,
        profile=settings.provided.koji.profile,
        timeout_seconds=settings.provided.koji.timeout_seconds,
    )

    # --- Use cases ---
    get_build_info_use_case = providers.Factory(
        GetBuildInfoUseCase,
        source=buildinfo_source,
        kojipkgs_url=settings.provided.kojipkgs.url,
    )


container = Container()

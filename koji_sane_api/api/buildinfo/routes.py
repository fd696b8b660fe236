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


"""FastAPI routes for koji build info lookups."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status

from api.buildinfo.dependencies import (
    get_build_info_correlation_id,
    get_build_info_use_case,
)
from api.buildinfo.schemas import BuildInfoErrorResponse, BuildInfoResponse
from api.logging_utils import log_secure_info
from core.buildinfo.exceptions import BuildInfoDomainError
from core.buildinfo.value_objects import CorrelationId
from orchestrator.buildinfo.commands import GetBuildInfoCommand
from orchestrator.buildinfo.use_cases import GetBuildInfoUseCase

router = APIRouter(tags=["Build Info"])

INTERNAL_ERROR_MESSAGE = "An internal server error occurred"


def _build_error_response(
    error_code: str,
    message: str,
    correlation_id: str,
) -> BuildInfoErrorResponse:
    return BuildInfoErrorResponse(
        error=error_code,
        message=message,
        correlation_id=correlation_id,
        timestamp=datetime.now(timezone.utc).isoformat() + "Z",
    )


def _internal_error(correlation_id: CorrelationId) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=_build_error_response(
            "INTERNAL_ERROR",
            INTERNAL_ERROR_MESSAGE,
            correlation_id.value,
        ).model_dump(),
    )


@router.get(
    "/buildinfo/{build}",
    response_model=BuildInfoResponse,
    status_code=status.HTTP_200_OK,
    summary="Get koji build info",
    description="Resolve an nvr or koji build id into its RPMs grouped by architecture",
    responses={
        200: {"description": "Build found", "model": BuildInfoResponse},
        500: {"description": "Internal error", "model": BuildInfoErrorResponse},
    },
)
def get_build_info(
    build: str,
    use_case: GetBuildInfoUseCase = Depends(get_build_info_use_case),
    correlation_id: CorrelationId = Depends(get_build_info_correlation_id),
) -> BuildInfoResponse:
    """Look up a koji build.

    Declared with ``def`` so FastAPI runs it in its threadpool while koji
    blocks. Every failure is reported as the same opaque 500; the specific
    error code only goes to the log.
    """
    log_secure_info(
        "info",
        f"Build info request: build={build!r}",
        identifier=correlation_id.value,
    )

    try:
        info = use_case.execute(
            GetBuildInfoCommand(build=build, correlation_id=correlation_id)
        )
    except BuildInfoDomainError as exc:
        log_secure_info(
            "warning",
            f"Build info failed: build={build!r}, reason={exc.code}, "
            f"message={exc.message}, status=500",
            identifier=correlation_id.value,
            end_section=True,
        )
        raise _internal_error(correlation_id) from exc
    except Exception as exc:
        log_secure_info(
            "error",
            f"Build info failed: build={build!r}, reason=unexpected_error, status=500",
            identifier=correlation_id.value,
            exc_info=True,
            end_section=True,
        )
        raise _internal_error(correlation_id) from exc

    log_secure_info(
        "info",
        f"Build info success: nvr={info.nvr}, id={info.build_id}, "
        f"arches={len(info.rpms)}, status=200",
        identifier=correlation_id.value,
        end_section=True,
    )
    return BuildInfoResponse.from_entity(info)

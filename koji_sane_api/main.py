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


"""koji-sane-api server.

Main entry point for the koji-sane-api application: a JSON front end for
``koji buildinfo``. This module initializes the FastAPI application and is
invoked from the Dockerfile.

Usage:
    uvicorn main:app --host 0.0.0.0 --port $PORT
"""

import logging
import os

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.router import api_router
from container import container

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

app = FastAPI(
    title="koji-sane-api",
    description="JSON API for koji build information",
    version=API_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.container = container

app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get(
    "/",
    summary="Root endpoint",
    description="Returns a welcome message and API documentation URL.",
)
async def root() -> dict:
    """Root endpoint returning service information."""
    return {
        "message": "Welcome to koji-sane-api",
        "docs": "/docs",
        "version": API_VERSION,
    }


@app.get(
    "/health",
    summary="Health check",
    description="Returns the health status of the API server.",
    status_code=status.HTTP_200_OK,
)
async def health_check() -> dict:
    """Health check endpoint for container orchestration."""
    return {"status": "healthy"}


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):  # pylint: disable=unused-argument
    """Global exception handler for unhandled exceptions."""
    logger.exception("Unhandled exception occurred")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"status": "error", "message": "An internal server error occurred"},
    )


def get_server_config():
    """Get server host and port configuration with proper validation."""
    host = os.getenv("HOST", "0.0.0.0")

    if not host or host.strip() == "":
        raise ValueError("HOST environment variable cannot be empty")

    port_env = os.getenv("PORT")
    if not port_env:
        raise ValueError("PORT environment variable is required")

    try:
        port = int(port_env)
    except ValueError as e:
        raise ValueError(
            f"PORT environment variable must be a valid integer, got: {port_env}"
        ) from e
    if not 1 <= port <= 65535:
        raise ValueError(f"Port {port} is not in valid range 1-65535")

    return host.strip(), port


if __name__ == "__main__":
    import uvicorn

    try:
        host, port = get_server_config()

        logger.info("Starting koji-sane-api server on %s:%d", host, port)

        uvicorn.run("main:app", host=host, port=port)
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        raise
    except Exception as e:
        logger.error("Failed to start server: %s", e)
        raise

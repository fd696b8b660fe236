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


"""Secure logging utilities for koji-sane-api.

Provides request logging with automatic redaction of sensitive data
(bearer tokens, passwords, API keys, emails) and an optional mirror of every
entry in ``<BUILDINFO_LOG_DIR>/buildinfo.log``.
"""

import logging
import os
import re
import traceback
from pathlib import Path
from typing import Optional

_LOG_FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

_SEPARATOR = "-" * 80

# ---------------------------------------------------------------------------
# Sensitive-data redaction patterns
# ---------------------------------------------------------------------------
_SENSITIVE_PATTERNS = [
    # JWT / Bearer tokens  (three base64url segments separated by dots)
    (re.compile(r"eyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+"), "<REDACTED_TOKEN>"),
    # Authorization header values
    (re.compile(r"(?i)(bearer\s+)[A-Za-z0-9_\-\.]+"), r"\1<REDACTED_TOKEN>"),
    # password= or passwd= or secret= or api_key= or token= values
    (re.compile(
        r"(?i)((?:password|passwd|secret|api_key|apikey|token|auth_token)"
        r"\s*[=:]\s*)[^\s,;\"']+"
    ), r"\1<REDACTED>"),
    # Email addresses
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Z|a-z]{2,}\b"), "<REDACTED_EMAIL>"),
]


def _sanitize_message(message: str) -> str:
    """Redact sensitive data from a log message."""
    for pattern, replacement in _SENSITIVE_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


# ---------------------------------------------------------------------------
# Request log file (singleton)
# ---------------------------------------------------------------------------
_request_logger: Optional[logging.Logger] = None


def _get_log_dir() -> Optional[Path]:
    log_dir = os.getenv("BUILDINFO_LOG_DIR", "").strip()
    return Path(log_dir) if log_dir else None


def _get_or_create_request_logger() -> Optional[logging.Logger]:
    """Return the cached request logger, creating it on first call.

    Writes to ``<BUILDINFO_LOG_DIR>/buildinfo.log``. Returns ``None`` when
    BUILDINFO_LOG_DIR is unset or the file cannot be created.
    """
    global _request_logger  # pylint: disable=global-statement
    if _request_logger is not None:
        return _request_logger

    log_dir = _get_log_dir()
    if log_dir is None:
        return None

    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / "buildinfo.log"
        log_file.touch(exist_ok=True)

        request_logger = logging.getLogger("koji_sane_api.buildinfo")
        request_logger.setLevel(logging.DEBUG)
        request_logger.propagate = False
        handler = logging.FileHandler(str(log_file), mode="a")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(_LOG_FORMATTER)
        request_logger.addHandler(handler)
        _request_logger = request_logger
        return _request_logger
    except OSError:
        logging.getLogger(__name__).warning("Failed to create buildinfo log file")
        return None


def remove_request_logger() -> None:
    """Flush, close, and drop the cached request logger."""
    global _request_logger  # pylint: disable=global-statement
    request_logger, _request_logger = _request_logger, None
    if request_logger is None:
        return
    for handler in list(request_logger.handlers):
        handler.flush()
        handler.close()
        request_logger.removeHandler(handler)


# ---------------------------------------------------------------------------
# Public logging entry point
# ---------------------------------------------------------------------------
def log_secure_info(
    level: str,
    message: str,
    identifier: Optional[str] = None,
    exc_info: bool = False,
    end_section: bool = False,
) -> None:
    """Log a message after redacting sensitive data.

    * *identifier* (usually the correlation id) is truncated to its first
      8 characters.
    * Tokens, passwords, API keys, and emails are automatically replaced
      with ``<REDACTED_*>`` placeholders.
    * When BUILDINFO_LOG_DIR is set the entry is also written to the
      request log file.

    Args:
        level: ``'info'``, ``'warning'``, ``'error'``, ``'debug'``, or ``'critical'``.
        message: Human-readable log message.
        identifier: Optional opaque id, only the first 8 chars are kept.
        exc_info: Append the current exception traceback.
        end_section: Append a separator line to visually delimit this request.
    """
    logger = logging.getLogger(__name__)

    if identifier:
        log_message = f"{message}: {identifier[:8]}..."
    else:
        log_message = message

    if exc_info:
        log_message = f"{log_message}\n{traceback.format_exc().rstrip()}"

    log_message = _sanitize_message(log_message)

    log_func = getattr(logger, level, logger.info)
    log_func(log_message)

    request_logger = _get_or_create_request_logger()
    if request_logger:
        request_log_func = getattr(request_logger, level, request_logger.info)
        request_log_func(log_message)
        if end_section:
            request_logger.info(_SEPARATOR)

"""Shared HTTP helpers used by the registry client.

Encapsulates common request/timeout error handling so callers avoid
duplicating try/except blocks. Transport failures surface as RemoteError;
status handling is left to the caller.
"""
from __future__ import annotations

import logging
from typing import Any

import requests

from constants import Constants
from errors import RemoteError
from common.logging_utils import extra_context, is_debug_enabled, safe_url, Timer

logger = logging.getLogger(__name__)


def safe_get(url: str, *, context: str, **kwargs: Any) -> requests.Response:
    """Perform a GET request with consistent error handling and DEBUG traces.

    Args:
        url: Target URL.
        context: Human-readable source tag for logs (e.g., "crates.io").
        **kwargs: Passed through to requests.get.

    Returns:
        requests.Response: The HTTP response object, whatever its status.

    Raises:
        RemoteError: On timeout or connection failure.
    """
    safe_target = safe_url(url)
    with Timer() as t:
        if is_debug_enabled(logger):
            logger.debug(
                "HTTP request",
                extra=extra_context(
                    event="http_request",
                    component="http_client",
                    action="GET",
                    target=safe_target,
                    context=context
                )
            )
        try:
            res = requests.get(url, timeout=Constants.REQUEST_TIMEOUT, **kwargs)
        except requests.Timeout as exc:
            raise RemoteError(
                f"{context} request timed out after {Constants.REQUEST_TIMEOUT} seconds"
            ) from exc
        except requests.RequestException as exc:  # includes ConnectionError
            raise RemoteError(f"{context} connection error") from exc

    if is_debug_enabled(logger):
        logger.debug(
            "HTTP response",
            extra=extra_context(
                event="http_response",
                component="http_client",
                action="GET",
                status_code=res.status_code,
                duration_ms=t.duration_ms(),
                target=safe_target,
                context=context
            )
        )
    return res

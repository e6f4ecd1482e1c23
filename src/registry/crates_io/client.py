"""crates.io API client: page through the most downloaded crates."""
from __future__ import annotations

import json
import logging
from typing import List, Optional
from urllib.parse import urlencode

from constants import Constants
from errors import RemoteError
from common.logging_utils import extra_context, is_debug_enabled, Timer, safe_url

import registry.crates_io as crates_pkg

logger = logging.getLogger(__name__)


def _describe_failure(res) -> str:
    headers = "\n".join(f"{key}: {value}" for key, value in res.headers.items())
    return (
        "Failed to fetch top crates from crates.io.\n"
        f"Status: {res.status_code}\n"
        f"Headers:\n{headers}\n"
        f"{res.text}"
    )


def _crate_names(res, fullurl: str) -> List[str]:
    try:
        payload = json.loads(res.text)
    except json.JSONDecodeError as exc:
        raise RemoteError(
            f"Couldn't decode crates.io response from {safe_url(fullurl)}",
            status_code=res.status_code,
        ) from exc

    crates = payload.get("crates") if isinstance(payload, dict) else None
    if not isinstance(crates, list):
        raise RemoteError(
            "Unexpected crates.io response structure: missing 'crates' list",
            status_code=res.status_code,
        )

    names = []
    for record in crates:
        name = record.get("name") if isinstance(record, dict) else None
        if not isinstance(name, str) or not name:
            raise RemoteError(
                "Unexpected crates.io response structure: record without a name",
                status_code=res.status_code,
            )
        names.append(name)
    return names


def fetch_top_downloaded(
    count: int,
    verbose: bool = False,
    url: Optional[str] = None,
) -> List[str]:
    """Return the names of the ``count`` most downloaded crates.

    Pages are requested sequentially, each at most CRATES_IO_PAGE_MAX long,
    starting from page 1 on every call. Any non-2xx response aborts the
    whole call; nothing is returned for pages fetched before the failure.

    Args:
        count: Number of crate names wanted.
        verbose: Log each request at INFO instead of DEBUG.
        url: Crates listing endpoint, defaults to Constants.CRATES_IO_API_URL.

    Returns:
        list: Crate names in ranking order.

    Raises:
        RemoteError: On transport failure, non-2xx status or a malformed body.
    """
    url = url or Constants.CRATES_IO_API_URL
    names: List[str] = []
    headers = {"User-Agent": Constants.USER_AGENT, "Accept": "application/json"}
    remaining = count
    page = 1

    while remaining > 0:
        # At least one crate per page so remaining always shrinks.
        per_page = max(1, min(remaining, Constants.CRATES_IO_PAGE_MAX))
        params = {"page": page, "per_page": per_page, "sort": "downloads"}
        fullurl = f"{url}?{urlencode(params)}"
        logger.log(
            logging.INFO if verbose else logging.DEBUG,
            "Sending request: %s",
            fullurl,
        )

        with Timer() as timer:
            res = crates_pkg.safe_get(url, context="crates.io", params=params, headers=headers)

        if not 200 <= res.status_code < 300:
            logger.debug(
                "HTTP non-2xx received",
                extra=extra_context(
                    event="http_response",
                    outcome="failure",
                    status_code=res.status_code,
                    duration_ms=timer.duration_ms(),
                    target=safe_url(fullurl),
                    package_manager="cargo"
                )
            )
            raise RemoteError(_describe_failure(res), status_code=res.status_code)

        page_names = _crate_names(res, fullurl)
        if is_debug_enabled(logger):
            logger.debug(
                "Received crates page",
                extra=extra_context(
                    event="http_response",
                    outcome="success",
                    status_code=res.status_code,
                    duration_ms=timer.duration_ms(),
                    page=page,
                    count=len(page_names),
                    package_manager="cargo"
                )
            )
        names.extend(page_names)

        if len(page_names) < per_page:
            logger.warning(
                "crates.io returned %d crates for page %d (asked for %d); stopping early.",
                len(page_names),
                page,
                per_page,
            )
            break
        page += 1
        remaining -= per_page

    return names[:count]

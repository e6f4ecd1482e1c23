"""Collect crate requests from every configured source into one RequestSet."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from constants import Constants
from registry.crates_io import fetch_top_downloaded, parse_cargo_lock
from top_crates import TOP_CRATES
from versioning.models import PackageRequest, RequestSet
from versioning.parser import parse_cli_token

logger = logging.getLogger(__name__)


def aggregate(
    top_deps: Optional[int] = None,
    top_downloads: Optional[int] = None,
    lockfile: Optional[str] = None,
    tokens: Iterable[str] = (),
    verbose: bool = False,
    table: Sequence[str] = TOP_CRATES,
) -> RequestSet:
    """Merge the requested sources into a single RequestSet.

    Args:
        top_deps: Take this many names from the static dependency table.
        top_downloads: Query crates.io for this many most downloaded crates.
        lockfile: Path to a Cargo.lock whose crates.io packages are pinned.
        tokens: Explicit ``name`` / ``name@version`` arguments.
        verbose: Passed to the crates.io client for per-request logging.
        table: Static ranking table, most depended-upon first.

    Returns:
        RequestSet: One entry per crate name. Sources never remove versions
        added by another source.
    """
    tokens = list(tokens)
    if top_deps is None and top_downloads is None and lockfile is None and not tokens:
        top_deps = Constants.DEFAULT_TOP_COUNT

    request_set = RequestSet()

    if top_deps is not None:
        if top_deps > len(table):
            logger.warning(
                "Requested top %d dependencies but the static table only lists %d crates.",
                top_deps,
                len(table),
            )
        for name in table[:top_deps]:
            request_set.add_request(PackageRequest(name=name, source="top-deps"))
        logger.debug("Added top %d dependencies from the static table", min(top_deps, len(table)))

    if top_downloads is not None:
        for name in fetch_top_downloaded(top_downloads, verbose=verbose):
            request_set.add_request(PackageRequest(name=name, source="top-downloads"))

    for token in tokens:
        request_set.add_request(parse_cli_token(token))

    if lockfile is not None:
        for request in parse_cargo_lock(lockfile):
            request_set.add_request(request)

    logger.log(
        logging.INFO if verbose else logging.DEBUG,
        "Collected %d crates to prefetch",
        len(request_set),
    )
    return request_set

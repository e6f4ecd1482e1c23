"""CLI entry point for the prefetch command.

Collects crate requests, synthesizes the scratch project and either lets
cargo download everything into its cache or lists what it resolved.
"""

from __future__ import annotations

import csv
import io
import json
import logging
import sys
from typing import Any, List, Sequence

from aggregator import aggregate
from constants import ExitCodes
from errors import FileError
from versioning.models import RequestSet, ResolvedPackage
from workspace import ResolveMode, extract_resolved, prefetch_workspace, run_resolver

logger = logging.getLogger(__name__)


def resolve_requests(
    request_set: RequestSet,
    mode: ResolveMode,
    verbose: bool = False,
) -> List[ResolvedPackage]:
    """Synthesize the scratch project and run cargo on it once.

    Returns:
        list: The resolved packages in LIST mode; empty in FETCH mode.
    """
    with prefetch_workspace(request_set) as directory:
        run_resolver(directory, mode, verbose=verbose)
        if mode is ResolveMode.LIST:
            return extract_resolved(directory)
    return []


def format_resolved(packages: Sequence[ResolvedPackage], fmt: str = "text") -> str:
    """Render resolved packages as text, json or csv."""
    if fmt == "json":
        return json.dumps(
            [{"name": p.name, "version": p.version} for p in packages], indent=2
        ) + "\n"
    if fmt == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(["name", "version"])
        writer.writerows([p.name, p.version] for p in packages)
        return buf.getvalue()
    return "".join(f'{p.name} = "{p.version}"\n' for p in packages)


def emit_resolved(packages: Sequence[ResolvedPackage], fmt: str = "text", output: Any = None) -> None:
    """Print the listing to stdout or write it to ``output``."""
    text = format_resolved(packages, fmt)
    if not output:
        sys.stdout.write(text)
        return
    try:
        with open(output, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        raise FileError(f"Listing couldn't be written to disk: {output}") from e
    logger.info("Listing of %d packages written to: %s", len(packages), output)


def run_prefetch(args: Any) -> int:
    """Entry point for the prefetch command.

    Args:
        args: Parsed CLI arguments namespace.

    Returns:
        int: Process exit code.
    """
    verbose = bool(getattr(args, "VERBOSE", False))
    request_set = aggregate(
        top_deps=getattr(args, "TOP_DEPS", None),
        top_downloads=getattr(args, "TOP_DOWNLOADS", None),
        lockfile=getattr(args, "LOCKFILE", None),
        tokens=getattr(args, "crates", None) or [],
        verbose=verbose,
    )
    fmt = getattr(args, "OUTPUT_FORMAT", "text")
    output = getattr(args, "OUTPUT", None)

    if getattr(args, "LIST", False):
        emit_resolved(resolve_requests(request_set, ResolveMode.LIST, verbose), fmt, output)
        return ExitCodes.SUCCESS.value

    if verbose:
        emit_resolved(resolve_requests(request_set, ResolveMode.LIST, verbose), fmt, output)
    resolve_requests(request_set, ResolveMode.FETCH, verbose)
    logger.log(
        logging.INFO if verbose else logging.DEBUG,
        "Prefetched %d requested crates into the cargo cache",
        len(request_set),
    )
    return ExitCodes.SUCCESS.value

"""Run cargo against a synthesized scratch project."""

from __future__ import annotations

import logging
import subprocess
from enum import Enum
from typing import List

from constants import Constants
from errors import SubprocessError

logger = logging.getLogger(__name__)


class ResolveMode(Enum):
    """What cargo does with the scratch project."""
    FETCH = "fetch"  # download every crate into the cargo cache
    LIST = "generate-lockfile"  # resolve only, leaving Cargo.lock behind


def cargo_command(mode: ResolveMode) -> List[str]:
    return [Constants.CARGO_BIN, mode.value]


def run_resolver(directory: str, mode: ResolveMode, verbose: bool = False) -> None:
    """Invoke cargo in ``directory`` and wait for it to exit.

    FETCH mode inherits the terminal so cargo's download progress stays
    visible. LIST mode captures output so it can be reported on failure.
    There is no timeout and no retry.

    Raises:
        SubprocessError: If cargo can't be launched or exits non-zero.
    """
    cmd = cargo_command(mode)
    logger.log(logging.INFO if verbose else logging.DEBUG, "Running: %s", " ".join(cmd))

    capture = mode is ResolveMode.LIST
    try:
        result = subprocess.run(
            cmd,
            cwd=directory,
            capture_output=capture,
            text=True,
            check=False,
        )
    except OSError as exc:
        raise SubprocessError(f"Failed to launch `{Constants.CARGO_BIN}`.") from exc

    if result.returncode != 0:
        message = f"`{' '.join(cmd)}` failed with exit status {result.returncode}"
        if capture:
            message = f"{message}\n{result.stdout or ''}\n{result.stderr or ''}".rstrip()
        raise SubprocessError(message, returncode=result.returncode)

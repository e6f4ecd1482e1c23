"""CLI entry point for the rank command (offline TOP_CRATES generator)."""

from __future__ import annotations

import logging
import sys
from typing import Any, Sequence

from constants import Constants, ExitCodes
from errors import FileError
from ranking.frequency import build_ranking, render_table
from versioning.models import RankEntry

logger = logging.getLogger(__name__)


def _render(entries: Sequence[RankEntry], fmt: str) -> str:
    if fmt == "text":
        return "".join(f"{entry.name} {entry.frequency}\n" for entry in entries)
    return render_table(entries)


def run_rank(args: Any) -> int:
    """Scan the index, rank dependency names and write the table."""
    top = getattr(args, "TOP", None)
    k = Constants.RANK_TOP_K if top is None else top
    entries = build_ranking(args.index_path, k)
    text = _render(entries, getattr(args, "OUTPUT_FORMAT", "python"))

    output = getattr(args, "OUTPUT", None)
    if not output:
        sys.stdout.write(text)
        return ExitCodes.SUCCESS.value
    try:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
    except OSError as e:
        raise FileError(f"Ranking couldn't be written to disk: {output}") from e
    logger.info("Top %d crates written to: %s", len(entries), output)
    return ExitCodes.SUCCESS.value

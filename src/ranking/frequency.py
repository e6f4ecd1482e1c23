"""Rank crates by how many other crates depend on them.

Only the newest version of every crate in the index is considered, yanked or
not, and each distinct dependency name of that version counts once. A renamed
dependency (``foo = { package = "bar" }``) counts under the crate it actually
pulls in, ``bar``, not under the local name ``foo``. The result feeds the
static TOP_CRATES table; it is never recomputed by the prefetch command.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

import semantic_version

from constants import Constants
from registry.crates_io.index import IndexRecord, iter_index
from versioning.models import RankEntry

logger = logging.getLogger(__name__)

IndexEntries = Iterable[Tuple[str, Sequence[IndexRecord]]]


def select_latest(records: Sequence[IndexRecord]) -> Optional[IndexRecord]:
    """Pick the record with the highest semver version.

    Records whose version does not parse are ignored. When two records carry
    the same version the first one in index order wins.
    """
    best: Optional[IndexRecord] = None
    best_version: Optional[semantic_version.Version] = None
    for record in records:
        try:
            parsed = semantic_version.Version(record.version)
        except ValueError:
            logger.debug("Skipping unparseable version %s %s", record.name, record.version)
            continue
        if best_version is None or parsed > best_version:
            best, best_version = record, parsed
    return best


def count_dependency_frequency(index: IndexEntries) -> Counter:
    """Tally dependency names across the newest version of every crate."""
    counts: Counter = Counter()
    crates = 0
    for name, records in index:
        latest = select_latest(records)
        if latest is None:
            logger.debug("No valid versions for %s", name)
            continue
        crates += 1
        counts.update(set(latest.dependencies))
    logger.info("Counted dependencies of %d crates (%d distinct names)", crates, len(counts))
    return counts


def rank_top(counts: Counter, k: int = Constants.RANK_TOP_K) -> List[RankEntry]:
    """Return the ``k`` most frequent names.

    Ordered by descending frequency; equal frequencies are ordered by
    ascending name so the table is stable between runs.
    """
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [RankEntry(name=name, frequency=freq) for name, freq in ordered[:k]]


def build_ranking(index_path: str, k: int = Constants.RANK_TOP_K) -> List[RankEntry]:
    return rank_top(count_dependency_frequency(iter_index(index_path)), k)


def render_table(entries: Sequence[RankEntry]) -> str:
    """Render entries as the source of the ``top_crates`` module."""
    lines = [
        '"""Most depended-upon crates on crates.io, most frequent first.',
        "",
        "Generated by ``cargo-prefetch rank <index-path>``; do not edit by hand.",
        '"""',
        "",
        "from typing import Tuple",
        "",
        "TOP_CRATES: Tuple[str, ...] = (",
    ]
    for entry in entries:
        lines.append(f'    "{entry.name}",  # {entry.frequency}')
    lines.append(")")
    return "\n".join(lines) + "\n"

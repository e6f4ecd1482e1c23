"""Reader for a local checkout of the crates.io index.

The index stores one file per crate (``se/rd/serde``, ``3/l/log``, ...)
holding one JSON object per published version::

    {"name": "serde", "vers": "1.0.0", "deps": [{"name": "serde_derive", ...}], ...}

Renamed dependencies carry the real crate name in ``package``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from errors import FileError, InputError

logger = logging.getLogger(__name__)

_SKIP_FILES = {"config.json"}


@dataclass(frozen=True)
class IndexRecord:
    """One published version of a crate as recorded in the index."""
    name: str
    version: str
    dependencies: Tuple[str, ...] = field(default_factory=tuple)


def _dependency_name(dep: dict) -> str:
    return dep.get("package") or dep["name"]


def parse_index_line(line: str, location: str) -> IndexRecord:
    """Parse a single index line into an IndexRecord."""
    try:
        entry = json.loads(line)
        return IndexRecord(
            name=entry["name"],
            version=entry["vers"],
            dependencies=tuple(_dependency_name(dep) for dep in entry.get("deps") or []),
        )
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        raise InputError(f"Malformed index record at {location}") from e


def read_index_file(path: str) -> List[IndexRecord]:
    records = []
    try:
        with open(path, encoding="utf-8") as fh:
            for lineno, line in enumerate(fh, start=1):
                if line.strip():
                    records.append(parse_index_line(line, f"{path}:{lineno}"))
    except OSError as e:
        raise FileError(f"Failed to read index file: {path}") from e
    return records


def iter_index(index_path: str) -> Iterator[Tuple[str, List[IndexRecord]]]:
    """Yield ``(crate_name, version_records)`` for every crate in the index.

    Directories are walked in sorted order so runs are reproducible;
    dot-directories such as ``.git`` are skipped.
    """
    if not os.path.isdir(index_path):
        raise FileError(f"Index directory not found: {index_path}")

    for root, dirs, files in os.walk(index_path):
        dirs[:] = sorted(d for d in dirs if not d.startswith("."))
        for file_name in sorted(files):
            if file_name.startswith(".") or file_name in _SKIP_FILES:
                continue
            records = read_index_file(os.path.join(root, file_name))
            if not records:
                logger.debug("Empty index file skipped: %s", file_name)
                continue
            yield records[0].name, records

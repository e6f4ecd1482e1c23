"""Cargo.lock parsing.

Cargo.lock is a TOML file with ``[[package]]`` sections. Each package has
``name`` and ``version`` fields and, unless it is a local path crate, a
``source`` naming where it comes from.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

try:
    import tomllib as toml  # type: ignore
except ImportError:
    import tomli as toml  # type: ignore

from constants import Constants
from errors import FileError, InputError
from versioning.models import PackageRequest

logger = logging.getLogger(__name__)


def load_lock_packages(lockfile_path: str) -> List[Dict[str, Any]]:
    """Return the raw ``[[package]]`` tables of a Cargo.lock file.

    Args:
        lockfile_path: Path to Cargo.lock

    Returns:
        List of package tables, empty when the file has no package section.

    Raises:
        FileError: If the file can't be read.
        InputError: If the file isn't valid TOML or has an unexpected shape.
    """
    try:
        with open(lockfile_path, "rb") as f:
            data = toml.load(f)
    except FileNotFoundError as e:
        raise FileError(f"Lockfile not found: {lockfile_path}") from e
    except OSError as e:
        raise FileError(f"Failed to read lockfile: {lockfile_path}") from e
    except toml.TOMLDecodeError as e:
        raise InputError(f"Failed to parse lockfile (invalid TOML): {lockfile_path}") from e

    package_list = data.get("package", [])
    if not isinstance(package_list, list) or not all(isinstance(p, dict) for p in package_list):
        raise InputError(f"Unexpected toml structure in {lockfile_path}")
    return package_list


def _required_str(pkg: Dict[str, Any], field: str, lockfile_path: str) -> str:
    value = pkg.get(field)
    if not isinstance(value, str):
        raise InputError(f"Missing package {field} in {lockfile_path}")
    return value


def parse_cargo_lock(lockfile_path: str) -> List[PackageRequest]:
    """Extract every crates.io-sourced (name, version) pair from Cargo.lock.

    Packages from git, path or other registries are skipped.
    """
    found: List[PackageRequest] = []
    skipped = 0
    for pkg in load_lock_packages(lockfile_path):
        if pkg.get("source") != Constants.CRATES_IO_SOURCE:
            skipped += 1
            continue
        found.append(
            PackageRequest(
                name=_required_str(pkg, "name", lockfile_path),
                version=_required_str(pkg, "version", lockfile_path),
                source="lockfile",
            )
        )
    logger.debug(
        "Parsed %s: %d crates.io packages, %d skipped", lockfile_path, len(found), skipped
    )
    return found

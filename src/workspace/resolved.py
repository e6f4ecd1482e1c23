"""Read back the packages cargo resolved for the scratch project."""

from __future__ import annotations

import os
from typing import List

from constants import Constants
from errors import InputError
from registry.crates_io.lockfile_parser import load_lock_packages
from versioning.models import ResolvedPackage


def extract_resolved(
    directory: str,
    project_name: str = Constants.TEMP_PROJECT_NAME,
) -> List[ResolvedPackage]:
    """Return every package pinned in ``directory``/Cargo.lock.

    The scratch project itself is left out. Order follows the lockfile.
    """
    lock_path = os.path.join(directory, Constants.LOCK_FILE)
    if not os.path.isfile(lock_path):
        raise InputError(f"cargo did not produce {lock_path}")

    resolved = []
    for pkg in load_lock_packages(lock_path):
        name, version = pkg.get("name"), pkg.get("version")
        if not isinstance(name, str) or not isinstance(version, str):
            raise InputError(f"Package record without name or version in {lock_path}")
        if name == project_name:
            continue
        resolved.append(ResolvedPackage(name=name, version=version))
    return resolved

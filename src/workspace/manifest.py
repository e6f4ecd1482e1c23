"""Synthesize the throwaway Cargo project that requests every crate.

Cargo allows only one version per dependency name, so each explicitly
versioned crate is requested under an alias (``serde__1_0_100``) that points
back at the real package. The alias table is also written into the manifest's
``[package.metadata]`` so results can be mapped back without guessing.
"""

from __future__ import annotations

import hashlib
import json
import logging
import os
import re
import shutil
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Iterator, List, Set, Tuple

try:
    import tomllib as toml  # type: ignore
except ImportError:
    import tomli as toml  # type: ignore

from constants import Constants
from errors import FileError, InputError
from versioning.models import RequestSet

logger = logging.getLogger(__name__)

ALIAS_SEPARATOR = "__"
_INVALID_ALIAS_CHARS = re.compile(r"[^-_0-9a-zA-Z]")
_METADATA_KEY = "prefetch"


@dataclass(frozen=True)
class AliasEntry:
    """An aliased dependency requesting one exact version of a crate."""
    alias: str
    name: str
    version: str


def sanitize_version(version: str) -> str:
    return _INVALID_ALIAS_CHARS.sub("_", version)


def version_requirement(version: str) -> str:
    """Turn a bare version into an exact cargo requirement.

    ``1.0.0`` becomes ``=1.0.0``; anything already carrying an operator
    (``=1.0``, ``^0.3``, ``>=2, <3``) is passed through.
    """
    if version[:1].isdigit():
        return f"={version}"
    return version


def _disambiguate(alias: str, version: str, taken: Set[str]) -> str:
    digest = hashlib.sha1(version.encode("utf-8")).hexdigest()
    candidate = alias
    while candidate in taken:
        candidate = f"{candidate}_{digest[:8]}"
        digest = hashlib.sha1(digest.encode("ascii")).hexdigest()
    return candidate


def build_aliases(request_set: RequestSet) -> Dict[str, AliasEntry]:
    """Assign a unique alias to every (name, version) pair.

    Versions are visited in sorted order so the assignment is deterministic.
    Two versions that sanitize to the same alias (``1.0.0+a`` and
    ``1.0.0.a``) are kept apart with a hash suffix.
    """
    taken: Set[str] = {name for name, versions in request_set.items() if not versions}
    aliases: Dict[str, AliasEntry] = {}
    for name, versions in request_set.items():
        for version in sorted(versions):
            alias = f"{name}{ALIAS_SEPARATOR}{sanitize_version(version)}"
            if alias in taken:
                unique = _disambiguate(alias, version, taken)
                logger.debug("Alias %s already used, %s@%s renamed to %s", alias, name, version, unique)
                alias = unique
            taken.add(alias)
            aliases[alias] = AliasEntry(alias=alias, name=name, version=version)
    return aliases


def _quote(value: str) -> str:
    # JSON string escapes are a subset of TOML basic string escapes
    return json.dumps(value)


def render_manifest(
    request_set: RequestSet,
    project_name: str = Constants.TEMP_PROJECT_NAME,
) -> Tuple[str, Dict[str, AliasEntry]]:
    """Render the Cargo.toml text for the request set.

    Returns:
        tuple: (manifest text, alias -> AliasEntry mapping)
    """
    aliases = build_aliases(request_set)

    lines: List[str] = [
        "[package]",
        f"name = {_quote(project_name)}",
        f"version = {_quote(Constants.TEMP_PROJECT_VERSION)}",
        "publish = false",
        "",
        f"[package.metadata.{_METADATA_KEY}.aliases]",
    ]
    for entry in aliases.values():
        lines.append(
            f"{_quote(entry.alias)} = {{ package = {_quote(entry.name)}, version = {_quote(entry.version)} }}"
        )

    lines += ["", "[dependencies]"]
    for name, versions in request_set.items():
        if not versions:
            lines.append(f"{_quote(name)} = \"*\"")
    for entry in aliases.values():
        lines.append(
            f"{_quote(entry.alias)} = {{ package = {_quote(entry.name)}, "
            f"version = {_quote(version_requirement(entry.version))} }}"
        )
    # NOTE: resolving everything in one project can hold a crate back to an
    # older version when another request pins a restrictive requirement.
    return "\n".join(lines) + "\n", aliases


def synthesize(
    directory: str,
    request_set: RequestSet,
    project_name: str = Constants.TEMP_PROJECT_NAME,
) -> Dict[str, AliasEntry]:
    """Write Cargo.toml and an empty src/lib.rs into ``directory``."""
    text, aliases = render_manifest(request_set, project_name)
    try:
        with open(os.path.join(directory, Constants.MANIFEST_FILE), "w", encoding="utf-8") as fh:
            fh.write(text)
        os.makedirs(os.path.join(directory, "src"))
        with open(os.path.join(directory, "src", "lib.rs"), "w", encoding="utf-8"):
            pass
    except OSError as e:
        raise FileError(f"Failed to write scratch project in {directory}") from e
    logger.debug(
        "Synthesized %s with %d dependency entries",
        Constants.MANIFEST_FILE,
        len(aliases) + sum(1 for _, versions in request_set.items() if not versions),
    )
    return aliases


def read_manifest(manifest_path: str) -> RequestSet:
    """Rebuild the RequestSet a synthesized manifest was written from."""
    try:
        with open(manifest_path, "rb") as fh:
            data = toml.load(fh)
    except OSError as e:
        raise FileError(f"Failed to read manifest: {manifest_path}") from e
    except toml.TOMLDecodeError as e:
        raise InputError(f"Failed to parse manifest (invalid TOML): {manifest_path}") from e

    aliases = (
        data.get("package", {}).get("metadata", {}).get(_METADATA_KEY, {}).get("aliases", {})
    )
    request_set = RequestSet()
    for dep_name, spec in data.get("dependencies", {}).items():
        if isinstance(spec, str):
            request_set.add(dep_name)
            continue
        entry = aliases.get(dep_name)
        if entry is None:
            raise InputError(f"Dependency {dep_name!r} has no alias metadata in {manifest_path}")
        request_set.add(entry["package"], entry["version"])
    return request_set


@contextmanager
def prefetch_workspace(
    request_set: RequestSet,
    project_name: str = Constants.TEMP_PROJECT_NAME,
) -> Iterator[str]:
    """Yield a private scratch directory holding the synthesized project.

    The directory is removed when the block exits, whether or not it raised.
    """
    try:
        directory = tempfile.mkdtemp(prefix="cargo-prefetch-")
    except OSError as e:
        raise FileError("Failed to create temp directory.") from e
    try:
        synthesize(directory, request_set, project_name)
        yield directory
    finally:
        shutil.rmtree(directory, ignore_errors=True)

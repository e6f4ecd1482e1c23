"""Data models for crate requests and resolution results."""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Set, Tuple


@dataclass(frozen=True)
class PackageRequest:
    """A single crate request; version None means any/newest."""
    name: str
    version: Optional[str] = None
    source: str = "cli"  # "top-deps" | "top-downloads" | "cli" | "lockfile"


@dataclass(frozen=True)
class ResolvedPackage:
    """A (name, version) pair pinned by cargo's resolver."""
    name: str
    version: str


@dataclass(frozen=True)
class RankEntry:
    """Dependency name and how many crates depend on it."""
    name: str
    frequency: int


class RequestSet:
    """Canonical mapping of crate names to the versions requested for them.

    An empty version set means the crate is unconstrained. Versions are only
    ever added to an entry; an unconstrained insert never resets an entry
    that already carries versions.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Set[str]] = {}

    def add(self, name: str, version: Optional[str] = None) -> None:
        versions = self._entries.setdefault(name, set())
        if version is not None:
            versions.add(version)

    def add_request(self, request: PackageRequest) -> None:
        self.add(request.name, request.version)

    def versions(self, name: str) -> Set[str]:
        return set(self._entries[name])

    def names(self) -> List[str]:
        return list(self._entries)

    def items(self) -> Iterator[Tuple[str, Set[str]]]:
        for name, versions in self._entries.items():
            yield name, set(versions)

    def as_dict(self) -> Dict[str, Set[str]]:
        return {name: set(versions) for name, versions in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RequestSet):
            return self._entries == other._entries
        if isinstance(other, Mapping):
            return self._entries == {k: set(v) for k, v in other.items()}
        return NotImplemented

    def __repr__(self) -> str:
        return f"RequestSet({self.as_dict()!r})"


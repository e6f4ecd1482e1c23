"""Scratch Cargo project handling.

- manifest.py: synthesizes the throwaway Cargo.toml requesting every crate
- driver.py: runs ``cargo fetch`` / ``cargo generate-lockfile`` against it
- resolved.py: reads the resolved packages back out of Cargo.lock
"""

from .manifest import AliasEntry, prefetch_workspace, read_manifest, synthesize  # noqa: F401
from .driver import ResolveMode, run_resolver  # noqa: F401
from .resolved import extract_resolved  # noqa: F401

__all__ = [
    "AliasEntry",
    "prefetch_workspace",
    "read_manifest",
    "synthesize",
    "ResolveMode",
    "run_resolver",
    "extract_resolved",
]

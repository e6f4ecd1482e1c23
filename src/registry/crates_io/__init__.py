"""crates.io registry package.

This package provides Cargo/crates.io support:
- client.py: paginated "most downloaded" queries against the crates.io API
- lockfile_parser.py: Cargo.lock parsing
- index.py: reading a local checkout of the crates.io index
"""

# Patch points exposed for tests (e.g., monkeypatch in tests)
from common.http_client import safe_get  # noqa: F401

# Public API re-exports
from .client import fetch_top_downloaded  # noqa: F401
from .lockfile_parser import load_lock_packages, parse_cargo_lock  # noqa: F401
from .index import IndexRecord, iter_index  # noqa: F401

__all__ = [
    "fetch_top_downloaded",
    "load_lock_packages",
    "parse_cargo_lock",
    "IndexRecord",
    "iter_index",
    # Patch points for tests
    "safe_get",
]

"""Token parsing utilities for explicit crate requests."""

from errors import InputError

from .models import PackageRequest


def parse_cli_token(token: str, source: str = "cli") -> PackageRequest:
    """Parse a ``name`` or ``name@version`` token into a PackageRequest.

    The split happens on the first ``@``; the version part is kept verbatim
    so requirement operators such as ``=1.0.100`` pass through to cargo.
    """
    raw = token.strip()
    name, sep, version = raw.partition("@")
    name = name.strip()
    if not name:
        raise InputError(f"empty crate name in argument {token!r}")
    if not sep:
        return PackageRequest(name=name, version=None, source=source)
    version = version.strip()
    if not version:
        raise InputError(f"missing version after '@' in argument {token!r}")
    return PackageRequest(name=name, version=version, source=source)

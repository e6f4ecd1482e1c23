"""Exception hierarchy for cargo-prefetch.

Every failure is fatal for the run: errors are raised where they are
detected, chained with ``raise ... from`` and reported once by the entry
point, which maps them to an exit code.
"""

from __future__ import annotations

from typing import Iterator, Optional

from constants import ExitCodes


class PrefetchError(Exception):
    """Base class for all fatal cargo-prefetch errors."""

    exit_code = ExitCodes.INPUT_ERROR

    def chain(self) -> Iterator[BaseException]:
        """Yield the causes of this error, nearest first."""
        seen = {id(self)}
        cause = self.__cause__ or self.__context__
        while cause is not None and id(cause) not in seen:
            seen.add(id(cause))
            yield cause
            cause = cause.__cause__ or cause.__context__


class InputError(PrefetchError):
    """Malformed argument, lockfile, manifest or index record."""

    exit_code = ExitCodes.INPUT_ERROR


class RemoteError(PrefetchError):
    """The crates.io API was unreachable or answered with a failure."""

    exit_code = ExitCodes.CONNECTION_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SubprocessError(PrefetchError):
    """cargo could not be launched or exited with a failure status."""

    exit_code = ExitCodes.SUBPROCESS_ERROR

    def __init__(self, message: str, returncode: Optional[int] = None):
        super().__init__(message)
        self.returncode = returncode


class FileError(PrefetchError):
    """Filesystem failure reading inputs or preparing the scratch project."""

    exit_code = ExitCodes.FILE_ERROR

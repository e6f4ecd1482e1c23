"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    INPUT_ERROR = 3
    SUBPROCESS_ERROR = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    CRATES_IO_API_URL = "https://crates.io/api/v1/crates"
    # crates.io rejects anonymous clients, every request must identify itself
    USER_AGENT = "cargo-prefetch (offline crate cache prefetcher)"
    CRATES_IO_PAGE_MAX = 100
    CRATES_IO_SOURCE = "registry+https://github.com/rust-lang/crates.io-index"

    TEMP_PROJECT_NAME = "temp_prefetch_project"
    TEMP_PROJECT_VERSION = "0.0.0"
    MANIFEST_FILE = "Cargo.toml"
    LOCK_FILE = "Cargo.lock"

    DEFAULT_TOP_COUNT = 100
    RANK_TOP_K = 1000

    CARGO_BIN = "cargo"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    ENV_LOG_LEVEL = "PREFETCH_LOG_LEVEL"
    ENV_CONFIG = "PREFETCH_CONFIG"
    ENV_USER_AGENT = "PREFETCH_USER_AGENT"
    ENV_CARGO = "CARGO"

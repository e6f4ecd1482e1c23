"""Shared pytest fixtures."""

import pytest

from constants import Constants

_TUNABLES = (
    "CRATES_IO_API_URL",
    "USER_AGENT",
    "CRATES_IO_PAGE_MAX",
    "CARGO_BIN",
    "REQUEST_TIMEOUT",
    "RANK_TOP_K",
)


@pytest.fixture(autouse=True)
def restore_constants(monkeypatch):
    """Keep Constants overrides and prefetch env vars local to each test."""
    for attr in _TUNABLES:
        monkeypatch.setattr(Constants, attr, getattr(Constants, attr))
    for var in (Constants.ENV_CARGO, Constants.ENV_USER_AGENT,
                Constants.ENV_CONFIG, Constants.ENV_LOG_LEVEL):
        monkeypatch.delenv(var, raising=False)

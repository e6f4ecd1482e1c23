"""Tests for request aggregation across sources."""

import logging
from unittest.mock import patch

import pytest

from aggregator import aggregate
from constants import Constants
from errors import InputError
from top_crates import TOP_CRATES

STATIC = ["serde", "rand", "log", "regex"]


def _lockfile(tmp_path):
    path = tmp_path / "Cargo.lock"
    path.write_text(
        f"""
[[package]]
name = "rand"
version = "0.8.5"
source = "{Constants.CRATES_IO_SOURCE}"

[[package]]
name = "home-grown"
version = "0.1.0"
source = "git+https://example.com/home-grown.git#deadbeef"

[[package]]
name = "anyhow"
version = "1.0.68"
source = "{Constants.CRATES_IO_SOURCE}"
""",
        encoding="utf-8",
    )
    return str(path)


class TestAggregate:
    """Test source merging rules."""

    @patch('aggregator.fetch_top_downloaded')
    def test_static_live_and_explicit_merge(self, mock_fetch):
        mock_fetch.return_value = ["serde"]

        result = aggregate(top_deps=2, top_downloads=1, tokens=["tokio@1.0"], table=STATIC)

        assert result == {"serde": set(), "rand": set(), "tokio": {"1.0"}}
        mock_fetch.assert_called_once_with(1, verbose=False)

    @patch('aggregator.fetch_top_downloaded')
    def test_defaults_to_top_100_static(self, mock_fetch):
        result = aggregate()

        assert result.names() == list(TOP_CRATES[:Constants.DEFAULT_TOP_COUNT])
        mock_fetch.assert_not_called()

    def test_explicit_tokens_disable_default(self):
        result = aggregate(tokens=["serde"], table=STATIC)
        assert result == {"serde": set()}

    def test_zero_top_deps_is_a_request(self):
        assert len(aggregate(top_deps=0, table=STATIC)) == 0

    def test_table_shorter_than_requested(self, caplog):
        with caplog.at_level(logging.WARNING, logger="aggregator"):
            assert aggregate(top_deps=50, table=STATIC).names() == STATIC

        assert any("only lists 4 crates" in r.getMessage() for r in caplog.records)

    def test_no_warning_when_table_is_long_enough(self, caplog):
        with caplog.at_level(logging.WARNING, logger="aggregator"):
            aggregate(top_deps=4, table=STATIC)

        assert not caplog.records

    def test_quiet_unless_verbose(self, caplog):
        with caplog.at_level(logging.INFO, logger="aggregator"):
            aggregate(tokens=["serde"], table=STATIC)
        assert not caplog.records

        with caplog.at_level(logging.INFO, logger="aggregator"):
            aggregate(tokens=["serde"], verbose=True, table=STATIC)
        assert [r.getMessage() for r in caplog.records] == ["Collected 1 crates to prefetch"]

    def test_lockfile_versions_are_added(self, tmp_path):
        result = aggregate(top_deps=2, lockfile=_lockfile(tmp_path), table=STATIC)

        assert result == {"serde": set(), "rand": {"0.8.5"}, "anyhow": {"1.0.68"}}

    def test_lockfile_only(self, tmp_path):
        result = aggregate(lockfile=_lockfile(tmp_path), table=STATIC)
        assert result == {"rand": {"0.8.5"}, "anyhow": {"1.0.68"}}

    def test_explicit_versions_accumulate(self):
        result = aggregate(tokens=["serde@1.0.0", "serde", "serde@=1.0.152"], table=STATIC)
        assert result == {"serde": {"1.0.0", "=1.0.152"}}

    @patch('aggregator.fetch_top_downloaded')
    def test_verbose_passed_to_client(self, mock_fetch):
        mock_fetch.return_value = []
        aggregate(top_downloads=5, verbose=True, table=STATIC)
        mock_fetch.assert_called_once_with(5, verbose=True)

    def test_bad_token_propagates(self):
        with pytest.raises(InputError):
            aggregate(tokens=["@1.0"], table=STATIC)


def test_static_table_is_immutable_and_unique():
    assert isinstance(TOP_CRATES, tuple)
    assert len(set(TOP_CRATES)) == len(TOP_CRATES)
    assert len(TOP_CRATES) >= Constants.DEFAULT_TOP_COUNT

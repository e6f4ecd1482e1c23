"""Tests for the index reader and the dependency-frequency ranker."""

import json

import pytest

from errors import FileError, InputError
from ranking.frequency import (
    build_ranking,
    count_dependency_frequency,
    rank_top,
    render_table,
    select_latest,
)
from registry.crates_io.index import IndexRecord, iter_index, parse_index_line
from versioning.models import RankEntry


def _line(name, vers, deps=(), **extra):
    entry = {
        "name": name,
        "vers": vers,
        "deps": [{"name": d, "req": "*", "kind": "normal"} for d in deps],
        "cksum": "0" * 64,
        "features": {},
        "yanked": False,
    }
    entry.update(extra)
    return json.dumps(entry)


def _index_file(root, rel_path, lines):
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


class TestSelectLatest:
    """Test max-version selection."""

    def test_picks_highest_semver_not_last(self):
        records = [
            IndexRecord("a", "1.10.0", ("new",)),
            IndexRecord("a", "1.9.0", ("old",)),
        ]
        assert select_latest(records).version == "1.10.0"

    def test_release_beats_prerelease(self):
        records = [
            IndexRecord("a", "2.0.0-rc.1"),
            IndexRecord("a", "2.0.0"),
            IndexRecord("a", "1.0.0"),
        ]
        assert select_latest(records).version == "2.0.0"

    def test_unparseable_versions_ignored(self):
        records = [IndexRecord("a", "not-a-version"), IndexRecord("a", "0.1.0")]
        assert select_latest(records).version == "0.1.0"

    def test_no_valid_versions(self):
        assert select_latest([IndexRecord("a", "bogus")]) is None
        assert select_latest([]) is None


class TestCountDependencyFrequency:
    """Test frequency tallying."""

    def test_only_latest_version_counts(self):
        index = [
            ("A", [IndexRecord("A", "1.0.0", ("x",)), IndexRecord("A", "2.0.0", ("x", "y"))]),
        ]
        assert dict(count_dependency_frequency(index)) == {"x": 1, "y": 1}

    def test_duplicate_dependency_names_count_once(self):
        index = [("A", [IndexRecord("A", "1.0.0", ("winapi", "winapi", "libc"))])]
        assert dict(count_dependency_frequency(index)) == {"winapi": 1, "libc": 1}

    def test_accumulates_across_crates(self):
        index = [
            ("A", [IndexRecord("A", "1.0.0", ("serde",))]),
            ("B", [IndexRecord("B", "0.2.0", ("serde", "log"))]),
            ("C", [IndexRecord("C", "bogus", ("ignored",))]),
        ]
        assert dict(count_dependency_frequency(index)) == {"serde": 2, "log": 1}


class TestRankTop:
    """Test ordering and truncation."""

    def test_descending_frequency_then_ascending_name(self):
        counts = {"b": 3, "a": 3, "c": 5, "d": 1}
        assert rank_top(counts, 10) == [
            RankEntry("c", 5),
            RankEntry("a", 3),
            RankEntry("b", 3),
            RankEntry("d", 1),
        ]

    def test_truncates_to_k(self):
        counts = {f"n{i}": i for i in range(20)}
        result = rank_top(counts, 3)
        assert [e.name for e in result] == ["n19", "n18", "n17"]

    def test_render_table(self):
        text = render_table([RankEntry("serde", 42), RankEntry("log", 7)])
        assert "TOP_CRATES: Tuple[str, ...] = (" in text
        assert '    "serde",  # 42\n    "log",  # 7\n)' in text


class TestIndexReader:
    """Test reading an index checkout from disk."""

    def test_iter_index_reads_crates(self, tmp_path):
        _index_file(tmp_path, "config.json", ['{"dl": "https://example.invalid"}'])
        _index_file(tmp_path, ".git/HEAD", ["ref: refs/heads/master"])
        _index_file(tmp_path, "3/l/log", [_line("log", "0.4.17", ["cfg-if"])])
        _index_file(tmp_path, "se/rd/serde", [
            _line("serde", "1.0.0"),
            _line("serde", "1.0.1", ["serde_derive"]),
        ])

        crates = dict(iter_index(str(tmp_path)))

        assert set(crates) == {"log", "serde"}
        assert [r.version for r in crates["serde"]] == ["1.0.0", "1.0.1"]
        assert crates["log"][0].dependencies == ("cfg-if",)

    def test_renamed_dependency_uses_package(self):
        line = json.dumps({
            "name": "a",
            "vers": "1.0.0",
            "deps": [{"name": "serde1", "package": "serde", "req": "^1"}],
        })
        assert parse_index_line(line, "a:1").dependencies == ("serde",)

    def test_malformed_line(self, tmp_path):
        _index_file(tmp_path, "1/a", ["{not json"])
        with pytest.raises(InputError, match="1/a:1"):
            list(iter_index(str(tmp_path)))

    def test_missing_index(self, tmp_path):
        with pytest.raises(FileError):
            list(iter_index(str(tmp_path / "missing")))

    def test_yanked_latest_version_still_counts(self, tmp_path):
        _index_file(tmp_path, "1/a", [
            _line("a", "1.0.0", ["old"]),
            _line("a", "2.0.0", ["new"], yanked=True),
        ])

        assert build_ranking(str(tmp_path), 5) == [RankEntry("new", 1)]

    def test_build_ranking_end_to_end(self, tmp_path):
        _index_file(tmp_path, "1/a", [_line("a", "1.0.0", ["x"]), _line("a", "2.0.0", ["x", "y"])])
        _index_file(tmp_path, "1/b", [_line("b", "0.1.0", ["y"])])

        assert build_ranking(str(tmp_path), 5) == [RankEntry("y", 2), RankEntry("x", 1)]

"""Tests for Cargo.lock parsing."""

import pytest

from constants import Constants
from errors import FileError, InputError
from registry.crates_io.lockfile_parser import load_lock_packages, parse_cargo_lock

MIXED_LOCK = f"""# This file is automatically @generated by Cargo.
version = 3

[[package]]
name = "my-app"
version = "0.1.0"
dependencies = [
 "serde",
 "rand",
 "forked",
]

[[package]]
name = "serde"
version = "1.0.152"
source = "{Constants.CRATES_IO_SOURCE}"
checksum = "bb7d1f0d3021d347a83e556fc4683dea2ea09d87bccdf88ff5c12545d89d5efb"

[[package]]
name = "forked"
version = "0.3.0"
source = "git+https://example.com/forked.git#0123456789abcdef"

[[package]]
name = "rand"
version = "0.8.5"
source = "{Constants.CRATES_IO_SOURCE}"
"""


def _write(tmp_path, content):
    lockfile_path = tmp_path / "Cargo.lock"
    lockfile_path.write_text(content, encoding="utf-8")
    return str(lockfile_path)


class TestParseCargoLock:
    """Test crates.io filtering and field validation."""

    def test_only_registry_packages_are_kept(self, tmp_path):
        result = parse_cargo_lock(_write(tmp_path, MIXED_LOCK))

        assert [(r.name, r.version) for r in result] == [("serde", "1.0.152"), ("rand", "0.8.5")]
        assert all(r.source == "lockfile" for r in result)

    def test_other_registry_is_skipped(self, tmp_path):
        content = """
[[package]]
name = "internal"
version = "1.0.0"
source = "registry+https://my-intranet:8080/git/index"
"""
        assert parse_cargo_lock(_write(tmp_path, content)) == []

    def test_missing_version_is_input_error(self, tmp_path):
        content = f"""
[[package]]
name = "serde"
source = "{Constants.CRATES_IO_SOURCE}"
"""
        with pytest.raises(InputError, match="Missing package version"):
            parse_cargo_lock(_write(tmp_path, content))

    def test_missing_name_is_input_error(self, tmp_path):
        content = f"""
[[package]]
version = "1.0.0"
source = "{Constants.CRATES_IO_SOURCE}"
"""
        with pytest.raises(InputError, match="Missing package name"):
            parse_cargo_lock(_write(tmp_path, content))

    def test_missing_fields_on_skipped_records_are_ignored(self, tmp_path):
        content = """
[[package]]
name = "local-only"
"""
        assert parse_cargo_lock(_write(tmp_path, content)) == []


class TestLoadLockPackages:
    """Test raw Cargo.lock loading."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileError):
            load_lock_packages(str(tmp_path / "nonexistent.lock"))

    def test_invalid_toml(self, tmp_path):
        with pytest.raises(InputError):
            load_lock_packages(_write(tmp_path, "invalid toml {"))

    def test_no_package_section(self, tmp_path):
        assert load_lock_packages(_write(tmp_path, "version = 3\n")) == []

    def test_package_not_an_array(self, tmp_path):
        with pytest.raises(InputError, match="Unexpected toml structure"):
            load_lock_packages(_write(tmp_path, 'package = "serde"\n'))

    def test_preserves_record_order(self, tmp_path):
        names = [pkg["name"] for pkg in load_lock_packages(_write(tmp_path, MIXED_LOCK))]
        assert names == ["my-app", "serde", "forked", "rand"]

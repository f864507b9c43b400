"""Tests for the installed-tree scanner."""

from __future__ import annotations

import pytest

from depcheck.scanner import read_entry, scan_installed

from conftest import write_json


class TestScanInstalled:
    @pytest.mark.asyncio
    async def test_sorted_entries(self, tmp_path):
        for name, version in [("zeta", "1.0.0"), ("alpha", "2.0.0"), ("mid", "0.1.0")]:
            write_json(tmp_path / name / "package.json", {"name": name, "version": version})
        entries = await scan_installed(tmp_path, "package.json")
        assert [(e.name, e.installed_version) for e in entries] == [
            ("alpha", "2.0.0"),
            ("mid", "0.1.0"),
            ("zeta", "1.0.0"),
        ]
        assert entries[0].source_path == tmp_path / "alpha"

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path):
        assert await scan_installed(tmp_path / "node_modules", "package.json") == []

    @pytest.mark.asyncio
    async def test_skips_entries_without_metadata(self, tmp_path):
        (tmp_path / ".bin").mkdir()
        (tmp_path / ".package-lock.json").write_text("{}")
        write_json(tmp_path / "a" / "package.json", {"name": "a", "version": "1.0.0"})
        entries = await scan_installed(tmp_path, "package.json")
        assert [e.name for e in entries] == ["a"]

    @pytest.mark.asyncio
    async def test_skips_unreadable_metadata(self, tmp_path):
        (tmp_path / "broken").mkdir()
        (tmp_path / "broken" / "package.json").write_text("{not json")
        write_json(tmp_path / "list" / "package.json", [1, 2])
        assert await scan_installed(tmp_path, "package.json") == []

    @pytest.mark.asyncio
    async def test_metadata_file_name_is_respected(self, tmp_path):
        write_json(tmp_path / "a" / ".bower.json", {"name": "a", "version": "1.0.0"})
        write_json(tmp_path / "b" / "package.json", {"name": "b", "version": "1.0.0"})
        entries = await scan_installed(tmp_path, ".bower.json")
        assert [e.name for e in entries] == ["a"]

    @pytest.mark.asyncio
    async def test_scoped_packages(self, tmp_path):
        write_json(tmp_path / "@org" / "util" / "package.json", {"version": "1.0.0"})
        write_json(tmp_path / "@org" / "core" / "package.json", {"version": "2.0.0"})
        write_json(tmp_path / "plain" / "package.json", {"version": "3.0.0"})
        entries = await scan_installed(tmp_path, "package.json", scoped_packages=True)
        assert [e.name for e in entries] == ["@org/core", "@org/util", "plain"]

    @pytest.mark.asyncio
    async def test_scope_dirs_not_expanded_without_flag(self, tmp_path):
        write_json(tmp_path / "@org" / "util" / "package.json", {"version": "1.0.0"})
        assert await scan_installed(tmp_path, "package.json") == []


class TestReadEntry:
    def test_missing_version(self, tmp_path):
        write_json(tmp_path / "a" / "package.json", {"name": "a"})
        entry = read_entry("a", tmp_path / "a", "package.json")
        assert entry is not None
        assert entry.installed_version is None

    def test_non_string_version(self, tmp_path):
        write_json(tmp_path / "a" / "package.json", {"name": "a", "version": 3})
        assert read_entry("a", tmp_path / "a", "package.json").installed_version is None

    def test_no_metadata(self, tmp_path):
        (tmp_path / "a").mkdir()
        assert read_entry("a", tmp_path / "a", "package.json") is None

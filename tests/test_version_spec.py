"""Tests for version spec classification."""

from __future__ import annotations

import pytest

from depcheck.version_spec import (
    GitUrl,
    Latest,
    Location,
    SemverRange,
    is_git_url,
    parse_version_spec,
)


class TestParseVersionSpec:
    def test_semver_range(self):
        assert parse_version_spec(">=1.0.0") == SemverRange(">=1.0.0")

    def test_range_with_spaces_is_not_git(self):
        assert parse_version_spec("1.0.0 - 2.0.0") == SemverRange("1.0.0 - 2.0.0")

    def test_latest(self):
        assert parse_version_spec("latest") == Latest()

    def test_latest_is_case_sensitive(self):
        assert parse_version_spec("LATEST") == SemverRange("LATEST")

    def test_invalid_range_does_not_raise(self):
        assert parse_version_spec("^^^") == SemverRange("^^^")

    @pytest.mark.parametrize(
        "raw,url,ref",
        [
            ("git+https://github.com/org/a.git#v0.5.9", "git+https://github.com/org/a.git", "v0.5.9"),
            ("git://github.com/org/a.git", "git://github.com/org/a.git", None),
            ("git+ssh://git@github.com/org/a.git#main", "git+ssh://git@github.com/org/a.git", "main"),
            ("git@github.com:org/a.git#1.0.0", "git@github.com:org/a.git", "1.0.0"),
            ("https://github.com/org/a.git#abc123", "https://github.com/org/a.git", "abc123"),
            ("github:org/a#dev", "github:org/a", "dev"),
            ("org/a#5f1e2d3", "org/a", "5f1e2d3"),
            ("org/a", "org/a", None),
        ],
    )
    def test_git_urls(self, raw, url, ref):
        assert parse_version_spec(raw) == GitUrl(url=url, ref=ref)

    def test_empty_ref_is_none(self):
        assert parse_version_spec("org/a#") == GitUrl(url="org/a", ref=None)

    def test_is_git_url(self):
        assert is_git_url("git+https://x/y.git")
        assert not is_git_url("^1.2.3")

    @pytest.mark.parametrize(
        "raw",
        [
            "https://registry.example.com/a/-/a-1.0.0.tgz",
            "http://example.com/a.tar.gz",
            "file:../a",
            "file:vendor/a-1.0.0.tgz",
            "./vendor/a",
            "../a",
            "/opt/pkgs/a",
            "~/pkgs/a",
        ],
    )
    def test_locations(self, raw):
        assert parse_version_spec(raw) == Location(raw)
        assert not is_git_url(raw)

    def test_https_repo_with_ref_is_git(self):
        assert parse_version_spec("https://host/org/a#v1.0.0") == GitUrl("https://host/org/a", "v1.0.0")

    @pytest.mark.parametrize("raw", ["-a/b", "./a", "^1.0.0"])
    def test_shorthand_needs_word_start(self, raw):
        assert not isinstance(parse_version_spec(raw), GitUrl)


class TestSemverRef:
    def test_plain_tag(self):
        assert GitUrl("org/a", "1.2.3").semver_ref == "1.2.3"

    def test_v_prefixed_tag_is_normalized(self):
        assert GitUrl("org/a", "v0.5.9").semver_ref == "0.5.9"

    def test_commit_hash_is_opaque(self):
        assert GitUrl("org/a", "5f1e2d3c4b").semver_ref is None

    def test_branch_is_opaque(self):
        assert GitUrl("org/a", "master").semver_ref is None

    def test_no_ref(self):
        assert GitUrl("org/a").semver_ref is None

    def test_semver_prefix(self):
        assert GitUrl("org/a", "semver:^1.2").semver_ref == "^1.2"

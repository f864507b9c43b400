"""npm-style range matching on top of the ``semver`` package.

``semver.Version.match`` understands a single comparison (``">=1.0.0"``)
only.  Manifests use the npm range grammar (``^1.2``, ``~1.2.3``,
``1.x || >=2.5.0``, ``1.2.3 - 2.3``), so a range is desugared here into
comparator sets which are then tested with ``semver.Version`` ordering.

Desugaring follows npm: exclusive upper bounds get a ``-0`` prerelease so
that prereleases of the next version do not sneak in, and a prerelease
version only satisfies a set that names a prerelease on the same
``major.minor.patch``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

import semver

_WILDCARDS = frozenset({"x", "X", "*"})

_PARTIAL_RE = re.compile(
    r"^v?(?P<major>\d+|[xX*])"
    r"(?:\.(?P<minor>\d+|[xX*]))?"
    r"(?:\.(?P<patch>\d+|[xX*]))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]+))?"
    r"(?:\+(?P<build>[0-9A-Za-z.-]+))?$"
)

_OPERATOR_RE = re.compile(r"^(?P<op><=|>=|<|>|=|~>|~|\^)?(?P<rest>.*)$")

# "1.2.3 - 2.3.4"
_HYPHEN_RE = re.compile(r"^(?P<low>\S+)\s+-\s+(?P<high>\S+)$")

# ">= 1.2.3" -> ">=1.2.3"
_OPERATOR_SPACE_RE = re.compile(r"(<=|>=|<|>|=|~>|~|\^)\s+")


@dataclass(frozen=True)
class Comparator:
    """A primitive comparison: ``op`` is one of ``<``, ``<=``, ``>``, ``>=``, ``=``."""

    op: str
    version: semver.Version

    def test(self, version: semver.Version) -> bool:
        cmp = version.compare(self.version)
        if self.op == "<":
            return cmp < 0
        if self.op == "<=":
            return cmp <= 0
        if self.op == ">":
            return cmp > 0
        if self.op == ">=":
            return cmp >= 0
        return cmp == 0


@dataclass(frozen=True)
class _Partial:
    major: int | None
    minor: int | None
    patch: int | None
    prerelease: str | None


def parse_version(text: str) -> semver.Version | None:
    """Parse a concrete version, tolerating a leading ``=`` or ``v``.

    Build metadata is dropped.  Returns ``None`` for anything that is not
    a full ``major.minor.patch`` version.
    """
    cleaned = text.strip().lstrip("=").strip().lstrip("vV")
    try:
        version = semver.Version.parse(cleaned)
    except (ValueError, TypeError):
        return None
    return version.replace(build=None)


def valid(text: str) -> str | None:
    """Return the normalized version string, or ``None`` if *text* is not a version."""
    version = parse_version(text)
    return str(version) if version is not None else None


def parse_range(text: str) -> list[list[Comparator]] | None:
    """Desugar an npm range into OR-ed comparator sets.

    An empty set matches every release version.  Returns ``None`` when the
    range cannot be parsed.
    """
    sets: list[list[Comparator]] = []
    for part in text.split("||"):
        part = part.strip()
        hyphen = _HYPHEN_RE.match(part)
        if hyphen:
            comparators = _hyphen_range(hyphen.group("low"), hyphen.group("high"))
        else:
            comparators = []
            for token in _OPERATOR_SPACE_RE.sub(r"\1", part).split():
                desugared = _desugar_token(token)
                if desugared is None:
                    return None
                comparators.extend(desugared)
        if comparators is None:
            return None
        sets.append(comparators)
    return sets


def satisfies(version: str, range_text: str) -> bool:
    """True if *version* satisfies the npm range *range_text*.

    Invalid versions and invalid ranges never satisfy anything.
    """
    parsed = parse_version(version)
    if parsed is None:
        return False
    sets = parse_range(range_text)
    if sets is None:
        return False
    return any(_test_set(comparators, parsed) for comparators in sets)


def valid_range(text: str) -> bool:
    return parse_range(text) is not None


# ── internals ────────────────────────────────────────────────────────────


def _test_set(comparators: list[Comparator], version: semver.Version) -> bool:
    if not all(c.test(version) for c in comparators):
        return False
    if not version.prerelease:
        return True
    core = (version.major, version.minor, version.patch)
    return any(
        c.version.prerelease
        and (c.version.major, c.version.minor, c.version.patch) == core
        for c in comparators
    )


def _parse_partial(text: str) -> _Partial | None:
    m = _PARTIAL_RE.match(text)
    if m is None:
        return None
    parts: list[int | None] = []
    for key in ("major", "minor", "patch"):
        raw = m.group(key)
        parts.append(None if raw is None or raw in _WILDCARDS else int(raw))
    # everything after the first wildcard is a wildcard too
    if parts[0] is None:
        parts[1] = parts[2] = None
    elif parts[1] is None:
        parts[2] = None
    prerelease = m.group("prerelease") if parts[2] is not None else None
    return _Partial(parts[0], parts[1], parts[2], prerelease)


def _version(major: int, minor: int = 0, patch: int = 0, prerelease: str | None = None):
    return semver.Version(major, minor, patch, prerelease)


def _below(major: int, minor: int = 0, patch: int = 0) -> Comparator:
    return Comparator("<", _version(major, minor, patch, "0"))


_NOTHING = [_below(0)]


def _desugar_token(token: str) -> list[Comparator] | None:
    m = _OPERATOR_RE.match(token)
    op = m.group("op") or "="
    p = _parse_partial(m.group("rest"))
    if p is None:
        return None

    if p.major is None:
        # "*", ">=*", "<=x" match everything; "<*" and ">*" match nothing
        return _NOTHING if op in ("<", ">") else []

    M, m_, pa = p.major, p.minor, p.patch
    if op == "=":
        if m_ is None:
            return [Comparator(">=", _version(M)), _below(M + 1)]
        if pa is None:
            return [Comparator(">=", _version(M, m_)), _below(M, m_ + 1)]
        return [Comparator("=", _version(M, m_, pa, p.prerelease))]

    if op in ("~", "~>"):
        if m_ is None:
            return [Comparator(">=", _version(M)), _below(M + 1)]
        return [
            Comparator(">=", _version(M, m_, pa or 0, p.prerelease)),
            _below(M, m_ + 1),
        ]

    if op == "^":
        if m_ is None:
            return [Comparator(">=", _version(M)), _below(M + 1)]
        if pa is None:
            upper = _below(M + 1) if M > 0 else _below(0, m_ + 1)
            return [Comparator(">=", _version(M, m_)), upper]
        if M > 0:
            upper = _below(M + 1)
        elif m_ > 0:
            upper = _below(0, m_ + 1)
        else:
            upper = _below(0, 0, pa + 1)
        return [Comparator(">=", _version(M, m_, pa, p.prerelease)), upper]

    if op == ">":
        if m_ is None:
            return [Comparator(">=", _version(M + 1))]
        if pa is None:
            return [Comparator(">=", _version(M, m_ + 1))]
        return [Comparator(">", _version(M, m_, pa, p.prerelease))]

    if op == ">=":
        if pa is None:
            return [Comparator(">=", _version(M, m_ or 0))]
        return [Comparator(">=", _version(M, m_, pa, p.prerelease))]

    if op == "<":
        if m_ is None:
            return [_below(M)]
        if pa is None:
            return [_below(M, m_)]
        return [Comparator("<", _version(M, m_, pa, p.prerelease))]

    # "<="
    if m_ is None:
        return [_below(M + 1)]
    if pa is None:
        return [_below(M, m_ + 1)]
    return [Comparator("<=", _version(M, m_, pa, p.prerelease))]


def _hyphen_range(low_text: str, high_text: str) -> list[Comparator] | None:
    low = _parse_partial(low_text)
    high = _parse_partial(high_text)
    if low is None or high is None:
        return None

    comparators: list[Comparator] = []
    if low.major is not None:
        if low.patch is None:
            comparators.append(Comparator(">=", _version(low.major, low.minor or 0)))
        else:
            comparators.append(
                Comparator(">=", _version(low.major, low.minor, low.patch, low.prerelease))
            )

    if high.major is None:
        return comparators
    if high.minor is None:
        comparators.append(_below(high.major + 1))
    elif high.patch is None:
        comparators.append(_below(high.major, high.minor + 1))
    else:
        comparators.append(
            Comparator("<=", _version(high.major, high.minor, high.patch, high.prerelease))
        )
    return comparators

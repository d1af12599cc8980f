"""Semantic versioning utilities."""

from __future__ import annotations

import re
from typing import NamedTuple, Tuple, Union

_SEMVER_RE = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[A-Za-z-][0-9A-Za-z-]*))*))?"
    r"(?:\+([0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?$",
    re.ASCII,
)

Identifier = Tuple[Union[int, str], ...]


class Version(NamedTuple):
    major: int
    minor: int
    patch: int
    prerelease: Tuple[str, ...] = ()
    build: Tuple[str, ...] = ()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


ZERO = Version(0, 0, 0)


def parse(version: str) -> Version:
    """Parse a SemVer 2.0.0 string, raising ValueError if it is not one."""
    match = _SEMVER_RE.match(version)
    if not match:
        raise ValueError(f"Invalid semver: {version}")
    major, minor, patch, prerelease, build = match.groups()
    return Version(
        int(major),
        int(minor),
        int(patch),
        tuple(prerelease.split(".")) if prerelease else (),
        tuple(build.split(".")) if build else (),
    )


def _identifier_key(identifier: str) -> Identifier:
    # Numeric identifiers always rank below alphanumeric ones.
    if identifier.isdigit():
        # Equal values with more leading zeros (build metadata only) rank higher.
        return (0, int(identifier), len(identifier))
    return (1, identifier)


def precedence_key(version: Version) -> tuple:
    """
    Return a sortable key implementing SemVer precedence.

    A release ranks above every pre-release of the same MAJOR.MINOR.PATCH.
    Build metadata does not take part in SemVer precedence; it is appended
    last so that otherwise equal versions still have a total order.
    """
    if version.prerelease:
        pre = (0, tuple(_identifier_key(p) for p in version.prerelease))
    else:
        pre = (1, ())
    build = tuple(_identifier_key(b) for b in version.build)
    return (version.major, version.minor, version.patch, pre, build)


def sort_key(text: str) -> tuple:
    """
    Sort key for a directory name.

    Names that are not valid semantic versions sort as 0.0.0 instead of
    being rejected.
    """
    try:
        version = parse(text)
    except ValueError:
        version = ZERO
    return precedence_key(version)

"""
Version resolution for a single package directory.

A package directory holds one subdirectory per published version. A request
may pin a version fully ("1.2.3"), partially ("1" or "1.2") or not at all, and
resolution picks exactly one of those subdirectories:

* no spec        -> every version directory is a candidate
* "M"            -> directories whose name starts with "M."
* "M.N"          -> directories whose name starts with "M.N."
* "M.N.P"        -> the directory named exactly "M.N.P"
* anything else  -> no candidates

Candidates are ordered by semantic version, with names that do not parse
ranking as 0.0.0, and the highest one wins.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional, Tuple

from pax_registry.domain import semver

logger = logging.getLogger(__name__)

METADATA_FILENAME = "metadata.yaml"
MAX_SPEC_COMPONENTS = 3


def parse_version_spec(spec: Optional[str]) -> Optional[Tuple[str, ...]]:
    """
    Split a version spec into its numeric components.

    Returns an empty tuple for "latest" (absent or empty spec) and None when
    the spec has an invalid shape.
    """
    if not spec:
        return ()
    parts = tuple(spec.split("."))
    if len(parts) > MAX_SPEC_COMPONENTS:
        return None
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    return parts


def list_version_dirs(package_dir: Path) -> List[Path]:
    """List immediate subdirectories of a package directory, in listing order."""
    try:
        with os.scandir(package_dir) as entries:
            return [Path(entry.path) for entry in entries if entry.is_dir()]
    except OSError as e:
        logger.debug(f"Could not list {package_dir}: {e}")
        return []


def _matches(name: str, parts: Tuple[str, ...]) -> bool:
    if not parts:
        return True
    if len(parts) == MAX_SPEC_COMPONENTS:
        return name == ".".join(parts)
    return name.startswith(".".join(parts) + ".")


def select_version(names: List[str], spec: Optional[str]) -> Optional[str]:
    """
    Pick the winning version name out of `names` for `spec`.

    Ties in version order go to the name listed last.
    """
    parts = parse_version_spec(spec)
    if parts is None:
        logger.debug(f"Ignoring malformed version spec {spec!r}")
        return None

    candidates = [name for name in names if _matches(name, parts)]
    if not candidates:
        return None

    candidates.sort(key=semver.sort_key)
    return candidates[-1]


def resolve_version(package_dir: Path, spec: Optional[str] = None) -> Optional[Path]:
    """
    Resolve `spec` to a version directory below `package_dir`.

    Returns None when nothing matches or when the winning directory has no
    metadata descriptor.
    """
    dirs = list_version_dirs(package_dir)
    chosen = select_version([d.name for d in dirs], spec)
    if chosen is None:
        return None

    version_dir = package_dir / chosen
    if not (version_dir / METADATA_FILENAME).is_file():
        logger.debug(f"Version directory {version_dir} has no {METADATA_FILENAME}")
        return None
    return version_dir


def resolve_metadata_file(package_dir: Path, spec: Optional[str] = None) -> Optional[Path]:
    """Return the descriptor path of the resolved version, if any."""
    version_dir = resolve_version(package_dir, spec)
    if version_dir is None:
        return None
    return version_dir / METADATA_FILENAME

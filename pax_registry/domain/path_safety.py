"""
Path traversal prevention for request-derived path fragments.

Every untrusted segment (package name, version, archive filename) MUST go
through `validate_path` before it touches the filesystem, and each segment is
validated on its own against its trusted base. Never join untrusted segments
into one string and validate that.
"""

from __future__ import annotations

import logging
from pathlib import Path, PureWindowsPath

from pax_registry.domain.errors import ForbiddenPathError

logger = logging.getLogger(__name__)

CURRENT_DIR = "."
PARENT_DIR = ".."


def _is_plain_name(component: str) -> bool:
    """
    Return True if a single component decomposes into exactly one plain name.

    The component is re-parsed as a Windows path, which recognises both
    separators as well as drive and UNC prefixes, so sequences like
    `..\\etc` or `C:evil` are caught even on POSIX hosts.
    """
    if "\x00" in component:
        return False
    parsed = PureWindowsPath(component)
    if parsed.drive or parsed.root:
        return False
    return parsed.parts == (component,) and component not in (CURRENT_DIR, PARENT_DIR)


def validate_path(untrusted: str, base: Path) -> Path:
    """
    Append an untrusted relative path to `base`, refusing anything that could
    leave it.

    Leading slashes are stripped and the rest is split on `/`. Empty and `.`
    components are skipped; `..` or any component that is not a single plain
    name rejects the whole input with ForbiddenPathError.

    The returned path is not required to exist.
    """
    result = Path(base)
    for component in untrusted.lstrip("/").split("/"):
        if component in ("", CURRENT_DIR):
            continue
        if component == PARENT_DIR or not _is_plain_name(component):
            logger.debug(f"Rejected path {untrusted!r} below {base}")
            raise ForbiddenPathError()
        result = result / component
    return result


def is_direct_child(path: Path, base: Path) -> bool:
    """Return True if `path` sits exactly one level below `base`."""
    return path.parent == Path(base) and path != Path(base)

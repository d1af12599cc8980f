"""
Filesystem-backed package registry.

Layout below the registry root:

    <root>/<package>/<version>/metadata.yaml
    <root>/<package>/<version>/<package>-<version>.pax

Nothing is cached; every call lists and stats the directories again so that
versions published while the server runs are picked up by the next request.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pax_registry.domain.errors import (
    ArchiveNotFoundError,
    ArchiveUnreadableError,
    PackageNotFoundError,
    VersionNotFoundError,
)
from pax_registry.domain.path_safety import is_direct_child, validate_path
from pax_registry.domain.versions import resolve_metadata_file
from pax_registry.storage.metadata import transcode_metadata

logger = logging.getLogger(__name__)

ARCHIVE_EXTENSION = "pax"


def archive_filename(name: str, version: str) -> str:
    return f"{name}-{version}.{ARCHIVE_EXTENSION}"


class PackageRegistry:
    def __init__(self, root: Path):
        self.root = Path(root)

    def package_dir(self, name: str) -> Path:
        """
        Map an untrusted package name to its directory.

        Raises ForbiddenPathError if the name tries to leave the root and
        PackageNotFoundError unless it names an existing directory directly
        below the root.
        """
        location = validate_path(name, self.root)
        if not is_direct_child(location, self.root) or not location.is_dir():
            logger.debug(f"Package {name!r} not found below {self.root}")
            raise PackageNotFoundError()
        return location

    def metadata_path(self, name: str, spec: Optional[str] = None) -> Path:
        location = self.package_dir(name)
        metadata_file = resolve_metadata_file(location, spec)
        if metadata_file is None:
            logger.debug(f"No version of {name!r} matches {spec!r}")
            raise VersionNotFoundError()
        return metadata_file

    async def metadata_for(self, name: str, spec: Optional[str] = None) -> str:
        """Return the JSON metadata of the version of `name` matching `spec`."""
        return await transcode_metadata(self.metadata_path(name, spec))

    def archive_for(self, name: str, version: str) -> Path:
        """
        Return the archive path for an exact package version.

        The package name, the version segment and the derived archive
        filename are each validated against their own parent directory.
        """
        location = self.package_dir(name)

        version_dir = validate_path(version, location)
        if not is_direct_child(version_dir, location) or not version_dir.is_dir():
            logger.debug(f"Version {version!r} of {name!r} not found")
            raise ArchiveNotFoundError()

        archive = validate_path(archive_filename(name, version), version_dir)
        if not archive.is_file():
            logger.debug(f"Archive {archive} does not exist")
            raise ArchiveNotFoundError()

        try:
            with archive.open("rb"):
                pass
        except OSError as e:
            logger.error(f"Failed to open package archive {archive}: {e}", exc_info=True)
            raise ArchiveUnreadableError() from e
        return archive

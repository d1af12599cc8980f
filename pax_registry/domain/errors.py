"""
Error types raised by the registry lookups.

Each error carries the HTTP status the API layer should answer with and a
public `detail` message that is safe to send back to clients. The three
families map onto the three outcomes a request can have besides success:

* ForbiddenPathError    - request-derived path escapes or malforms (403)
* NotFoundError         - package, version or file does not exist (404)
* InternalRegistryError - an existing file cannot be read or decoded (500)
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for all registry lookup failures."""

    http_status: int = 500
    detail: str = "Something went wrong."

    def __init__(self, detail: str | None = None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class ForbiddenPathError(RegistryError):
    http_status = 403
    detail = "You do not have access to this location."


class NotFoundError(RegistryError):
    http_status = 404
    detail = "Requested resource could not be found."


class PackageNotFoundError(NotFoundError):
    detail = "Requested package could not be found."


class VersionNotFoundError(NotFoundError):
    detail = "Requested package's version's metadata could not be found."


class ArchiveNotFoundError(NotFoundError):
    detail = "Requested file could not be found."


class InternalRegistryError(RegistryError):
    http_status = 500


class MetadataUnreadableError(InternalRegistryError):
    detail = "Error reading package metadata!"


class ArchiveUnreadableError(InternalRegistryError):
    detail = "Error reading package!"

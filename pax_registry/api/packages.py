from __future__ import annotations

from typing import NoReturn, Optional
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from fastapi.responses import FileResponse, PlainTextResponse

from pax_registry import __version__
from pax_registry.core.dependencies import get_registry
from pax_registry.domain.errors import (
    ForbiddenPathError,
    InternalRegistryError,
    RegistryError,
)
from pax_registry.storage.registry import PackageRegistry

logger = logging.getLogger(__name__)
router = APIRouter()


def _raise_http(error: RegistryError) -> NoReturn:
    if isinstance(error, InternalRegistryError):
        logger.debug(f"Internal registry error: {error.detail}")
    elif isinstance(error, ForbiddenPathError):
        logger.warning(f"Refused request outside the registry root: {error.detail}")
    raise HTTPException(status_code=error.http_status, detail=error.detail) from error


# ---------------------------------------------------------------------------
# 1. GET /packages/metadata/{name}
# ---------------------------------------------------------------------------

@router.get("/packages/metadata/{name:path}")
async def get_metadata(
    name: str,
    v: Optional[str] = Query(default=None, description="Version or version prefix to pin."),
    registry: PackageRegistry = Depends(get_registry),
) -> Response:
    """
    Metadata of the highest version of a package matching `v`.

    `v` may be omitted (latest), "MAJOR", "MAJOR.MINOR" or an exact
    "MAJOR.MINOR.PATCH".
    """
    try:
        body = await registry.metadata_for(name, v)
    except RegistryError as e:
        _raise_http(e)

    return Response(content=body, media_type="application/json")


# ---------------------------------------------------------------------------
# 2. GET /package/{name}/{ver}
# ---------------------------------------------------------------------------

@router.get("/package/{name:path}/{ver}")
async def download_package(
    name: str,
    ver: str,
    registry: PackageRegistry = Depends(get_registry),
) -> FileResponse:
    """
    Serve the raw `<name>-<ver>.pax` archive of an exact version.
    """
    try:
        archive = registry.archive_for(name, ver)
    except RegistryError as e:
        _raise_http(e)

    return FileResponse(
        path=str(archive),
        filename=archive.name,
        media_type="application/octet-stream",
    )


# ---------------------------------------------------------------------------
# 3. GET /version
# ---------------------------------------------------------------------------

@router.get("/version", response_class=PlainTextResponse)
async def get_version() -> str:
    """
    Build version of the running server.
    """
    return __version__

"""
Pydantic models for the package registry.

PackageMetadata mirrors the `metadata.yaml` descriptor stored in every
version directory. The descriptor is produced by the package build process,
so the schema is fixed: every field is required, strings and string lists
are not interchangeable and field names are kept as-is on the JSON side.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PackageMetadata(BaseModel):
    """
    Metadata for one published version of a package.
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    name: str = Field(description="Package name, matching its registry directory.")
    description: str = Field(description="Human-readable summary of the package.")
    version: str = Field(description="Semantic version of this build.")
    origin: str = Field(description="Where the package sources come from.")
    build_dependencies: List[str] = Field(
        description="Packages required to build this package.",
    )
    runtime_dependencies: List[str] = Field(
        description="Packages required at runtime.",
    )
    build: str = Field(description="Build script reference.")
    install: str = Field(description="Install script reference.")
    uninstall: str = Field(description="Uninstall script reference.")
    purge: str = Field(description="Purge script reference.")
    hash: str = Field(description="Content hash of the package archive.")

"""
Read `metadata.yaml` descriptors and re-encode them as JSON.
"""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import yaml
from pydantic import ValidationError

from pax_registry.domain.errors import MetadataUnreadableError
from pax_registry.domain.models import PackageMetadata

logger = logging.getLogger(__name__)


async def load_metadata(path: Path) -> PackageMetadata:
    """
    Load and validate a descriptor file.

    I/O errors, YAML syntax errors and schema mismatches are all reported as
    MetadataUnreadableError; callers cannot tell them apart.
    """
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as f:
            content = await f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read package metadata {path}: {e}", exc_info=True)
        raise MetadataUnreadableError() from e

    try:
        # Plain scalars keep their source text, so `yes` or `1.10` stay strings.
        raw = yaml.load(content, Loader=yaml.BaseLoader)
        return PackageMetadata.model_validate(raw)
    except (yaml.YAMLError, ValidationError) as e:
        logger.error(f"Failed to decode package metadata {path}: {e}", exc_info=True)
        raise MetadataUnreadableError() from e


async def transcode_metadata(path: Path) -> str:
    """Return the descriptor at `path` as a JSON document."""
    metadata = await load_metadata(path)
    return metadata.model_dump_json()

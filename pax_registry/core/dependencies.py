from fastapi import Request

from pax_registry.core.config import Settings
from pax_registry.storage.registry import PackageRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_registry(request: Request) -> PackageRegistry:
    return PackageRegistry(get_settings(request).directory)

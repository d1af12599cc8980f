"""
Shared pytest fixtures for pax-registry tests.

Builds throwaway registry trees under `tmp_path` and a TestClient wired to
them.
"""

import sys
from pathlib import Path
from typing import Dict, Iterable, Optional

import pytest
import yaml

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def make_metadata(name: str, version: str, **overrides) -> Dict:
    """Return a complete descriptor dict for `name`/`version`."""
    data = {
        "name": name,
        "description": f"The {name} package",
        "version": version,
        "origin": f"https://example.org/{name}.git",
        "build_dependencies": ["cmake", "make"],
        "runtime_dependencies": ["libc"],
        "build": "build.sh",
        "install": "install.sh",
        "uninstall": "uninstall.sh",
        "purge": "purge.sh",
        "hash": "0f3a9c",
    }
    data.update(overrides)
    return data


class RegistryBuilder:
    """
    Helper that lays out packages the way the server expects them:

        <root>/<package>/<version>/metadata.yaml
        <root>/<package>/<version>/<package>-<version>.pax
    """

    def __init__(self, root: Path):
        self.root = root

    def add_version(
        self,
        package: str,
        version: str,
        metadata: Optional[Dict] = None,
        archive: Optional[bytes] = b"PAX-ARCHIVE",
        with_metadata: bool = True,
    ) -> Path:
        version_dir = self.root / package / version
        version_dir.mkdir(parents=True, exist_ok=True)
        if with_metadata:
            data = metadata if metadata is not None else make_metadata(package, version)
            (version_dir / "metadata.yaml").write_text(
                yaml.safe_dump(data, sort_keys=False), encoding="utf-8"
            )
        if archive is not None:
            (version_dir / f"{package}-{version}.pax").write_bytes(archive)
        return version_dir

    def add_versions(self, package: str, versions: Iterable[str]) -> Path:
        for version in versions:
            self.add_version(package, version)
        return self.root / package


@pytest.fixture
def registry_root(tmp_path) -> Path:
    root = tmp_path / "registry"
    root.mkdir()
    return root


@pytest.fixture
def builder(registry_root) -> RegistryBuilder:
    return RegistryBuilder(registry_root)


@pytest.fixture
def client(registry_root):
    """TestClient for an app serving `registry_root`."""
    from fastapi.testclient import TestClient

    from pax_registry.core.config import Settings
    from pax_registry.main import create_app

    app = create_app(Settings(directory=registry_root))
    with TestClient(app) as test_client:
        yield test_client

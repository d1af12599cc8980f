"""Tests for version resolution."""

import pytest

from pax_registry.domain.versions import (
    METADATA_FILENAME,
    parse_version_spec,
    resolve_metadata_file,
    resolve_version,
    select_version,
)


class TestParseVersionSpec:
    """Test parse_version_spec."""

    def test_absent_and_empty_mean_latest(self):
        assert parse_version_spec(None) == ()
        assert parse_version_spec("") == ()

    def test_valid_shapes(self):
        assert parse_version_spec("1") == ("1",)
        assert parse_version_spec("1.2") == ("1", "2")
        assert parse_version_spec("1.2.3") == ("1", "2", "3")

    @pytest.mark.parametrize("spec", ["1.2.3.4", "abc", "1.x", "1..2", "1.", ".1", "1.2.3-rc", "١"])
    def test_invalid_shapes(self, spec):
        """Too many or non-numeric components are invalid."""
        assert parse_version_spec(spec) is None


class TestSelectVersion:
    """Test select_version on plain name lists."""

    NAMES = ["1.0.0", "1.2.0", "1.2.5", "2.0.0"]

    def test_major_prefix(self):
        assert select_version(self.NAMES, "1") == "1.2.5"

    def test_major_minor_prefix(self):
        assert select_version(self.NAMES, "1.2") == "1.2.5"

    def test_exact(self):
        assert select_version(self.NAMES, "2.0.0") == "2.0.0"
        assert select_version(self.NAMES, "1.0.0") == "1.0.0"

    def test_latest(self):
        assert select_version(self.NAMES, None) == "2.0.0"

    def test_no_match(self):
        assert select_version(self.NAMES, "3") is None
        assert select_version(self.NAMES, "1.3") is None
        assert select_version(self.NAMES, "1.2.4") is None

    def test_invalid_spec(self):
        assert select_version(self.NAMES, "1.2.3.4") is None
        assert select_version(self.NAMES, "abc") is None

    def test_semver_not_lexical_order(self):
        """1.10.0 beats 1.9.0 even though it sorts lower as a string."""
        assert select_version(["1.9.0", "1.10.0"], "1") == "1.10.0"

    def test_prefix_is_string_based(self):
        """A major prefix only matches names starting with "M." exactly."""
        names = ["2.0.0", "20.0.0"]
        assert select_version(names, "2") == "2.0.0"
        assert select_version(names, "20") == "20.0.0"

    def test_prefix_matches_unparsable_names(self):
        """Unparsable names that share the prefix are candidates, ranked lowest."""
        assert select_version(["1.nightly"], "1") == "1.nightly"
        assert select_version(["1.nightly", "1.0.0"], "1") == "1.0.0"

    def test_unparsable_never_beats_real_version(self):
        assert select_version(["latest", "1.0.0"], None) == "1.0.0"
        assert select_version(["1.0.0", "latest"], None) == "1.0.0"

    def test_ties_go_to_last_listed(self):
        """Equal ranks keep listing order and the last one wins."""
        assert select_version(["latest", "nightly"], None) == "nightly"
        assert select_version(["nightly", "latest"], None) == "latest"

    def test_empty_listing(self):
        assert select_version([], None) is None
        assert select_version([], "1") is None


class TestResolveVersion:
    """Test resolve_version against real directories."""

    def test_prefix_and_exact_resolution(self, builder):
        package_dir = builder.add_versions("hello", ["1.0.0", "1.2.0", "1.2.5", "2.0.0"])

        assert resolve_version(package_dir, "1") == package_dir / "1.2.5"
        assert resolve_version(package_dir, "1.2") == package_dir / "1.2.5"
        assert resolve_version(package_dir, "2.0.0") == package_dir / "2.0.0"
        assert resolve_version(package_dir, None) == package_dir / "2.0.0"

    def test_invalid_specs_not_found(self, builder):
        package_dir = builder.add_versions("hello", ["1.2.3"])

        assert resolve_version(package_dir, "1.2.3.4") is None
        assert resolve_version(package_dir, "abc") is None

    def test_latest_directory_loses_to_release(self, builder):
        package_dir = builder.add_versions("hello", ["latest", "1.0.0"])

        assert resolve_version(package_dir) == package_dir / "1.0.0"

    def test_empty_package_dir(self, registry_root):
        package_dir = registry_root / "empty"
        package_dir.mkdir()

        for spec in (None, "", "1", "1.0", "1.0.0"):
            assert resolve_version(package_dir, spec) is None

    def test_files_are_ignored(self, builder):
        package_dir = builder.add_versions("hello", ["1.0.0"])
        (package_dir / "9.9.9").write_text("not a directory")

        assert resolve_version(package_dir) == package_dir / "1.0.0"

    def test_winner_without_descriptor_is_not_found(self, builder):
        """Resolution does not fall back to an older version."""
        package_dir = builder.add_versions("hello", ["1.0.0"])
        builder.add_version("hello", "1.1.0", with_metadata=False)

        assert resolve_version(package_dir, "1") is None
        assert resolve_version(package_dir, "1.0") == package_dir / "1.0.0"

    def test_missing_package_dir(self, registry_root):
        assert resolve_version(registry_root / "nope") is None

    def test_sees_new_versions_immediately(self, builder):
        """No listing is cached between calls."""
        package_dir = builder.add_versions("hello", ["1.0.0"])
        assert resolve_version(package_dir) == package_dir / "1.0.0"

        builder.add_version("hello", "1.1.0")
        assert resolve_version(package_dir) == package_dir / "1.1.0"

    def test_resolve_metadata_file(self, builder):
        package_dir = builder.add_versions("hello", ["1.0.0"])

        assert resolve_metadata_file(package_dir) == package_dir / "1.0.0" / METADATA_FILENAME
        assert resolve_metadata_file(package_dir, "2") is None

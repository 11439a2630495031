"""Tests for path utilities."""

from pathlib import Path

import pytest

from efs_config_dir.utils.paths import (
    DEFAULT_LEGACY_DIR,
    DEFAULT_PREFERRED_DIR,
    DEFAULT_TARGET_PATH,
    LEGACY_DIR_ENV_VAR,
    PREFERRED_DIR_ENV_VAR,
    TARGET_PATH_ENV_VAR,
    ConfigDirPaths,
    resolve_dirs,
    resolve_path,
)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every path override from the environment."""
    for var in (LEGACY_DIR_ENV_VAR, PREFERRED_DIR_ENV_VAR, TARGET_PATH_ENV_VAR):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    """Test default location constants."""

    def test_target_path_is_etc_amazon_efs(self):
        """The symlink lives where efs-utils reads its config."""
        assert DEFAULT_TARGET_PATH == Path("/etc/amazon/efs")

    def test_defaults_are_distinct(self):
        """Legacy, preferred and target locations should all differ."""
        defaults = {DEFAULT_LEGACY_DIR, DEFAULT_PREFERRED_DIR, DEFAULT_TARGET_PATH}
        assert len(defaults) == 3


class TestResolvePath:
    """Test resolve_path function."""

    def test_explicit_value(self, tmp_path, clean_env):
        """Explicit value should be used."""
        result = resolve_path(str(tmp_path), LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR)
        assert result == tmp_path

    def test_explicit_path_with_tilde(self, clean_env):
        """Explicit path with ~ should be expanded."""
        result = resolve_path("~/efs", LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR)
        assert result == Path.home() / "efs"

    def test_env_var_override(self, tmp_path, monkeypatch):
        """Environment variable should override default when no explicit value."""
        monkeypatch.setenv(LEGACY_DIR_ENV_VAR, str(tmp_path))
        assert resolve_path(None, LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR) == tmp_path

    def test_empty_env_var_is_ignored(self, monkeypatch):
        """An empty environment variable falls back to the default."""
        monkeypatch.setenv(LEGACY_DIR_ENV_VAR, "")
        result = resolve_path(None, LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR)
        assert result == DEFAULT_LEGACY_DIR

    def test_explicit_overrides_env_var(self, tmp_path, monkeypatch):
        """Explicit value should override environment variable."""
        monkeypatch.setenv(LEGACY_DIR_ENV_VAR, str(tmp_path / "env"))
        explicit = tmp_path / "explicit"
        result = resolve_path(explicit, LEGACY_DIR_ENV_VAR, DEFAULT_LEGACY_DIR)
        assert result == explicit

    def test_symlinks_are_not_resolved(self, tmp_path, clean_env):
        """A symlinked path should be returned as given."""
        real = tmp_path / "real"
        real.mkdir()
        alias = tmp_path / "alias"
        alias.symlink_to(real)
        assert resolve_path(alias, TARGET_PATH_ENV_VAR, DEFAULT_TARGET_PATH) == alias


class TestResolveDirs:
    """Test resolve_dirs function."""

    def test_defaults(self, clean_env):
        """With nothing set, all three defaults are returned."""
        assert resolve_dirs() == ConfigDirPaths(
            DEFAULT_LEGACY_DIR, DEFAULT_PREFERRED_DIR, DEFAULT_TARGET_PATH
        )

    def test_each_location_has_its_own_env_var(self, tmp_path, monkeypatch):
        """Each environment variable overrides only its own location."""
        monkeypatch.setenv(LEGACY_DIR_ENV_VAR, str(tmp_path / "legacy"))
        monkeypatch.setenv(PREFERRED_DIR_ENV_VAR, str(tmp_path / "preferred"))
        monkeypatch.setenv(TARGET_PATH_ENV_VAR, str(tmp_path / "efs"))

        paths = resolve_dirs()

        assert paths.legacy_dir == tmp_path / "legacy"
        assert paths.preferred_dir == tmp_path / "preferred"
        assert paths.target_path == tmp_path / "efs"

    def test_mixed_explicit_and_default(self, tmp_path, clean_env):
        """Unset locations keep their defaults."""
        paths = resolve_dirs(target_path=tmp_path / "efs")
        assert paths.legacy_dir == DEFAULT_LEGACY_DIR
        assert paths.preferred_dir == DEFAULT_PREFERRED_DIR
        assert paths.target_path == tmp_path / "efs"

    def test_result_unpacks_in_linker_order(self, tmp_path, clean_env):
        """The tuple order matches ensure_config_symlink's arguments."""
        legacy, preferred, target = resolve_dirs(
            tmp_path / "a", tmp_path / "b", tmp_path / "c"
        )
        assert (legacy, preferred, target) == (
            tmp_path / "a",
            tmp_path / "b",
            tmp_path / "c",
        )

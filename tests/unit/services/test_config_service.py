"""
Unit tests for npmbuild.services.config_service module.

Each test runs in an empty working directory (see conftest), so only the
config files and env vars a test creates are seen.
"""

from pathlib import Path

import pytest

from npmbuild.helpers.files_helper import DEFAULT_EXCLUDES
from npmbuild.services.config_service import ConfigService


class TestDefaults:
    """Tests for built-in defaults."""

    @pytest.mark.unit
    def test_default_config(self) -> None:
        cfg = ConfigService().get_config()
        assert cfg == {
            "npm_executable": "npm",
            "release": False,
            "node_env": None,
            "install": True,
            "exclude": list(DEFAULT_EXCLUDES),
        }

    @pytest.mark.unit
    def test_default_build_settings(self) -> None:
        settings = ConfigService().make_build_settings()
        assert settings.npm_executable == "npm"
        assert settings.release is False
        assert settings.node_env is None
        assert settings.install is True
        assert settings.exclude == DEFAULT_EXCLUDES


class TestYamlSources:
    """Tests for npmbuild.yaml and $NPMBUILD_CONFIG."""

    @pytest.mark.unit
    def test_local_yaml_overrides_defaults(self, isolated_environment: Path) -> None:
        (isolated_environment / "npmbuild.yaml").write_text(
            "npm_executable: pnpm\nrelease: true\nexclude: [node_modules, coverage]\n", encoding="utf-8"
        )
        settings = ConfigService().make_build_settings()
        assert settings.npm_executable == "pnpm"
        assert settings.release is True
        assert settings.exclude == ("node_modules", "coverage")

    @pytest.mark.unit
    def test_env_config_path_overrides_local_yaml(
        self, isolated_environment: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (isolated_environment / "npmbuild.yaml").write_text("node_env: staging\n", encoding="utf-8")
        explicit = tmp_path / "ci.yaml"
        explicit.write_text("node_env: test\n", encoding="utf-8")
        monkeypatch.setenv("NPMBUILD_CONFIG", str(explicit))

        assert ConfigService().get("node_env") == "test"

    @pytest.mark.unit
    def test_invalid_yaml_is_ignored(self, isolated_environment: Path) -> None:
        (isolated_environment / "npmbuild.yaml").write_text("release: [unterminated\n", encoding="utf-8")
        assert ConfigService().get("release") is False

    @pytest.mark.unit
    def test_non_mapping_yaml_is_ignored(self, isolated_environment: Path) -> None:
        (isolated_environment / "npmbuild.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        assert ConfigService().get("npm_executable") == "npm"

    @pytest.mark.unit
    def test_missing_env_config_path_is_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPMBUILD_CONFIG", str(tmp_path / "nope.yaml"))
        assert ConfigService().get("install") is True


class TestOverridesAndEnv:
    """Tests for direct overrides and NPMBUILD_* variables."""

    @pytest.mark.unit
    def test_direct_overrides(self) -> None:
        assert ConfigService({"install": False}).get("install") is False

    @pytest.mark.unit
    def test_env_beats_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPMBUILD_INSTALL", "true")
        assert ConfigService({"install": False}).get("install") is True

    @pytest.mark.unit
    def test_env_values_are_typed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NPMBUILD_RELEASE", "TRUE")
        monkeypatch.setenv("NPMBUILD_NPM", "/opt/node/bin/npm")
        monkeypatch.setenv("NPMBUILD_NODE_ENV", "staging")
        monkeypatch.setenv("NPMBUILD_EXCLUDE", "node_modules, .cache ,")

        settings = ConfigService().make_build_settings()

        assert settings.release is True
        assert settings.npm_executable == "/opt/node/bin/npm"
        assert settings.node_env == "staging"
        assert settings.exclude == ("node_modules", ".cache")

    @pytest.mark.unit
    def test_string_booleans_from_yaml(self, isolated_environment: Path) -> None:
        (isolated_environment / "npmbuild.yaml").write_text('install: "no"\nrelease: "yes"\n', encoding="utf-8")
        settings = ConfigService().make_build_settings()
        assert settings.install is False
        assert settings.release is True


class TestCaching:
    """Tests for get(), caching and reload()."""

    @pytest.mark.unit
    def test_dotted_get_with_default(self) -> None:
        service = ConfigService()
        assert service.get("npm_executable") == "npm"
        assert service.get("missing.key", 2) == 2
        assert service.get("npm_executable.nested", "x") == "x"

    @pytest.mark.unit
    def test_config_is_cached_until_reload(self, monkeypatch: pytest.MonkeyPatch) -> None:
        service = ConfigService()
        assert service.get("release") is False

        monkeypatch.setenv("NPMBUILD_RELEASE", "true")
        assert service.get("release") is False

        service.reload()
        assert service.get("release") is True

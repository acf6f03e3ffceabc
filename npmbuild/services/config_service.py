#!/usr/bin/env python3
# ======================================================================
#  Config Service - Build defaults loading and caching
#  - Loads config from YAML files and NPMBUILD_* env vars
#  - Caches composed config; reload() re-reads all sources
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from typing import Any

import yaml

from npmbuild.helpers.dto.config_dto import BuildSettings
from npmbuild.helpers.files_helper import DEFAULT_EXCLUDES

# Name of the repo-local config file looked up in the working directory
LOCAL_CONFIG_FILENAME = "npmbuild.yaml"

# Environment variable pointing at an explicit config file
CONFIG_PATH_ENV = "NPMBUILD_CONFIG"

# Environment variable -> config key
ENV_KEYS = {
    "NPMBUILD_NPM": "npm_executable",
    "NPMBUILD_RELEASE": "release",
    "NPMBUILD_NODE_ENV": "node_env",
    "NPMBUILD_INSTALL": "install",
    "NPMBUILD_EXCLUDE": "exclude",
}


class ConfigService:
    """
    Service for loading and caching build configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """Initialize ConfigService with empty cache and optional direct overrides."""
        self._config: dict[str, Any] | None = None
        self._overrides = overrides or {}
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
        return self._config

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("npm_executable")
            'npm'
            >>> service.get("missing.key", 2)
            2
        """
        node: Any = self.get_config()
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> dict[str, Any]:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def make_build_settings(self) -> BuildSettings:
        """
        Build a BuildSettings from the current configuration.

        This is the boundary where raw config values are coerced into the
        types a Build expects.
        """
        cfg = self.get_config()
        node_env = cfg.get("node_env")

        return BuildSettings(
            npm_executable=str(cfg.get("npm_executable") or "npm"),
            release=_as_bool(cfg.get("release", False)),
            node_env=str(node_env) if node_env else None,
            install=_as_bool(cfg.get("install", True)),
            exclude=_as_names(cfg.get("exclude", DEFAULT_EXCLUDES)),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) ./npmbuild.yaml in the working directory (if present)
          3) $NPMBUILD_CONFIG (if set)
          4) overrides dict passed in
          5) Environment variables (NPMBUILD_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        self._deep_merge(cfg, self._load_yaml(os.path.join(os.getcwd(), LOCAL_CONFIG_FILENAME)))

        env_path = os.getenv(CONFIG_PATH_ENV)
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        if overrides:
            self._deep_merge(cfg, overrides)

        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """
        Base defaults; all fields present so no KeyErrors downstream.
        """
        return {
            "npm_executable": "npm",
            "release": False,  # npm ci instead of npm install; NODE_ENV defaults to production
            "node_env": None,  # None = $NODE_ENV, else derived from release
            "install": True,  # Run npm install/ci once before the first script
            "exclude": list(DEFAULT_EXCLUDES),
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring config file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply NPMBUILD_* environment overrides.

        Supported formats:
          NPMBUILD_NPM=/usr/local/bin/npm
          NPMBUILD_RELEASE=true
          NPMBUILD_NODE_ENV=staging
          NPMBUILD_INSTALL=false
          NPMBUILD_EXCLUDE=node_modules,.git,coverage
        """
        for env_key, key in ENV_KEYS.items():
            v = os.environ.get(env_key)
            if v is None:
                continue

            val: Any
            if key == "exclude":
                val = [part.strip() for part in v.split(",") if part.strip()]
            elif v.lower() in ("true", "false"):
                val = v.lower() == "true"
            else:
                val = v

            cfg[key] = val


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _as_names(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    return tuple(str(part) for part in value)

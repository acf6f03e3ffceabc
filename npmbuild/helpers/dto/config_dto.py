"""
Configuration DTOs.

Rules:
- Import only stdlib and typing (no npmbuild.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildSettings:
    """Defaults a Build starts from, extracted from the composed config dict."""

    npm_executable: str
    release: bool
    node_env: str | None
    install: bool
    exclude: tuple[str, ...]

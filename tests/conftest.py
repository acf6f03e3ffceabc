"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Every test runs in its own working directory with NPMBUILD_* and NODE_ENV
  cleared, so a developer's npmbuild.yaml or shell never leaks in
- Process tests use a fake npm shell script instead of a real Node install
"""

import os
import stat
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import npmbuild package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


# Fake npm: logs "<args>|NODE_ENV" to $FAKE_NPM_LOG and implements a few scripts.
FAKE_NPM_SCRIPT = """#!/bin/sh
if [ -n "$FAKE_NPM_LOG" ]; then
  printf '%s|%s\\n' "$*" "$NODE_ENV" >> "$FAKE_NPM_LOG"
fi
if [ "$1" = "run" ]; then
  case "$2" in
    build)
      [ -f package.json ] || exit 3
      [ -f src/index.js ] || exit 4
      mkdir -p dist && cat src/index.js > dist/out.js
      ;;
    fail)
      exit 1
      ;;
    crash)
      exit 7
      ;;
    args)
      shift 2
      printf '%s\\n' "$@" > args.txt
      ;;
    *)
      ;;
  esac
fi
exit 0
"""


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[Path, None, None]:
    """Run each test in an empty working directory with a clean build environment."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    for key in list(os.environ):
        if key.startswith("NPMBUILD_") or key in ("NODE_ENV", "FAKE_NPM_LOG"):
            monkeypatch.delenv(key, raising=False)
    yield workdir


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """A small npm project: package.json, src/index.js, plus dirs copy_all() must skip."""
    project = tmp_path / "project"
    (project / "src").mkdir(parents=True)
    (project / "package.json").write_text('{"name": "demo", "scripts": {"build": "webpack"}}\n', encoding="utf-8")
    (project / "src" / "index.js").write_text("console.log('hello');\n", encoding="utf-8")
    (project / "src" / "util.js").write_text("export const x = 1;\n", encoding="utf-8")
    (project / "node_modules" / "left-pad").mkdir(parents=True)
    (project / "node_modules" / "left-pad" / "index.js").write_text("module.exports = 1;\n", encoding="utf-8")
    (project / ".git").mkdir()
    (project / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    return project


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    """Target path inside a separate output area (not created yet)."""
    return tmp_path / "out" / "npm"


@pytest.fixture
def fake_npm(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write the fake npm executable and point FAKE_NPM_LOG at a call log."""
    if sys.platform == "win32":
        pytest.skip("fake npm is a POSIX shell script")
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    npm = bin_dir / "npm"
    npm.write_text(FAKE_NPM_SCRIPT, encoding="utf-8")
    npm.chmod(npm.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("FAKE_NPM_LOG", str(tmp_path / "npm-calls.log"))
    return npm


@pytest.fixture
def npm_calls(tmp_path: Path):
    """Return a callable reading the fake npm call log as [(args, node_env), ...]."""

    def _read() -> list[tuple[str, str]]:
        log = tmp_path / "npm-calls.log"
        if not log.exists():
            return []
        calls = []
        for line in log.read_text(encoding="utf-8").splitlines():
            args, _, node_env = line.rpartition("|")
            calls.append((args, node_env))
        return calls

    return _read


# === PYTEST MARKERS ===


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: fast tests with no external processes")
    config.addinivalue_line("markers", "integration: tests that spawn the fake npm executable")

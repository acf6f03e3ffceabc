"""
Config command: show the effective configuration.
"""

from __future__ import annotations

import argparse

import yaml

from npmbuild.interfaces.cli.ui import InfoPanel
from npmbuild.services.config_service import ConfigService


def cmd_config(args: argparse.Namespace) -> int:
    """Print the composed configuration as YAML."""
    cfg = ConfigService().get_config()
    InfoPanel.show("Effective configuration", yaml.safe_dump(cfg, sort_keys=True).rstrip())
    return 0

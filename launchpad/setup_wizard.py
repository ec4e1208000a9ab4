#===============================================================================
#  World_Hash_Launcher | setup_wizard.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  First-run collection of config.json values from the operator.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from .config_store import ConfigStore
from .models import Configuration

_LOGGER = logging.getLogger(__name__)

OPTIONAL_MARKER = "optional"
RULE = "#" * 70


def default_saves_dir() -> str:
    """Default Minecraft saves folder for this platform."""
    if os.name == "nt":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return str(Path(base) / ".minecraft" / "saves")
    if sys.platform == "darwin":
        return str(Path.home() / "Library" / "Application Support" / "minecraft" / "saves")
    return str(Path.home() / ".minecraft" / "saves")


def collect_configuration(prompt) -> Configuration:
    print(f"\n{RULE}")
    print("Please provide the following configuration options:")
    print("Press ENTER to accept the default in brackets.\n")
    config = Configuration(
        IPFS_API=prompt.prompt("IPFS API URL:", "http://localhost:5001/"),
        IPFS_GATEWAY=prompt.prompt("IPFS Gateway URL:", "http://localhost:8080/"),
        ETHEREUM_RPC_URL=prompt.prompt("Ethereum RPC URL:", "https://cloudflare-eth.com/"),
        MINECRAFT_SAVES_DIR=prompt.prompt("Minecraft Saves Directory:", default_saves_dir()),
    )
    shortcut = prompt.prompt("Minecraft Shortcut:", OPTIONAL_MARKER)
    config.MINECRAFT_SHORTCUT = None if shortcut == OPTIONAL_MARKER else shortcut
    print(f"{RULE}\n")
    return config


def ensure_configuration(store: ConfigStore, path: Path, prompt) -> Configuration:
    """Load config.json, asking the operator for it first when it does not exist."""
    _LOGGER.info("Loading configuration...")
    if not store.exists(path):
        _LOGGER.info("Configuration not found.")
        config = collect_configuration(prompt)
        _LOGGER.info("Saving configuration...")
        store.write(path, config)
    else:
        config = store.read(path)
    _LOGGER.info("Configuration loaded.")
    return config

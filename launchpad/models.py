#===============================================================================
#  World_Hash_Launcher | models.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Shared data models used across the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class VersionManifest:
    """Version descriptor of an installation (local package.json or remote copy)."""
    version: str


@dataclass
class Configuration:
    """User configuration persisted as config.json inside the installation."""
    IPFS_API: str
    IPFS_GATEWAY: str
    ETHEREUM_RPC_URL: str
    MINECRAFT_SAVES_DIR: str
    MINECRAFT_SHORTCUT: Optional[str] = None   # omitted on disk when None


REQUIRED_CONFIG_FIELDS: Tuple[str, ...] = (
    "IPFS_API",
    "IPFS_GATEWAY",
    "ETHEREUM_RPC_URL",
    "MINECRAFT_SAVES_DIR",
)
OPTIONAL_CONFIG_FIELDS: Tuple[str, ...] = ("MINECRAFT_SHORTCUT",)


class UpdateOutcome(enum.Enum):
    """Result of one update check cycle."""
    INSTALLED = "installed"          # no installation existed
    REINSTALLED = "reinstalled"      # versions differed, operator accepted
    DECLINED = "declined"            # versions differed, operator declined
    UP_TO_DATE = "up_to_date"
    CHECK_FAILED = "check_failed"    # remote manifest unavailable


@dataclass
class RunResult:
    """What a supervised child process left behind once it exited."""
    args: List[str]
    returncode: Optional[int]                       # None when the spawn itself failed
    stdout_lines: List[str] = field(default_factory=list)
    captured: str = ""                              # joined stdout when capture was requested

    @property
    def spawned(self) -> bool:
        return self.returncode is not None


@dataclass(frozen=True)
class ToolchainInfo:
    node_version: str
    node_major: int
    npm_version: str

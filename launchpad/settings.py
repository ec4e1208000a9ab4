#===============================================================================
#  World_Hash_Launcher | settings.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Launcher settings: defaults, optional launcher_settings.json, derived paths/URLs.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict

from .constants import (
    APP_DIR_PREFIX,
    ARCHIVE_URL_TEMPLATE,
    CONFIG_FILE_NAME,
    DEFAULT_BRANCH,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REPOSITORY,
    LOG_DIR_NAME,
    MANIFEST_FILE_NAME,
    MANIFEST_URL_TEMPLATE,
    MIN_NODE_MAJOR,
    PROJECT_URL_TEMPLATE,
)


@dataclass(frozen=True)
class LauncherSettings:
    branch: str = DEFAULT_BRANCH
    repository: str = DEFAULT_REPOSITORY
    install_root: str = "."
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    min_node_major: int = MIN_NODE_MAJOR
    open_browser: bool = True
    strict_build: bool = False     # fail the install when npm install/build exits non-zero
    log_dir: str = LOG_DIR_NAME

    @property
    def app_dir_name(self) -> str:
        # GitHub names the archive folder after the branch with slashes as dashes
        return f"{APP_DIR_PREFIX}-{self.branch.replace('/', '-')}"

    @property
    def root(self) -> Path:
        return Path(self.install_root)

    @property
    def app_dir(self) -> Path:
        return self.root / self.app_dir_name

    @property
    def config_path(self) -> Path:
        return self.app_dir / CONFIG_FILE_NAME

    @property
    def manifest_path(self) -> Path:
        return self.app_dir / MANIFEST_FILE_NAME

    @property
    def remote_manifest_url(self) -> str:
        return MANIFEST_URL_TEMPLATE.format(repository=self.repository, branch=self.branch)

    @property
    def archive_url(self) -> str:
        return ARCHIVE_URL_TEMPLATE.format(repository=self.repository, branch=self.branch)

    @property
    def project_url(self) -> str:
        return PROJECT_URL_TEMPLATE.format(repository=self.repository)

    @property
    def app_url(self) -> str:
        return f"http://{self.host}:{self.port}/"


def default_settings() -> Dict[str, Any]:
    return asdict(LauncherSettings())


def load_settings(settings_path: Path) -> LauncherSettings:
    """Load settings from disk (or defaults). Unknown keys are ignored, a corrupt file yields defaults."""
    d = default_settings()
    if not settings_path.exists():
        return LauncherSettings()
    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
        for k in d:
            if k in data and data[k] is not None:
                d[k] = data[k]
        d["port"] = int(d["port"])
        d["min_node_major"] = int(d["min_node_major"])
    except (ValueError, TypeError, AttributeError):
        return LauncherSettings()
    return LauncherSettings(**d)


def save_settings(settings_path: Path, settings: LauncherSettings) -> None:
    settings_path.write_text(json.dumps(asdict(settings), indent=2), encoding="utf-8")


def apply_overrides(settings: LauncherSettings, **overrides: Any) -> LauncherSettings:
    """Return a copy with every non-None override applied (CLI flags take precedence)."""
    known = {f.name for f in fields(LauncherSettings)}
    changes = {k: v for k, v in overrides.items() if k in known and v is not None}
    return replace(settings, **changes)

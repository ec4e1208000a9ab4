#===============================================================================
#  World_Hash_Launcher | installer.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Replaces the application folder with a fresh copy of the branch archive,
#  carrying config.json over, then installs npm dependencies and builds.
#
#  Notes
#  -----
#  - The config backup is held in memory between deleting the old folder and
#    extracting the new one; a crash in between loses it.
#  - npm exit codes are only checked when strict_build is enabled.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import shutil
import zipfile
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import requests

from .config_store import ConfigStore
from .constants import (
    ARCHIVE_FILE_NAME,
    CONFIG_FILE_NAME,
    DOWNLOAD_CHUNK_SIZE,
    DOWNLOAD_TIMEOUT,
    USER_AGENT,
)
from .errors import ExtractError, InstallError, NetworkError
from .supervisor import ProcessSupervisor
from .toolchain import resolve_command

_LOGGER = logging.getLogger(__name__)

BuildStep = Tuple[str, Sequence[str]]


def default_build_steps() -> List[BuildStep]:
    npm = resolve_command("npm")
    return [(npm, ["install"]), (npm, ["run", "build"])]


def download_archive(session: requests.Session, url: str, dest: Path, timeout: float = DOWNLOAD_TIMEOUT) -> None:
    """Stream ``url`` into ``dest``. Transport or HTTP failures raise NetworkError."""
    try:
        with session.get(url, stream=True, timeout=timeout, headers={"User-Agent": USER_AGENT}) as r:
            r.raise_for_status()
            with open(dest, "wb") as f:
                for chunk in r.iter_content(chunk_size=DOWNLOAD_CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
    except requests.RequestException as e:
        raise NetworkError(f"Download of {url} failed: {e}") from e


def extract_archive(archive: Path, dest_root: Path, expected_dir: Path) -> None:
    """Extract into ``dest_root``; the archive must produce ``expected_dir``."""
    try:
        with zipfile.ZipFile(archive, "r") as z:
            bad = z.testzip()
            if bad is not None:
                raise ExtractError(f"Archive member {bad} is corrupt.")
            top_level = {n.split("/", 1)[0] for n in z.namelist() if n.split("/", 1)[0]}
            new_entries = [dest_root / n for n in sorted(top_level) if not (dest_root / n).exists()]
            z.extractall(dest_root)
    except zipfile.BadZipFile as e:
        raise ExtractError(f"{archive} is not a valid zip archive: {e}") from e

    if not expected_dir.is_dir():
        # drop whatever the wrong archive put next to the installation
        for p in new_entries:
            if p.is_dir():
                shutil.rmtree(p)
            elif p.exists():
                p.unlink()
        raise ExtractError(f"Archive did not contain the expected folder {expected_dir.name}.")


class Installer:
    """Installs (or reinstalls) the application from its branch archive."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        supervisor: Optional[ProcessSupervisor] = None,
        config_store: Optional[ConfigStore] = None,
        build_steps: Optional[List[BuildStep]] = None,
        strict_build: bool = False,
        archive_name: str = ARCHIVE_FILE_NAME,
        config_name: str = CONFIG_FILE_NAME,
    ):
        self.session = session or requests.Session()
        self.supervisor = supervisor or ProcessSupervisor()
        self.config_store = config_store or ConfigStore()
        self.build_steps = build_steps
        self.strict_build = strict_build
        self.archive_name = archive_name
        self.config_name = config_name

    def install_latest(self, branch_url: str, target_dir: Path) -> None:
        target_dir = Path(target_dir)
        root = target_dir.parent
        archive = root / self.archive_name
        config_path = target_dir / self.config_name

        _LOGGER.info("Beginning installation...")
        try:
            config_backup = self._clean(archive, target_dir, config_path)

            _LOGGER.info("Downloading package. This may take a minute...")
            root.mkdir(parents=True, exist_ok=True)
            download_archive(self.session, branch_url, archive)

            _LOGGER.info("Unzipping package...")
            try:
                extract_archive(archive, root, target_dir)
            finally:
                _LOGGER.info("Cleaning directory...")
                archive.unlink()

            if config_backup is not None:
                _LOGGER.info("Restoring configuration...")
                self.config_store.restore(config_path, config_backup)
        except (OSError, NetworkError, ExtractError) as e:
            raise InstallError(f"Installation failed: {e}") from e

        _LOGGER.info("Installing dependencies...")
        self._build(target_dir)
        _LOGGER.info("Installation complete!")

    def _clean(self, archive: Path, target_dir: Path, config_path: Path) -> Optional[bytes]:
        """Remove leftovers of a previous install; return the config bytes worth keeping."""
        _LOGGER.info("Cleaning directory...")
        if archive.exists():
            _LOGGER.info("Removing previous package...")
            archive.unlink()

        config_backup = None
        if target_dir.exists():
            _LOGGER.info("Cleaning current installation...")
            config_backup = self.config_store.backup(config_path)
            if config_backup is not None:
                _LOGGER.info("Backing up configuration...")
            _LOGGER.info("Removing old installation...")
            shutil.rmtree(target_dir)
        return config_backup

    def _build(self, target_dir: Path) -> None:
        steps = self.build_steps if self.build_steps is not None else default_build_steps()
        for command, args in steps:
            result = self.supervisor.run_process(command, args, cwd=target_dir, log_errors=True)
            if result.returncode == 0:
                continue
            step = " ".join(result.args)
            if self.strict_build:
                raise InstallError(f"'{step}' failed (rc={result.returncode}).")
            _LOGGER.warning("'%s' exited with rc=%s; continuing.", step, result.returncode)

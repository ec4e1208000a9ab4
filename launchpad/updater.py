#===============================================================================
#  World_Hash_Launcher | updater.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Decides whether the installed application needs (re)installing by comparing
#  the local package.json with the one on the remote branch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
from pathlib import Path

from .console import ask_yes_no
from .constants import APP_TITLE, MANIFEST_FILE_NAME
from .errors import LauncherError
from .installer import Installer
from .manifest import ManifestReader
from .models import UpdateOutcome
from .versioning import compare_versions, versions_differ

_LOGGER = logging.getLogger(__name__)


class UpdateCoordinator:
    """Runs one update check cycle.

    The check itself is best-effort: when the remote manifest cannot be read
    the existing installation is kept. Any difference between the versions
    (newer or older) offers the update.
    """

    def __init__(self, manifest_reader: ManifestReader, installer: Installer, prompt):
        self.manifest_reader = manifest_reader
        self.installer = installer
        self.prompt = prompt

    def check_and_maybe_update(self, local_dir: Path, remote_manifest_url: str, branch_url: str) -> UpdateOutcome:
        local_dir = Path(local_dir)
        if not local_dir.exists():
            _LOGGER.info("Could not find package.")
            self.installer.install_latest(branch_url, local_dir)
            return UpdateOutcome.INSTALLED

        local = self.manifest_reader.read_local(local_dir / MANIFEST_FILE_NAME)

        _LOGGER.info("Checking for updates...")
        try:
            remote = self.manifest_reader.read_remote(remote_manifest_url)
        except LauncherError as e:
            _LOGGER.debug("Remote manifest error: %s", e)
            _LOGGER.warning("Could not fetch remote package to check for updates...")
            return UpdateOutcome.CHECK_FAILED

        if not versions_differ(local.version, remote.version):
            _LOGGER.info("Up to date!")
            return UpdateOutcome.UP_TO_DATE

        if compare_versions(local.version, remote.version) < 0:
            _LOGGER.warning(
                "Remote version %s is older than the installed %s.", remote.version, local.version
            )

        accepted = ask_yes_no(
            self.prompt,
            f"An update is available for {APP_TITLE} ({remote.version}). "
            f"Would you like to install it? (Y/N)",
        )
        if not accepted:
            _LOGGER.info("Installation bypassed.")
            return UpdateOutcome.DECLINED

        self.installer.install_latest(branch_url, local_dir)
        return UpdateOutcome.REINSTALLED

#===============================================================================
#  World_Hash_Launcher | workflow.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  The launcher sequence: toolchain check -> update check/install ->
#  configuration -> start the local web app and supervise it until it exits.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import webbrowser
from typing import Optional

import requests

from .config_store import ConfigStore
from .constants import APP_ENTRYPOINT, APP_TITLE
from .console import print_banner, set_console_title
from .installer import Installer
from .manifest import ManifestReader
from .models import RunResult
from .settings import LauncherSettings
from .setup_wizard import ensure_configuration
from .supervisor import ProcessSupervisor
from .toolchain import check_toolchain, resolve_command
from .updater import UpdateCoordinator

_LOGGER = logging.getLogger(__name__)


def launch_application(
    settings: LauncherSettings,
    supervisor: ProcessSupervisor,
    manifest_reader: ManifestReader,
) -> RunResult:
    """Start the built web app with HOST/PORT injected and block until it exits."""
    active = manifest_reader.read_local(settings.manifest_path)
    _LOGGER.info("Starting local web app (%s) ...", active.version)

    if settings.open_browser:
        try:
            webbrowser.open(settings.app_url)
        except webbrowser.Error as e:
            _LOGGER.debug("Could not open browser: %s", e)

    return supervisor.run_process(
        resolve_command("node"),
        [APP_ENTRYPOINT],
        cwd=settings.app_dir,
        capture_output=False,
        log_errors=True,
        log_stdout=True,
        env={"HOST": settings.host, "PORT": str(settings.port)},
    )


def run_launcher(
    settings: LauncherSettings,
    prompt,
    session: Optional[requests.Session] = None,
    supervisor: Optional[ProcessSupervisor] = None,
    skip_toolchain_check: bool = False,
) -> RunResult:
    """Run the whole sequence. Fatal problems surface as LauncherError / OSError."""
    session = session or requests.Session()
    supervisor = supervisor or ProcessSupervisor(title=APP_TITLE)
    store = ConfigStore()
    reader = ManifestReader(session=session)

    set_console_title(APP_TITLE)
    print_banner()

    if not skip_toolchain_check:
        check_toolchain(supervisor, settings.min_node_major)

    installer = Installer(
        session=session,
        supervisor=supervisor,
        config_store=store,
        strict_build=settings.strict_build,
    )
    coordinator = UpdateCoordinator(reader, installer, prompt)
    outcome = coordinator.check_and_maybe_update(
        settings.app_dir, settings.remote_manifest_url, settings.archive_url
    )
    _LOGGER.debug("Update check outcome: %s", outcome.value)

    ensure_configuration(store, settings.config_path, prompt)

    result = launch_application(settings, supervisor, reader)
    _LOGGER.info("Web app exited (rc=%s).", result.returncode)
    return result

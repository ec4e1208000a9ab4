#===============================================================================
#  World_Hash_Launcher | errors.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Exception taxonomy shared by the update, install and supervise workflow.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from typing import Optional


class LauncherError(Exception):
    """Base class for failures the launcher reports to the operator.

    ``remediation_url`` points the operator at a page that explains how to fix
    the problem; the CLI prints it before exiting.
    """

    def __init__(self, message: str, remediation_url: Optional[str] = None):
        super().__init__(message)
        self.remediation_url = remediation_url


class ToolchainError(LauncherError):
    """Node.js / npm missing or older than the supported major version."""


class NetworkError(LauncherError):
    """A remote fetch or download failed."""


class ExtractError(LauncherError):
    """The downloaded archive is corrupt or did not contain the application."""


class InstallError(LauncherError):
    """An install step failed; the installation is left unusable."""


class ConfigParseError(LauncherError):
    """The persisted configuration file is malformed."""


class ManifestError(LauncherError):
    """A version manifest could not be parsed."""


class PromptClosedError(LauncherError):
    """Operator input closed while an answer was still required."""

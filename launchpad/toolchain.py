#===============================================================================
#  World_Hash_Launcher | toolchain.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Resolves the Node.js toolchain (node, npm) and checks that it is recent enough
#  to build and run the web app.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import re
import shutil
import webbrowser
from typing import Optional, Tuple

from .constants import MIN_NODE_MAJOR, NODE_DOWNLOAD_URL
from .errors import ToolchainError
from .models import ToolchainInfo
from .supervisor import ProcessSupervisor

_LOGGER = logging.getLogger(__name__)

NODE_VERSION_RE = re.compile(r"^v(\d+)([\d.]+)")
NPM_VERSION_RE = re.compile(r"^([\d.]+)")


def resolve_command(name: str) -> str:
    """Return the full path of ``name`` on PATH.

    On Windows npm is a .cmd shim, so the bare name cannot be spawned without
    a shell; which() finds the shim. Falls back to the bare name.
    """
    return shutil.which(name) or name


def parse_node_version(output: str) -> Optional[Tuple[int, str]]:
    """Return (major, full version without the leading v), or None."""
    m = NODE_VERSION_RE.match((output or "").strip())
    if not m:
        return None
    return int(m.group(1)), m.group(1) + m.group(2)


def parse_npm_version(output: str) -> Optional[str]:
    m = NPM_VERSION_RE.match((output or "").strip())
    return m.group(1) if m else None


def _fail(message: str) -> ToolchainError:
    try:
        webbrowser.open(NODE_DOWNLOAD_URL)
    except webbrowser.Error as e:
        _LOGGER.debug("Could not open browser: %s", e)
    return ToolchainError(message, remediation_url=NODE_DOWNLOAD_URL)


def check_toolchain(supervisor: ProcessSupervisor, min_node_major: int = MIN_NODE_MAJOR) -> ToolchainInfo:
    """Verify node + npm. Missing, unparseable and too-old versions all raise ToolchainError."""
    node_out = supervisor.run(resolve_command("node"), ["--version"], capture_output=True)
    npm_out = supervisor.run(resolve_command("npm"), ["--version"], capture_output=True)

    node = parse_node_version(node_out)
    npm = parse_npm_version(npm_out)
    if node is None or npm is None:
        raise _fail(
            "Node.js is not installed or is not configured correctly. "
            "Please install Node.js before continuing."
        )

    major, node_version = node
    if major < min_node_major:
        raise _fail(
            f"Node.js installation is out of date. "
            f"Please update to v{min_node_major} or greater before continuing."
        )

    _LOGGER.info("All dependencies checked! node: %s, npm: %s", node_version, npm)
    return ToolchainInfo(node_version=node_version, node_major=major, npm_version=npm)

#===============================================================================
#  World_Hash_Launcher | constants.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Central place for launcher defaults, remote endpoints and file naming conventions.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

APP_TITLE = "World Hash"
SETTINGS_FILE_NAME = "launcher_settings.json"
LOG_DIR_NAME = "logs"
LOG_FILE_NAME = "launcher.log"

# --- Managed application ---
DEFAULT_REPOSITORY = "trmid/world-hash"
DEFAULT_BRANCH = "release"
APP_DIR_PREFIX = "world-hash"
ARCHIVE_FILE_NAME = "world-hash.zip"
MANIFEST_FILE_NAME = "package.json"
CONFIG_FILE_NAME = "config.json"

# GitHub endpoints (formatted with repository + branch)
ARCHIVE_URL_TEMPLATE = "https://github.com/{repository}/archive/refs/heads/{branch}.zip"
MANIFEST_URL_TEMPLATE = "https://raw.githubusercontent.com/{repository}/{branch}/package.json"
PROJECT_URL_TEMPLATE = "https://github.com/{repository}"

# Sent with every remote request so the host can identify the launcher
USER_AGENT = "world-hash-installer"
MANIFEST_TIMEOUT = 20
DOWNLOAD_TIMEOUT = 60
DOWNLOAD_CHUNK_SIZE = 1024 * 256

# --- Toolchain ---
MIN_NODE_MAJOR = 16
NODE_DOWNLOAD_URL = "https://nodejs.org/en/download/"

# --- Web app ---
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 25557
APP_ENTRYPOINT = "build/index.js"

BANNER = r"""
 ##      ##  #######  ########  ##       ########     ##     ##    ###     ######  ##     ##
 ##  ##  ## ##     ## ##     ## ##       ##     ##    ##     ##   ## ##   ##    ## ##     ##
 ##  ##  ## ##     ## ##     ## ##       ##     ##    ##     ##  ##   ##  ##       ##     ##
 ##  ##  ## ##     ## ########  ##       ##     ##    ######### ##     ##  ######  #########
 ##  ##  ## ##     ## ##   ##   ##       ##     ##    ##     ## #########       ## ##     ##
 ##  ##  ## ##     ## ##    ##  ##       ##     ##    ##     ## ##     ## ##    ## ##     ##
  ###  ###   #######  ##     ## ######## ########     ##     ## ##     ##  ######  ##     ##
"""

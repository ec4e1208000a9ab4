#===============================================================================
#  World_Hash_Launcher  |  Bootstrap Launcher for the World Hash web app
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  A console launcher that keeps a local copy of the World Hash web app
#  installed and current, then runs it. On every start it:
#    - Checks that Node.js (v16+) and npm are available
#    - Installs the app from its GitHub branch archive when missing
#    - Offers a reinstall when the remote package.json version differs,
#      carrying config.json over byte-for-byte
#    - Asks for config.json values on first run
#    - Starts `node build/index.js` with HOST/PORT injected and streams its output
#
#  Folder Conventions
#  ------------------
#    ./world-hash-<branch>/               -> managed application folder
#    ./world-hash-<branch>/config.json    -> operator configuration (kept)
#    ./launcher_settings.json             -> optional launcher settings
#    ./logs/launcher.log                  -> launcher log file
#
#  Copyright & License Notes
#  -------------------------
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#
#  This source code is provided "AS IS", without warranty of any kind, express
#  or implied, including but not limited to the warranties of merchantability,
#  fitness for a particular purpose, and noninfringement.
#
#  Third-Party Components
#  ----------------------
#  This project uses third-party libraries (requests, packaging) which are
#  licensed separately by their respective authors. Ensure compliance with
#  their license terms when distributing this software.
#===============================================================================

import sys

from launchpad.cli import main


if __name__ == "__main__":
    sys.exit(main())

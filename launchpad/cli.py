#===============================================================================
#  World_Hash_Launcher | cli.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Command line entry point: parses options, configures logging, runs the
#  launcher and maps fatal errors to exit codes.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from .console import ConsolePrompt, FixedPrompt, configure_logging
from .constants import SETTINGS_FILE_NAME
from .errors import LauncherError
from .settings import apply_overrides, load_settings, save_settings
from .workflow import run_launcher

_LOGGER = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="worldhash-launcher",
        description="Install, update and run the World Hash local web app.",
    )
    p.add_argument("--settings", type=Path, default=Path(SETTINGS_FILE_NAME),
                   help="launcher settings file (default: %(default)s)")
    p.add_argument("--branch", help="branch of the application repository to track")
    p.add_argument("--install-root", help="folder that holds the application folder")
    p.add_argument("--host", help="host the web app binds to")
    p.add_argument("--port", type=int, help="port the web app binds to")
    p.add_argument("--no-browser", dest="open_browser", action="store_const", const=False,
                   help="do not open the web app in a browser")
    p.add_argument("--strict-build", action="store_const", const=True,
                   help="abort the install when npm install/build fails")
    p.add_argument("--save-settings", action="store_true",
                   help="write the effective settings back to the settings file")
    p.add_argument("--skip-toolchain-check", action="store_true",
                   help="do not verify node/npm before starting")
    answer = p.add_mutually_exclusive_group()
    answer.add_argument("-y", "--yes", dest="answer", action="store_const", const="y",
                        help="accept updates and configuration defaults without asking")
    answer.add_argument("-n", "--no", dest="answer", action="store_const", const="n",
                        help="decline updates and accept configuration defaults without asking")
    p.add_argument("-v", "--verbose", action="store_true", help="show debug output on the console")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    settings = apply_overrides(
        load_settings(args.settings),
        branch=args.branch,
        install_root=args.install_root,
        host=args.host,
        port=args.port,
        open_browser=args.open_browser,
        strict_build=args.strict_build,
    )
    configure_logging(settings.root / settings.log_dir, verbose=args.verbose)
    if args.save_settings:
        save_settings(args.settings, settings)

    prompt = FixedPrompt(args.answer) if args.answer else ConsolePrompt()
    try:
        run_launcher(settings, prompt, skip_toolchain_check=args.skip_toolchain_check)
    except KeyboardInterrupt:
        _LOGGER.info("Interrupted.")
        return EXIT_INTERRUPTED
    except LauncherError as e:
        _LOGGER.error("%s", e)
        _LOGGER.error("See %s for help.", e.remediation_url or settings.project_url)
        return EXIT_FATAL
    except OSError as e:
        _LOGGER.error("File system error: %s", e)
        _LOGGER.error("See %s for help.", settings.project_url)
        return EXIT_FATAL
    return EXIT_OK

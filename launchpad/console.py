#===============================================================================
#  World_Hash_Launcher | console.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Operator-facing console concerns: logging setup, window title, banner and
#  the pluggable prompt providers used for free-text and yes/no questions.
#
#  Notes
#  -----
#  - Prompts go through a provider object so automated runs (and tests) can
#    answer without an interactive terminal.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import re
import sys
from pathlib import Path
from typing import Optional

from .constants import BANNER, LOG_FILE_NAME
from .errors import PromptClosedError

_LOGGER = logging.getLogger(__name__)

CONSOLE_FORMAT = "[%(asctime)s] %(message)s"
CONSOLE_DATEFMT = "%H:%M"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

YES_RE = re.compile(r"^y", re.IGNORECASE)
NO_RE = re.compile(r"^n", re.IGNORECASE)


def configure_logging(log_dir: Optional[Path] = None, verbose: bool = False) -> logging.Logger:
    """Attach console + file handlers to the package logger and return it."""
    logger = logging.getLogger("launchpad")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt=CONSOLE_DATEFMT))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def set_console_title(title: str) -> None:
    """Set the terminal window title (no-op when stdout is not a terminal)."""
    if os.name == "nt":
        import ctypes

        ctypes.windll.kernel32.SetConsoleTitleW(title)  # type: ignore[attr-defined]
        return
    stream = sys.stdout
    if stream is not None and stream.isatty():
        stream.write(f"\x1b]0;{title}\x07")
        stream.flush()


def print_banner() -> None:
    print(BANNER)


class ConsolePrompt:
    """Reads answers from stdin."""

    def prompt(self, text: str, default: Optional[str] = None) -> str:
        suffix = "" if default is None else f"({default}) "
        try:
            answer = input(f"{text} {suffix}").strip()
        except EOFError:
            if default is not None:
                return default
            raise PromptClosedError("Input closed while waiting for an answer.")
        return answer or (default or "")


class FixedPrompt:
    """Non-interactive answers (used by --yes / --no).

    Questions with a default take the default; the rest get ``answer``.
    """

    def __init__(self, answer: str):
        self.answer = answer

    def prompt(self, text: str, default: Optional[str] = None) -> str:
        reply = default if default is not None else self.answer
        _LOGGER.info("%s %s", text, reply)
        return reply


def ask_yes_no(prompt, question: str) -> bool:
    """Ask until the answer starts with y or n (any case)."""
    text = question
    while True:
        answer = prompt.prompt(text, None)
        if YES_RE.match(answer):
            return True
        if NO_RE.match(answer):
            return False
        text = "Please enter Y for yes, or N for no:"

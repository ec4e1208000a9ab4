#===============================================================================
#  World_Hash_Launcher | supervisor.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Runs one child process at a time with both output streams piped back into
#  the launcher. Each stream is drained by its own reader thread; stdout lines
#  are collected into a per-run buffer, and either stream can be echoed live
#  to the operator's console.
#
#  Notes
#  -----
#  - Reader threads are joined before run_process() returns, so callers only
#    ever see a complete buffer.
#  - There is no timeout: a child that never exits blocks the launcher.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import logging
import os
import subprocess
import threading
from pathlib import Path
from typing import Callable, Dict, IO, List, Mapping, Optional, Sequence, Union

from .console import set_console_title
from .models import RunResult

_LOGGER = logging.getLogger(__name__)


def _print_line(line: str) -> None:
    print(line, flush=True)


class _OutputCapture:
    """State shared by the two reader threads of a single run."""

    def __init__(self, log_stdout: bool, log_errors: bool):
        self.log_stdout = log_stdout
        self.log_errors = log_errors
        self.lines: List[str] = []
        self.lock = threading.Lock()

    def add(self, line: str) -> None:
        with self.lock:
            self.lines.append(line)

    def snapshot(self) -> List[str]:
        with self.lock:
            return list(self.lines)


class ProcessSupervisor:
    """Spawns a child process, multiplexes its output and waits for it.

    ``title`` is reasserted after every output line because some children
    (npm, node) overwrite the window title. ``echo`` receives lines that are
    shown to the operator; it defaults to printing on stdout.
    """

    def __init__(
        self,
        title: Optional[str] = None,
        echo: Optional[Callable[[str], None]] = None,
        set_title: Callable[[str], None] = set_console_title,
    ):
        self.title = title
        self.echo = echo or _print_line
        self._set_title = set_title
        # Console echo and title resets come from both reader threads.
        self._console_lock = threading.Lock()

    def run(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Optional[Union[str, Path]] = None,
        capture_output: bool = False,
        log_errors: bool = True,
        log_stdout: bool = False,
        env: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Run to completion; return the stdout lines joined by newlines when ``capture_output``."""
        result = self.run_process(
            command,
            args,
            cwd=cwd,
            capture_output=capture_output,
            log_errors=log_errors,
            log_stdout=log_stdout,
            env=env,
        )
        return result.captured

    def run_process(
        self,
        command: str,
        args: Sequence[str] = (),
        cwd: Optional[Union[str, Path]] = None,
        capture_output: bool = False,
        log_errors: bool = True,
        log_stdout: bool = False,
        env: Optional[Mapping[str, str]] = None,
    ) -> RunResult:
        argv = [str(command)] + [str(a) for a in args]
        capture = _OutputCapture(log_stdout=log_stdout, log_errors=log_errors)

        child_env: Dict[str, str] = dict(os.environ)
        if env:
            child_env.update({str(k): str(v) for k, v in env.items()})

        _LOGGER.debug("$ %s (cwd=%s)", " ".join(argv), cwd or os.getcwd())
        try:
            proc = subprocess.Popen(
                argv,
                cwd=str(cwd) if cwd else None,
                env=child_env,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            _LOGGER.warning("Could not start %s: %s", argv[0], e)
            return RunResult(args=argv, returncode=None)

        self._reassert_title()

        readers = [
            threading.Thread(target=self._pump_stdout, args=(proc.stdout, capture), daemon=True),
            threading.Thread(target=self._pump_stderr, args=(proc.stderr, capture), daemon=True),
        ]
        for t in readers:
            t.start()

        try:
            rc = proc.wait()
        except KeyboardInterrupt:
            proc.terminate()
            proc.wait()
            raise
        finally:
            for t in readers:
                t.join()
            for stream in (proc.stdout, proc.stderr):
                if stream:
                    stream.close()

        _LOGGER.debug("%s exited with rc=%s", argv[0], rc)
        lines = capture.snapshot()
        return RunResult(
            args=argv,
            returncode=rc,
            stdout_lines=lines,
            captured="\n".join(lines) if capture_output else "",
        )

    def _pump_stdout(self, stream: IO[str], capture: _OutputCapture) -> None:
        for raw in iter(stream.readline, ""):
            line = raw.rstrip("\r\n")
            if not line:
                self._emit(None)
                continue
            capture.add(line)
            _LOGGER.debug("[stdout] %s", line)
            self._emit(line if capture.log_stdout else None)

    def _pump_stderr(self, stream: IO[str], capture: _OutputCapture) -> None:
        for raw in iter(stream.readline, ""):
            line = raw.rstrip("\r\n")
            if not line:
                self._emit(None)
                continue
            _LOGGER.debug("[stderr] %s", line)
            self._emit(line if capture.log_errors else None)

    def _emit(self, line: Optional[str]) -> None:
        with self._console_lock:
            if line is not None:
                self.echo(line)
            if self.title:
                self._set_title(self.title)

    def _reassert_title(self) -> None:
        if not self.title:
            return
        with self._console_lock:
            self._set_title(self.title)

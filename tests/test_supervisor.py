"""Tests for launchpad.supervisor using real child processes."""

import sys
from pathlib import Path

from launchpad.supervisor import ProcessSupervisor

PY = sys.executable


class Recorder:
    def __init__(self):
        self.echoed = []
        self.titles = []

    def supervisor(self, title="World Hash"):
        return ProcessSupervisor(title=title, echo=self.echoed.append, set_title=self.titles.append)


def test_capture_returns_lines_in_order():
    rec = Recorder()
    out = rec.supervisor().run(PY, ["-c", "for i in range(5): print(f'line {i}')"], capture_output=True)
    assert out == "\n".join(f"line {i}" for i in range(5))


def test_capture_disabled_returns_empty_but_still_buffers():
    rec = Recorder()
    result = rec.supervisor().run_process(PY, ["-c", "print('a'); print('b')"], capture_output=False)
    assert result.captured == ""
    assert result.stdout_lines == ["a", "b"]
    assert rec.supervisor().run(PY, ["-c", "print('a')"]) == ""


def test_log_flags_control_echo_only():
    script = "import sys; print('out'); sys.stderr.write('err\\n')"

    quiet = Recorder()
    out = quiet.supervisor().run(PY, ["-c", script], capture_output=True, log_stdout=False, log_errors=False)
    assert out == "out"
    assert quiet.echoed == []

    loud = Recorder()
    out = loud.supervisor().run(PY, ["-c", script], capture_output=True, log_stdout=True, log_errors=True)
    assert out == "out"
    assert sorted(loud.echoed) == ["err", "out"]


def test_stderr_is_never_captured():
    rec = Recorder()
    out = rec.supervisor().run(PY, ["-c", "import sys; sys.stderr.write('boom\\n')"], capture_output=True)
    assert out == ""


def test_environment_overrides_are_injected(monkeypatch):
    monkeypatch.setenv("INHERITED_VAR", "kept")
    rec = Recorder()
    script = "import os; print(os.environ['HOST']); print(os.environ['PORT']); print(os.environ['INHERITED_VAR'])"
    out = rec.supervisor().run(PY, ["-c", script], capture_output=True, env={"HOST": "localhost", "PORT": "25557"})
    assert out.splitlines() == ["localhost", "25557", "kept"]


def test_working_directory(tmp_path):
    rec = Recorder()
    out = rec.supervisor().run(PY, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path, capture_output=True)
    assert Path(out).resolve() == tmp_path.resolve()


def test_exit_code_is_reported_not_raised():
    rec = Recorder()
    result = rec.supervisor().run_process(PY, ["-c", "print('x'); raise SystemExit(3)"])
    assert result.returncode == 3
    assert result.stdout_lines == ["x"]


def test_title_reasserted_after_every_line():
    rec = Recorder()
    script = "import sys; print('1'); print('2'); sys.stderr.write('3\\n')"
    rec.supervisor().run(PY, ["-c", script])
    # once after spawn + once per line
    assert rec.titles == ["World Hash"] * 4


def test_blank_lines_are_skipped():
    rec = Recorder()
    out = rec.supervisor().run(PY, ["-c", "print('a'); print(); print('b')"], capture_output=True)
    assert out == "a\nb"


def test_spawn_failure_looks_like_empty_run():
    rec = Recorder()
    result = rec.supervisor().run_process("definitely-not-a-real-command-xyz", ["--version"], capture_output=True)
    assert result.returncode is None
    assert not result.spawned
    assert result.captured == ""


def test_title_reasserted_for_blank_lines_too():
    rec = Recorder()
    rec.supervisor().run(PY, ["-c", "print('a'); print(); print('b')"])
    # once after spawn + three stdout lines, the blank one included
    assert rec.titles == ["World Hash"] * 4
    assert rec.echoed == []

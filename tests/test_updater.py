"""Tests for launchpad.updater: the update decision state machine."""

import json
from unittest.mock import MagicMock

import pytest

from conftest import FakeResponse, FakeSession, ScriptedPrompt
from launchpad.manifest import ManifestReader
from launchpad.models import UpdateOutcome
from launchpad.updater import UpdateCoordinator

REMOTE = "https://raw.githubusercontent.com/trmid/world-hash/release/package.json"
BRANCH = "https://github.com/trmid/world-hash/archive/refs/heads/release.zip"


def _install(tmp_path, version="1.0.0"):
    app = tmp_path / "world-hash-release"
    app.mkdir()
    (app / "package.json").write_text(json.dumps({"version": version}), encoding="utf-8")
    return app


def _coordinator(remote_version=None, answers=(), remote_error=None):
    routes = {}
    if remote_version is not None:
        routes[REMOTE] = FakeResponse(content=json.dumps({"version": remote_version}).encode())
    if remote_error is not None:
        routes[REMOTE] = remote_error
    installer = MagicMock()
    prompt = ScriptedPrompt(answers)
    coordinator = UpdateCoordinator(ManifestReader(session=FakeSession(routes)), installer, prompt)
    return coordinator, installer, prompt


def test_missing_install_is_installed_unconditionally(tmp_path):
    coordinator, installer, prompt = _coordinator()
    target = tmp_path / "world-hash-release"
    assert coordinator.check_and_maybe_update(target, REMOTE, BRANCH) is UpdateOutcome.INSTALLED
    installer.install_latest.assert_called_once_with(BRANCH, target)
    assert prompt.questions == []


def test_equal_versions_skip_update(tmp_path):
    app = _install(tmp_path, "1.2.0")
    coordinator, installer, prompt = _coordinator("1.2.0")
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.UP_TO_DATE
    installer.install_latest.assert_not_called()
    assert prompt.questions == []


def test_different_version_accepted_reinstalls(tmp_path):
    app = _install(tmp_path, "1.0.0")
    coordinator, installer, prompt = _coordinator("1.1.0", answers=["y"])
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.REINSTALLED
    installer.install_latest.assert_called_once_with(BRANCH, app)
    assert len(prompt.questions) == 1
    assert "1.1.0" in prompt.questions[0][0]


def test_different_version_declined_keeps_install(tmp_path):
    app = _install(tmp_path, "1.0.0")
    coordinator, installer, prompt = _coordinator("1.1.0", answers=["N"])
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.DECLINED
    installer.install_latest.assert_not_called()


def test_unrecognised_answers_reprompt(tmp_path):
    app = _install(tmp_path, "1.0.0")
    coordinator, installer, prompt = _coordinator("1.1.0", answers=["what", "?", "yes"])
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.REINSTALLED
    assert len(prompt.questions) == 3


def test_older_remote_still_offers_update(tmp_path):
    app = _install(tmp_path, "2.0.0")
    coordinator, installer, prompt = _coordinator("1.9.0", answers=["n"])
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.DECLINED
    assert len(prompt.questions) == 1


@pytest.mark.parametrize("route", [None, FakeResponse(status_code=500), FakeResponse(content=b"<html>")])
def test_remote_failure_is_best_effort(tmp_path, route):
    app = _install(tmp_path)
    coordinator, installer, prompt = _coordinator(remote_error=route)
    assert coordinator.check_and_maybe_update(app, REMOTE, BRANCH) is UpdateOutcome.CHECK_FAILED
    installer.install_latest.assert_not_called()
    assert prompt.questions == []


def test_unreadable_local_manifest_propagates(tmp_path):
    app = tmp_path / "world-hash-release"
    app.mkdir()
    coordinator, installer, prompt = _coordinator("1.0.0")
    with pytest.raises(OSError):
        coordinator.check_and_maybe_update(app, REMOTE, BRANCH)

"""Tests for launchpad.toolchain."""

from pathlib import Path
from unittest.mock import patch

import pytest

from launchpad.errors import ToolchainError
from launchpad.toolchain import NODE_DOWNLOAD_URL, check_toolchain, parse_node_version, parse_npm_version


class StubSupervisor:
    """Answers `node --version` / `npm --version` with canned output."""

    def __init__(self, node, npm):
        self.outputs = {"node": node, "npm": npm}
        self.calls = []

    def run(self, command, args=(), **kwargs):
        self.calls.append((command, list(args), kwargs))
        name = "node" if Path(str(command)).name.lower().startswith("node") else "npm"
        return self.outputs[name] if kwargs.get("capture_output") else ""


def test_parse_node_version():
    assert parse_node_version("v18.17.1\n") == (18, "18.17.1")
    assert parse_node_version("18.17.1") is None
    assert parse_node_version("") is None


def test_parse_npm_version():
    assert parse_npm_version("9.6.7") == "9.6.7"
    assert parse_npm_version("npm: command not found") is None


def test_check_toolchain_accepts_supported_versions():
    sup = StubSupervisor("v16.20.0", "8.19.4")
    with patch("launchpad.toolchain.webbrowser.open") as browser:
        info = check_toolchain(sup, min_node_major=16)
    assert (info.node_major, info.node_version, info.npm_version) == (16, "16.20.0", "8.19.4")
    assert [c[1] for c in sup.calls] == [["--version"], ["--version"]]
    browser.assert_not_called()


@pytest.mark.parametrize("node,npm", [
    ("v14.21.3", "6.14.18"),   # too old
    ("", "9.0.0"),             # node missing
    ("v18.0.0", ""),           # npm missing
    ("garbage", "9.0.0"),      # unparseable
])
def test_check_toolchain_rejects_old_or_unparseable(node, npm):
    with patch("launchpad.toolchain.webbrowser.open") as browser:
        with pytest.raises(ToolchainError) as exc:
            check_toolchain(StubSupervisor(node, npm), min_node_major=16)
    assert exc.value.remediation_url == NODE_DOWNLOAD_URL
    browser.assert_called_once_with(NODE_DOWNLOAD_URL)

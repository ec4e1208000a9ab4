#===============================================================================
#  World_Hash_Launcher | manifest.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Reads the version manifest (package.json) from disk or from the remote branch.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import requests

from .constants import MANIFEST_TIMEOUT, USER_AGENT
from .errors import ManifestError, NetworkError
from .models import VersionManifest


def parse_manifest(text: str, source: str = "manifest") -> VersionManifest:
    """Parse a JSON object and pick its ``version`` field (key matched case-insensitively)."""
    try:
        data = json.loads(text)
    except ValueError as e:
        raise ManifestError(f"{source} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ManifestError(f"{source} is not a JSON object.")

    for key, value in data.items():
        if key.lower() != "version":
            continue
        if not isinstance(value, str) or not value.strip():
            raise ManifestError(f"{source} has an invalid version field: {value!r}")
        return VersionManifest(version=value.strip())

    raise ManifestError(f"{source} has no version field.")


class ManifestReader:
    """Loads version manifests. One attempt per call, no retry."""

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = MANIFEST_TIMEOUT):
        self.session = session or requests.Session()
        self.timeout = timeout

    def read_local(self, path: Path) -> VersionManifest:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise ManifestError(f"{path} is not valid UTF-8: {e}") from e
        return parse_manifest(text, source=str(path))

    def read_remote(self, url: str) -> VersionManifest:
        try:
            r = self.session.get(url, timeout=self.timeout, headers={"User-Agent": USER_AGENT})
            r.raise_for_status()
        except requests.RequestException as e:
            raise NetworkError(f"Could not fetch {url}: {e}") from e
        return parse_manifest(r.text, source=url)

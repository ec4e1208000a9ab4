#===============================================================================
#  World_Hash_Launcher | config_store.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Load/save of the application configuration (config.json) plus raw
#  backup/restore used to carry it across a reinstall.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigParseError
from .models import OPTIONAL_CONFIG_FIELDS, REQUIRED_CONFIG_FIELDS, Configuration


class ConfigStore:
    """Persists a :class:`Configuration` as an indented JSON object."""

    def exists(self, path: Path) -> bool:
        return Path(path).is_file()

    def read(self, path: Path) -> Configuration:
        """Load the configuration. Field names are matched case-insensitively."""
        path = Path(path)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except ValueError as e:
            raise ConfigParseError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigParseError(f"{path} is not a JSON object.")

        by_name: Dict[str, Any] = {str(k).upper(): v for k, v in data.items()}
        values: Dict[str, Optional[str]] = {}
        for name in REQUIRED_CONFIG_FIELDS:
            value = by_name.get(name)
            if not isinstance(value, str):
                raise ConfigParseError(f"{path} is missing required field {name}.")
            values[name] = value
        for name in OPTIONAL_CONFIG_FIELDS:
            value = by_name.get(name)
            if value is not None and not isinstance(value, str):
                raise ConfigParseError(f"{path} has a non-string value for {name}.")
            values[name] = value
        return Configuration(**values)

    def write(self, path: Path, config: Configuration) -> None:
        """Persist to disk. Optional fields left as None are not written."""
        data = {k: v for k, v in asdict(config).items() if v is not None or k in REQUIRED_CONFIG_FIELDS}
        Path(path).write_text(json.dumps(data, indent=2), encoding="utf-8")

    def backup(self, path: Path) -> Optional[bytes]:
        """Return the raw file content, or None when there is nothing to keep."""
        path = Path(path)
        if not path.is_file():
            return None
        return path.read_bytes()

    def restore(self, path: Path, content: bytes) -> None:
        Path(path).write_bytes(content)

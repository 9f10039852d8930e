"""Config file discovery and loading.

Walk-up finder locates stratagem.toml, similar to how git finds .git/.
Supports the STRATAGEM_CONFIG env var override.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from stratagem.config.models import StratagemConfig
from stratagem.errors import ConfigError

CONFIG_FILENAME = "stratagem.toml"
CONFIG_ENV_VAR = "STRATAGEM_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for stratagem.toml.

    Returns the path to the config file, or None if not found.
    Checks STRATAGEM_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, raising ConfigError on malformed input."""
    raw = path.read_text(encoding="utf-8")
    try:
        return tomllib.loads(raw)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise ConfigError(msg) from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> StratagemConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*cwd*) to discover the file.
    Returns default StratagemConfig if no file is found.
    """
    if path is None:
        path = find_config(cwd)

    if path is None:
        return StratagemConfig()

    data = read_toml(path)
    try:
        return StratagemConfig.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid configuration in {path}: {exc}"
        raise ConfigError(msg) from exc

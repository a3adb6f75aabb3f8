from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Callable, Dict

import yaml

from src.models.configs import FormatterConfig


FORMATTER_TABLE = "formatter"

_PARSERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".toml": tomllib.loads,
    ".json": json.loads,
}


def _read_formatter_settings(path: Path) -> Dict[str, Any]:
    """Return the formatter settings mapping stored in ``path``.

    Settings may sit at the top level or under a ``formatter`` table, so the
    formatter can share a config file with other book tooling.
    """

    if not path.exists():
        raise FileNotFoundError(f"Formatter config not found: {path}")

    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        supported = ", ".join(sorted(_PARSERS))
        raise ValueError(
            f"Unsupported config format '{path.suffix}' for formatter config {path} (expected {supported})"
        )

    data = parser(path.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Formatter config {path} must contain a mapping of settings")

    section = data.get(FORMATTER_TABLE, data)
    if not isinstance(section, dict):
        raise ValueError(f"'{FORMATTER_TABLE}' in {path} must be a mapping of settings")
    return section


def load_formatter_config(path: Path) -> FormatterConfig:
    settings = _read_formatter_settings(path)
    config = FormatterConfig.model_validate(settings)
    return config.resolve_paths(path.parent)


__all__ = ["FORMATTER_TABLE", "load_formatter_config"]

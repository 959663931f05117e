"""Configuration loading: stockfolio.yaml lookup, env expansion, data file location."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml

from stockfolio.config.schema import StockfolioConfig

logger = logging.getLogger(__name__)

CONFIG_SEARCH_PATHS = (
    Path("stockfolio.yaml"),
    Path("~/.stockfolio/config.yaml"),
)

DATA_DIR_ENV = "STOCKFOLIO_DATA_DIR"

_ENV_PATTERN = re.compile(r"\$\{(\w+)\}")


def _expand_env_vars(value: Any) -> Any:
    """Recursively expand ${ENV_VAR} references in config values."""
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda m: os.environ.get(m.group(1), ""), value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    return value


def _config_candidates(explicit_path: str | Path | None) -> tuple[Path, ...]:
    if explicit_path is not None:
        return (Path(explicit_path).expanduser(),)
    return tuple(p.expanduser() for p in CONFIG_SEARCH_PATHS)


def _read_yaml(path: Path) -> dict[str, Any]:
    logger.debug("Reading config %s", path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return _expand_env_vars(raw)


def load_config(path: str | Path | None = None) -> StockfolioConfig:
    """Build the configuration for this process.

    An explicit *path* is the only file considered; a missing one is
    reported and defaults are used. Without *path*, ``./stockfolio.yaml``
    then ``~/.stockfolio/config.yaml`` are tried. ``${VAR}`` references in
    string values are expanded, and ``STOCKFOLIO_DATA_DIR`` replaces
    ``storage.data_dir`` when set.
    """
    raw: dict[str, Any] = {}
    found = next((p for p in _config_candidates(path) if p.exists()), None)
    if found is not None:
        raw = _read_yaml(found)
    elif path is not None:
        logger.warning("Config file not found: %s", path)

    data_dir = os.environ.get(DATA_DIR_ENV)
    if data_dir:
        raw["storage"] = {**(raw.get("storage") or {}), "data_dir": data_dir}

    return StockfolioConfig.model_validate(raw)


def data_file_path(config: StockfolioConfig) -> Path:
    """Absolute location of the ledger file; ``~`` in ``data_dir`` is expanded."""
    storage = config.storage
    return Path(storage.data_dir).expanduser().resolve() / storage.file_name

"""Settings loading with a fixed precedence.

Later sources win, key by key:
1) model defaults
2) ``~/.config/error_utils/error_utils.yaml``
3) ``ERROR_UTILS_*`` environment variables
4) explicit ``cli_params``

Environment keys nest on ``__``: ``ERROR_UTILS_BOUNDARIES__CHAIN_NESTED_FAILURES=true``
sets ``boundaries.chain_nested_failures``. Values are read as YAML scalars, so
``true``, ``3`` and ``[a, b]`` arrive typed.
"""

from __future__ import annotations

import copy
import os
from functools import lru_cache, reduce
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import DEFAULT_CONFIG_PATH, ENV_PREFIX, ErrorUtilsSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
    config_path: str | Path | None = None,
    env_prefix: str = ENV_PREFIX,
) -> ErrorUtilsSettings:
    """Resolve settings from every source; ``environ`` defaults to ``os.environ``."""
    layers = (
        _read_config_file(Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH),
        _read_environment(os.environ if environ is None else environ, env_prefix),
        dict(cli_params or {}),
    )
    return ErrorUtilsSettings(**reduce(_deep_merge, layers, {}))


@lru_cache(maxsize=1)
def get_settings() -> ErrorUtilsSettings:
    """Return process-wide settings, loaded once from the default sources."""
    return load_settings()


def reset_settings() -> None:
    """Drop cached settings so the next ``get_settings`` call reloads them."""
    get_settings.cache_clear()


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ValueError(f"Config file must contain a top-level mapping: {path}")
    return dict(parsed)


def _read_environment(environ: Mapping[str, str], prefix: str) -> dict[str, Any]:
    tree: dict[str, Any] = {}
    for key, raw in environ.items():
        if not key.startswith(prefix):
            continue
        path = [part.lower() for part in key[len(prefix) :].split("__") if part]
        if not path:
            continue
        branch = tree
        for part in path[:-1]:
            child = branch.get(part)
            if not isinstance(child, dict):
                child = branch[part] = {}
            branch = child
        branch[path[-1]] = _parse_env_value(raw)
    return tree


def _parse_env_value(raw: str) -> Any:
    """Read an environment string as a YAML scalar, keeping it verbatim on error."""
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged

#!/usr/bin/env python3
# minishell/config.py
from __future__ import annotations

"""
Configuration loader (stdlib-only).

Precedence (low → high):
  1) Built-in defaults
  2) Files in the config directory: config.ini, config.json, config.toml
     ($XDG_CONFIG_HOME/minishell, default ~/.config/minishell)
  3) Environment variables prefixed MINISHELL_ (MINISHELL_PROMPT, ...)

Validation:
  - PROMPT: str (may be empty)
  - HISTORY_FILE_PATH: None or normalized path
  - LOG_FILE_PATH: None or normalized path
  - LOG_LEVEL: one of {'DEBUG','INFO','WARNING','ERROR','CRITICAL'}
  - ENABLE_COMPLETION: bool
  - FRONTEND: one of {'auto','prompt_toolkit','readline','plain'}
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional
import configparser
import json
import logging
import os
import tomllib

from minishell.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "MINISHELL_"

# ---------- defaults ----------

DEFAULTS: dict[str, Any] = {
    "PROMPT": "$ ",
    "HISTORY_FILE_PATH": "~/.minishell_history",
    "LOG_LEVEL": "WARNING",
    "LOG_FILE_PATH": None,
    "ENABLE_COMPLETION": True,
    "FRONTEND": "auto",
}

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_FRONTENDS = {"auto", "prompt_toolkit", "readline", "plain"}


# ---------- data model ----------

@dataclass(frozen=True)
class AppConfig:
    prompt: str = DEFAULTS["PROMPT"]
    history_file_path: Path | None = None
    log_level: str = DEFAULTS["LOG_LEVEL"]
    log_file_path: Path | None = None
    enable_completion: bool = DEFAULTS["ENABLE_COMPLETION"]
    frontend: str = DEFAULTS["FRONTEND"]

    # Unrecognized keys preserved for debugging/forward-compat
    extra: dict[str, Any] = field(default_factory=dict)


# ---------- file loaders ----------

def _load_ini_file(path: Path) -> dict[str, str]:
    cfg = configparser.ConfigParser(interpolation=None)
    try:
        with path.open(encoding="utf-8") as f:
            cfg.read_file(f)
    except FileNotFoundError:
        return {}
    except configparser.Error as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc
    flat: dict[str, str] = {}
    for sec in cfg.sections():
        for k, v in cfg.items(sec):
            flat[k.upper()] = v
    return flat


def _load_json_file(path: Path) -> dict[str, Any]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc


def _load_toml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except FileNotFoundError:
        return {}
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"{path}: {exc}") from exc


def _flatten_mapping(obj: Any, prefix: str = "") -> dict[str, Any]:
    """
    Flatten nested dicts to UPPER_SNAKE keys.
    Example: {'log': {'level': 'debug'}} -> {'LOG_LEVEL': 'debug'}
    """
    flat: dict[str, Any] = {}
    if isinstance(obj, Mapping):
        for k, v in obj.items():
            key = f"{prefix}_{k}" if prefix else str(k)
            if isinstance(v, Mapping):
                flat.update(_flatten_mapping(v, key))
            else:
                flat[str(key).upper()] = v
    return flat


def default_config_dir() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "minishell"


def _find_config_files(config_dir: Path) -> list[Path]:
    return [
        config_dir / "config.ini",
        config_dir / "config.json",
        config_dir / "config.toml",
    ]


# ---------- normalization & coercion ----------

_BOOL_TRUE = {"1", "true", "yes", "y", "on"}
_BOOL_FALSE = {"0", "false", "no", "n", "off"}


def _as_bool(val: Any) -> bool:
    if isinstance(val, bool):
        return val
    s = str(val).strip().lower()
    if s in _BOOL_TRUE:
        return True
    if s in _BOOL_FALSE:
        return False
    raise ConfigurationError(f"Expected boolean, got: {val!r}")


def _as_opt_str(val: Any) -> str | None:
    return None if val is None or str(val).strip().lower() in {"", "none"} else str(val)


def _as_choice(name: str, val: Any, allowed: set[str], *, upper: bool = False) -> str:
    s = str(val).strip()
    s = s.upper() if upper else s.lower()
    if s not in allowed:
        raise ConfigurationError(
            f"{name} must be one of {sorted(allowed)}, got {val!r}")
    return s


def _as_opt_path(val: Any) -> Path | None:
    v = _as_opt_str(val)
    if v is None:
        return None
    # expand both ~ and env vars
    return Path(os.path.expandvars(os.path.expanduser(v))).resolve()


def _normalize_keys(d: Mapping[str, Any]) -> dict[str, Any]:
    return {str(k).upper(): v for k, v in d.items()}


# ---------- merge & load ----------

def _merge_sources(files: Iterable[Path], environ: Mapping[str, str]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(DEFAULTS)

    for file in files:
        if file.suffix == ".ini":
            merged.update(_normalize_keys(_load_ini_file(file)))
        elif file.suffix == ".json":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_json_file(file))))
        elif file.suffix == ".toml":
            merged.update(_normalize_keys(
                _flatten_mapping(_load_toml_file(file))))

    # Environment variables override all; only prefixed keys
    env_overrides = {k[len(ENV_PREFIX):]: v for k, v in environ.items()
                     if k.startswith(ENV_PREFIX) and len(k) > len(ENV_PREFIX)}
    merged.update(env_overrides)
    return merged


def _validate_and_build(config: Mapping[str, Any]) -> AppConfig:
    prompt = config.get("PROMPT", DEFAULTS["PROMPT"])
    prompt = "" if prompt is None else str(prompt)

    recognized = set(DEFAULTS.keys())
    extra = {k: v for k, v in config.items() if k not in recognized}

    return AppConfig(
        prompt=prompt,
        history_file_path=_as_opt_path(config.get("HISTORY_FILE_PATH")),
        log_level=_as_choice(
            "LOG_LEVEL", config.get("LOG_LEVEL", DEFAULTS["LOG_LEVEL"]), _LOG_LEVELS, upper=True),
        log_file_path=_as_opt_path(config.get("LOG_FILE_PATH")),
        enable_completion=_as_bool(config.get(
            "ENABLE_COMPLETION", DEFAULTS["ENABLE_COMPLETION"])),
        frontend=_as_choice(
            "FRONTEND", config.get("FRONTEND", DEFAULTS["FRONTEND"]), _FRONTENDS),
        extra=extra,
    )


# ---------- public API ----------

def load_config(
    config_dir: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Load, merge, normalize, and validate configuration.
    No filesystem side-effects.

    Raises:
        ConfigurationError: a config file is malformed or a value is invalid.
    """
    files = _find_config_files(config_dir or default_config_dir())
    raw = _merge_sources(files, os.environ if environ is None else environ)
    return _validate_and_build(raw)


def load_config_or_defaults(**kwargs: Any) -> AppConfig:
    """Like load_config, but warns and falls back to defaults when invalid."""
    try:
        return load_config(**kwargs)
    except ConfigurationError as exc:
        logger.warning("Invalid configuration, using defaults: %s", exc)
        return _validate_and_build(DEFAULTS)

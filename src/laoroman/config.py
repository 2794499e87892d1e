"""Configuration loading utilities for laoroman."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast, get_args

from laoroman.models import JoinMode

_ENV_PREFIX = "LAOROMAN_"
_JOIN_MODES = frozenset(get_args(JoinMode))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    workers: int
    join_mode: JoinMode


_DEFAULTS: dict[str, Any] = {
    "log_level": "INFO",
    "api_host": "127.0.0.1",
    "api_port": 8000,
    "workers": 1,
    "join_mode": "space",
}


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides.

    Each key of the profile can be overridden by `LAOROMAN_<KEY>`.
    """
    env = env_name or os.getenv(f"{_ENV_PREFIX}ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()

    values = dict(_DEFAULTS)
    values.update(_load_profile(resolved_dir / f"{env}.toml"))
    for key, coerce in _COERCERS.items():
        name = f"{_ENV_PREFIX}{key.upper()}"
        raw = os.getenv(name)
        if raw is not None:
            values[key] = coerce(name, raw)

    return AppConfig(
        env=env,
        log_level=values["log_level"].upper(),
        api_host=values["api_host"],
        api_port=values["api_port"],
        workers=values["workers"],
        join_mode=values["join_mode"],
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    return {key: _COERCERS[key](key, raw) for key, raw in payload.items() if key in _COERCERS}


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")


def _coerce_join_mode(name: str, value: object) -> JoinMode:
    mode = _coerce_str(name, value)
    if mode not in _JOIN_MODES:
        raise ValueError(f"{name} must be one of {sorted(_JOIN_MODES)}, got {mode!r}")
    return cast(JoinMode, mode)


_COERCERS: dict[str, Callable[[str, object], Any]] = {
    "log_level": _coerce_str,
    "api_host": _coerce_str,
    "api_port": _coerce_int,
    "workers": _coerce_int,
    "join_mode": _coerce_join_mode,
}

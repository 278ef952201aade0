from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _env_str(env: Mapping[str, str], key: str, default: str) -> str:
    val = env.get(key)
    return val if val is not None else default


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    val = env.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError as e:
        raise ValueError(f"{key} must be an integer, got {val!r}") from e


def _env_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    """Accepts true/false/1/0/yes/no/on/off."""
    val = env.get(key)
    if val is None:
        return default
    return val.strip().lower() in ("true", "1", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    unicode: bool = True


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Read ``KAIK_*`` environment variables, falling back to defaults."""
    if env is None:
        env = os.environ
    defaults = Settings()
    return Settings(
        host=_env_str(env, "KAIK_HOST", defaults.host),
        port=_env_int(env, "KAIK_PORT", defaults.port),
        log_level=_env_str(env, "KAIK_LOG_LEVEL", defaults.log_level).upper(),
        unicode=_env_bool(env, "KAIK_UNICODE", defaults.unicode),
    )

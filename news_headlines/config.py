from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from dotenv import load_dotenv

from .exceptions import ConfigError


# Homepages visited by all-sources mode, in output order.
SOURCE_URLS: Sequence[str] = (
    "https://www.nytimes.com",
    "https://www.theguardian.com",
    "https://www.bbc.com",
    "https://www.nature.com",
    "https://www.economist.com",
)

ENV_PREFIX = "NEWS_HEADLINES_"
_TRUTHY = {"1", "true", "yes", "on"}
SCORERS: Sequence[str] = ("vader", "openai")


@dataclass(frozen=True)
class Settings:
    scorer: str = "vader"
    model: Optional[str] = None
    timeout: Optional[float] = None
    workers: int = 1
    skip_failed: bool = False


def _get(env: Mapping[str, str], key: str) -> Optional[str]:
    val = env.get(ENV_PREFIX + key)
    if val is None or not val.strip():
        return None
    return val.strip()


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from NEWS_HEADLINES_* environment variables.

    When `env` is omitted, a .env file (if any) is loaded into os.environ first.
    Raises ConfigError for values that are not valid numbers.
    """
    if env is None:
        load_dotenv()
        env = os.environ

    timeout_raw = _get(env, "TIMEOUT")
    workers_raw = _get(env, "WORKERS")
    try:
        timeout = float(timeout_raw) if timeout_raw is not None else None
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}TIMEOUT must be a number of seconds, got {timeout_raw!r}") from e
    try:
        workers = int(workers_raw) if workers_raw is not None else 1
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}WORKERS must be an integer, got {workers_raw!r}") from e
    if workers < 1:
        raise ConfigError(f"{ENV_PREFIX}WORKERS must be at least 1, got {workers}")

    scorer = (_get(env, "SCORER") or "vader").lower()
    if scorer not in SCORERS:
        raise ConfigError(f"{ENV_PREFIX}SCORER must be one of {', '.join(SCORERS)}, got {scorer!r}")

    skip_raw = _get(env, "SKIP_FAILED")
    return Settings(
        scorer=scorer,
        model=_get(env, "MODEL"),
        timeout=timeout,
        workers=workers,
        skip_failed=bool(skip_raw) and skip_raw.lower() in _TRUTHY,
    )

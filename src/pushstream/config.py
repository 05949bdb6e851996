# /src/pushstream/config.py
# Settings for the HTTP source adapter

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

ENV_PREFIX = "PUSHSTREAM_HTTP_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class HttpSettings:
    """Request settings shared by every subscription of an HTTP source."""
    timeout: float = 10.0
    follow_redirects: bool = True
    user_agent: str = "pushstream"
    raise_for_status: bool = True

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "HttpSettings":
        """Load settings from ``PUSHSTREAM_HTTP_*`` variables.

        A ``.env`` file is read first when present; variables already set
        in the process environment win.

        Raises:
            ValueError: If a variable is set to something unparseable
        """
        load_dotenv(dotenv_path)
        defaults = cls()

        timeout = os.getenv(f"{ENV_PREFIX}TIMEOUT")
        user_agent = os.getenv(f"{ENV_PREFIX}USER_AGENT")

        return cls(
            timeout=_parse_float("TIMEOUT", timeout) if timeout else defaults.timeout,
            follow_redirects=_env_bool("FOLLOW_REDIRECTS", defaults.follow_redirects),
            user_agent=user_agent or defaults.user_agent,
            raise_for_status=_env_bool("RAISE_FOR_STATUS", defaults.raise_for_status),
        )

    def client_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for ``httpx.Client`` / ``httpx.AsyncClient``."""
        return {
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "headers": {"User-Agent": self.user_agent},
        }


def _parse_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as e:
        raise ValueError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}") from e
    if value <= 0:
        raise ValueError(f"{ENV_PREFIX}{name} must be positive, got {raw!r}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(f"{ENV_PREFIX}{name}")
    if raw is None or not raw.strip():
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{ENV_PREFIX}{name} must be a boolean, got {raw!r}")

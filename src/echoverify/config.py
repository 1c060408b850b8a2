# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for echoverify."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_USER_AGENT = f"echoverify/{__version__}"
DEFAULT_FORWARD_PATH = "/forward"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _path_env(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        return default
    return value if value.startswith("/") else f"/{value}"


@dataclass
class EchoSettings:
    """Transport defaults for talking to an echo instance."""

    timeout: float = 10.0
    forward_path: str = DEFAULT_FORWARD_PATH
    user_agent: str = DEFAULT_USER_AGENT
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "EchoSettings":
        """Create settings from environment variables (evaluated at call time)."""
        timeout = _float_env("ECHOVERIFY_TIMEOUT", cls.timeout)
        if timeout <= 0:
            timeout = cls.timeout
        return cls(
            timeout=timeout,
            forward_path=_path_env("ECHOVERIFY_FORWARD_PATH", cls.forward_path),
            user_agent=os.getenv("ECHOVERIFY_USER_AGENT", cls.user_agent),
            verify_ssl=_bool_env("ECHOVERIFY_VERIFY_SSL", cls.verify_ssl),
        )


def load_echo_settings() -> EchoSettings:
    """Load echo settings from environment with sensible defaults."""
    return EchoSettings.from_env()

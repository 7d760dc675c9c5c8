"""Configuration from environment variables"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import ConfigError
from .session import DEFAULT_HOST, DEFAULT_PORT


def _int_env(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from None


def _float_env(name: str) -> Optional[float]:
    value = os.getenv(name, "")
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None


@dataclass(frozen=True)
class NutConfig:
    """Connection and monitoring settings"""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    ups_name: str = ""
    username: Optional[str] = None
    password: Optional[str] = None
    timeout: Optional[float] = None
    normal_statuses: List[str] = field(default_factory=lambda: ["OL", "OL CHRG"])
    check_interval: int = 5
    max_check_error_limits: int = 5

    @classmethod
    def from_env(cls) -> "NutConfig":
        """Read the settings from the environment"""
        return cls(
            host=os.getenv("NUT_HOST", DEFAULT_HOST),
            port=_int_env("NUT_PORT", str(DEFAULT_PORT)),
            ups_name=os.getenv("NUT_UPS_NAME", ""),
            username=os.getenv("NUT_USERNAME") or None,
            password=os.getenv("NUT_PASSWORD") or None,
            timeout=_float_env("NUT_TIMEOUT"),
            normal_statuses=[
                status.strip()
                for status in os.getenv("UPS_NORMAL_STATUSES", "OL,OL CHRG").split(",")
                if status.strip()
            ],
            check_interval=_int_env("NUT_CHECK_INTERVAL", "5"),
            max_check_error_limits=_int_env("MAX_CHECK_ERROR_LIMITS", "5"),
        )

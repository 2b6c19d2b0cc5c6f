"""Configuration system for vctd."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    """Read a float setting, keeping the default when the value is malformed."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not a number, using {default}")
        return default


class Config:
    """Global configuration for vctd.

    Defaults come from the environment (``VCTD_*`` variables, optionally
    provided through a ``.env`` file) and can be changed at runtime.
    """

    def __init__(self) -> None:
        # Base URL
        self.vlr_base = os.getenv("VCTD_BASE_URL", "https://www.vlr.gg")

        # HTTP settings
        self.request_delay = _env_float("VCTD_REQUEST_DELAY", 1.0)
        self.timeout = _env_float("VCTD_TIMEOUT", 30.0)
        self.user_agent = os.getenv(
            "VCTD_USER_AGENT",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        )

        self.log_level = os.getenv("VCTD_LOG_LEVEL", "INFO").upper()

    def update(
        self,
        vlr_base: Optional[str] = None,
        request_delay: Optional[float] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        """Update configuration settings.

        Args:
            vlr_base: Base URL for VLR.gg
            request_delay: Seconds to wait before every request after the first
            timeout: Request timeout in seconds
            user_agent: User-Agent header
            log_level: Logging level name used by the command line
        """
        if vlr_base is not None:
            self.vlr_base = vlr_base
        if request_delay is not None:
            self.request_delay = request_delay
        if timeout is not None:
            self.timeout = timeout
        if user_agent is not None:
            self.user_agent = user_agent
        if log_level is not None:
            self.log_level = log_level.upper()

    def reset_to_defaults(self) -> None:
        """Reset all configuration to default values."""
        self.__init__()


# Global configuration instance
_global_config = Config()


def get_config() -> Config:
    """Get the global configuration instance."""
    return _global_config


def configure(
    vlr_base: Optional[str] = None,
    request_delay: Optional[float] = None,
    timeout: Optional[float] = None,
    user_agent: Optional[str] = None,
    log_level: Optional[str] = None,
) -> None:
    """Configure global settings for vctd.

    Example:
        >>> import vctd
        >>> vctd.configure(request_delay=2.0)
    """
    _global_config.update(
        vlr_base=vlr_base,
        request_delay=request_delay,
        timeout=timeout,
        user_agent=user_agent,
        log_level=log_level,
    )


def reset_config() -> None:
    """Reset all configuration settings to their default values."""
    _global_config.reset_to_defaults()

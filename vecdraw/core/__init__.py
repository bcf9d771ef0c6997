"""
Core module for vecdraw runtime settings.
This module holds the global configuration shared by drawings, the renderer
and the command line interface.
"""

import os
import time
import logging
from typing import Dict, Any, Optional

from vecdraw.config.default import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


def _load_config() -> Dict[str, Any]:
    """Build the initial configuration from defaults and environment overrides."""
    config = dict(DEFAULT_CONFIG)

    output_dir = os.environ.get("VECDRAW_OUTPUT_DIR")
    if output_dir:
        config["output_dir"] = output_dir

    level = os.environ.get("VECDRAW_LOG_LEVEL")
    if level:
        config["log_level"] = level.upper()
    else:
        config["log_level"] = "WARNING"

    return config


# Global configuration settings
CONFIG: Dict[str, Any] = _load_config()


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update

    Raises:
        KeyError: If a setting name is not known
    """
    unknown = [key for key in settings if key not in CONFIG]
    if unknown:
        raise KeyError(f"Unknown configuration keys: {', '.join(sorted(unknown))}")

    CONFIG.update(settings)
    logger.info(f"Configuration updated: {', '.join(settings.keys())}")


def reset_config() -> None:
    """Restore the configuration to its defaults."""
    CONFIG.clear()
    CONFIG.update(_load_config())


class Profiler:
    """Simple context manager that logs how long a block took."""

    def __init__(self, name: str, enabled: Optional[bool] = None):
        self.name = name
        self.enabled = logger.isEnabledFor(logging.DEBUG) if enabled is None else enabled
        self.start_time = None
        self.duration = None

    def __enter__(self):
        if not self.enabled:
            return self

        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if not self.enabled or self.start_time is None:
            return

        self.duration = time.perf_counter() - self.start_time
        logger.debug(f"{self.name} took {self.duration:.6f}s")


__all__ = [
    "CONFIG",
    "configure",
    "reset_config",
    "Profiler",
]

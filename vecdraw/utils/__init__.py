"""
vecdraw - Utilities Package
=========================
Logging and file helpers shared across the package.
"""

from vecdraw.utils.logger import (
    JsonFormatter, setup_logger, get_logger, LogCapture, log_exception
)
from vecdraw.utils.io import (
    load_csv, find_column, load_svg, save_svg, load_config, save_config
)

__all__ = [
    'JsonFormatter', 'setup_logger', 'get_logger', 'LogCapture', 'log_exception',
    'load_csv', 'find_column', 'load_svg', 'save_svg', 'load_config', 'save_config'
]

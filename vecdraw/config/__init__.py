"""
vecdraw - Configuration Package
=============================
Default settings consumed by vecdraw.core.CONFIG.
"""

from vecdraw.config.default import DEFAULT_CONFIG

__all__ = ["DEFAULT_CONFIG"]

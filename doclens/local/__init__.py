"""
Local package for the Document Lens desktop core.

This package provides the effective configuration through the
effective_settings object, plus the supervisor and database subpackages.
"""

from .config import effective_settings

__all__ = ["effective_settings"]

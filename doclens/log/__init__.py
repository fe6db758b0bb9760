"""
Logging module for the application.
This module provides the logging setup shared by the console entry point.
"""

from .setup import setup_logging

__all__ = ["setup_logging"]

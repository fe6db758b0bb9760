"""
This module initializes the local database management system.
It exposes the store manager, its bootstrap routine and their errors.
"""

from .errors import MigrationFailure, StoreError, StoreOpenFailure
from .initializer import InitReport, StoreInitializer
from .store import StoreDBManager

__all__ = [
    "StoreDBManager", "StoreInitializer", "InitReport",
    "StoreError", "StoreOpenFailure", "MigrationFailure",
]

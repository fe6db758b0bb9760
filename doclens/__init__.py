"""
Document Lens desktop core.

Bootstraps the local persistent store and supervises the bundled analysis
sidecar that the desktop application depends on.
"""

__version__ = "0.3.0"

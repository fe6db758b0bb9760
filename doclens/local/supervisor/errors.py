from pathlib import Path
from typing import List, Optional


class SidecarError(Exception):
    """Base class for every failure reported by the sidecar supervisor."""


class BinaryNotFound(SidecarError):
    """The packaged sidecar executable is missing from all candidate locations."""

    def __init__(self, candidates: List[Path]):
        self.candidates = candidates
        locations = ", ".join(str(p) for p in candidates) or "<none>"
        super().__init__(f"Sidecar executable not found. Searched: {locations}")


class SpawnFailure(SidecarError):
    """The OS refused to create the sidecar process, or it died during startup."""

    def __init__(self, message: str, exit_code: Optional[int] = None):
        self.exit_code = exit_code
        super().__init__(message)


class StartupTimeout(SidecarError):
    """Readiness was never observed within the startup budget."""

    def __init__(self, timeout: float, url: str):
        self.timeout = timeout
        self.url = url
        super().__init__(f"Sidecar at {url} did not become healthy within {timeout:.1f} seconds.")


class HealthCheckFailure(SidecarError):
    """A single liveness probe did not get an HTTP 200."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"Health check against {url} failed: {reason}")

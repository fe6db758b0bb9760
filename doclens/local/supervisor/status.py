from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional


class SidecarState(str, Enum):
    """Liveness state of the supervised sidecar process."""
    UNKNOWN = "unknown"
    STARTING = "starting"
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    STOPPED = "stopped"


@dataclass(frozen=True)
class SidecarStatus:
    """Read-only snapshot handed to the UI layer. Recomputed on every query."""
    running: bool
    url: Optional[str]
    pid: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"running": self.running, "url": self.url, "pid": self.pid}

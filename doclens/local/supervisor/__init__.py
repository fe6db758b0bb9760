"""
The Supervisor package.
Manages the lifecycle of the bundled sidecar server process.

This package contains the SidecarSupervisor class and its helper modules,
which together resolve, spawn, health-check, monitor and stop the sidecar.
"""
from .errors import BinaryNotFound, HealthCheckFailure, SidecarError, SpawnFailure, StartupTimeout
from .status import SidecarState, SidecarStatus
from .supervisor import SidecarSupervisor

__all__ = [
    'SidecarSupervisor', 'SidecarState', 'SidecarStatus',
    'SidecarError', 'BinaryNotFound', 'SpawnFailure', 'StartupTimeout', 'HealthCheckFailure',
]

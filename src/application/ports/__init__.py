"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.application_worker import (
    ApplicationWorkerProtocol,
    WorkerResponse,
)

__all__ = ["ApplicationWorkerProtocol", "WorkerResponse"]

"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Application Layer.
Handles all external dependencies (here: the HTTP application worker).

Architecture:
    - Implements Application Layer protocols (ApplicationWorkerProtocol)
    - Depends on external libraries (httpx)
    - No Domain business logic (only technical implementations)

Modules:
    - worker: HTTP client for the external application worker

Usage:
    >>> from src.infrastructure import HttpApplicationWorker
    >>> from src.infrastructure.worker import DEFAULT_WORKER_URL
"""

from .worker import DEFAULT_WORKER_URL, HttpApplicationWorker

__all__ = [
    "HttpApplicationWorker",
    "DEFAULT_WORKER_URL",
]

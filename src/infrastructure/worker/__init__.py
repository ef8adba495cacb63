"""
Worker Infrastructure Module

HTTP client for the external application worker.

Exports:
    - HttpApplicationWorker: httpx-based ApplicationWorkerProtocol implementation
    - DEFAULT_WORKER_URL: Worker endpoint used when no override is configured
"""

from .http_application_worker import DEFAULT_WORKER_URL, HttpApplicationWorker

__all__ = [
    "HttpApplicationWorker",
    "DEFAULT_WORKER_URL",
]

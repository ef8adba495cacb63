"""
HTTP Application Worker

Implements ApplicationWorkerProtocol over HTTP with httpx.

Responsibility:
    - Encode a JobApplication as a four-part multipart body
    - POST it to the worker URL
    - Decode the JSON answer into a WorkerResponse
    - Translate transport and decoding failures into DownstreamServiceError

Architecture Notes:
    - Part of Infrastructure Layer (external services)
    - One AsyncClient per call: the connection is opened and closed per request
    - Timeouts are disabled and nothing is retried
    - An httpx transport can be injected (httpx.MockTransport in tests)
"""

import logging
import os
import time
from typing import Optional

import httpx

from src.application.ports.application_worker import WorkerResponse
from src.domain.intake.entities.job_application import JobApplication
from src.domain.shared.exceptions import DownstreamServiceError

logger = logging.getLogger(__name__)

DEFAULT_WORKER_URL = "https://job-application-worker.malmiwithanage.workers.dev/"


class HttpApplicationWorker:
    """
    Worker client that forwards applications over HTTP.

    Configuration Priority (worker URL):
        1. worker_url constructor argument
        2. APPLICATION_WORKER_URL environment variable
        3. DEFAULT_WORKER_URL

    Examples:
        >>> worker = HttpApplicationWorker()
        >>> response = await worker.submit(application)
        >>> response.status_code
        200

        >>> # Test double transport
        >>> transport = httpx.MockTransport(lambda request: httpx.Response(200, json={}))
        >>> worker = HttpApplicationWorker(transport=transport)
    """

    def __init__(
        self,
        worker_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialize worker client.

        Args:
            worker_url: Worker endpoint (default from environment or DEFAULT_WORKER_URL)
            transport: Optional httpx transport override
        """
        self.worker_url = worker_url or os.getenv(
            "APPLICATION_WORKER_URL", DEFAULT_WORKER_URL
        )
        self.transport = transport

    async def submit(self, application: JobApplication) -> WorkerResponse:
        """
        POST the application to the worker and decode the answer.

        Args:
            application: Complete application

        Returns:
            WorkerResponse for any HTTP status the worker answers with

        Raises:
            DownstreamServiceError: On network failure or a non-JSON body
        """
        start_time = time.perf_counter()

        try:
            async with httpx.AsyncClient(
                timeout=None, transport=self.transport
            ) as client:
                response = await client.post(
                    self.worker_url,
                    data=application.form_fields(),
                    files=application.form_files(),
                )
        except httpx.HTTPError as e:
            logger.error(
                f"Worker request failed: {e.__class__.__name__} - {e} "
                f"(url={self.worker_url})"
            )
            raise DownstreamServiceError(
                DownstreamServiceError.TRANSPORT_FAILURE_MESSAGE
            ) from e

        duration = time.perf_counter() - start_time
        logger.info(
            f"Worker responded: {response.status_code} - {duration:.3f}s"
        )

        try:
            payload = response.json()
        except ValueError as e:
            logger.error(
                f"Worker returned a non-JSON body (status={response.status_code}): "
                f"{response.text[:200]!r}"
            )
            raise DownstreamServiceError(
                DownstreamServiceError.TRANSPORT_FAILURE_MESSAGE,
                status_code=response.status_code,
            ) from e

        return WorkerResponse(
            status_code=response.status_code,
            body=payload if isinstance(payload, dict) else {},
        )

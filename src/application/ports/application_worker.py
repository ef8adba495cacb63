"""
Application Worker Port

Protocol for the external worker that stores CVs and returns a public URL.
Infrastructure Layer implements it over HTTP (HttpApplicationWorker);
tests substitute an in-memory double.
"""

from typing import Any, Dict, Protocol

from pydantic import BaseModel, Field

from src.domain.intake.entities.job_application import JobApplication


class WorkerResponse(BaseModel):
    """
    Decoded answer from the worker.

    Attributes:
        status_code: HTTP status returned by the worker
        body: Decoded JSON object (empty dict when the worker sent a non-object)
    """

    status_code: int = Field(description="Worker HTTP status code")
    body: Dict[str, Any] = Field(default_factory=dict, description="Decoded JSON body")

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class ApplicationWorkerProtocol(Protocol):
    """
    Contract for forwarding an application to the worker.

    Implementations send the four parts as one multipart body, perform no
    retries and keep no state between calls.
    """

    async def submit(self, application: JobApplication) -> WorkerResponse:
        """
        Forward the application and return the worker's answer.

        Args:
            application: Complete application (all parts present)

        Returns:
            WorkerResponse with status code and JSON body, for both success
            and non-success statuses

        Raises:
            DownstreamServiceError: If no usable response was received
                (network failure, body that is not JSON)
        """
        ...

"""
Submit Application Use Case

Responsibility:
    Forwards one job application to the external worker and interprets
    its answer. This is the whole server-side path of the intake form.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses ApplicationWorkerProtocol (implemented in Infrastructure Layer)
    - Called by API Layer (applications.py router)
    - Returns SubmitApplicationResult DTO
    - Stateless: a pure function of (command, worker) -> result or exception

Contains:
    - SubmitApplicationUseCase: Main use case
    - SubmitApplicationResult: DTO for a successful submission

Does NOT contain:
    - HTTP concerns (belongs to API Layer)
    - Multipart encoding and transport (delegated to Infrastructure Layer)
    - File type/size checks (left to the worker)
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, Field

from src.application.commands.submit_application import SubmitApplicationCommand
from src.application.ports.application_worker import ApplicationWorkerProtocol
from src.domain.intake.constants import SUBMISSION_SUCCESS_MESSAGE
from src.domain.shared.exceptions import (
    DownstreamServiceError,
    MissingApplicationFieldsError,
)

logger = logging.getLogger(__name__)


# ============================================================================
# DATA TRANSFER OBJECTS (DTOs)
# ============================================================================


class SubmitApplicationResult(BaseModel):
    """
    Result of a successful submission.

    Both file fields are relayed exactly as the worker sent them.

    Attributes:
        message: Fixed confirmation message
        file_name: Name under which the worker stored the CV
        file_public_url: Public URL of the stored CV

    Examples:
        >>> result = SubmitApplicationResult(
        ...     file_name="jane-doe.pdf",
        ...     file_public_url="https://files.example.com/jane-doe.pdf",
        ... )
        >>> result.message
        'CV uploaded and data saved successfully!'
    """

    message: str = Field(default=SUBMISSION_SUCCESS_MESSAGE)
    file_name: Optional[Any] = Field(
        default=None, description="Stored filename reported by the worker"
    )
    file_public_url: Optional[Any] = Field(
        default=None, description="Public URL reported by the worker"
    )


# ============================================================================
# USE CASE
# ============================================================================


class SubmitApplicationUseCase:
    """
    Use case for forwarding a job application to the worker.

    Process Flow:
        1. Check that all four parts are present (else 400, no worker call)
        2. Build JobApplication from the command
        3. Forward it through the worker port
        4. Non-success status -> DownstreamServiceError with the worker's
           `error` text or "Something went wrong!"
        5. Success -> SubmitApplicationResult with fileName/filePublicUrl

    No retries are attempted at any step.

    Examples:
        >>> use_case = SubmitApplicationUseCase(worker=HttpApplicationWorker())
        >>> result = await use_case.execute(command)
        >>> result.file_public_url
        'https://files.example.com/jane-doe.pdf'
    """

    def __init__(self, worker: ApplicationWorkerProtocol) -> None:
        """
        Initialize use case with its worker dependency.

        Args:
            worker: Port used to reach the external worker
        """
        self.worker = worker

    async def execute(
        self, command: SubmitApplicationCommand
    ) -> SubmitApplicationResult:
        """
        Forward the submission and interpret the worker's answer.

        Args:
            command: Parts received by the proxy

        Returns:
            SubmitApplicationResult on worker success

        Raises:
            MissingApplicationFieldsError: If any part is absent or empty
            DownstreamServiceError: If the worker failed or was unreachable
        """
        try:
            application = command.to_application()
        except MissingApplicationFieldsError as e:
            logger.info(f"Rejected incomplete application, missing: {e.missing_fields}")
            raise

        logger.info(
            f"Forwarding application with CV '{application.cv.filename}' "
            f"({application.cv.size_bytes} bytes)"
        )

        response = await self.worker.submit(application)

        if not response.is_success:
            message = (
                response.body.get("error")
                or DownstreamServiceError.UNSUCCESSFUL_RESPONSE_MESSAGE
            )
            logger.warning(
                f"Worker rejected application: status={response.status_code}, "
                f"error={message!r}"
            )
            raise DownstreamServiceError(message, status_code=response.status_code)

        result = SubmitApplicationResult(
            file_name=response.body.get("fileName"),
            file_public_url=response.body.get("filePublicUrl"),
        )
        logger.info(f"Application stored by worker as '{result.file_name}'")
        return result

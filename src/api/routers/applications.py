"""
API Router for Job Applications

Responsibility:
    HTTP interface of the submission proxy. Receives the multipart body sent
    by the form client and delegates to SubmitApplicationUseCase.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (SubmitApplicationUseCase)
    - Uses dependency injection for the worker (test doubles via dependency_overrides)
    - No business logic - pure HTTP concerns

Contains:
    - POST /submitApplication - Forward an application to the worker

Does NOT contain:
    - Presence rules (delegated to SubmitApplicationCommand)
    - Worker transport (delegated to Infrastructure Layer)
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel, ConfigDict, Field

from src.api.schemas.common import ErrorResponse
from src.application.commands.submit_application import SubmitApplicationCommand
from src.application.ports.application_worker import ApplicationWorkerProtocol
from src.application.services.submit_application_use_case import (
    SubmitApplicationUseCase,
)
from src.domain.intake.constants import SUBMISSION_SUCCESS_MESSAGE
from src.domain.intake.value_objects.cv_file import CvFile
from src.domain.shared.exceptions import DomainException, DownstreamServiceError
from src.infrastructure.worker.http_application_worker import HttpApplicationWorker

logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class SubmitApplicationResponse(BaseModel):
    """
    Response model for a successful submission.

    Field names on the wire are camelCase (fileName, filePublicUrl) to match
    what the worker returns and what the form client expects.

    Attributes:
        message: Fixed confirmation message
        file_name: Stored filename reported by the worker (wire: fileName)
        file_public_url: Public URL of the stored CV (wire: filePublicUrl)
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "message": SUBMISSION_SUCCESS_MESSAGE,
                "fileName": "1718037300-jane-doe.pdf",
                "filePublicUrl": "https://files.example.com/1718037300-jane-doe.pdf",
            }
        },
    )

    message: str = Field(default=SUBMISSION_SUCCESS_MESSAGE)
    file_name: Optional[Any] = Field(default=None, alias="fileName")
    file_public_url: Optional[Any] = Field(default=None, alias="filePublicUrl")


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    tags=["applications"],
    responses={
        400: {
            "model": ErrorResponse,
            "description": "Bad Request - A required part is missing or empty",
        },
        500: {
            "model": ErrorResponse,
            "description": "Internal Server Error - Worker failed or was unreachable",
        },
    },
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_application_worker() -> ApplicationWorkerProtocol:
    """Worker client used to reach the external application worker."""
    return HttpApplicationWorker()


def get_submit_application_use_case(
    worker: ApplicationWorkerProtocol = Depends(get_application_worker),
) -> SubmitApplicationUseCase:
    """
    Dependency injection for SubmitApplicationUseCase.

    Args:
        worker: Injected worker port (override in tests)

    Returns:
        SubmitApplicationUseCase bound to the worker
    """
    return SubmitApplicationUseCase(worker=worker)


async def _read_cv(cv: Optional[UploadFile]) -> Optional[CvFile]:
    if cv is None:
        return None
    content = await cv.read()
    return CvFile(
        filename=cv.filename or "",
        content_type=cv.content_type or "application/octet-stream",
        content=content,
    )


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/submitApplication",
    status_code=status.HTTP_200_OK,
    response_model=SubmitApplicationResponse,
    summary="Submit a job application",
    description=(
        "Forward a job application (name, email, phone_number, cv) to the "
        "application worker and relay its answer. All four multipart parts "
        "are required. The CV is forwarded without type or size checks."
    ),
)
async def submit_application(
    name: Optional[str] = Form(default=None, description="Candidate full name"),
    email: Optional[str] = Form(default=None, description="Candidate email"),
    phone_number: Optional[str] = Form(
        default=None, description="Candidate phone number"
    ),
    cv: Optional[UploadFile] = File(default=None, description="Resume (PDF or DOCX)"),
    use_case: SubmitApplicationUseCase = Depends(get_submit_application_use_case),
) -> SubmitApplicationResponse:
    """
    Forward a job application to the worker.

    Process Flow:
        1. Read the four multipart parts (all optional at schema level)
        2. Build SubmitApplicationCommand
        3. Delegate to SubmitApplicationUseCase
        4. Return 200 with message, fileName, filePublicUrl

    Raises:
        MissingApplicationFieldsError: -> 400 (global handler)
        DownstreamServiceError: -> 500 with the worker's error text (global handler)
        HTTPException 500: For any unexpected error

    Examples:
        >>> # Using curl
        >>> curl -X POST "http://localhost:8000/api/submitApplication" \\
        ...      -F "name=Jane Doe" -F "email=jane@x.com" \\
        ...      -F "phone_number=+1234567890" -F "cv=@jane.pdf;type=application/pdf"
        {
            "message": "CV uploaded and data saved successfully!",
            "fileName": "1718037300-jane-doe.pdf",
            "filePublicUrl": "https://files.example.com/1718037300-jane-doe.pdf"
        }
    """
    try:
        command = SubmitApplicationCommand(
            name=name,
            email=email,
            phone_number=phone_number,
            cv=await _read_cv(cv),
        )
        result = await use_case.execute(command)
    except DomainException:
        raise
    except Exception as e:
        logger.error(
            f"Unexpected error while submitting application: "
            f"{e.__class__.__name__} - {e}",
            exc_info=True,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=DownstreamServiceError.TRANSPORT_FAILURE_MESSAGE,
        ) from e

    return SubmitApplicationResponse(
        message=result.message,
        file_name=result.file_name,
        file_public_url=result.file_public_url,
    )

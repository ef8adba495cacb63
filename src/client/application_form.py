"""
Application Form Client

Client-side state of the job application form and its submission lifecycle.

Responsibility:
    - Hold the four field values, the selected CV, the submitting flag,
      the result message and the per-field error mapping
    - Enforce the picker boundary (single PDF/DOCX file)
    - Validate before submitting, reporting every failing field at once
    - POST the multipart body to the submission proxy and update state
      from the answer

Architecture Notes:
    - Presentation state only: nothing here is persisted or shared
    - The HTTP client is injected, so the form can be driven against the
      in-process app (httpx.ASGITransport) or a remote proxy
    - `is_submitting` is advisory UI state, not a lock
"""

import logging
from typing import Dict, Optional, Sequence

import httpx

from src.domain.intake.constants import (
    CV_FIELD,
    EMAIL_FIELD,
    NAME_FIELD,
    PHONE_NUMBER_FIELD,
    SUBMISSION_SUCCESS_MESSAGE,
)
from src.domain.intake.services.application_validator import validate_form_fields
from src.domain.intake.value_objects.cv_file import CvFile
from src.domain.shared.exceptions import DownstreamServiceError

logger = logging.getLogger(__name__)

SUBMIT_APPLICATION_PATH = "/api/submitApplication"
CLIENT_FAILURE_MESSAGE = "There was an error processing your request."

TEXT_FIELDS = (NAME_FIELD, EMAIL_FIELD, PHONE_NUMBER_FIELD)


class ApplicationForm:
    """
    Stateful job application form.

    Attributes:
        name: Full name field
        email: Email field
        phone_number: Phone number field
        cv: Selected resume, None until a file passes the picker
        is_submitting: True while a submission is in flight
        message: Result of the last submission (None before/while submitting)
        errors: Field name -> validation message

    Examples:
        >>> form = ApplicationForm()
        >>> form.update_field("name", "Jane Doe")
        >>> form.validate()
        False
        >>> sorted(form.errors)
        ['cv', 'email', 'phone_number']

        >>> async with httpx.AsyncClient(base_url="http://localhost:8000") as client:
        ...     await form.submit(client)
    """

    def __init__(self) -> None:
        self.name: str = ""
        self.email: str = ""
        self.phone_number: str = ""
        self.cv: Optional[CvFile] = None
        self.is_submitting: bool = False
        self.message: Optional[str] = None
        self.errors: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Field updates
    # ------------------------------------------------------------------

    def update_field(self, field: str, value: str) -> None:
        """
        Replace a text field value and clear its error.

        Args:
            field: One of "name", "email", "phone_number"
            value: New field value (stored as typed, not trimmed)

        Raises:
            ValueError: If field is not a text field (use select_files for the CV)
        """
        if field not in TEXT_FIELDS:
            raise ValueError(f"Unknown text field: {field!r}")
        setattr(self, field, value)
        self.errors.pop(field, None)

    def select_files(self, files: Sequence[CvFile]) -> bool:
        """
        Picker boundary: accept a single PDF or DOCX file.

        A drop or selection of zero files, several files, or a file of another
        type is rejected as a whole and leaves the form untouched. An accepted
        file replaces any previous selection and clears the CV error.

        Args:
            files: Files dropped or chosen in one gesture

        Returns:
            True if a file was accepted
        """
        if len(files) != 1:
            logger.debug(f"Rejected file selection: expected 1 file, got {len(files)}")
            return False

        selected = files[0]
        if not selected.is_accepted_type():
            logger.debug(
                f"Rejected file '{selected.filename}' ({selected.content_type}): "
                f"not a PDF or DOCX"
            )
            return False

        self.cv = selected
        self.errors.pop(CV_FIELD, None)
        return True

    def reset(self) -> None:
        """Clear all four fields and the error mapping."""
        self.name = ""
        self.email = ""
        self.phone_number = ""
        self.cv = None
        self.errors = {}

    # ------------------------------------------------------------------
    # Validation & submission
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Validate every field and replace the error mapping.

        Returns:
            True if the form can be submitted
        """
        self.errors = validate_form_fields(
            self.name, self.email, self.phone_number, self.cv
        )
        return not self.errors

    def _multipart_fields(self) -> Dict[str, str]:
        return {
            NAME_FIELD: self.name,
            EMAIL_FIELD: self.email,
            PHONE_NUMBER_FIELD: self.phone_number,
        }

    async def submit(self, http_client: httpx.AsyncClient) -> bool:
        """
        Validate, then POST the application to the submission proxy.

        Process Flow:
            1. validate(); on failure return immediately (no request)
            2. Set is_submitting, clear message
            3. POST name, email, phone_number, cv as multipart
            4. Success -> fixed success message, fields and errors reset
            5. Non-success -> server `error` text or "Something went wrong!"
            6. Transport failure / unreadable body -> generic client message
            7. is_submitting cleared in every path

        Args:
            http_client: Client whose base_url points at the proxy

        Returns:
            True if the proxy accepted the application
        """
        if not self.validate():
            return False

        self.is_submitting = True
        self.message = None

        try:
            response = await http_client.post(
                SUBMIT_APPLICATION_PATH,
                data=self._multipart_fields(),
                files={
                    CV_FIELD: (self.cv.filename, self.cv.content, self.cv.content_type)
                },
            )
            data = response.json()

            if response.is_success:
                self.message = SUBMISSION_SUCCESS_MESSAGE
                self.reset()
                return True

            error = data.get("error") if isinstance(data, dict) else None
            self.message = error or DownstreamServiceError.UNSUCCESSFUL_RESPONSE_MESSAGE
            logger.warning(
                f"Submission rejected: status={response.status_code}, message={self.message!r}"
            )
            return False
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Submission failed: {e.__class__.__name__} - {e}")
            self.message = CLIENT_FAILURE_MESSAGE
            return False
        finally:
            self.is_submitting = False

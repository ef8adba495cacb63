"""
SubmitApplicationCommand - CQRS Write Command

Encapsulates the parts received by the submission proxy.

Responsibility:
    - Data holder for one submission, exactly as parsed from the multipart body
    - Presence check of the four required parts (validate_business_rules)
    - Conversion to the JobApplication entity once complete

Architecture Notes:
    - Part of Application Layer (orchestration)
    - Used by SubmitApplicationUseCase
    - Immutable data structure (Command pattern)
    - Every part is optional here: an incomplete body is a business error
      (HTTP 400), not a schema error (HTTP 422)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.intake.entities.job_application import JobApplication
from src.domain.intake.services.application_validator import find_missing_fields
from src.domain.intake.value_objects.cv_file import CvFile
from src.domain.shared.exceptions import MissingApplicationFieldsError


class SubmitApplicationCommand(BaseModel):
    """
    Command carrying a raw submission.

    Attributes:
        name: `name` part, None when absent
        email: `email` part, None when absent
        phone_number: `phone_number` part, None when absent
        cv: `cv` file part, None when absent

    Examples:
        >>> command = SubmitApplicationCommand(name="Jane Doe", email="jane@x.com")
        >>> command.missing_fields()
        ['phone_number', 'cv']
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Candidate full name")
    email: Optional[str] = Field(default=None, description="Candidate email")
    phone_number: Optional[str] = Field(
        default=None, description="Candidate phone number"
    )
    cv: Optional[CvFile] = Field(default=None, description="Uploaded resume")

    def missing_fields(self) -> list[str]:
        """Names of absent or empty parts, in submission order."""
        return find_missing_fields(self.name, self.email, self.phone_number, self.cv)

    def validate_business_rules(self) -> None:
        """
        Ensure all four parts are present and non-empty.

        Raises:
            MissingApplicationFieldsError: If any part is absent or empty
        """
        missing = self.missing_fields()
        if missing:
            raise MissingApplicationFieldsError(missing_fields=missing)

    def to_application(self) -> JobApplication:
        """
        Build the JobApplication entity.

        Raises:
            MissingApplicationFieldsError: If any part is absent or empty
        """
        self.validate_business_rules()
        return JobApplication(
            name=self.name,
            email=self.email,
            phone_number=self.phone_number,
            cv=self.cv,
        )

"""
JobApplication Entity.

A candidate's submission: name, email, phone number and CV.
The entity is transient: it is built for one HTTP round trip and discarded,
so it carries no identifier and no lifecycle state.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from src.domain.intake.constants import (
    CV_FIELD,
    EMAIL_FIELD,
    NAME_FIELD,
    PHONE_NUMBER_FIELD,
)
from src.domain.intake.value_objects.cv_file import CvFile


@dataclass(frozen=True)
class JobApplication:
    """
    Complete job application ready to be forwarded.

    Instances are only created once all four parts are known to be present
    (see application_validator.find_missing_fields), so every attribute is
    non-empty.

    Attributes:
        name: Candidate full name
        email: Candidate email address
        phone_number: Candidate phone number (free-form)
        cv: Resume document

    Examples:
        >>> application = JobApplication(
        ...     name="Jane Doe",
        ...     email="jane@x.com",
        ...     phone_number="+1234567890",
        ...     cv=CvFile(filename="jane.pdf", content_type="application/pdf", content=b"%PDF"),
        ... )
        >>> application.form_fields()
        {'name': 'Jane Doe', 'email': 'jane@x.com', 'phone_number': '+1234567890'}
    """

    name: str
    email: str
    phone_number: str
    cv: CvFile

    def form_fields(self) -> Dict[str, str]:
        """Text parts of the multipart body, keyed by part name."""
        return {
            NAME_FIELD: self.name,
            EMAIL_FIELD: self.email,
            PHONE_NUMBER_FIELD: self.phone_number,
        }

    def form_files(self) -> Dict[str, Tuple[str, bytes, str]]:
        """File part of the multipart body, in (filename, content, content_type) form."""
        return {CV_FIELD: (self.cv.filename, self.cv.content, self.cv.content_type)}

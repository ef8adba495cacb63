"""
Application Validator

Domain rules for a job application, used at two points of the intake path:

    - validate_form_fields(): the form client's full check before submit.
      Collects every failing field so the candidate sees all problems at once.
    - find_missing_fields(): the proxy's presence check on received parts.
      Deliberately weaker (no trimming, no email pattern, no file type),
      it only guards against incomplete multipart bodies.
"""

from typing import Dict, List, Optional

from src.domain.intake.constants import (
    CV_FIELD,
    CV_REQUIRED_MESSAGE,
    EMAIL_FIELD,
    EMAIL_INVALID_MESSAGE,
    EMAIL_PATTERN,
    NAME_FIELD,
    NAME_REQUIRED_MESSAGE,
    PHONE_NUMBER_FIELD,
    PHONE_NUMBER_REQUIRED_MESSAGE,
)
from src.domain.intake.value_objects.cv_file import CvFile


def is_valid_email(email: Optional[str]) -> bool:
    """
    Check the basic local@domain.tld shape.

    Examples:
        >>> is_valid_email("emma@gmail.com")
        True
        >>> is_valid_email("emma@@gmail")
        False
        >>> is_valid_email("emma.com")
        False
        >>> is_valid_email("")
        False
    """
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_form_fields(
    name: str,
    email: str,
    phone_number: str,
    cv: Optional[CvFile],
) -> Dict[str, str]:
    """
    Validate all form fields and return a field -> message mapping.

    An empty mapping means the form is valid. Every rule is evaluated,
    failures are never short-circuited.

    Args:
        name: Must be non-empty after trimming whitespace
        email: Must match EMAIL_PATTERN (not trimmed)
        phone_number: Must be non-empty after trimming whitespace
        cv: Must be present

    Returns:
        Mapping of failing field name to user-facing message
    """
    errors: Dict[str, str] = {}

    if not (name or "").strip():
        errors[NAME_FIELD] = NAME_REQUIRED_MESSAGE

    if not is_valid_email(email):
        errors[EMAIL_FIELD] = EMAIL_INVALID_MESSAGE

    if not (phone_number or "").strip():
        errors[PHONE_NUMBER_FIELD] = PHONE_NUMBER_REQUIRED_MESSAGE

    if cv is None:
        errors[CV_FIELD] = CV_REQUIRED_MESSAGE

    return errors


def find_missing_fields(
    name: Optional[str],
    email: Optional[str],
    phone_number: Optional[str],
    cv: Optional[CvFile],
) -> List[str]:
    """
    Return the names of parts that are absent or empty, in submission order.

    Text parts are empty when None or "". The file part is empty when it has
    no filename or no bytes.
    """
    missing: List[str] = []

    for field_name, value in (
        (NAME_FIELD, name),
        (EMAIL_FIELD, email),
        (PHONE_NUMBER_FIELD, phone_number),
    ):
        if not value:
            missing.append(field_name)

    if cv is None or cv.is_empty():
        missing.append(CV_FIELD)

    return missing

"""
Intake Subdomain Module

Business rules for job-application intake: the application entity, the CV
document value object, accepted CV formats and field validation.

Exports:
    Entities:
        - JobApplication: Complete application ready to be forwarded

    Value Objects:
        - CvFile: Resume document

    Services:
        - validate_form_fields, find_missing_fields, is_valid_email

Usage:
    >>> from src.domain.intake import JobApplication, CvFile
    >>> from src.domain.intake.services import validate_form_fields
"""

from .entities import JobApplication
from .services import find_missing_fields, is_valid_email, validate_form_fields
from .value_objects import CvFile

__all__ = [
    "JobApplication",
    "CvFile",
    "is_valid_email",
    "validate_form_fields",
    "find_missing_fields",
]

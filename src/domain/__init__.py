"""
Domain Layer - Core Business Logic

Contains the business rules of job-application intake: the application
entity, the CV value object, validation rules and domain exceptions.
Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Dependency Inversion: Application Layer defines ports, Infrastructure implements

Subdomains:
    - intake: Application entity, CV document, validation rules
    - shared: Cross-subdomain concepts (exceptions)

Usage:
    >>> from src.domain import JobApplication, CvFile, DomainException
    >>> from src.domain.intake.services import validate_form_fields
"""

# Intake Subdomain
from .intake import (
    CvFile,
    JobApplication,
    find_missing_fields,
    is_valid_email,
    validate_form_fields,
)

# Shared Domain
from .shared import (
    DomainException,
    DownstreamServiceError,
    MissingApplicationFieldsError,
)

__all__ = [
    # Intake Subdomain
    "JobApplication",
    "CvFile",
    "is_valid_email",
    "validate_form_fields",
    "find_missing_fields",
    # Shared Domain
    "DomainException",
    "MissingApplicationFieldsError",
    "DownstreamServiceError",
]

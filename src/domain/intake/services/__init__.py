"""
Intake Domain Services

Exports:
    - is_valid_email: Basic local@domain.tld check
    - validate_form_fields: Full form check, collects every failure
    - find_missing_fields: Presence check used by the submission proxy
"""

from .application_validator import (
    find_missing_fields,
    is_valid_email,
    validate_form_fields,
)

__all__ = [
    "is_valid_email",
    "validate_form_fields",
    "find_missing_fields",
]

"""
Client Layer - Application Form

Client-side state and submission logic of the job application form.
Driven by scripts/submit_application.py (terminal) or by tests.

Exports:
    - ApplicationForm: Form state, picker boundary, validation and submission
"""

from .application_form import (
    CLIENT_FAILURE_MESSAGE,
    SUBMIT_APPLICATION_PATH,
    ApplicationForm,
)

__all__ = [
    "ApplicationForm",
    "SUBMIT_APPLICATION_PATH",
    "CLIENT_FAILURE_MESSAGE",
]

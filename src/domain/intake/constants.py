"""
Intake Domain Constants

Accepted CV formats, field names and user-facing messages shared by the
form client and the submission proxy.
"""

import re
from typing import Dict, Set


# ============================================================================
# FORM FIELDS - multipart part names
# ============================================================================

NAME_FIELD = "name"
EMAIL_FIELD = "email"
PHONE_NUMBER_FIELD = "phone_number"
CV_FIELD = "cv"


# ============================================================================
# CV FORMATS - PDF and DOCX only
# ============================================================================

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

ACCEPTED_CV_TYPES: Dict[str, Set[str]] = {
    PDF_MIME_TYPE: {".pdf"},
    DOCX_MIME_TYPE: {".docx"},
}

ACCEPTED_CV_EXTENSIONS: Set[str] = {
    extension for extensions in ACCEPTED_CV_TYPES.values() for extension in extensions
}


# ============================================================================
# VALIDATION
# ============================================================================

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_REQUIRED_MESSAGE = "Name is required."
EMAIL_INVALID_MESSAGE = "Enter a valid email (e.g., emma@gmail.com)."
PHONE_NUMBER_REQUIRED_MESSAGE = "Phone number is required."
CV_REQUIRED_MESSAGE = "Please upload your CV (PDF or DOCX)."

SUBMISSION_SUCCESS_MESSAGE = "CV uploaded and data saved successfully!"

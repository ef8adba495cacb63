"""
CvFile Value Object

Represents the resume attached to a job application: original filename,
declared content type and raw bytes.

Responsibility:
    - Carry the uploaded document unchanged between layers
    - Answer format questions (is it a PDF/DOCX?) for the picker boundary

Architecture Notes:
    - Value Object (immutable, defined by values)
    - Uses Pydantic for validation
    - Format checks are advisory: the proxy forwards any type it receives
"""

from pathlib import PurePath

from pydantic import BaseModel, ConfigDict, Field

from src.domain.intake.constants import ACCEPTED_CV_EXTENSIONS, ACCEPTED_CV_TYPES


class CvFile(BaseModel):
    """
    Immutable resume document.

    Attributes:
        filename: Original filename as chosen by the candidate
        content_type: MIME type declared by the picker or browser
        content: Raw file bytes

    Examples:
        >>> cv = CvFile(filename="jane.pdf", content_type="application/pdf", content=b"%PDF-1.7")
        >>> cv.extension
        '.pdf'
        >>> cv.is_accepted_type()
        True
        >>> CvFile(filename="notes.txt", content_type="text/plain", content=b"hi").is_accepted_type()
        False
    """

    model_config = ConfigDict(frozen=True)

    filename: str = Field(description="Original filename")
    content_type: str = Field(
        default="application/octet-stream", description="Declared MIME type"
    )
    content: bytes = Field(default=b"", repr=False, description="Raw file bytes")

    @property
    def extension(self) -> str:
        """Lower-cased filename extension including the dot ('' if none)."""
        return PurePath(self.filename).suffix.lower()

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    def is_empty(self) -> bool:
        """A file without a name or without bytes counts as not uploaded."""
        return not self.filename or not self.content

    def is_accepted_type(self) -> bool:
        """
        Check whether the file is a PDF or DOCX.

        A file is accepted when either its MIME type or its extension is
        one of the accepted CV formats, mirroring how browser file pickers
        match an `accept` list.
        """
        if self.content_type in ACCEPTED_CV_TYPES:
            return True
        return self.extension in ACCEPTED_CV_EXTENSIONS

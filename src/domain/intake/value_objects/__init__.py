"""
Intake Value Objects

Exports:
    - CvFile: Immutable resume document (filename, content type, bytes)
"""

from .cv_file import CvFile

__all__ = ["CvFile"]

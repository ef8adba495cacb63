"""
Intake Entities

Exports:
    - JobApplication: Complete application ready to be forwarded
"""

from .job_application import JobApplication

__all__ = ["JobApplication"]

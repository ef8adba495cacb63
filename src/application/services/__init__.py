"""
Application Services

Responsibility:
    Use cases that coordinate domain rules and infrastructure ports.

Contains:
    - SubmitApplicationUseCase: Forward a job application to the worker

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure calls (use dependency injection)
"""

from src.application.services.submit_application_use_case import (
    SubmitApplicationResult,
    SubmitApplicationUseCase,
)

__all__ = ["SubmitApplicationUseCase", "SubmitApplicationResult"]

"""
Shared Domain Module

Shared domain concepts used across all subdomains.

This module exports:
    - DomainException: Base exception for all domain errors
    - MissingApplicationFieldsError: Incomplete submission (HTTP 400)
    - DownstreamServiceError: Worker failure (HTTP 500)
"""

from .exceptions import (
    DomainException,
    DownstreamServiceError,
    MissingApplicationFieldsError,
)

__all__ = [
    "DomainException",
    "MissingApplicationFieldsError",
    "DownstreamServiceError",
]

"""
API schemas shared by the submission proxy.

ErrorResponse is the {"error": ...} body returned for every failure.
"""

from src.api.schemas.common import ErrorResponse

__all__ = ["ErrorResponse"]

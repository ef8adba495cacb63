"""
Application Commands (CQRS write side)

Contains:
    - SubmitApplicationCommand: Parts received by the submission proxy
"""

from src.application.commands.submit_application import SubmitApplicationCommand

__all__ = ["SubmitApplicationCommand"]

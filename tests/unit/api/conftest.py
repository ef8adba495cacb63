"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI TestClient wired to the mocked worker
- Multipart payload helpers
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.api.routers.applications import get_application_worker


@pytest.fixture
def app(mock_worker):
    """FastAPI app whose worker dependency is the mocked worker."""
    application = create_app()
    application.dependency_overrides[get_application_worker] = lambda: mock_worker
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for testing endpoints.

    Returns TestClient configured with the FastAPI app.
    """
    return TestClient(app)


@pytest.fixture
def application_form_data():
    """Text parts of a complete submission."""
    return {
        "name": "Jane Doe",
        "email": "jane@x.com",
        "phone_number": "+1234567890",
    }


@pytest.fixture
def application_files(sample_pdf_cv):
    """File part of a complete submission."""
    return {
        "cv": (sample_pdf_cv.filename, sample_pdf_cv.content, sample_pdf_cv.content_type)
    }

"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, integration).

Fixtures:
    - sample_pdf_cv / sample_docx_cv: CvFile documents in both accepted formats
    - sample_application: Complete JobApplication
    - mock_worker: ApplicationWorkerProtocol double answering with success
    - worker_success_body: JSON the mock worker returns on success

Architecture Notes:
    - No fixture touches the network: the worker is always a double
      (Mock/AsyncMock here, httpx.MockTransport in worker and integration tests)
"""

import logging
from unittest.mock import AsyncMock, Mock

import pytest

from src.application.ports.application_worker import WorkerResponse
from src.domain.intake.constants import DOCX_MIME_TYPE, PDF_MIME_TYPE
from src.domain.intake.entities.job_application import JobApplication
from src.domain.intake.value_objects.cv_file import CvFile

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# CV FIXTURES
# ============================================================================


@pytest.fixture
def sample_pdf_cv() -> CvFile:
    """Minimal PDF resume."""
    return CvFile(
        filename="jane-doe.pdf",
        content_type=PDF_MIME_TYPE,
        content=b"%PDF-1.7\n%\xe2\xe3\xcf\xd3\n1 0 obj\n<<>>\nendobj\n%%EOF",
    )


@pytest.fixture
def sample_docx_cv() -> CvFile:
    """Minimal DOCX resume (zip header only)."""
    return CvFile(
        filename="jane-doe.docx",
        content_type=DOCX_MIME_TYPE,
        content=b"PK\x03\x04" + b"\x00" * 64,
    )


@pytest.fixture
def sample_application(sample_pdf_cv) -> JobApplication:
    """Complete application with a PDF resume."""
    return JobApplication(
        name="Jane Doe",
        email="jane@x.com",
        phone_number="+1234567890",
        cv=sample_pdf_cv,
    )


# ============================================================================
# WORKER FIXTURES
# ============================================================================


@pytest.fixture
def worker_success_body() -> dict:
    """Body the worker returns after storing a CV."""
    return {
        "fileName": "1718037300-jane-doe.pdf",
        "filePublicUrl": "https://files.example.com/1718037300-jane-doe.pdf",
    }


@pytest.fixture
def mock_worker(worker_success_body):
    """
    Mocked ApplicationWorkerProtocol.

    Default: the worker stores the CV and answers 200 with worker_success_body.
    Tests change `mock_worker.submit.return_value` / `side_effect` as needed.
    """
    mock = Mock()
    mock.submit = AsyncMock(
        return_value=WorkerResponse(status_code=200, body=worker_success_body)
    )
    return mock

"""
Tests for HttpApplicationWorker (httpx adapter for the application worker).

All HTTP traffic goes through httpx.MockTransport - no network access.

Covers:
- Worker URL configuration priority
- Multipart encoding of the four parts
- Decoding of success and non-success answers
- Transport and decoding failures -> DownstreamServiceError
"""

import httpx
import pytest

from src.domain.shared.exceptions import DownstreamServiceError
from src.infrastructure.worker.http_application_worker import (
    DEFAULT_WORKER_URL,
    HttpApplicationWorker,
)


def _worker(handler, **kwargs) -> HttpApplicationWorker:
    return HttpApplicationWorker(transport=httpx.MockTransport(handler), **kwargs)


# ============================================================================
# CONFIGURATION
# ============================================================================


def test_default_worker_url(monkeypatch):
    monkeypatch.delenv("APPLICATION_WORKER_URL", raising=False)

    assert HttpApplicationWorker().worker_url == DEFAULT_WORKER_URL


def test_worker_url_from_environment(monkeypatch):
    monkeypatch.setenv("APPLICATION_WORKER_URL", "https://worker.internal/upload")

    assert HttpApplicationWorker().worker_url == "https://worker.internal/upload"


def test_explicit_worker_url_wins(monkeypatch):
    monkeypatch.setenv("APPLICATION_WORKER_URL", "https://worker.internal/upload")

    worker = HttpApplicationWorker(worker_url="https://other.example.com/")

    assert worker.worker_url == "https://other.example.com/"


# ============================================================================
# REQUEST ENCODING
# ============================================================================


@pytest.mark.asyncio
async def test_submit_posts_multipart_body(sample_application, worker_success_body):
    """Test that all four parts reach the worker in one multipart POST."""
    # Arrange
    captured = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["method"] = request.method
        captured["url"] = str(request.url)
        captured["content_type"] = request.headers["content-type"]
        captured["body"] = request.content
        return httpx.Response(200, json=worker_success_body)

    worker = _worker(handler, worker_url="https://worker.example.com/")

    # Act
    await worker.submit(sample_application)

    # Assert
    assert captured["method"] == "POST"
    assert captured["url"] == "https://worker.example.com/"
    assert captured["content_type"].startswith("multipart/form-data")
    body = captured["body"]
    assert b'name="name"' in body and b"Jane Doe" in body
    assert b'name="email"' in body and b"jane@x.com" in body
    assert b'name="phone_number"' in body and b"+1234567890" in body
    assert b'name="cv"; filename="jane-doe.pdf"' in body
    assert b"Content-Type: application/pdf" in body
    assert sample_application.cv.content in body


# ============================================================================
# RESPONSE DECODING
# ============================================================================


@pytest.mark.asyncio
async def test_submit_success_response(sample_application, worker_success_body):
    # Arrange
    worker = _worker(lambda request: httpx.Response(200, json=worker_success_body))

    # Act
    response = await worker.submit(sample_application)

    # Assert
    assert response.is_success
    assert response.status_code == 200
    assert response.body == worker_success_body


@pytest.mark.asyncio
async def test_submit_error_response_is_returned_not_raised(sample_application):
    """Test that non-success statuses are returned for the use case to interpret."""
    # Arrange
    worker = _worker(lambda request: httpx.Response(500, json={"error": "disk full"}))

    # Act
    response = await worker.submit(sample_application)

    # Assert
    assert not response.is_success
    assert response.status_code == 500
    assert response.body == {"error": "disk full"}


@pytest.mark.asyncio
async def test_submit_non_object_json_gives_empty_body(sample_application):
    worker = _worker(lambda request: httpx.Response(200, json=["unexpected"]))

    response = await worker.submit(sample_application)

    assert response.body == {}


# ============================================================================
# FAILURES
# ============================================================================


@pytest.mark.asyncio
async def test_submit_transport_failure(sample_application):
    """Test that a DNS/connection failure becomes DownstreamServiceError."""
    # Arrange
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Name or service not known", request=request)

    worker = _worker(handler)

    # Act & Assert
    with pytest.raises(DownstreamServiceError) as exc_info:
        await worker.submit(sample_application)

    assert exc_info.value.message == "There was an error processing your request"
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_submit_non_json_body(sample_application):
    """Test that an HTML error page from the worker becomes DownstreamServiceError."""
    # Arrange
    worker = _worker(
        lambda request: httpx.Response(
            502, text="<html>Bad Gateway</html>", headers={"content-type": "text/html"}
        )
    )

    # Act & Assert
    with pytest.raises(DownstreamServiceError) as exc_info:
        await worker.submit(sample_application)

    assert exc_info.value.message == "There was an error processing your request"
    assert exc_info.value.status_code == 502

"""
Tests for SubmitApplicationUseCase.

Tests cover:
- Successful forwarding and result mapping
- Short-circuit on missing parts (worker untouched)
- Worker non-success statuses (relayed error / fallback)
- Worker transport failures
"""

import pytest

from src.application.commands.submit_application import SubmitApplicationCommand
from src.application.ports.application_worker import WorkerResponse
from src.application.services.submit_application_use_case import (
    SubmitApplicationResult,
    SubmitApplicationUseCase,
)
from src.domain.shared.exceptions import (
    DownstreamServiceError,
    MissingApplicationFieldsError,
)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def complete_command(sample_pdf_cv):
    return SubmitApplicationCommand(
        name="Jane Doe",
        email="jane@x.com",
        phone_number="+1234567890",
        cv=sample_pdf_cv,
    )


@pytest.fixture
def use_case(mock_worker):
    return SubmitApplicationUseCase(worker=mock_worker)


# ============================================================================
# SUCCESS
# ============================================================================


@pytest.mark.asyncio
async def test_successful_submission(use_case, mock_worker, complete_command, worker_success_body):
    """Test that a worker success is mapped to SubmitApplicationResult."""
    # Act
    result = await use_case.execute(complete_command)

    # Assert
    assert isinstance(result, SubmitApplicationResult)
    assert result.message == "CV uploaded and data saved successfully!"
    assert result.file_name == worker_success_body["fileName"]
    assert result.file_public_url == worker_success_body["filePublicUrl"]

    application = mock_worker.submit.await_args.args[0]
    assert application.name == "Jane Doe"
    assert application.cv == complete_command.cv


@pytest.mark.asyncio
async def test_success_without_file_fields(use_case, mock_worker, complete_command):
    """Test that missing fileName/filePublicUrl in the worker reply become None."""
    # Arrange
    mock_worker.submit.return_value = WorkerResponse(status_code=201, body={})

    # Act
    result = await use_case.execute(complete_command)

    # Assert
    assert result.file_name is None
    assert result.file_public_url is None


@pytest.mark.asyncio
async def test_success_relays_non_string_file_fields(use_case, mock_worker, complete_command):
    """Test that fileName/filePublicUrl are passed through without coercion."""
    # Arrange
    mock_worker.submit.return_value = WorkerResponse(
        status_code=200, body={"fileName": 123, "filePublicUrl": "u"}
    )

    # Act
    result = await use_case.execute(complete_command)

    # Assert
    assert result.file_name == 123
    assert result.file_public_url == "u"


# ============================================================================
# MISSING PARTS
# ============================================================================


@pytest.mark.asyncio
async def test_missing_cv_short_circuits(use_case, mock_worker):
    """Test that no worker call is made for an incomplete submission."""
    # Arrange
    command = SubmitApplicationCommand(
        name="Jane Doe", email="jane@x.com", phone_number="+1234567890"
    )

    # Act & Assert
    with pytest.raises(MissingApplicationFieldsError) as exc_info:
        await use_case.execute(command)

    assert exc_info.value.missing_fields == ["cv"]
    mock_worker.submit.assert_not_awaited()


# ============================================================================
# WORKER FAILURES
# ============================================================================


@pytest.mark.asyncio
async def test_worker_error_message_relayed(use_case, mock_worker, complete_command):
    # Arrange
    mock_worker.submit.return_value = WorkerResponse(
        status_code=500, body={"error": "disk full"}
    )

    # Act & Assert
    with pytest.raises(DownstreamServiceError) as exc_info:
        await use_case.execute(complete_command)

    assert exc_info.value.message == "disk full"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_worker_error_object_relayed_unchanged(use_case, mock_worker, complete_command):
    # Arrange
    worker_error = {"code": "STORAGE_FULL"}
    mock_worker.submit.return_value = WorkerResponse(
        status_code=500, body={"error": worker_error}
    )

    # Act & Assert
    with pytest.raises(DownstreamServiceError) as exc_info:
        await use_case.execute(complete_command)

    assert exc_info.value.message == worker_error


@pytest.mark.asyncio
@pytest.mark.parametrize("body", [{}, {"error": ""}, {"error": None}])
async def test_worker_error_fallback_message(use_case, mock_worker, complete_command, body):
    # Arrange
    mock_worker.submit.return_value = WorkerResponse(status_code=400, body=body)

    # Act & Assert
    with pytest.raises(DownstreamServiceError) as exc_info:
        await use_case.execute(complete_command)

    assert exc_info.value.message == "Something went wrong!"


@pytest.mark.asyncio
async def test_worker_transport_failure_propagates(use_case, mock_worker, complete_command):
    """Test that transport failures reported by the worker port propagate unchanged."""
    # Arrange
    mock_worker.submit.side_effect = DownstreamServiceError(
        "There was an error processing your request"
    )

    # Act & Assert
    for _ in range(2):
        with pytest.raises(DownstreamServiceError) as exc_info:
            await use_case.execute(complete_command)
        assert exc_info.value.message == "There was an error processing your request"

    assert mock_worker.submit.await_count == 2

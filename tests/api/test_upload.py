import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from docqa.api.deps.dependencies import get_upload_service
from docqa.api.main import create_app
from docqa.api.validation import MAX_FILE_SIZE
from docqa.application.services import UploadResult
from docqa.boundary.storage import StoredFile
from docqa.core.document_processing import IngestionOutcome, PersistResult
from docqa.core.exceptions import ParsingError, ProviderError, ProviderTimeoutError, StorageError


@pytest.fixture
def mock_upload_service():
    service = AsyncMock()
    service.upload.return_value = UploadResult(
        file=StoredFile(
            original_name="notes.txt",
            stored_path="uploads/1-2-notes.txt",
            size_bytes=9,
            content_type="text/plain",
        ),
        ingestion=IngestionOutcome.succeeded(PersistResult(total_chunks=3)),
    )
    service.ask_instant.return_value = "Thirty days."
    return service


@pytest.fixture
def client(mock_upload_service):
    app = create_app()
    app.dependency_overrides[get_upload_service] = lambda: mock_upload_service
    return TestClient(app)


def test_upload_file(client, mock_upload_service):
    response = client.post(
        "/api/v1/upload",
        files={"file": ("notes.txt", b"some text", "text/plain")},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "File uploaded and indexed successfully"
    assert body["data"]["file"]["stored_path"] == "uploads/1-2-notes.txt"
    assert body["data"]["ingestion"] == {"status": "persisted", "total_chunks": 3, "error": None}
    mock_upload_service.upload.assert_awaited_once_with(b"some text", "notes.txt", "text/plain")


def test_upload_reports_failed_indexing(client, mock_upload_service):
    mock_upload_service.upload.return_value = UploadResult(
        file=StoredFile(original_name="a.png", stored_path="uploads/a.png", size_bytes=4),
        ingestion=IngestionOutcome.failed(ParsingError("not text")),
    )

    response = client.post("/api/v1/upload", files={"file": ("a.png", b"\x89PNG", "image/png")})

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "File uploaded; indexing failed"
    assert body["data"]["ingestion"]["status"] == "failed"


def test_upload_rejects_extension(client, mock_upload_service):
    response = client.post(
        "/api/v1/upload",
        files={"file": ("script.exe", b"MZ", "application/octet-stream")},
    )

    assert response.status_code == 422
    assert response.json()["error_type"] == "ValidationError"
    mock_upload_service.upload.assert_not_awaited()


def test_upload_rejects_oversized_file(client, mock_upload_service):
    response = client.post(
        "/api/v1/upload",
        files={"file": ("big.txt", b"a" * (MAX_FILE_SIZE + 1), "text/plain")},
    )

    assert response.status_code == 422
    mock_upload_service.upload.assert_not_awaited()


def test_upload_rejects_empty_file(client):
    response = client.post("/api/v1/upload", files={"file": ("empty.txt", b"", "text/plain")})

    assert response.status_code == 422


def test_upload_storage_failure_is_500(client, mock_upload_service):
    mock_upload_service.upload.side_effect = StorageError("disk full")

    response = client.post("/api/v1/upload", files={"file": ("a.txt", b"x", "text/plain")})

    assert response.status_code == 500
    assert response.json()["message"] == "disk full"


def test_ask_instant(client, mock_upload_service):
    response = client.post(
        "/api/v1/upload/ask-instant",
        files={"file": ("policy.txt", b"Refunds within 30 days.", "text/plain")},
        data={"message": "Refund window?"},
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"question": "Refund window?", "answer": "Thirty days."}
    mock_upload_service.ask_instant.assert_awaited_once_with(
        b"Refunds within 30 days.", "policy.txt", "Refund window?"
    )


def test_ask_instant_blank_question(client, mock_upload_service):
    response = client.post(
        "/api/v1/upload/ask-instant",
        files={"file": ("policy.txt", b"text", "text/plain")},
        data={"message": "   "},
    )

    assert response.status_code == 422
    assert response.json()["details"] == {"field": "message"}
    mock_upload_service.ask_instant.assert_not_awaited()


def test_ask_instant_missing_question(client):
    response = client.post(
        "/api/v1/upload/ask-instant",
        files={"file": ("policy.txt", b"text", "text/plain")},
    )

    assert response.status_code == 422


@pytest.mark.parametrize(
    ("error", "status_code"),
    [
        (ParsingError("bad bytes", source="memory://a.csv"), 422),
        (ProviderError("quota", operation="generate"), 502),
        (ProviderTimeoutError("slow", operation="generate"), 504),
    ],
)
def test_ask_instant_error_mapping(client, mock_upload_service, error, status_code):
    mock_upload_service.ask_instant.side_effect = error

    response = client.post(
        "/api/v1/upload/ask-instant",
        files={"file": ("a.csv", b"x,y", "text/csv")},
        data={"message": "What?"},
    )

    assert response.status_code == status_code
    assert response.json()["error_type"] == type(error).__name__

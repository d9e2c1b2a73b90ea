"""
Test suite for document endpoints.

Tests listing, upload (success, size limit, missing file, octet-stream text,
model-based extraction) and search validation.

System role: Verification of the document HTTP API
"""

import re

from langchain_core.messages import AIMessage, HumanMessage

LIST_URL = "/api/v1/documents"
UPLOAD_URL = "/api/v1/documents/upload"
SEARCH_URL = "/api/v1/documents/search"


class TestListDocuments:
    """Test suite for GET /api/v1/documents."""

    def test_new_owner_should_have_no_documents(self, client, auth_headers) -> None:
        response = client.get(LIST_URL, headers=auth_headers())

        assert response.status_code == 200
        assert response.json() == []


class TestUploadDocument:
    """Test suite for POST /api/v1/documents/upload."""

    def test_upload_text_should_return_201_with_indexed_document(
        self, client, auth_headers, mock_storage
    ) -> None:
        # Act
        response = client.post(
            UPLOAD_URL,
            headers=auth_headers("user-1"),
            files={"file": ("notes.md", b"# Notes\nBuy milk.", "text/markdown")},
        )

        # Assert
        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "File uploaded successfully"
        document = body["document"]
        assert document["owner_id"] == "user-1"
        assert document["file_name"] == "notes.md"
        assert document["status"] == "indexed"
        assert re.fullmatch(r"user-1/[0-9a-f-]{36}\.md", document["storage_path"])
        mock_storage.upload_document.assert_called_once_with(
            document["storage_path"], b"# Notes\nBuy milk.", "text/markdown"
        )

    def test_upload_over_limit_should_return_413(
        self, client, auth_headers, test_settings, mock_storage
    ) -> None:
        # Arrange
        test_settings.ingestion.max_upload_bytes = 8

        # Act
        response = client.post(
            UPLOAD_URL,
            headers=auth_headers(),
            files={"file": ("big.txt", b"123456789", "text/plain")},
        )

        # Assert
        assert response.status_code == 413
        mock_storage.upload_document.assert_not_called()

    def test_upload_at_limit_should_succeed(self, client, auth_headers, test_settings) -> None:
        test_settings.ingestion.max_upload_bytes = 8

        response = client.post(
            UPLOAD_URL,
            headers=auth_headers(),
            files={"file": ("ok.txt", b"12345678", "text/plain")},
        )

        assert response.status_code == 201

    def test_upload_without_file_should_return_400(self, client, auth_headers) -> None:
        response = client.post(
            UPLOAD_URL,
            headers=auth_headers(),
            files={"attachment": ("a.txt", b"a", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "No file uploaded", "error": "ValidationError"}

    def test_octet_stream_text_should_be_indexed(self, client, auth_headers, test_container) -> None:
        # Act
        response = client.post(
            UPLOAD_URL,
            headers=auth_headers(),
            files={"file": ("notes.md", b"The capital of France is Paris.", "application/octet-stream")},
        )
        search = client.post(SEARCH_URL, headers=auth_headers(), json={"query": "capital of France"})

        # Assert
        assert response.status_code == 201
        assert response.json()["document"]["status"] == "indexed"
        assert search.json()["results"][0]["content"] == "The capital of France is Paris."
        test_container.extraction_model.invoke.assert_not_called()

    def test_pdf_should_be_transcribed_by_extraction_model(
        self, client, auth_headers, test_container
    ) -> None:
        # Arrange
        test_container.extraction_model.invoke.return_value = AIMessage(
            content="Invoice 1042. Total due: 42 euros."
        )

        # Act
        upload = client.post(
            UPLOAD_URL,
            headers=auth_headers(),
            files={"file": ("invoice.pdf", b"%PDF-1.4 binary", "application/pdf")},
        )
        search = client.post(SEARCH_URL, headers=auth_headers(), json={"query": "invoice total due"})

        # Assert
        assert upload.status_code == 201
        (messages,), _ = test_container.extraction_model.invoke.call_args
        assert isinstance(messages[0], HumanMessage)
        assert search.json()["results"][0]["content"] == "Invoice 1042. Total due: 42 euros."


class TestSearchDocuments:
    """Test suite for POST /api/v1/documents/search."""

    def test_blank_query_should_return_422(self, client, auth_headers) -> None:
        response = client.post(SEARCH_URL, headers=auth_headers(), json={"query": "   "})

        assert response.status_code == 422

    def test_missing_query_should_return_422(self, client, auth_headers) -> None:
        response = client.post(SEARCH_URL, headers=auth_headers(), json={})

        assert response.status_code == 422

    def test_search_with_no_documents_should_return_empty_results(self, client, auth_headers) -> None:
        response = client.post(SEARCH_URL, headers=auth_headers(), json={"query": "anything"})

        assert response.status_code == 200
        assert response.json() == {"message": "Search successful", "results": []}

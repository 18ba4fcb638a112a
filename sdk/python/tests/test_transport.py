"""Tests for the HTTP transport and error translation."""

from unittest.mock import MagicMock

import pytest
import requests

from conftest import API_KEY, BASE_URL, FakeResponse, StubSession
from esl import EslServerError, PackageId
from esl.api import Package
from esl.transport import RestClient, build_url


def test_build_url_quotes_params():
    url = build_url(BASE_URL, "/packages/{packageId}/documents/{documentId}",
                    packageId=PackageId("a/b"), documentId="doc 1")
    assert url == BASE_URL + "/packages/a%2Fb/documents/doc%201"


class TestRestClient:

    def test_auth_headers(self):
        session = StubSession()
        RestClient(API_KEY, session=session)
        assert session.headers["Authorization"] == f"Basic {API_KEY}"
        assert session.headers["Accept"] == "application/json"

    def test_post_serializes_without_nulls(self):
        session = StubSession(FakeResponse(200, {"id": "pkg1"}))
        client = RestClient(API_KEY, session=session, timeout=5)

        result = client.post(BASE_URL + "/packages", Package(name="p", description=None))

        assert result == {"id": "pkg1"}
        request = session.last
        assert request.method == "POST"
        assert request.json() == {"name": "p"}
        assert request.headers["Content-Type"] == "application/json"
        assert request.timeout == 5

    def test_post_without_payload_sends_no_body(self):
        session = StubSession()
        client = RestClient(API_KEY, session=session)
        assert client.post(BASE_URL + "/authenticationTokens") is None
        assert session.last.data is None
        assert session.last.headers == {}

    def test_get_bytes(self):
        session = StubSession(FakeResponse(200, content=b"%PDF-1.4"))
        client = RestClient(API_KEY, session=session)
        assert client.get_bytes(BASE_URL + "/packages/p/documents/d/pdf") == b"%PDF-1.4"

    def test_non_json_success_body(self):
        session = StubSession(FakeResponse(200, content=b"OK"))
        client = RestClient(API_KEY, session=session)
        assert client.get(BASE_URL + "/packages/p") is None


class TestErrors:

    def test_error_payload_is_parsed(self):
        session = StubSession(FakeResponse(400, {
            "messageKey": "error.validation.attachments.delete.completedTransaction",
            "message": "Attachments cannot be deleted.",
            "code": 400,
            "technical": "pkg1 is COMPLETED",
            "entity": None,
        }))
        client = RestClient(API_KEY, session=session)

        with pytest.raises(EslServerError) as excinfo:
            client.delete(BASE_URL + "/packages/pkg1/attachment/att1/files/1")

        error = excinfo.value
        assert error.status_code == 400
        assert error.message_key == "error.validation.attachments.delete.completedTransaction"
        assert error.server_error.technical == "pkg1 is COMPLETED"
        assert "Attachments cannot be deleted." in str(error)
        assert "HTTP 400" in str(error)

    def test_error_without_json_body(self):
        session = StubSession(FakeResponse(502, content=b"<html>Bad gateway</html>"))
        client = RestClient(API_KEY, session=session)

        with pytest.raises(EslServerError) as excinfo:
            client.get(BASE_URL + "/packages/pkg1")

        error = excinfo.value
        assert error.status_code == 502
        assert error.message_key is None
        assert error.server_error.code == 502
        assert str(error) == "HTTP 502 (HTTP 502)"

    def test_connection_errors_propagate(self):
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("connection refused")
        client = RestClient(API_KEY, session=session)

        with pytest.raises(requests.ConnectionError):
            client.get(BASE_URL + "/packages/pkg1")

    def test_timeouts_propagate(self):
        session = MagicMock()
        session.request.side_effect = requests.Timeout("read timed out")
        client = RestClient(API_KEY, session=session)

        with pytest.raises(requests.Timeout):
            client.post(BASE_URL + "/packages", {"name": "p"})

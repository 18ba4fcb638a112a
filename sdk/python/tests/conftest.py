"""Shared fixtures: in-memory stand-ins for requests.Session and the e-SignLive server."""

import copy
import json
import re
from typing import Any, Callable, Dict, List, Optional, Tuple
from urllib.parse import unquote, urlsplit

import pytest

from esl import EslClient

BASE_URL = "https://esl.example.com/api"
API_KEY = "test-api-key"

COMPLETED_DELETE_KEY = "error.validation.attachments.delete.completedTransaction"


class FakeResponse:
    """The parts of requests.Response the SDK reads."""

    def __init__(self, status_code: int = 200, body: Any = None, content: Optional[bytes] = None):
        self.status_code = status_code
        if content is not None:
            self.content = content
        elif body is None:
            self.content = b""
        else:
            self.content = json.dumps(body).encode()

    @property
    def text(self) -> str:
        return self.content.decode(errors="replace")

    def json(self):
        return json.loads(self.content)


class RecordedRequest:
    def __init__(self, method: str, url: str, kwargs: Dict[str, Any]):
        self.method = method
        self.url = url
        self.params = kwargs.get("params")
        self.data = kwargs.get("data")
        self.files = kwargs.get("files")
        self.headers = kwargs.get("headers") or {}
        self.timeout = kwargs.get("timeout")

    @property
    def path(self) -> str:
        return unquote(urlsplit(self.url).path)

    def json(self):
        return json.loads(self.data)


class StubSession:
    """
    Session returning queued responses in order and recording each request.

        session = StubSession(FakeResponse(200, {"id": "abc"}))
    """

    def __init__(self, *responses: FakeResponse):
        self.headers: Dict[str, str] = {}
        self.responses = list(responses)
        self.requests: List[RecordedRequest] = []
        self.closed = False

    def queue(self, *responses: FakeResponse) -> None:
        self.responses.extend(responses)

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        self.requests.append(RecordedRequest(method, url, kwargs))
        if not self.responses:
            return FakeResponse(200)
        return self.responses.pop(0)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def close(self) -> None:
        self.closed = True


class FakeEslServer:
    """
    Just enough of the package, document and attachment endpoints to run
    whole workflows in memory.
    """

    def __init__(self):
        self.packages: Dict[str, Dict[str, Any]] = {}
        self.tokens: Dict[str, Tuple[str, str]] = {}
        self._counter = 0
        self._routes: List[Tuple[str, "re.Pattern", Callable]] = [
            ("POST", re.compile(r"^/packages$"), self._create_package),
            ("GET", re.compile(r"^/packages/([^/]+)$"), self._get_package),
            ("POST", re.compile(r"^/packages/([^/]+)$"), self._update_package),
            ("POST", re.compile(r"^/packages/([^/]+)/documents$"), self._upload_document),
            ("POST", re.compile(r"^/packages/([^/]+)/documents/signed_documents$"), self._sign_documents),
            ("POST", re.compile(r"^/signerAuthenticationTokens$"), self._signer_token),
            ("POST", re.compile(r"^/packages/([^/]+)/attachment/([^/]+)$"), self._upload_attachment),
            ("DELETE", re.compile(r"^/packages/([^/]+)/attachment/([^/]+)/files/([^/]+)$"),
             self._delete_attachment_file),
        ]

    def _next_id(self, prefix: str) -> str:
        self._counter += 1
        return f"{prefix}{self._counter}"

    @staticmethod
    def _error(status: int, key: str, message: str) -> FakeResponse:
        return FakeResponse(status, {"messageKey": key, "message": message, "code": status})

    def handle(self, request: RecordedRequest) -> FakeResponse:
        path = request.path
        if path.startswith("/api"):
            path = path[len("/api"):]
        for method, pattern, handler in self._routes:
            match = pattern.match(path)
            if method == request.method and match:
                return handler(request, *match.groups())
        return self._error(404, "error.resourceNotFound", f"No route for {request.method} {path}")

    def _requirement(self, package_id: str, attachment_id: str) -> Optional[Dict[str, Any]]:
        for role in self.packages[package_id].get("roles", []):
            for requirement in role.get("attachmentRequirements", []):
                if requirement["id"] == attachment_id:
                    return requirement
        return None

    def _signer_session(self, request: RecordedRequest, package_id: str) -> bool:
        cookie = request.headers.get("Cookie", "")
        token = cookie.split("=", 1)[-1]
        return token in self.tokens and self.tokens[token][0] == package_id

    # Handlers

    def _create_package(self, request):
        body = request.json()
        package_id = self._next_id("pkg")
        body["id"] = package_id
        body.setdefault("status", "DRAFT")
        for role in body.get("roles", []):
            for requirement in role.get("attachmentRequirements", []):
                requirement["id"] = self._next_id("att")
                requirement["status"] = "INCOMPLETE"
                requirement["files"] = []
        body.setdefault("documents", [])
        self.packages[package_id] = body
        return FakeResponse(200, {"id": package_id})

    def _get_package(self, request, package_id):
        if package_id not in self.packages:
            return self._error(404, "error.resourceNotFound", "Package not found")
        package = copy.deepcopy(self.packages[package_id])
        package["visibility"] = "ACCOUNT"
        return FakeResponse(200, package)

    def _update_package(self, request, package_id):
        body = request.json()
        self.packages[package_id].update(body)
        return FakeResponse(200)

    def _upload_document(self, request, package_id):
        document = json.loads(request.data["payload"])
        document["id"] = self._next_id("doc")
        self.packages[package_id]["documents"].append(document)
        return FakeResponse(200, document)

    def _sign_documents(self, request, package_id):
        return FakeResponse(200)

    def _signer_token(self, request):
        body = request.json()
        token = self._next_id("token")
        self.tokens[token] = (body["packageId"], body["signerId"])
        return FakeResponse(200, {"value": token, "packageId": body["packageId"], "signerId": body["signerId"]})

    def _upload_attachment(self, request, package_id, attachment_id):
        if not self._signer_session(request, package_id):
            return self._error(401, "error.unauthorised.noSession", "No signer session")
        requirement = self._requirement(package_id, attachment_id)
        if requirement is None:
            return self._error(404, "error.resourceNotFound", "Attachment requirement not found")
        file_name = request.files["file"][0]
        requirement["files"].append({"id": self._next_id(""), "name": file_name, "preview": False})
        return FakeResponse(200)

    def _delete_attachment_file(self, request, package_id, attachment_id, file_id):
        if not self._signer_session(request, package_id):
            return self._error(401, "error.unauthorised.noSession", "No signer session")
        if self.packages[package_id].get("status") == "COMPLETED":
            return self._error(
                400, COMPLETED_DELETE_KEY,
                "Attachments cannot be deleted once the transaction is completed.",
            )
        requirement = self._requirement(package_id, attachment_id)
        if requirement is None:
            return self._error(404, "error.resourceNotFound", "Attachment requirement not found")
        requirement["files"] = [f for f in requirement["files"] if f["id"] != str(file_id)]
        return FakeResponse(200)


class ServerSession(StubSession):
    """Session that answers every request from a FakeEslServer."""

    def __init__(self, server: FakeEslServer):
        super().__init__()
        self.server = server

    def request(self, method: str, url: str, **kwargs) -> FakeResponse:
        recorded = RecordedRequest(method, url, kwargs)
        self.requests.append(recorded)
        return self.server.handle(recorded)


@pytest.fixture
def stub_session():
    return StubSession()


@pytest.fixture
def stub_client(stub_session):
    """EslClient whose requests go to a StubSession."""
    return EslClient(API_KEY, BASE_URL + "/", session=stub_session)


@pytest.fixture
def fake_server():
    return FakeEslServer()


@pytest.fixture
def server_client(fake_server):
    """EslClient talking to an in-memory FakeEslServer."""
    return EslClient(API_KEY, BASE_URL, session=ServerSession(fake_server))

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
EslClient: single entry point composing every service client.

Usage:
    from esl import EslClient

    client = EslClient(api_key="...", base_url="https://sandbox.esignlive.com/api")
    package_id = client.create_and_send_package(package)
    package = client.get_package(package_id)

Or from the data directory (see esl.config):
    with EslClient.from_env() as client:
        ...
"""

import dataclasses
import logging
from typing import Optional, Union

import requests

from .builders import PackageBuilder
from .config import load_config
from .exceptions import EslBuilderError, EslConfigError
from .models import (
    AuthenticationToken,
    Document,
    DocumentPackage,
    PackageId,
    SessionToken,
    SigningState,
)
from .serialization import JsonSerializer
from .services import (
    AccountService,
    AuditService,
    AuthenticationService,
    CustomFieldService,
    EventNotificationService,
    FieldSummaryService,
    GroupService,
    PackageService,
    ReminderService,
    SessionService,
    TemplateService,
)
from .transport import DEFAULT_TIMEOUT, RestClient

logger = logging.getLogger(__name__)


def _require(value: Optional[str], name: str) -> str:
    if value is None or not str(value).strip():
        raise EslBuilderError(name, "must not be empty")
    return value


class EslClient:
    """
    Client for the e-SignLive API.

    All services share one RestClient (one HTTP session authenticated with
    the API key) and one JsonSerializer. Service clients are available as
    attributes (package_service, template_service, ...); the common
    package workflows are exposed directly on the client.

    Args:
        api_key: Account API key
        base_url: API root, e.g. "https://sandbox.esignlive.com/api"
        timeout: Request timeout in seconds
        session: Optional requests.Session to send requests through
    """

    def __init__(
        self,
        api_key: str,
        base_url: str,
        timeout: int = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        _require(api_key, "api_key")
        _require(base_url, "base_url")
        self.base_url = base_url.rstrip("/")

        self.serializer = JsonSerializer(ignore_nulls=True)
        self.rest_client = RestClient(api_key, self.serializer, timeout=timeout, session=session)

        self.package_service = PackageService(self.rest_client, self.base_url)
        self.session_service = SessionService(self.rest_client, self.base_url)
        self.authentication_service = AuthenticationService(self.rest_client, self.base_url)
        self.field_summary_service = FieldSummaryService(self.rest_client, self.base_url)
        self.audit_service = AuditService(self.rest_client, self.base_url)
        self.event_notification_service = EventNotificationService(self.rest_client, self.base_url)
        self.custom_field_service = CustomFieldService(self.rest_client, self.base_url)
        self.group_service = GroupService(self.rest_client, self.base_url)
        self.account_service = AccountService(self.rest_client, self.base_url)
        self.reminder_service = ReminderService(self.rest_client, self.base_url)
        self.template_service = TemplateService(self.rest_client, self.base_url)

    @classmethod
    def from_env(cls, data_dir: Optional[str] = None) -> "EslClient":
        """
        Create a client from the data directory and environment.

        Raises:
            EslConfigError: If no API key or base URL is configured
        """
        config = load_config(data_dir)
        if not config.api_key:
            raise EslConfigError("No API key configured (esl.key or ESL_API_KEY)")
        if not config.base_url:
            raise EslConfigError("No base URL configured (config.yaml or ESL_BASE_URL)")
        return cls(config.api_key, config.base_url, timeout=config.timeout)

    def close(self):
        self.rest_client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    # -------------------------------------------------------------------------
    # Packages
    # -------------------------------------------------------------------------

    def create_package(self, package: DocumentPackage) -> PackageId:
        """
        Create a package and upload the content of each of its documents.

        Returns:
            Id of the new (draft) package
        """
        # Documents go up one by one with their content
        api_package = dataclasses.replace(package.to_api_package(), documents=None)
        package_id = self.package_service.create_package(api_package)
        created = self.get_package(package_id)

        for document in package.documents.values():
            self.upload_document(document, created)

        logger.info("Package %s created with %d document(s)", package_id, len(package.documents))
        return package_id

    def create_and_send_package(self, package: DocumentPackage) -> PackageId:
        package_id = self.create_package(package)
        self.send_package(package_id)
        return package_id

    def send_package(self, package_id: PackageId) -> None:
        self.package_service.send_package(package_id)

    def mark_complete(self, package_id: PackageId) -> None:
        """Complete a package whose signers have all signed."""
        self.package_service.mark_complete(package_id)

    def get_package(self, package_id: PackageId) -> DocumentPackage:
        """
        Fetch a package.

        The result is a snapshot; it does not follow later changes on the
        server.
        """
        api_package = self.package_service.get_package(package_id)
        return PackageBuilder.from_api_package(api_package).build()

    def update_package(self, package_id: PackageId, package: DocumentPackage) -> None:
        self.package_service.update_package(package_id, package.to_api_package())

    def delete_package(self, package_id: PackageId) -> None:
        self.package_service.delete_package(package_id)

    def get_signing_status(
        self,
        package_id: PackageId,
        signer_id: Optional[str] = None,
        document_id: Optional[str] = None,
    ) -> Optional[SigningState]:
        return self.package_service.get_signing_status(package_id, signer_id, document_id)

    def sign_documents(self, package_id: PackageId) -> None:
        self.package_service.sign_documents(package_id)

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def upload_document(
        self,
        document: Document,
        package: Union[DocumentPackage, PackageId],
    ) -> Document:
        """
        Upload a document into an existing package.

        Args:
            document: Document built with content (DocumentBuilder.from_file etc.)
            package: The package (as fetched) or its id

        Returns:
            The uploaded document. A package object passed in is left as
            it was; fetch the package again to see the new document.
        """
        if isinstance(package, PackageId):
            package = self.get_package(package)
        if document.content is None:
            raise EslBuilderError("document content", f"document {document.name!r} has no content")

        file_name = document.file_name or f"{document.name}.{document.document_type.value}"
        return self.package_service.upload_document(package, file_name, document.content, document)

    def download_document(self, package_id: PackageId, document_id: str) -> bytes:
        return self.package_service.download_document(package_id, document_id)

    def download_evidence_summary(self, package_id: PackageId) -> bytes:
        return self.package_service.download_evidence_summary(package_id)

    def download_zipped_documents(self, package_id: PackageId) -> bytes:
        return self.package_service.download_zipped_documents(package_id)

    # -------------------------------------------------------------------------
    # Attachments
    # -------------------------------------------------------------------------

    def upload_attachment(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_name: str,
        content: bytes,
        signer_id: str,
    ) -> None:
        """
        Upload a file against a signer's attachment requirement.

        Existing DocumentPackage objects are not updated; fetch the package
        again to see the new file.
        """
        _require(attachment_id, "attachment_id")
        _require(file_name, "file_name")
        token = self.authentication_service.create_signer_authentication_token(package_id, signer_id)
        self.package_service.upload_attachment(package_id, attachment_id, file_name, content, token.token)

    def delete_attachment_file(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_id: Union[str, int],
        signer_id: str,
    ) -> None:
        """
        Delete an uploaded attachment file.

        Raises:
            EslServerError: With message key
                error.validation.attachments.delete.completedTransaction
                if the package is already complete
        """
        _require(attachment_id, "attachment_id")
        token = self.authentication_service.create_signer_authentication_token(package_id, signer_id)
        self.package_service.delete_attachment_file(package_id, attachment_id, file_id, token.token)

    def download_attachment_file(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_id: Union[str, int],
    ) -> bytes:
        return self.package_service.download_attachment_file(package_id, attachment_id, file_id)

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    def create_template(self, template: DocumentPackage) -> PackageId:
        """Create a template and upload its documents."""
        api_template = dataclasses.replace(template.to_api_package(), documents=None)
        template_id = self.template_service.create_template(api_template)
        created = self.get_package(template_id)

        for document in template.documents.values():
            self.upload_document(document, created)

        return template_id

    def create_template_from_package(
        self,
        package_id: PackageId,
        delta: Union[DocumentPackage, str],
    ) -> PackageId:
        """
        Clone a package into a template.

        Args:
            delta: Package with the values to override, or just the new name
        """
        if isinstance(delta, str):
            delta = PackageBuilder.new_package_named(delta).build()
        return self.template_service.create_template_from_package(package_id, delta.to_api_package())

    def create_package_from_template(
        self,
        template_id: PackageId,
        delta: Union[DocumentPackage, str],
    ) -> PackageId:
        """
        Clone a template into a new package.

        Args:
            delta: Package with the values to override, or just the new name
        """
        if isinstance(delta, str):
            delta = PackageBuilder.new_package_named(delta).build()
        return self.template_service.create_package_from_template(template_id, delta.to_api_package())

    # -------------------------------------------------------------------------
    # Sessions and tokens
    # -------------------------------------------------------------------------

    def create_signer_session_token(self, package_id: PackageId, signer_id: str) -> SessionToken:
        return self.session_service.create_signer_session_token(package_id, signer_id)

    def create_sender_session_token(self) -> SessionToken:
        return self.session_service.create_sender_session_token()

    def create_authentication_token(self) -> AuthenticationToken:
        return self.authentication_service.create_authentication_token()

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Package, document and attachment endpoints."""

import logging
from typing import Dict, List, Optional, Union

from .. import api
from ..exceptions import EslError
from ..mapping import (
    from_api_document,
    from_api_package,
    role_emails_for,
    role_ids_for,
    to_api_document,
)
from ..models import Document, DocumentPackage, DocumentType, PackageId, PackageStatus, SigningState
from ..transport import SESSION_COOKIE
from .base import Service, package_id_from

logger = logging.getLogger(__name__)

MIME_TYPES = {
    DocumentType.PDF: "application/pdf",
    DocumentType.WORD: "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    DocumentType.WORD_97: "application/msword",
    DocumentType.ODT: "application/vnd.oasis.opendocument.text",
    DocumentType.TEXT: "text/plain",
    DocumentType.RTF: "application/rtf",
}


def _session_headers(session_id: str) -> Dict[str, str]:
    return {"Cookie": f"{SESSION_COOKIE}={session_id}"}


class PackageService(Service):
    """
    Package lifecycle, documents and attachments.

    Methods taking or returning packages use the wire Package; EslClient
    converts to and from DocumentPackage.
    """

    # -------------------------------------------------------------------------
    # Packages
    # -------------------------------------------------------------------------

    def create_package(self, package: api.Package) -> PackageId:
        """Create a package (without document content) and return its id."""
        data = self.client.post(self.url("/packages"), package)
        package_id = package_id_from(data, "package")
        logger.info("Created package %s", package_id)
        return package_id

    def get_package(self, package_id: PackageId) -> api.Package:
        data = self.client.get(self.url("/packages/{packageId}", packageId=package_id))
        return api.Package.from_dict(data or {})

    def update_package(self, package_id: PackageId, package: api.Package) -> None:
        self.client.post(self.url("/packages/{packageId}", packageId=package_id), package)

    def delete_package(self, package_id: PackageId) -> None:
        self.client.delete(self.url("/packages/{packageId}", packageId=package_id))

    def _change_status(self, package_id: PackageId, status: PackageStatus) -> None:
        self.update_package(package_id, api.Package(status=status.value))

    def send_package(self, package_id: PackageId) -> None:
        self._change_status(package_id, PackageStatus.SENT)

    def mark_complete(self, package_id: PackageId) -> None:
        self._change_status(package_id, PackageStatus.COMPLETED)

    def get_packages(
        self,
        status: PackageStatus,
        page_from: int = 1,
        page_to: int = 50,
    ) -> List[DocumentPackage]:
        """
        List packages in a given status, one page at a time.

        Args:
            status: Package status to filter on
            page_from: 1-based index of the first package on the page
            page_to: 1-based index of the last package on the page
        """
        data = self.client.get(
            self.url("/packages"),
            params={"query": status.value.lower(), "from": page_from, "to": page_to},
        ) or {}
        return [from_api_package(api.Package.from_dict(p)) for p in data.get("results", [])]

    def get_signing_status(
        self,
        package_id: PackageId,
        signer_id: Optional[str] = None,
        document_id: Optional[str] = None,
    ) -> Optional[SigningState]:
        params = {}
        if signer_id:
            params["signer"] = signer_id
        if document_id:
            params["document"] = document_id
        data = self.client.get(
            self.url("/packages/{packageId}/signingStatus", packageId=package_id),
            params=params,
        ) or {}
        status = api.SigningStatus.from_dict(data).status
        try:
            return SigningState(status) if status else None
        except ValueError:
            return None

    def sign_documents(self, package_id: PackageId) -> None:
        """Sign every document of the package on behalf of the sender."""
        package = self.get_package(package_id)
        documents = [api.Document(id=d.id, name=d.name) for d in package.documents or []]
        self.client.post(
            self.url("/packages/{packageId}/documents/signed_documents", packageId=package_id),
            documents,
        )

    def notify_signer(self, package_id: PackageId, role_id: str) -> None:
        """Resend the signing invitation to a signer."""
        self.client.post(
            self.url("/packages/{packageId}/roles/{roleId}/notifications",
                     packageId=package_id, roleId=role_id),
        )

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def upload_document(
        self,
        package: DocumentPackage,
        file_name: str,
        content: bytes,
        document: Document,
    ) -> Document:
        """
        Upload a document's content and metadata to an existing package.

        Args:
            package: The package as fetched from the server (must have an id)
            file_name: File name reported to the server
            content: Raw document bytes
            document: Document metadata (signatures, fields)

        Returns:
            The document as the server stored it
        """
        if package.id is None:
            raise EslError("Cannot upload a document to a package without an id")

        payload = to_api_document(document, role_ids_for(package))
        mime_type = MIME_TYPES.get(document.document_type, "application/octet-stream")
        data = self.client.post_multipart(
            self.url("/packages/{packageId}/documents", packageId=package.id),
            files={"file": (file_name, content, mime_type)},
            data={"payload": self.client.serializer.dumps(payload)},
        )
        logger.info("Uploaded document %r to package %s", document.name, package.id)

        stored = api.Document.from_dict(data) if isinstance(data, dict) else payload
        uploaded = from_api_document(stored, role_emails_for(package))
        uploaded.file_name = file_name
        uploaded.content = content
        uploaded.document_type = document.document_type
        return uploaded

    def delete_document(self, package_id: PackageId, document_id: str) -> None:
        self.client.delete(
            self.url("/packages/{packageId}/documents/{documentId}",
                     packageId=package_id, documentId=document_id)
        )

    def download_document(self, package_id: PackageId, document_id: str) -> bytes:
        return self.client.get_bytes(
            self.url("/packages/{packageId}/documents/{documentId}/pdf",
                     packageId=package_id, documentId=document_id)
        )

    def download_zipped_documents(self, package_id: PackageId) -> bytes:
        return self.client.get_bytes(
            self.url("/packages/{packageId}/documents/zip", packageId=package_id)
        )

    def download_evidence_summary(self, package_id: PackageId) -> bytes:
        return self.client.get_bytes(
            self.url("/packages/{packageId}/evidence/summary", packageId=package_id)
        )

    # -------------------------------------------------------------------------
    # Attachments
    # -------------------------------------------------------------------------

    def upload_attachment(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_name: str,
        content: bytes,
        session_id: str,
    ) -> None:
        """
        Upload a file against an attachment requirement, acting as the signer.

        Args:
            session_id: Signer authentication token for the requirement's signer
        """
        self.client.post_multipart(
            self.url("/packages/{packageId}/attachment/{attachmentId}",
                     packageId=package_id, attachmentId=attachment_id),
            files={"file": (file_name, content, "application/octet-stream")},
            headers=_session_headers(session_id),
        )
        logger.info("Uploaded attachment file %r to requirement %s", file_name, attachment_id)

    def delete_attachment_file(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_id: Union[str, int],
        session_id: str,
    ) -> None:
        """
        Delete one uploaded file from an attachment requirement, acting as the signer.

        Fails with message key
        error.validation.attachments.delete.completedTransaction once the
        package is complete.
        """
        self.client.delete(
            self.url("/packages/{packageId}/attachment/{attachmentId}/files/{fileId}",
                     packageId=package_id, attachmentId=attachment_id, fileId=file_id),
            headers=_session_headers(session_id),
        )

    def download_attachment_file(
        self,
        package_id: PackageId,
        attachment_id: str,
        file_id: Union[str, int],
    ) -> bytes:
        return self.client.get_bytes(
            self.url("/packages/{packageId}/attachment/{attachmentId}/files/{fileId}",
                     packageId=package_id, attachmentId=attachment_id, fileId=file_id)
        )

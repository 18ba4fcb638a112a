# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
Domain model for signing transactions.

Construct these through the builders in esl.builders; the plain
constructors exist for the mapping layer and for tests.

Objects returned by EslClient.get_package() are snapshots: they do not
change when the server-side package changes. Fetch again to see uploads,
deletions or status changes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional


# -----------------------------------------------------------------------------
# Enumerations
# -----------------------------------------------------------------------------

class PackageStatus(str, Enum):
    DRAFT = "DRAFT"
    SENT = "SENT"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"
    DECLINED = "DECLINED"
    OPTED_OUT = "OPTED_OUT"
    EXPIRED = "EXPIRED"


class DocumentType(str, Enum):
    PDF = "pdf"
    WORD = "docx"
    WORD_97 = "doc"
    ODT = "odt"
    TEXT = "txt"
    RTF = "rtf"


class SignatureStyle(str, Enum):
    """Signature styles and their wire subtype."""
    FULL_NAME = "FULLNAME"
    HAND_DRAWN = "CAPTURE"
    INITIALS = "INITIALS"


class FieldStyle(Enum):
    """Field styles as (wire subtype, wire binding)."""
    TEXT_FIELD = ("TEXTFIELD", None)
    CHECK_BOX = ("CHECKBOX", None)
    LABEL = ("LABEL", None)
    SIGNATURE_DATE = ("LABEL", "{approval.signed}")
    SIGNER_NAME = ("LABEL", "{signer.name}")
    SIGNER_TITLE = ("LABEL", "{signer.title}")
    SIGNER_COMPANY = ("LABEL", "{signer.company}")

    @property
    def subtype(self) -> str:
        return self.value[0]

    @property
    def binding(self) -> Optional[str]:
        return self.value[1]

    @classmethod
    def from_wire(cls, subtype: Optional[str], binding: Optional[str]) -> "FieldStyle":
        for style in cls:
            if style.subtype == subtype and style.binding == binding:
                return style
        if subtype == "CHECKBOX":
            return cls.CHECK_BOX
        if subtype == "LABEL":
            return cls.LABEL
        return cls.TEXT_FIELD


class RequirementStatus(str, Enum):
    INCOMPLETE = "INCOMPLETE"
    COMPLETE = "COMPLETE"
    REJECTED = "REJECTED"
    ACCEPTED = "ACCEPTED"


class SigningState(str, Enum):
    """Signing status of a signer or document"""
    INACTIVE = "INACTIVE"
    SIGNING_PENDING = "SIGNING_PENDING"
    SIGNING_COMPLETE = "SIGNING_COMPLETE"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"
    DECLINED = "DECLINED"
    OPTED_OUT = "OPTED_OUT"
    EXPIRED = "EXPIRED"
    DISABLED = "DISABLED"


class NotificationEvent(str, Enum):
    PACKAGE_CREATE = "PACKAGE_CREATE"
    PACKAGE_ACTIVATE = "PACKAGE_ACTIVATE"
    PACKAGE_DEACTIVATE = "PACKAGE_DEACTIVATE"
    PACKAGE_READY_FOR_COMPLETE = "PACKAGE_READY_FOR_COMPLETE"
    PACKAGE_COMPLETE = "PACKAGE_COMPLETE"
    PACKAGE_TRASH = "PACKAGE_TRASH"
    PACKAGE_RESTORE = "PACKAGE_RESTORE"
    PACKAGE_DELETE = "PACKAGE_DELETE"
    PACKAGE_DECLINE = "PACKAGE_DECLINE"
    PACKAGE_EXPIRE = "PACKAGE_EXPIRE"
    PACKAGE_OPT_OUT = "PACKAGE_OPT_OUT"
    DOCUMENT_SIGNED = "DOCUMENT_SIGNED"
    ROLE_REASSIGN = "ROLE_REASSIGN"
    SIGNER_COMPLETE = "SIGNER_COMPLETE"
    KBA_FAILURE = "KBA_FAILURE"
    EMAIL_BOUNCE = "EMAIL_BOUNCE"
    PACKAGE_ATTACHMENT = "PACKAGE_ATTACHMENT"
    SIGNER_LOCKED = "SIGNER_LOCKED"


# -----------------------------------------------------------------------------
# Package graph
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PackageId:
    """Server-assigned package (or template) identifier"""
    id: str

    def __str__(self) -> str:
        return self.id


@dataclass
class AttachmentFile:
    """A file a signer uploaded against an attachment requirement"""
    id: str
    name: str = ""


@dataclass
class AttachmentRequirement:
    """A named request for a signer to upload supporting files"""
    name: str
    description: str = ""
    required: bool = False
    id: Optional[str] = None
    status: Optional[RequirementStatus] = None
    sender_comment: Optional[str] = None
    files: List[AttachmentFile] = field(default_factory=list)


@dataclass
class Signer:
    """A party that signs documents or fulfils requirements in a package"""
    email: str
    first_name: str = ""
    last_name: str = ""
    company: Optional[str] = None
    title: Optional[str] = None
    custom_id: Optional[str] = None
    signing_order: Optional[int] = None
    message: Optional[str] = None
    deliver_signed_documents: bool = False
    can_change_signer: bool = False
    attachment_requirements: Dict[str, AttachmentRequirement] = field(default_factory=dict)

    def get_attachment_requirement(self, name: str) -> Optional[AttachmentRequirement]:
        return self.attachment_requirements.get(name)


@dataclass
class Field:
    """A form field placed on a document page"""
    style: FieldStyle = FieldStyle.TEXT_FIELD
    page: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    name: Optional[str] = None
    value: Optional[str] = None
    extract: bool = False
    id: Optional[str] = None


@dataclass
class Signature:
    """Where and how a signer signs a document"""
    signer_email: str
    style: SignatureStyle = SignatureStyle.FULL_NAME
    page: int = 0
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    optional: bool = False
    extract: bool = False
    fields: List[Field] = field(default_factory=list)
    id: Optional[str] = None


@dataclass
class Document:
    """A document in a package, plus the bytes to upload for it"""
    name: str
    description: Optional[str] = None
    index: Optional[int] = None
    file_name: Optional[str] = None
    content: Optional[bytes] = None
    document_type: DocumentType = DocumentType.PDF
    extract: bool = False
    signatures: List[Signature] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)
    id: Optional[str] = None


@dataclass
class DocumentPackage:
    """A signing transaction: documents, signers and settings"""
    name: str
    description: Optional[str] = None
    status: Optional[PackageStatus] = None
    email_message: Optional[str] = None
    autocomplete: bool = True
    language: Optional[str] = None
    expiry_date: Optional[datetime] = None
    documents: Dict[str, Document] = field(default_factory=dict)
    signers: Dict[str, Signer] = field(default_factory=dict)
    id: Optional[PackageId] = None

    def get_signer(self, email: str) -> Optional[Signer]:
        return self.signers.get(email)

    def get_document(self, name: str) -> Optional[Document]:
        return self.documents.get(name)

    def to_api_package(self):
        """Convert to the wire DTO (see esl.mapping.to_api_package)."""
        from .mapping import to_api_package
        return to_api_package(self)


# -----------------------------------------------------------------------------
# Service results
# -----------------------------------------------------------------------------

@dataclass
class SessionToken:
    session_token: str


@dataclass
class AuthenticationToken:
    token: str


@dataclass
class AuditEvent:
    type: str
    date: Optional[datetime] = None
    target: str = ""
    target_type: str = ""
    user: str = ""
    user_email: str = ""
    user_ip: str = ""
    data: str = ""


@dataclass
class FieldSummary:
    signer_id: str
    document_id: str
    field_id: str
    field_name: str = ""
    field_value: Optional[str] = None


@dataclass
class Reminder:
    date: Optional[datetime] = None
    sent_date: Optional[datetime] = None


@dataclass
class ReminderSchedule:
    package_id: PackageId
    days_until_first_reminder: int = 0
    days_between_reminders: int = 0
    number_of_repetitions: int = 0
    reminders: List[Reminder] = field(default_factory=list)


@dataclass
class GroupMember:
    email: str
    first_name: str = ""
    last_name: str = ""
    member_type: str = "REGULAR"


@dataclass
class Group:
    name: str
    email: Optional[str] = None
    individual_member_email: bool = False
    members: List[GroupMember] = field(default_factory=list)
    id: Optional[str] = None
    created: Optional[datetime] = None


@dataclass
class Translation:
    language: str
    name: str
    description: str = ""


@dataclass
class CustomField:
    id: str
    value: str = ""
    required: bool = False
    translations: List[Translation] = field(default_factory=list)


@dataclass
class CustomFieldValue:
    id: str
    value: str


@dataclass
class EventNotificationConfig:
    url: str
    key: Optional[str] = None
    events: List[NotificationEvent] = field(default_factory=list)


@dataclass
class Sender:
    email: str
    first_name: str = ""
    last_name: str = ""
    company: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    language: Optional[str] = None
    id: Optional[str] = None
    created: Optional[datetime] = None

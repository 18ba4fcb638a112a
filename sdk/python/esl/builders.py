# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
Fluent builders for the domain model.

Usage:
    from esl import PackageBuilder, SignerBuilder, DocumentBuilder, SignatureBuilder

    package = (
        PackageBuilder.new_package_named("Contract")
        .described_as("Sales contract")
        .with_signer(
            SignerBuilder.new_signer_with_email("john.smith@example.com")
            .with_first_name("John")
            .with_last_name("Smith")
            .with_custom_id("signer1")
            .build()
        )
        .with_document(
            DocumentBuilder.new_document_named("contract")
            .from_file("contract.pdf")
            .with_signature(
                SignatureBuilder.signature_for("john.smith@example.com")
                .on_page(0)
                .at_position(100, 100)
                .build()
            )
            .build()
        )
        .build()
    )

build() validates required fields and raises EslBuilderError naming the
offending field. Builders never touch the network.
"""

import copy
import os
from datetime import datetime, timezone
from typing import BinaryIO, List, Optional

from . import api
from .exceptions import EslBuilderError
from .mapping import from_api_package, positional_role_id
from .models import (
    AttachmentRequirement,
    CustomField,
    Document,
    DocumentPackage,
    DocumentType,
    Field,
    FieldStyle,
    Group,
    GroupMember,
    PackageId,
    PackageStatus,
    ReminderSchedule,
    Signature,
    SignatureStyle,
    Signer,
    Translation,
)
from .serialization import normalize_language

DEFAULT_SIGNATURE_WIDTH = 200.0
DEFAULT_SIGNATURE_HEIGHT = 50.0
DEFAULT_FIELD_WIDTH = 150.0
DEFAULT_FIELD_HEIGHT = 50.0


def _require_text(value: Optional[str], name: str) -> str:
    if value is None or not value.strip():
        raise EslBuilderError(name, "must not be empty")
    return value


def _require_non_negative(value: float, name: str) -> None:
    if value < 0:
        raise EslBuilderError(name, f"must not be negative, got {value!r}")


def _check_role_ids(signers: List[Signer]) -> None:
    """
    Every signer must end up with its own role id.

    Custom ids may not repeat, may not take the generated id of a signer
    without a custom id, and may not equal the signer's own generated id
    (it would read back from the server as no custom id at all).
    """
    generated = {
        positional_role_id(position)
        for position, signer in enumerate(signers, start=1)
        if not signer.custom_id
    }
    seen = set()
    for position, signer in enumerate(signers, start=1):
        custom_id = signer.custom_id
        if not custom_id:
            continue
        if custom_id in seen:
            raise EslBuilderError("signer custom id", f"duplicate custom id {custom_id!r}")
        if custom_id in generated or custom_id == positional_role_id(position):
            raise EslBuilderError(
                "signer custom id",
                f"{custom_id!r} is reserved for generated role ids ({signer.email})",
            )
        seen.add(custom_id)


def _utc_seconds(value: datetime) -> datetime:
    """Expiry dates travel at second precision in UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).replace(microsecond=0)


# -----------------------------------------------------------------------------
# Attachment requirements
# -----------------------------------------------------------------------------

class AttachmentRequirementBuilder:
    """Builds an AttachmentRequirement for a signer."""

    def __init__(self, name: str):
        self._name = name
        self._description = ""
        self._required = False

    @classmethod
    def new_attachment_requirement_with_name(cls, name: str) -> "AttachmentRequirementBuilder":
        return cls(name)

    def with_description(self, description: str) -> "AttachmentRequirementBuilder":
        self._description = description
        return self

    def is_required_attachment(self) -> "AttachmentRequirementBuilder":
        self._required = True
        return self

    def build(self) -> AttachmentRequirement:
        return AttachmentRequirement(
            name=_require_text(self._name, "attachment requirement name"),
            description=self._description,
            required=self._required,
        )


# -----------------------------------------------------------------------------
# Signers
# -----------------------------------------------------------------------------

class SignerBuilder:
    """Builds a Signer identified by email address."""

    def __init__(self, email: str):
        self._email = email
        self._first_name = ""
        self._last_name = ""
        self._company: Optional[str] = None
        self._title: Optional[str] = None
        self._custom_id: Optional[str] = None
        self._signing_order: Optional[int] = None
        self._message: Optional[str] = None
        self._deliver = False
        self._can_change_signer = False
        self._attachments: List[AttachmentRequirement] = []

    @classmethod
    def new_signer_with_email(cls, email: str) -> "SignerBuilder":
        return cls(email)

    def with_first_name(self, first_name: str) -> "SignerBuilder":
        self._first_name = first_name
        return self

    def with_last_name(self, last_name: str) -> "SignerBuilder":
        self._last_name = last_name
        return self

    def with_company(self, company: str) -> "SignerBuilder":
        self._company = company
        return self

    def with_title(self, title: str) -> "SignerBuilder":
        self._title = title
        return self

    def with_custom_id(self, custom_id: str) -> "SignerBuilder":
        self._custom_id = custom_id
        return self

    def signing_order(self, order: int) -> "SignerBuilder":
        if order < 1:
            raise EslBuilderError("signing order", f"must be at least 1, got {order}")
        self._signing_order = order
        return self

    def with_email_message(self, message: str) -> "SignerBuilder":
        self._message = message
        return self

    def deliver_signed_documents_by_email(self) -> "SignerBuilder":
        self._deliver = True
        return self

    def can_change_signer(self) -> "SignerBuilder":
        self._can_change_signer = True
        return self

    def with_attachment_requirement(self, requirement: AttachmentRequirement) -> "SignerBuilder":
        self._attachments.append(requirement)
        return self

    def build(self) -> Signer:
        email = _require_text(self._email, "signer email")

        requirements = {}
        for requirement in self._attachments:
            if requirement.name in requirements:
                raise EslBuilderError(
                    "attachment requirement name",
                    f"duplicate requirement {requirement.name!r} for {email}",
                )
            requirements[requirement.name] = requirement

        return Signer(
            email=email,
            first_name=self._first_name,
            last_name=self._last_name,
            company=self._company,
            title=self._title,
            custom_id=self._custom_id,
            signing_order=self._signing_order,
            message=self._message,
            deliver_signed_documents=self._deliver,
            can_change_signer=self._can_change_signer,
            attachment_requirements=requirements,
        )


# -----------------------------------------------------------------------------
# Fields and signatures
# -----------------------------------------------------------------------------

class FieldBuilder:
    """
    Builds a Field. Start from one of the style factories:

        FieldBuilder.signature_date().on_page(0).at_position(100, 200).build()
    """

    def __init__(self, style: FieldStyle):
        self._style = style
        self._page = 0
        self._x = 0.0
        self._y = 0.0
        self._width = DEFAULT_FIELD_WIDTH
        self._height = DEFAULT_FIELD_HEIGHT
        self._name: Optional[str] = None
        self._value: Optional[str] = None
        self._extract = False
        self._id: Optional[str] = None

    @classmethod
    def text_field(cls) -> "FieldBuilder":
        return cls(FieldStyle.TEXT_FIELD)

    @classmethod
    def check_box(cls) -> "FieldBuilder":
        return cls(FieldStyle.CHECK_BOX)

    @classmethod
    def label(cls) -> "FieldBuilder":
        return cls(FieldStyle.LABEL)

    @classmethod
    def signature_date(cls) -> "FieldBuilder":
        return cls(FieldStyle.SIGNATURE_DATE)

    @classmethod
    def signer_name(cls) -> "FieldBuilder":
        return cls(FieldStyle.SIGNER_NAME)

    @classmethod
    def signer_title(cls) -> "FieldBuilder":
        return cls(FieldStyle.SIGNER_TITLE)

    @classmethod
    def signer_company(cls) -> "FieldBuilder":
        return cls(FieldStyle.SIGNER_COMPANY)

    def with_id(self, field_id: str) -> "FieldBuilder":
        self._id = field_id
        return self

    def with_name(self, name: str) -> "FieldBuilder":
        self._name = name
        return self

    def with_value(self, value: str) -> "FieldBuilder":
        self._value = value
        return self

    def on_page(self, page: int) -> "FieldBuilder":
        self._page = page
        return self

    def at_position(self, x: float, y: float) -> "FieldBuilder":
        self._x = x
        self._y = y
        return self

    def with_size(self, width: float, height: float) -> "FieldBuilder":
        self._width = width
        self._height = height
        return self

    def with_position_extracted(self) -> "FieldBuilder":
        self._extract = True
        return self

    def build(self) -> Field:
        _require_non_negative(self._page, "field page")
        _require_non_negative(self._width, "field width")
        _require_non_negative(self._height, "field height")
        return Field(
            id=self._id,
            style=self._style,
            page=self._page,
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            name=self._name,
            value=self._value,
            extract=self._extract,
        )


class SignatureBuilder:
    """Builds a Signature for the signer with the given email."""

    def __init__(self, signer_email: str, style: SignatureStyle = SignatureStyle.FULL_NAME):
        self._signer_email = signer_email
        self._style = style
        self._page = 0
        self._x = 0.0
        self._y = 0.0
        self._width = DEFAULT_SIGNATURE_WIDTH
        self._height = DEFAULT_SIGNATURE_HEIGHT
        self._optional = False
        self._extract = False
        self._fields: List[Field] = []
        self._id: Optional[str] = None

    @classmethod
    def signature_for(cls, signer_email: str) -> "SignatureBuilder":
        return cls(signer_email, SignatureStyle.FULL_NAME)

    @classmethod
    def initials_for(cls, signer_email: str) -> "SignatureBuilder":
        return cls(signer_email, SignatureStyle.INITIALS)

    @classmethod
    def capture_for(cls, signer_email: str) -> "SignatureBuilder":
        return cls(signer_email, SignatureStyle.HAND_DRAWN)

    def with_id(self, signature_id: str) -> "SignatureBuilder":
        self._id = signature_id
        return self

    def on_page(self, page: int) -> "SignatureBuilder":
        self._page = page
        return self

    def at_position(self, x: float, y: float) -> "SignatureBuilder":
        self._x = x
        self._y = y
        return self

    def with_size(self, width: float, height: float) -> "SignatureBuilder":
        self._width = width
        self._height = height
        return self

    def make_optional(self) -> "SignatureBuilder":
        self._optional = True
        return self

    def with_position_extracted(self) -> "SignatureBuilder":
        self._extract = True
        return self

    def with_field(self, f: Field) -> "SignatureBuilder":
        self._fields.append(f)
        return self

    def build(self) -> Signature:
        _require_text(self._signer_email, "signature signer email")
        _require_non_negative(self._page, "signature page")
        _require_non_negative(self._width, "signature width")
        _require_non_negative(self._height, "signature height")
        return Signature(
            id=self._id,
            signer_email=self._signer_email,
            style=self._style,
            page=self._page,
            x=self._x,
            y=self._y,
            width=self._width,
            height=self._height,
            optional=self._optional,
            extract=self._extract,
            fields=list(self._fields),
        )


# -----------------------------------------------------------------------------
# Documents
# -----------------------------------------------------------------------------

class DocumentBuilder:
    """Builds a Document together with the content to upload for it."""

    def __init__(self, name: str):
        self._name = name
        self._description: Optional[str] = None
        self._index: Optional[int] = None
        self._file_name: Optional[str] = None
        self._content: Optional[bytes] = None
        self._document_type = DocumentType.PDF
        self._extract = False
        self._signatures: List[Signature] = []
        self._fields: List[Field] = []
        self._id: Optional[str] = None

    @classmethod
    def new_document_named(cls, name: str) -> "DocumentBuilder":
        return cls(name)

    def with_id(self, document_id: str) -> "DocumentBuilder":
        self._id = document_id
        return self

    def with_description(self, description: str) -> "DocumentBuilder":
        self._description = description
        return self

    def at_index(self, index: int) -> "DocumentBuilder":
        self._index = index
        return self

    def from_file(self, path: str) -> "DocumentBuilder":
        """Read content from ``path``; the type is taken from the file extension."""
        path = os.path.expanduser(path)
        with open(path, "rb") as f:
            self._content = f.read()
        self._file_name = os.path.basename(path)
        ext = os.path.splitext(path)[1].lstrip(".").lower()
        try:
            self._document_type = DocumentType(ext)
        except ValueError:
            raise EslBuilderError("document file", f"unsupported file type {ext!r}")
        return self

    def from_stream(self, stream: BinaryIO, document_type: DocumentType) -> "DocumentBuilder":
        self._content = stream.read()
        self._document_type = document_type
        return self

    def from_bytes(self, content: bytes, document_type: DocumentType) -> "DocumentBuilder":
        self._content = content
        self._document_type = document_type
        return self

    def enable_extraction(self) -> "DocumentBuilder":
        self._extract = True
        return self

    def with_signature(self, signature: Signature) -> "DocumentBuilder":
        self._signatures.append(signature)
        return self

    def with_injected_field(self, f: Field) -> "DocumentBuilder":
        self._fields.append(f)
        return self

    def build(self) -> Document:
        name = _require_text(self._name, "document name")
        file_name = self._file_name
        if file_name is None and self._content is not None:
            file_name = f"{name}.{self._document_type.value}"
        return Document(
            id=self._id,
            name=name,
            description=self._description,
            index=self._index,
            file_name=file_name,
            content=self._content,
            document_type=self._document_type,
            extract=self._extract,
            signatures=list(self._signatures),
            fields=list(self._fields),
        )


# -----------------------------------------------------------------------------
# Packages
# -----------------------------------------------------------------------------

class PackageBuilder:
    """
    Builds a DocumentPackage.

    Start a new package with new_package_named(), or continue from a
    package fetched from the server with from_api_package() /
    from_package() to run read-modify-send cycles.
    """

    def __init__(self, name: str):
        self._name = name
        self._id: Optional[PackageId] = None
        self._description: Optional[str] = None
        self._status: Optional[PackageStatus] = None
        self._email_message: Optional[str] = None
        self._autocomplete = True
        self._language: Optional[str] = None
        self._expiry_date: Optional[datetime] = None
        self._signers: List[Signer] = []
        self._documents: List[Document] = []

    @classmethod
    def new_package_named(cls, name: str) -> "PackageBuilder":
        return cls(name)

    @classmethod
    def from_package(cls, package: DocumentPackage) -> "PackageBuilder":
        """Seed a builder with a copy of an existing package."""
        package = copy.deepcopy(package)
        builder = cls(package.name)
        builder._id = package.id
        builder._description = package.description
        builder._status = package.status
        builder._email_message = package.email_message
        builder._autocomplete = package.autocomplete
        builder._language = package.language
        builder._expiry_date = package.expiry_date
        builder._signers = list(package.signers.values())
        builder._documents = list(package.documents.values())
        return builder

    @classmethod
    def from_api_package(cls, package: api.Package) -> "PackageBuilder":
        """Seed a builder from the wire Package returned by the server."""
        return cls.from_package(from_api_package(package))

    def with_id(self, package_id: PackageId) -> "PackageBuilder":
        self._id = package_id
        return self

    def described_as(self, description: str) -> "PackageBuilder":
        self._description = description
        return self

    def with_status(self, status: PackageStatus) -> "PackageBuilder":
        self._status = status
        return self

    def with_email_message(self, message: str) -> "PackageBuilder":
        self._email_message = message
        return self

    def without_autocomplete(self) -> "PackageBuilder":
        self._autocomplete = False
        return self

    def with_language(self, language: str) -> "PackageBuilder":
        self._language = normalize_language(language)
        return self

    def expires_at(self, expiry_date: datetime) -> "PackageBuilder":
        self._expiry_date = _utc_seconds(expiry_date)
        return self

    def with_signer(self, signer: Signer) -> "PackageBuilder":
        self._signers.append(signer)
        return self

    def with_document(self, document: Document) -> "PackageBuilder":
        self._documents.append(document)
        return self

    def build(self) -> DocumentPackage:
        name = _require_text(self._name, "package name")

        signers = {}
        for signer in self._signers:
            if signer.email in signers:
                raise EslBuilderError("signer email", f"duplicate signer {signer.email!r}")
            signers[signer.email] = signer
        _check_role_ids(list(signers.values()))

        documents = {}
        for document in self._documents:
            if document.name in documents:
                raise EslBuilderError("document name", f"duplicate document {document.name!r}")
            documents[document.name] = document

        return DocumentPackage(
            id=self._id,
            name=name,
            description=self._description,
            status=self._status,
            email_message=self._email_message,
            autocomplete=self._autocomplete,
            language=self._language,
            expiry_date=self._expiry_date,
            documents=documents,
            signers=signers,
        )


# -----------------------------------------------------------------------------
# Account resources
# -----------------------------------------------------------------------------

class ReminderScheduleBuilder:
    """Builds a ReminderSchedule for a package."""

    def __init__(self, package_id: PackageId):
        self._package_id = package_id
        self._days_until_first = 1
        self._days_between = 1
        self._repetitions = 1

    @classmethod
    def for_package_with_id(cls, package_id: PackageId) -> "ReminderScheduleBuilder":
        return cls(package_id)

    def with_days_until_first_reminder(self, days: int) -> "ReminderScheduleBuilder":
        self._days_until_first = days
        return self

    def with_days_between_reminders(self, days: int) -> "ReminderScheduleBuilder":
        self._days_between = days
        return self

    def with_number_of_repetitions(self, repetitions: int) -> "ReminderScheduleBuilder":
        self._repetitions = repetitions
        return self

    def build(self) -> ReminderSchedule:
        if self._package_id is None or not str(self._package_id):
            raise EslBuilderError("package id", "must not be empty")
        if self._days_until_first < 1:
            raise EslBuilderError("days until first reminder", "must be at least 1")
        if self._days_between < 1:
            raise EslBuilderError("days between reminders", "must be at least 1")
        if self._repetitions < 1:
            raise EslBuilderError("number of repetitions", "must be at least 1")
        return ReminderSchedule(
            package_id=self._package_id,
            days_until_first_reminder=self._days_until_first,
            days_between_reminders=self._days_between,
            number_of_repetitions=self._repetitions,
        )


class GroupBuilder:
    """Builds a signer Group."""

    def __init__(self, name: str):
        self._name = name
        self._email: Optional[str] = None
        self._individual_member_email = False
        self._members: List[GroupMember] = []

    @classmethod
    def new_group(cls, name: str) -> "GroupBuilder":
        return cls(name)

    def with_email(self, email: str) -> "GroupBuilder":
        self._email = email
        return self

    def with_individual_member_email(self) -> "GroupBuilder":
        self._individual_member_email = True
        return self

    def with_member(self, email: str, first_name: str = "", last_name: str = "") -> "GroupBuilder":
        self._members.append(GroupMember(email=email, first_name=first_name, last_name=last_name))
        return self

    def build(self) -> Group:
        name = _require_text(self._name, "group name")
        for member in self._members:
            _require_text(member.email, "group member email")
        return Group(
            name=name,
            email=self._email,
            individual_member_email=self._individual_member_email,
            members=list(self._members),
        )


class CustomFieldBuilder:
    """Builds an account-level CustomField."""

    def __init__(self, custom_field_id: str):
        self._id = custom_field_id
        self._value = ""
        self._required = False
        self._translations: List[Translation] = []

    @classmethod
    def custom_field_with_id(cls, custom_field_id: str) -> "CustomFieldBuilder":
        return cls(custom_field_id)

    def with_default_value(self, value: str) -> "CustomFieldBuilder":
        self._value = value
        return self

    def is_required(self) -> "CustomFieldBuilder":
        self._required = True
        return self

    def with_translation(self, language: str, name: str, description: str = "") -> "CustomFieldBuilder":
        self._translations.append(
            Translation(language=normalize_language(language), name=name, description=description)
        )
        return self

    def build(self) -> CustomField:
        custom_field_id = _require_text(self._id, "custom field id")
        if not self._translations:
            raise EslBuilderError("custom field translations", "at least one translation is required")
        return CustomField(
            id=custom_field_id,
            value=self._value,
            required=self._required,
            translations=list(self._translations),
        )

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
Wire DTOs exchanged with the e-SignLive REST API.

These classes mirror the JSON payloads one to one (camelCase keys live in
field metadata). They are only used at the transport boundary; callers work
with the domain classes in esl.models and the mapping layer in esl.mapping
converts between the two.

Parsing drops keys a DTO does not declare, and serialization omits fields
that are None.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime
from typing import Any, Dict, List, Optional

from .serialization import format_date, parse_date


def wire(name: str, item: Optional[type] = None, date: bool = False) -> Any:
    """Declare a DTO field stored under JSON key ``name``."""
    metadata: Dict[str, Any] = {"json": name}
    if item is not None:
        metadata["item"] = item
    if date:
        metadata["date"] = True
    return field(default=None, metadata=metadata)


def _encode(value: Any) -> Any:
    if isinstance(value, WireModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_encode(v) for v in value]
    if isinstance(value, datetime):
        return format_date(value)
    return value


def _decode(metadata: Any, value: Any) -> Any:
    item = metadata.get("item")
    if item is not None:
        if isinstance(value, list):
            return [item.from_dict(v) for v in value if v is not None]
        return item.from_dict(value)
    if metadata.get("date"):
        return parse_date(value)
    return value


class WireModel:
    """Mixin giving DTO dataclasses their JSON mapping."""

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[f.metadata["json"]] = _encode(value)
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        if data is None:
            return None
        kwargs = {}
        for f in fields(cls):
            key = f.metadata["json"]
            if data.get(key) is None:
                continue
            kwargs[f.name] = _decode(f.metadata, data[key])
        return cls(**kwargs)


# -----------------------------------------------------------------------------
# Errors and simple results
# -----------------------------------------------------------------------------

@dataclass
class ServerError(WireModel):
    """Error payload returned with non-2xx responses"""
    message_key: Optional[str] = wire("messageKey")
    message: Optional[str] = wire("message")
    code: Optional[int] = wire("code")
    technical: Optional[str] = wire("technical")
    name: Optional[str] = wire("name")


@dataclass
class IdResult(WireModel):
    """Body of create responses: {"id": "..."}"""
    id: Optional[str] = wire("id")


@dataclass
class SessionToken(WireModel):
    session_token: Optional[str] = wire("sessionToken")


@dataclass
class AuthenticationToken(WireModel):
    value: Optional[str] = wire("value")


@dataclass
class SignerAuthenticationToken(WireModel):
    value: Optional[str] = wire("value")
    package_id: Optional[str] = wire("packageId")
    signer_id: Optional[str] = wire("signerId")


@dataclass
class SigningStatus(WireModel):
    status: Optional[str] = wire("status")


# -----------------------------------------------------------------------------
# Package graph
# -----------------------------------------------------------------------------

@dataclass
class AttachmentFile(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")


@dataclass
class AttachmentRequirement(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    description: Optional[str] = wire("description")
    required: Optional[bool] = wire("required")
    status: Optional[str] = wire("status")
    comment: Optional[str] = wire("comment")
    files: Optional[List[AttachmentFile]] = wire("files", item=AttachmentFile)


@dataclass
class Delivery(WireModel):
    email: Optional[bool] = wire("email")
    download: Optional[bool] = wire("download")


@dataclass
class Signer(WireModel):
    id: Optional[str] = wire("id")
    email: Optional[str] = wire("email")
    first_name: Optional[str] = wire("firstName")
    last_name: Optional[str] = wire("lastName")
    company: Optional[str] = wire("company")
    title: Optional[str] = wire("title")
    delivery: Optional[Delivery] = wire("delivery", item=Delivery)


@dataclass
class EmailMessage(WireModel):
    content: Optional[str] = wire("content")


@dataclass
class Role(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    type: Optional[str] = wire("type")
    index: Optional[int] = wire("index")
    reassign: Optional[bool] = wire("reassign")
    email_message: Optional[EmailMessage] = wire("emailMessage", item=EmailMessage)
    signers: Optional[List[Signer]] = wire("signers", item=Signer)
    attachment_requirements: Optional[List[AttachmentRequirement]] = wire(
        "attachmentRequirements", item=AttachmentRequirement
    )


@dataclass
class Field(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    type: Optional[str] = wire("type")
    subtype: Optional[str] = wire("subtype")
    page: Optional[int] = wire("page")
    left: Optional[float] = wire("left")
    top: Optional[float] = wire("top")
    width: Optional[float] = wire("width")
    height: Optional[float] = wire("height")
    value: Optional[str] = wire("value")
    extract: Optional[bool] = wire("extract")
    binding: Optional[str] = wire("binding")


@dataclass
class Approval(WireModel):
    id: Optional[str] = wire("id")
    role: Optional[str] = wire("role")
    optional: Optional[bool] = wire("optional")
    fields: Optional[List[Field]] = wire("fields", item=Field)


@dataclass
class Document(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    description: Optional[str] = wire("description")
    index: Optional[int] = wire("index")
    extract: Optional[bool] = wire("extract")
    approvals: Optional[List[Approval]] = wire("approvals", item=Approval)
    fields: Optional[List[Field]] = wire("fields", item=Field)


@dataclass
class Package(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    description: Optional[str] = wire("description")
    status: Optional[str] = wire("status")
    type: Optional[str] = wire("type")
    email_message: Optional[str] = wire("emailMessage")
    autocomplete: Optional[bool] = wire("autocomplete")
    language: Optional[str] = wire("language")
    due: Optional[datetime] = wire("due", date=True)
    created: Optional[datetime] = wire("created", date=True)
    updated: Optional[datetime] = wire("updated", date=True)
    roles: Optional[List[Role]] = wire("roles", item=Role)
    documents: Optional[List[Document]] = wire("documents", item=Document)


# -----------------------------------------------------------------------------
# Account resources
# -----------------------------------------------------------------------------

@dataclass
class AuditEvent(WireModel):
    type: Optional[str] = wire("type")
    date_time: Optional[datetime] = wire("date-time", date=True)
    target: Optional[str] = wire("target")
    target_type: Optional[str] = wire("target-type")
    user: Optional[str] = wire("user")
    user_email: Optional[str] = wire("user-email")
    user_ip: Optional[str] = wire("user-ip")
    data: Optional[str] = wire("data")


@dataclass
class Audit(WireModel):
    audit_events: Optional[List[AuditEvent]] = wire("audit-events", item=AuditEvent)


@dataclass
class FieldSummary(WireModel):
    signer_id: Optional[str] = wire("signerId")
    document_id: Optional[str] = wire("documentId")
    field_id: Optional[str] = wire("fieldId")
    field_name: Optional[str] = wire("fieldName")
    field_value: Optional[str] = wire("fieldValue")


@dataclass
class Reminder(WireModel):
    date: Optional[datetime] = wire("date", date=True)
    sent_date: Optional[datetime] = wire("sentDate", date=True)


@dataclass
class ReminderSchedule(WireModel):
    package_id: Optional[str] = wire("packageId")
    start_in_days_delay: Optional[int] = wire("startInDaysDelay")
    interval_in_days: Optional[int] = wire("intervalInDays")
    repetitions_count: Optional[int] = wire("repetitionsCount")
    reminders: Optional[List[Reminder]] = wire("reminders", item=Reminder)


@dataclass
class GroupMember(WireModel):
    member_type: Optional[str] = wire("memberType")
    email: Optional[str] = wire("email")
    first_name: Optional[str] = wire("firstName")
    last_name: Optional[str] = wire("lastName")


@dataclass
class Group(WireModel):
    id: Optional[str] = wire("id")
    name: Optional[str] = wire("name")
    email: Optional[str] = wire("email")
    email_members: Optional[bool] = wire("emailMembers")
    members: Optional[List[GroupMember]] = wire("members", item=GroupMember)
    created: Optional[datetime] = wire("created", date=True)


@dataclass
class Translation(WireModel):
    language: Optional[str] = wire("language")
    name: Optional[str] = wire("name")
    description: Optional[str] = wire("description")


@dataclass
class CustomField(WireModel):
    id: Optional[str] = wire("id")
    value: Optional[str] = wire("value")
    required: Optional[bool] = wire("required")
    translations: Optional[List[Translation]] = wire("translations", item=Translation)


@dataclass
class CustomFieldValue(WireModel):
    id: Optional[str] = wire("id")
    value: Optional[str] = wire("value")


@dataclass
class Callback(WireModel):
    url: Optional[str] = wire("url")
    key: Optional[str] = wire("key")
    events: Optional[List[str]] = wire("events")


@dataclass
class Sender(WireModel):
    id: Optional[str] = wire("id")
    email: Optional[str] = wire("email")
    first_name: Optional[str] = wire("firstName")
    last_name: Optional[str] = wire("lastName")
    company: Optional[str] = wire("company")
    title: Optional[str] = wire("title")
    status: Optional[str] = wire("status")
    type: Optional[str] = wire("type")
    language: Optional[str] = wire("language")
    created: Optional[datetime] = wire("created", date=True)

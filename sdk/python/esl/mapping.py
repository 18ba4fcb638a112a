# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
Conversion between domain objects (esl.models) and wire DTOs (esl.api).

All functions here are pure: they neither touch the network nor mutate
their input.

Package mapping rules:
    - each signer becomes a role whose id is the signer's custom_id, or
      "signer<n>" (1-based position) when no custom_id was given; on
      parse a role id equal to its own positional id reads back as no
      custom_id
    - a signature becomes an approval for the signer's role; the
      signature itself is the approval's SIGNATURE field, any attached
      fields follow it
    - a signature for an email that is not one of the package's signers
      (typically the sender) references that email as the role
    - document content, file name and type are upload payload, not part
      of the package JSON
    - wire fields without a domain counterpart are dropped
"""

from typing import Dict, Optional, Type, TypeVar

from . import api
from .models import (
    AttachmentFile,
    AttachmentRequirement,
    AuditEvent,
    CustomField,
    CustomFieldValue,
    Document,
    DocumentPackage,
    EventNotificationConfig,
    Field,
    FieldStyle,
    FieldSummary,
    Group,
    GroupMember,
    NotificationEvent,
    PackageId,
    PackageStatus,
    Reminder,
    ReminderSchedule,
    RequirementStatus,
    Sender,
    Signature,
    SignatureStyle,
    Signer,
    Translation,
)
from .serialization import normalize_language

E = TypeVar("E")

SIGNATURE_FIELD_TYPE = "SIGNATURE"
INPUT_FIELD_TYPE = "INPUT"


def _enum(enum_cls: Type[E], value: Optional[str]) -> Optional[E]:
    """Look up an enum member, returning None for values this SDK does not know."""
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


def _value(member) -> Optional[str]:
    return member.value if member is not None else None


def positional_role_id(position: int) -> str:
    """Role id generated for a signer without a custom id at 1-based ``position``."""
    return f"signer{position}"


def role_id_for(signer: Signer, position: int) -> str:
    """Role id used for a signer at 1-based ``position`` in its package."""
    return signer.custom_id or positional_role_id(position)


def role_ids_for(package: DocumentPackage) -> Dict[str, str]:
    """Signer email -> role id, as to_api_package() assigns them."""
    return {
        signer.email: role_id_for(signer, position)
        for position, signer in enumerate(package.signers.values(), start=1)
    }


def role_emails_for(package: DocumentPackage) -> Dict[str, str]:
    """Role id -> signer email, the inverse of role_ids_for()."""
    return {role_id: email for email, role_id in role_ids_for(package).items()}


# -----------------------------------------------------------------------------
# Domain -> wire
# -----------------------------------------------------------------------------

def to_api_attachment_requirement(requirement: AttachmentRequirement) -> api.AttachmentRequirement:
    return api.AttachmentRequirement(
        id=requirement.id,
        name=requirement.name,
        description=requirement.description,
        required=requirement.required,
        status=_value(requirement.status),
        comment=requirement.sender_comment,
        files=[api.AttachmentFile(id=f.id, name=f.name) for f in requirement.files],
    )


def to_api_role(signer: Signer, role_id: str) -> api.Role:
    """Wrap a signer in the role the server expects."""
    api_signer = api.Signer(
        id=role_id,
        email=signer.email,
        first_name=signer.first_name,
        last_name=signer.last_name,
        company=signer.company,
        title=signer.title,
        delivery=api.Delivery(email=signer.deliver_signed_documents),
    )
    email_message = None
    if signer.message is not None:
        email_message = api.EmailMessage(content=signer.message)

    return api.Role(
        id=role_id,
        name=role_id,
        type="SIGNER",
        index=signer.signing_order,
        reassign=signer.can_change_signer,
        email_message=email_message,
        signers=[api_signer],
        attachment_requirements=[
            to_api_attachment_requirement(r) for r in signer.attachment_requirements.values()
        ],
    )


def to_api_field(f: Field) -> api.Field:
    return api.Field(
        id=f.id,
        name=f.name,
        type=INPUT_FIELD_TYPE,
        subtype=f.style.subtype,
        binding=f.style.binding,
        page=f.page,
        left=f.x,
        top=f.y,
        width=f.width,
        height=f.height,
        value=f.value,
        extract=f.extract,
    )


def to_api_approval(signature: Signature, role_ids: Dict[str, str]) -> api.Approval:
    signature_field = api.Field(
        type=SIGNATURE_FIELD_TYPE,
        subtype=signature.style.value,
        page=signature.page,
        left=signature.x,
        top=signature.y,
        width=signature.width,
        height=signature.height,
        extract=signature.extract,
    )
    return api.Approval(
        id=signature.id,
        role=role_ids.get(signature.signer_email, signature.signer_email),
        optional=signature.optional,
        fields=[signature_field] + [to_api_field(f) for f in signature.fields],
    )


def to_api_document(document: Document, role_ids: Dict[str, str]) -> api.Document:
    return api.Document(
        id=document.id,
        name=document.name,
        description=document.description,
        index=document.index,
        extract=document.extract,
        approvals=[to_api_approval(s, role_ids) for s in document.signatures],
        fields=[to_api_field(f) for f in document.fields],
    )


def to_api_package(package: DocumentPackage) -> api.Package:
    """
    Convert a DocumentPackage to the wire Package.

    Deterministic: signers and documents keep their insertion order.
    """
    role_ids = role_ids_for(package)
    roles = [to_api_role(signer, role_ids[signer.email]) for signer in package.signers.values()]

    return api.Package(
        id=str(package.id) if package.id else None,
        name=package.name,
        description=package.description,
        status=_value(package.status),
        type="PACKAGE",
        email_message=package.email_message,
        autocomplete=package.autocomplete,
        language=normalize_language(package.language),
        due=package.expiry_date,
        roles=roles,
        documents=[to_api_document(d, role_ids) for d in package.documents.values()],
    )


# -----------------------------------------------------------------------------
# Wire -> domain
# -----------------------------------------------------------------------------

def from_api_attachment_requirement(requirement: api.AttachmentRequirement) -> AttachmentRequirement:
    return AttachmentRequirement(
        id=requirement.id,
        name=requirement.name or "",
        description=requirement.description or "",
        required=bool(requirement.required),
        status=_enum(RequirementStatus, requirement.status),
        sender_comment=requirement.comment,
        files=[AttachmentFile(id=f.id, name=f.name or "") for f in requirement.files or []],
    )


def from_api_role(role: api.Role, position: int) -> Optional[Signer]:
    """
    Signer for a role, or None for placeholder roles with no signer attached.

    Args:
        position: 1-based position of the role among the package's signer roles
    """
    if not role.signers:
        return None
    custom_id = role.id
    if custom_id == positional_role_id(position):
        custom_id = None
    api_signer = role.signers[0]
    requirements = [from_api_attachment_requirement(r) for r in role.attachment_requirements or []]
    return Signer(
        email=api_signer.email or "",
        first_name=api_signer.first_name or "",
        last_name=api_signer.last_name or "",
        company=api_signer.company,
        title=api_signer.title,
        custom_id=custom_id,
        signing_order=role.index,
        message=role.email_message.content if role.email_message else None,
        deliver_signed_documents=bool(api_signer.delivery and api_signer.delivery.email),
        can_change_signer=bool(role.reassign),
        attachment_requirements={r.name: r for r in requirements},
    )


def from_api_field(f: api.Field) -> Field:
    return Field(
        id=f.id,
        name=f.name,
        style=FieldStyle.from_wire(f.subtype, f.binding),
        page=f.page or 0,
        x=f.left or 0.0,
        y=f.top or 0.0,
        width=f.width or 0.0,
        height=f.height or 0.0,
        value=f.value,
        extract=bool(f.extract),
    )


def from_api_approval(approval: api.Approval, role_emails: Dict[str, str]) -> Optional[Signature]:
    """
    Signature for an approval.

    Consent-only approvals have no SIGNATURE field; they have no domain
    counterpart and yield None.
    """
    api_fields = approval.fields or []
    signature_field = next((f for f in api_fields if f.type == SIGNATURE_FIELD_TYPE), None)
    if signature_field is None:
        return None

    role = approval.role or ""
    return Signature(
        id=approval.id,
        signer_email=role_emails.get(role, role),
        style=_enum(SignatureStyle, signature_field.subtype) or SignatureStyle.FULL_NAME,
        page=signature_field.page or 0,
        x=signature_field.left or 0.0,
        y=signature_field.top or 0.0,
        width=signature_field.width or 0.0,
        height=signature_field.height or 0.0,
        optional=bool(approval.optional),
        extract=bool(signature_field.extract),
        fields=[from_api_field(f) for f in api_fields if f is not signature_field],
    )


def from_api_document(document: api.Document, role_emails: Dict[str, str]) -> Document:
    signatures = []
    for approval in document.approvals or []:
        signature = from_api_approval(approval, role_emails)
        if signature is not None:
            signatures.append(signature)

    return Document(
        id=document.id,
        name=document.name or "",
        description=document.description,
        index=document.index,
        extract=bool(document.extract),
        signatures=signatures,
        fields=[from_api_field(f) for f in document.fields or []],
    )


def from_api_package(package: api.Package) -> DocumentPackage:
    """Reconstruct a DocumentPackage from the wire Package."""
    signers: Dict[str, Signer] = {}
    role_emails: Dict[str, str] = {}
    for role in package.roles or []:
        signer = from_api_role(role, len(signers) + 1)
        if signer is None:
            continue
        signers[signer.email] = signer
        if role.id:
            role_emails[role.id] = signer.email

    documents: Dict[str, Document] = {}
    for api_document in package.documents or []:
        document = from_api_document(api_document, role_emails)
        documents[document.name] = document

    return DocumentPackage(
        id=PackageId(package.id) if package.id else None,
        name=package.name or "",
        description=package.description,
        status=_enum(PackageStatus, package.status),
        email_message=package.email_message,
        autocomplete=True if package.autocomplete is None else package.autocomplete,
        language=package.language,
        expiry_date=package.due,
        documents=documents,
        signers=signers,
    )


# -----------------------------------------------------------------------------
# Account resources
# -----------------------------------------------------------------------------

def to_api_reminder_schedule(schedule: ReminderSchedule) -> api.ReminderSchedule:
    return api.ReminderSchedule(
        package_id=str(schedule.package_id),
        start_in_days_delay=schedule.days_until_first_reminder,
        interval_in_days=schedule.days_between_reminders,
        repetitions_count=schedule.number_of_repetitions,
        reminders=[api.Reminder(date=r.date, sent_date=r.sent_date) for r in schedule.reminders],
    )


def from_api_reminder_schedule(schedule: api.ReminderSchedule) -> ReminderSchedule:
    return ReminderSchedule(
        package_id=PackageId(schedule.package_id or ""),
        days_until_first_reminder=schedule.start_in_days_delay or 0,
        days_between_reminders=schedule.interval_in_days or 0,
        number_of_repetitions=schedule.repetitions_count or 0,
        reminders=[Reminder(date=r.date, sent_date=r.sent_date) for r in schedule.reminders or []],
    )


def to_api_group_member(member: GroupMember) -> api.GroupMember:
    return api.GroupMember(
        member_type=member.member_type,
        email=member.email,
        first_name=member.first_name,
        last_name=member.last_name,
    )


def to_api_group(group: Group) -> api.Group:
    return api.Group(
        id=group.id,
        name=group.name,
        email=group.email,
        email_members=group.individual_member_email,
        members=[to_api_group_member(m) for m in group.members],
    )


def from_api_group(group: api.Group) -> Group:
    return Group(
        id=group.id,
        name=group.name or "",
        email=group.email,
        individual_member_email=bool(group.email_members),
        members=[
            GroupMember(
                email=m.email or "",
                first_name=m.first_name or "",
                last_name=m.last_name or "",
                member_type=m.member_type or "REGULAR",
            )
            for m in group.members or []
        ],
        created=group.created,
    )


def to_api_custom_field(custom_field: CustomField) -> api.CustomField:
    return api.CustomField(
        id=custom_field.id,
        value=custom_field.value,
        required=custom_field.required,
        translations=[
            api.Translation(
                language=normalize_language(t.language),
                name=t.name,
                description=t.description,
            )
            for t in custom_field.translations
        ],
    )


def from_api_custom_field(custom_field: api.CustomField) -> CustomField:
    return CustomField(
        id=custom_field.id or "",
        value=custom_field.value or "",
        required=bool(custom_field.required),
        translations=[
            Translation(language=t.language or "", name=t.name or "", description=t.description or "")
            for t in custom_field.translations or []
        ],
    )


def from_api_custom_field_value(value: api.CustomFieldValue) -> CustomFieldValue:
    return CustomFieldValue(id=value.id or "", value=value.value or "")


def to_api_callback(config: EventNotificationConfig) -> api.Callback:
    return api.Callback(url=config.url, key=config.key, events=[e.value for e in config.events])


def from_api_callback(callback: api.Callback) -> EventNotificationConfig:
    events = [_enum(NotificationEvent, e) for e in callback.events or []]
    return EventNotificationConfig(
        url=callback.url or "",
        key=callback.key,
        events=[e for e in events if e is not None],
    )


def to_api_sender(sender: Sender) -> api.Sender:
    return api.Sender(
        id=sender.id,
        email=sender.email,
        first_name=sender.first_name,
        last_name=sender.last_name,
        company=sender.company,
        title=sender.title,
        language=normalize_language(sender.language),
    )


def from_api_sender(sender: api.Sender) -> Sender:
    return Sender(
        id=sender.id,
        email=sender.email or "",
        first_name=sender.first_name or "",
        last_name=sender.last_name or "",
        company=sender.company,
        title=sender.title,
        status=sender.status,
        language=sender.language,
        created=sender.created,
    )


def from_api_audit_event(event: api.AuditEvent) -> AuditEvent:
    return AuditEvent(
        type=event.type or "",
        date=event.date_time,
        target=event.target or "",
        target_type=event.target_type or "",
        user=event.user or "",
        user_email=event.user_email or "",
        user_ip=event.user_ip or "",
        data=event.data or "",
    )


def from_api_field_summary(summary: api.FieldSummary) -> FieldSummary:
    return FieldSummary(
        signer_id=summary.signer_id or "",
        document_id=summary.document_id or "",
        field_id=summary.field_id or "",
        field_name=summary.field_name or "",
        field_value=summary.field_value,
    )

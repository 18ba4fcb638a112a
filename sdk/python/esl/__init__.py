# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
ESL Python SDK - e-SignLive transaction API client

Data directory: ~/.esl (override with ESL_DATA)

Usage:
    from esl import EslClient, PackageBuilder, SignerBuilder

    client = EslClient.from_env()
    package = (
        PackageBuilder.new_package_named("Contract")
        .with_signer(SignerBuilder.new_signer_with_email("john@example.com").build())
        .build()
    )
    package_id = client.create_and_send_package(package)
    client.close()
"""

from .builders import (
    AttachmentRequirementBuilder,
    CustomFieldBuilder,
    DocumentBuilder,
    FieldBuilder,
    GroupBuilder,
    PackageBuilder,
    ReminderScheduleBuilder,
    SignatureBuilder,
    SignerBuilder,
)
from .client import EslClient
from .config import ClientConfig, load_config
from .exceptions import (
    EslBuilderError,
    EslConfigError,
    EslError,
    EslServerError,
)
from .mapping import from_api_package, to_api_package
from .models import (
    AttachmentFile,
    AttachmentRequirement,
    AuditEvent,
    AuthenticationToken,
    CustomField,
    CustomFieldValue,
    Document,
    DocumentPackage,
    DocumentType,
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
    SessionToken,
    Signature,
    SignatureStyle,
    Signer,
    SigningState,
    Translation,
)

__version__ = "0.1.0"
__all__ = [
    # Main client
    "EslClient",

    # Builders
    "PackageBuilder",
    "SignerBuilder",
    "DocumentBuilder",
    "SignatureBuilder",
    "FieldBuilder",
    "AttachmentRequirementBuilder",
    "ReminderScheduleBuilder",
    "GroupBuilder",
    "CustomFieldBuilder",

    # Mapping
    "to_api_package",
    "from_api_package",

    # Configuration
    "ClientConfig",
    "load_config",

    # Exceptions
    "EslError",
    "EslBuilderError",
    "EslConfigError",
    "EslServerError",

    # Types
    "AttachmentFile",
    "AttachmentRequirement",
    "AuditEvent",
    "AuthenticationToken",
    "CustomField",
    "CustomFieldValue",
    "Document",
    "DocumentPackage",
    "DocumentType",
    "EventNotificationConfig",
    "Field",
    "FieldStyle",
    "FieldSummary",
    "Group",
    "GroupMember",
    "NotificationEvent",
    "PackageId",
    "PackageStatus",
    "Reminder",
    "ReminderSchedule",
    "RequirementStatus",
    "Sender",
    "SessionToken",
    "Signature",
    "SignatureStyle",
    "Signer",
    "SigningState",
    "Translation",
]

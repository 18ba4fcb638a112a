# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Service clients, one per API resource area."""

from .account import AccountService
from .audit import AuditService
from .authentication import AuthenticationService
from .custom_field import CustomFieldService
from .event_notification import EventNotificationService
from .field_summary import FieldSummaryService
from .group import GroupService
from .package import PackageService
from .reminder import ReminderService
from .session import SessionService
from .template import TemplateService

__all__ = [
    "AccountService",
    "AuditService",
    "AuthenticationService",
    "CustomFieldService",
    "EventNotificationService",
    "FieldSummaryService",
    "GroupService",
    "PackageService",
    "ReminderService",
    "SessionService",
    "TemplateService",
]

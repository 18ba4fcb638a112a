# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

from typing import List

from .. import api
from ..mapping import from_api_audit_event
from ..models import AuditEvent, PackageId
from .base import Service


class AuditService(Service):

    def get_audit(self, package_id: PackageId) -> List[AuditEvent]:
        """Audit trail of a package, oldest event first."""
        data = self.client.get(self.url("/packages/{packageId}/audit", packageId=package_id))
        audit = api.Audit.from_dict(data or {})
        return [from_api_audit_event(e) for e in audit.audit_events or []]

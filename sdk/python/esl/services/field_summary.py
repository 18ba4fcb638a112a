# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

from typing import List

from .. import api
from ..mapping import from_api_field_summary
from ..models import FieldSummary, PackageId
from .base import Service


class FieldSummaryService(Service):

    def get_field_summary(self, package_id: PackageId) -> List[FieldSummary]:
        """Values entered in every field of a package."""
        data = self.client.get(self.url("/packages/{packageId}/fieldSummary", packageId=package_id))
        return [from_api_field_summary(api.FieldSummary.from_dict(s)) for s in data or []]

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Templates: reusable packages that new packages are cloned from."""

import dataclasses
import logging

from .. import api
from ..models import PackageId
from .base import Service, package_id_from

logger = logging.getLogger(__name__)

TEMPLATE = "TEMPLATE"
PACKAGE = "PACKAGE"


class TemplateService(Service):

    def create_template(self, template: api.Package) -> PackageId:
        """Create an empty template (documents are uploaded afterwards)."""
        template = dataclasses.replace(template, type=TEMPLATE)
        template_id = package_id_from(self.client.post(self.url("/packages"), template), "template")
        logger.info("Created template %s", template_id)
        return template_id

    def create_template_from_package(self, package_id: PackageId, delta: api.Package) -> PackageId:
        """
        Clone an existing package into a new template.

        Args:
            package_id: Package to clone
            delta: Values overriding the original's (at least a name)
        """
        return self._clone(package_id, dataclasses.replace(delta, type=TEMPLATE))

    def create_package_from_template(self, template_id: PackageId, delta: api.Package) -> PackageId:
        """Clone a template into a new draft package, applying delta."""
        return self._clone(template_id, dataclasses.replace(delta, type=PACKAGE))

    def _clone(self, source_id: PackageId, delta: api.Package) -> PackageId:
        data = self.client.post(self.url("/packages/{packageId}/clone", packageId=source_id), delta)
        clone_id = package_id_from(data, delta.type.lower())
        logger.info("Cloned %s into %s %s", source_id, delta.type.lower(), clone_id)
        return clone_id

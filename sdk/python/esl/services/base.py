# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

from typing import Any

from .. import api
from ..exceptions import EslError
from ..models import PackageId
from ..transport import RestClient, build_url


def package_id_from(data: Any, what: str) -> PackageId:
    """Read the {"id": ...} body returned when a package or template is created."""
    result = api.IdResult.from_dict(data) if isinstance(data, dict) else None
    if result is None or not result.id:
        raise EslError(f"Server did not return an id for the new {what}")
    return PackageId(result.id)


class Service:
    """Base for service clients: one RestClient and the API base URL."""

    def __init__(self, client: RestClient, base_url: str):
        self.client = client
        self.base_url = base_url

    def url(self, template: str, **params: Any) -> str:
        return build_url(self.base_url, template, **params)

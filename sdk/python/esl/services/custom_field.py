# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Account custom fields and the sender's values for them."""

from typing import List

from .. import api
from ..exceptions import EslServerError
from ..mapping import from_api_custom_field, from_api_custom_field_value, to_api_custom_field
from ..models import CustomField, CustomFieldValue
from .base import Service


class CustomFieldService(Service):

    def create_custom_field(self, custom_field: CustomField) -> CustomField:
        data = self.client.post(self.url("/account/customfields"), to_api_custom_field(custom_field))
        return from_api_custom_field(api.CustomField.from_dict(data or {}))

    def get_custom_field(self, custom_field_id: str) -> CustomField:
        data = self.client.get(self.url("/account/customfields/{id}", id=custom_field_id))
        return from_api_custom_field(api.CustomField.from_dict(data or {}))

    def get_custom_fields(self) -> List[CustomField]:
        data = self.client.get(self.url("/account/customfields")) or []
        return [from_api_custom_field(api.CustomField.from_dict(c)) for c in data]

    def does_custom_field_exist(self, custom_field_id: str) -> bool:
        try:
            self.get_custom_field(custom_field_id)
        except EslServerError as e:
            if e.status_code == 404:
                return False
            raise
        return True

    def delete_custom_field(self, custom_field_id: str) -> None:
        self.client.delete(self.url("/account/customfields/{id}", id=custom_field_id))

    def submit_custom_field_value(self, value: CustomFieldValue) -> CustomFieldValue:
        """Store the calling sender's own value for a custom field."""
        data = self.client.post(
            self.url("/user/customfields"),
            api.CustomFieldValue(id=value.id, value=value.value),
        )
        return from_api_custom_field_value(api.CustomFieldValue.from_dict(data or {}))

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Callback (webhook) registration."""

from typing import List, Optional

from .. import api
from ..mapping import from_api_callback, to_api_callback
from ..models import EventNotificationConfig, NotificationEvent
from .base import Service


class EventNotificationService(Service):

    def register(self, url: str, events: List[NotificationEvent], key: Optional[str] = None) -> None:
        """
        Register the account's callback URL.

        Args:
            url: Endpoint the server POSTs notifications to
            events: Events to be notified of
            key: Shared secret sent back with each notification
        """
        config = EventNotificationConfig(url=url, key=key, events=list(events))
        self.client.post(self.url("/callback"), to_api_callback(config))

    def get_event_notification_config(self) -> Optional[EventNotificationConfig]:
        data = self.client.get(self.url("/callback"))
        if not data:
            return None
        return from_api_callback(api.Callback.from_dict(data))

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Account senders."""

from typing import List

from .. import api
from ..mapping import from_api_sender, to_api_sender
from ..models import Sender
from .base import Service


class AccountService(Service):

    def invite_user(self, sender: Sender) -> Sender:
        """Invite a new sender to the account."""
        data = self.client.post(self.url("/account/senders"), to_api_sender(sender))
        return from_api_sender(api.Sender.from_dict(data or {}))

    def get_senders(self, page_from: int = 1, page_to: int = 50) -> List[Sender]:
        data = self.client.get(
            self.url("/account/senders"), params={"from": page_from, "to": page_to}
        ) or {}
        return [from_api_sender(api.Sender.from_dict(s)) for s in data.get("results", [])]

    def get_sender(self, sender_id: str) -> Sender:
        data = self.client.get(self.url("/account/senders/{senderId}", senderId=sender_id))
        return from_api_sender(api.Sender.from_dict(data or {}))

    def delete_sender(self, sender_id: str) -> None:
        self.client.delete(self.url("/account/senders/{senderId}", senderId=sender_id))

# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Session tokens for embedding the signing and sender UIs."""

from .. import api
from ..exceptions import EslError
from ..models import PackageId, SessionToken
from .base import Service


def _session_token(data) -> SessionToken:
    token = api.SessionToken.from_dict(data or {}).session_token
    if not token:
        raise EslError("Server did not return a session token")
    return SessionToken(session_token=token)


class SessionService(Service):

    def create_signer_session_token(self, package_id: PackageId, signer_id: str) -> SessionToken:
        """Session token that lets a signer open the signing ceremony."""
        data = self.client.post(
            self.url("/sessions"),
            params={"package": str(package_id), "signer": signer_id},
        )
        return _session_token(data)

    def create_sender_session_token(self) -> SessionToken:
        return _session_token(self.client.post(self.url("/sessions")))

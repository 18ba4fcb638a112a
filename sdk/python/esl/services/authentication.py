# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Authentication tokens."""

from .. import api
from ..exceptions import EslError
from ..models import AuthenticationToken, PackageId
from .base import Service


def _token_value(data) -> str:
    value = api.AuthenticationToken.from_dict(data or {}).value
    if not value:
        raise EslError("Server did not return an authentication token")
    return value


class AuthenticationService(Service):

    def create_authentication_token(self) -> AuthenticationToken:
        """Single-use token that logs the account's sender into the web UI."""
        data = self.client.post(self.url("/authenticationTokens"))
        return AuthenticationToken(token=_token_value(data))

    def create_signer_authentication_token(self, package_id: PackageId, signer_id: str) -> AuthenticationToken:
        """Token that lets API calls act as a given signer of a package."""
        body = api.SignerAuthenticationToken(package_id=str(package_id), signer_id=signer_id)
        data = self.client.post(self.url("/signerAuthenticationTokens"), body)
        return AuthenticationToken(token=_token_value(data))

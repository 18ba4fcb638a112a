# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""Exceptions raised by the ESL SDK."""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .api import ServerError


class EslError(Exception):
    """Base exception for SDK errors"""
    pass


class EslConfigError(EslError):
    """Configuration missing or invalid"""
    pass


class EslBuilderError(EslError):
    """A builder or argument check rejected its input before any request was made."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class EslServerError(EslError):
    """
    The server rejected a request.

    Carries the parsed error payload so callers can branch on the
    server's message key:

        try:
            client.delete_attachment_file(package_id, att_id, file_id, signer_id)
        except EslServerError as e:
            if e.message_key == "error.validation.attachments.delete.completedTransaction":
                ...
    """

    def __init__(self, message: str, server_error: "ServerError", status_code: int):
        self.server_error = server_error
        self.status_code = status_code
        super().__init__(message)

    @property
    def message_key(self) -> Optional[str]:
        return self.server_error.message_key

    def __str__(self) -> str:
        base = super().__str__()
        if self.message_key:
            return f"{base} (HTTP {self.status_code}, {self.message_key})"
        return f"{base} (HTTP {self.status_code})"

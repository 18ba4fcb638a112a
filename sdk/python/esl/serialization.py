# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2026 ESL SDK Authors

"""
JSON settings shared by every service client.

Rules applied to wire payloads:
    - None values are omitted, never written as null
    - datetimes are written in UTC as YYYY-MM-DDTHH:MM:SSZ
      (naive datetimes are taken to already be UTC)
    - language tags are normalised, e.g. "fr_ca" -> "fr-CA"
"""

import json
import re
from datetime import datetime, timezone
from typing import Any, Optional

DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

_LANGUAGE_RE = re.compile(r"^([A-Za-z]{2,3})(?:[-_]([A-Za-z]{2}|\d{3}))?$")
_FRACTION_RE = re.compile(r"\.(\d+)")


def format_date(value: datetime) -> str:
    """Format a datetime as a UTC wire timestamp."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime(DATE_FORMAT)


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a wire timestamp into an aware UTC datetime.

    Accepts the SDK's own format plus the ISO variants the server
    returns (fractional seconds, explicit offsets).
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    # fromisoformat before 3.11 wants exactly 6 fractional digits (or 3)
    text = _FRACTION_RE.sub(lambda m: "." + (m.group(1) + "000000")[:6], text)
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def normalize_language(value: Optional[str]) -> Optional[str]:
    """
    Normalise a language tag to the form the server expects.

    "EN" -> "en", "fr_ca" -> "fr-CA". Unrecognised tags are passed
    through unchanged so the server can reject them.
    """
    if value is None:
        return None
    match = _LANGUAGE_RE.match(value.strip())
    if not match:
        return value
    lang, region = match.groups()
    if region:
        return f"{lang.lower()}-{region.upper()}"
    return lang.lower()


def strip_nulls(value: Any) -> Any:
    """Recursively drop None entries from dicts."""
    if isinstance(value, dict):
        return {k: strip_nulls(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [strip_nulls(v) for v in value]
    return value


class JsonSerializer:
    """Serializer configured once per EslClient and shared by its services."""

    def __init__(self, ignore_nulls: bool = True):
        self.ignore_nulls = ignore_nulls

    def _default(self, obj: Any) -> Any:
        if isinstance(obj, datetime):
            return format_date(obj)
        if hasattr(obj, "to_dict"):
            return obj.to_dict()
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def to_payload(self, obj: Any) -> Any:
        """Convert a DTO (or plain dict/list) into JSON-ready data."""
        if hasattr(obj, "to_dict"):
            obj = obj.to_dict()
        elif isinstance(obj, list):
            obj = [o.to_dict() if hasattr(o, "to_dict") else o for o in obj]
        if self.ignore_nulls:
            obj = strip_nulls(obj)
        return obj

    def dumps(self, obj: Any) -> str:
        return json.dumps(self.to_payload(obj), default=self._default)

    def loads(self, text: str) -> Any:
        return json.loads(text)

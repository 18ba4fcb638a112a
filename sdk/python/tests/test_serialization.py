"""Tests for the shared JSON settings."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from esl import api
from esl.serialization import JsonSerializer, format_date, normalize_language, parse_date


class TestDates:

    def test_naive_datetime_is_utc(self):
        assert format_date(datetime(2030, 1, 2, 3, 4, 5)) == "2030-01-02T03:04:05Z"

    def test_aware_datetime_converted_to_utc(self):
        value = datetime(2030, 1, 2, 3, 4, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_date(value) == "2030-01-02T01:04:05Z"

    @pytest.mark.parametrize("text", [
        "2030-01-02T01:04:05Z",
        "2030-01-02T01:04:05.000Z",
        "2030-01-02T03:04:05+02:00",
        "2030-01-02T01:04:05",
    ])
    def test_parse_variants(self, text):
        assert parse_date(text) == datetime(2030, 1, 2, 1, 4, 5, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text, microsecond", [
        ("2030-01-02T01:04:05.1Z", 100000),
        ("2030-01-02T01:04:05.12Z", 120000),
        ("2030-01-02T01:04:05.1234Z", 123400),
        ("2030-01-02T01:04:05.123456789Z", 123456),
        ("2030-01-02T01:04:05.12+00:00", 120000),
    ])
    def test_parse_fractional_seconds(self, text, microsecond):
        assert parse_date(text) == datetime(2030, 1, 2, 1, 4, 5, microsecond, tzinfo=timezone.utc)

    def test_parse_empty(self):
        assert parse_date(None) is None
        assert parse_date("") is None


class TestLanguage:

    @pytest.mark.parametrize("value, expected", [
        ("EN", "en"),
        ("fr_ca", "fr-CA"),
        ("fr-CA", "fr-CA"),
        ("es-419", "es-419"),
        ("not a locale", "not a locale"),
        (None, None),
    ])
    def test_normalize(self, value, expected):
        assert normalize_language(value) == expected


class TestJsonSerializer:

    def test_nulls_omitted(self):
        serializer = JsonSerializer()
        payload = json.loads(serializer.dumps({"a": 1, "b": None, "c": {"d": None, "e": [{"f": None}]}}))
        assert payload == {"a": 1, "c": {"e": [{}]}}

    def test_nulls_kept_when_configured(self):
        serializer = JsonSerializer(ignore_nulls=False)
        assert json.loads(serializer.dumps({"a": None})) == {"a": None}

    def test_dto_and_dates(self):
        serializer = JsonSerializer()
        package = api.Package(name="p", due=datetime(2030, 1, 1, tzinfo=timezone.utc))
        assert json.loads(serializer.dumps(package)) == {"name": "p", "due": "2030-01-01T00:00:00Z"}

    def test_list_of_dtos(self):
        serializer = JsonSerializer()
        docs = [api.Document(id="d1", name="one"), api.Document(id="d2")]
        assert json.loads(serializer.dumps(docs)) == [{"id": "d1", "name": "one"}, {"id": "d2"}]

    def test_plain_datetime_values(self):
        serializer = JsonSerializer()
        assert serializer.dumps({"when": datetime(2030, 1, 1)}) == '{"when": "2030-01-01T00:00:00Z"}'


class TestWireModel:

    def test_from_dict_ignores_unknown_keys(self):
        error = api.ServerError.from_dict({"messageKey": "k", "code": 400, "entity": {"x": 1}})
        assert error == api.ServerError(message_key="k", code=400)

    def test_from_dict_none(self):
        assert api.Package.from_dict(None) is None

    def test_nested_lists(self):
        role = api.Role.from_dict({"id": "r", "signers": [{"email": "a@x.com"}, None]})
        assert role.signers == [api.Signer(email="a@x.com")]

    def test_hyphenated_keys(self):
        audit = api.Audit.from_dict({"audit-events": [
            {"type": "login", "date-time": "2030-01-01T00:00:00Z", "user-email": "a@x.com"},
        ]})
        event = audit.audit_events[0]
        assert event.user_email == "a@x.com"
        assert event.date_time == datetime(2030, 1, 1, tzinfo=timezone.utc)

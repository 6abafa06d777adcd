"""Unit tests for the Filter schema and its canonical encoding."""

import json
from datetime import datetime, timezone

import pytest

from nipsearch.errors import FilterEncodingError, NipSearchError
from nipsearch.schema.filter import Filter
from nipsearch.schema.kinds import EventKind


class TestFilter:
    """Tests for Filter construction."""

    def test_all_fields_default_to_none(self):
        f = Filter()
        for name in ("ids", "authors", "kinds", "since", "until", "limit", "e", "p", "search"):
            assert getattr(f, name) is None

    def test_tag_fields_accept_wire_alias(self):
        f = Filter(**{"#e": ["event1"], "#p": ["pubkey1"]})
        assert f.e == ["event1"]
        assert f.p == ["pubkey1"]

    def test_tag_fields_accept_field_name(self):
        f = Filter(e=["event1"])
        assert f.e == ["event1"]


class TestToWireDict:
    """Tests for Filter.to_wire_dict."""

    def test_absent_fields_omitted(self):
        assert Filter(search="x").to_wire_dict() == {"search": "x"}

    def test_tag_fields_use_wire_keys(self):
        data = Filter(e=["event1"], p=["pubkey1"]).to_wire_dict()
        assert data == {"#e": ["event1"], "#p": ["pubkey1"]}

    def test_datetime_serialized_as_unix_seconds(self):
        since = datetime.fromtimestamp(1700000000, tz=timezone.utc)
        until = datetime.fromtimestamp(1700086400, tz=timezone.utc)
        data = Filter(since=since, until=until).to_wire_dict()
        assert data == {"since": 1700000000, "until": 1700086400}

    def test_int_timestamps_unchanged(self):
        assert Filter(since=1700000000).to_wire_dict() == {"since": 1700000000}

    def test_limit_zero_is_kept(self):
        """Zero is a value, not an absent field."""
        assert Filter(limit=0).to_wire_dict() == {"limit": 0}


class TestToJson:
    """Tests for the canonical JSON encoding."""

    def test_search_filter_encoding(self):
        f = Filter(authors=["author1"], kinds=[1], limit=10, search="test query")
        assert f.to_json() == (
            '{"authors":["author1"],"kinds":[1],"limit":10,"search":"test query"}'
        )

    def test_keys_sorted(self):
        f = Filter(search="s", limit=5, kinds=[1], authors=["a"], ids=["i"], p=["p1"], e=["e1"])
        keys = list(json.loads(f.to_json()).keys())
        assert keys == sorted(keys)
        assert keys[0] == "#e"

    def test_identical_content_identical_bytes(self):
        a = Filter(kinds=[1], search="nostr", limit=10)
        b = Filter(limit=10, search="nostr", kinds=[1])
        assert a.to_json() == b.to_json()

    def test_non_ascii_kept(self):
        assert '"search":"café ☕"' in Filter(search="café ☕").to_json()

    def test_quotes_in_search_escaped(self):
        f = Filter(search='say "hi"')
        assert json.loads(f.to_json())["search"] == 'say "hi"'

    @pytest.mark.filterwarnings("ignore")
    def test_unserializable_value_raises(self):
        f = Filter.model_construct(kinds=[object()])
        with pytest.raises(FilterEncodingError):
            f.to_json()

    def test_encoding_error_is_library_error(self):
        assert issubclass(FilterEncodingError, NipSearchError)


class TestEventKind:
    """Tests for EventKind."""

    def test_values(self):
        assert EventKind.TEXT_NOTE == 1
        assert EventKind.LONG_FORM_CONTENT == 30023
        assert EventKind.OPEN_TIMESTAMPS == 1040

    def test_every_kind_has_description(self):
        for kind in EventKind:
            assert kind.description

    def test_description(self):
        assert EventKind.TEXT_NOTE.description == "Text Note"

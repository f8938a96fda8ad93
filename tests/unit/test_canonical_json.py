"""
Schemas & Canonicalization
File: tests/unit/test_canonical_json.py

Purpose: Unit tests for canonical JSON serialization.
These tests ensure deterministic serialization across runs.
"""

import math
from datetime import datetime, timezone, timedelta
from enum import Enum
from typing import Any

import pytest
from pydantic import BaseModel

from chainutil.schemas import (
    CanonicalizationException,
    canonical_equals,
    canonicalize_value,
    dumps_canonical,
    ensure_utc,
    format_datetime_canonical,
    loads_canonical,
)


class SampleEnum(str, Enum):
    """Sample enum for testing."""
    OPTION_A = "option_a"
    OPTION_B = "option_b"


class Holder(BaseModel):
    data: dict[str, Any]


class SampleModel(BaseModel):
    name: str
    count: int
    kind: SampleEnum = SampleEnum.OPTION_A


class TestDatetimeHandling:

    def test_naive_treated_as_utc(self):
        naive = datetime(2026, 1, 27, 21, 35, 0)
        assert ensure_utc(naive).tzinfo == timezone.utc
        assert ensure_utc(naive).hour == 21

    def test_aware_converted(self):
        plus_five = timezone(timedelta(hours=5))
        dt = datetime(2026, 1, 27, 21, 35, 0, tzinfo=plus_five)
        assert ensure_utc(dt).hour == 16

    def test_format(self):
        assert format_datetime_canonical(datetime(2026, 1, 27, 21, 35, 0)) == "2026-01-27T21:35:00Z"
        assert (
            format_datetime_canonical(datetime(2026, 1, 27, 21, 35, 0, 1500))
            == "2026-01-27T21:35:00.001500Z"
        )


class TestDumpsCanonical:

    def test_sorted_keys_no_whitespace(self):
        assert dumps_canonical({"b": 2, "a": 1}) == '{"a":1,"b":2}'

    def test_nested(self):
        value = {"z": {"y": [3, 2, 1], "x": None}, "a": True}
        assert dumps_canonical(value) == '{"a":true,"z":{"x":null,"y":[3,2,1]}}'

    def test_none_values_kept(self):
        # Dropping None would lose information on reload
        assert loads_canonical(dumps_canonical({"a": None})) == {"a": None}

    def test_enum_and_model(self):
        model = SampleModel(name="n", count=2, kind=SampleEnum.OPTION_B)
        assert dumps_canonical(model) == '{"count":2,"kind":"option_b","name":"n"}'

    def test_bytes_as_base64(self):
        assert dumps_canonical({"b": b"\x00\x01\x02"}) == '{"b":"AAEC"}'

    def test_tuple_as_list(self):
        assert dumps_canonical({"t": (1, 2)}) == '{"t":[1,2]}'

    def test_unicode_preserved(self):
        assert dumps_canonical({"name": "Łódź"}) == '{"name":"Łódź"}'

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite(self, value):
        with pytest.raises(CanonicalizationException) as exc_info:
            dumps_canonical({"x": value})
        assert exc_info.value.details["path"] == "x"

    @pytest.mark.parametrize("value", [object(), {1, 2}, print, lambda: 1])
    def test_rejects_unsupported_types(self, value):
        with pytest.raises(CanonicalizationException):
            canonicalize_value({"outer": [value]})

    def test_error_path(self):
        with pytest.raises(CanonicalizationException) as exc_info:
            canonicalize_value({"outer": [1, object()]})
        assert exc_info.value.details["path"] == "outer[1]"

    def test_rejects_non_string_keys(self):
        with pytest.raises(CanonicalizationException):
            dumps_canonical({1: "one"})

    def test_cyclic_model_rejected(self):
        data: dict[str, Any] = {}
        data["self"] = data
        with pytest.raises(CanonicalizationException) as exc_info:
            canonicalize_value({"holder": Holder(data=data)})
        assert exc_info.value.details["path"] == "holder"


class TestCanonicalEquals:

    def test_key_order_irrelevant(self):
        assert canonical_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_different_values(self):
        assert not canonical_equals({"a": 1}, {"a": 2})

    def test_unserializable_is_not_equal(self):
        assert not canonical_equals({"a": object()}, {"a": object()})

"""Tests for the list field codec."""

import pytest

from app.services.field_codec import EMPTY_LIST_TOKEN, decode_list, encode_list


class TestEncodeList:
    """Tests for encode_list."""

    def test_empty_list_encodes_to_canonical_token(self) -> None:
        """Test that an empty list is stored as "[]" rather than omitted."""
        assert encode_list([]) == EMPTY_LIST_TOKEN == "[]"

    def test_accepts_any_iterable(self) -> None:
        """Test that tuples and generators encode like lists."""
        assert encode_list(("a", "b")) == encode_list(x for x in ["a", "b"])

    def test_no_dedupe_or_sorting(self) -> None:
        """Test that duplicates and order are kept."""
        assert decode_list(encode_list(["pool", "gym", "pool", "attic"])) == [
            "pool",
            "gym",
            "pool",
            "attic",
        ]


class TestDecodeList:
    """Tests for decode_list."""

    @pytest.mark.parametrize(
        "values",
        [
            ["Infinity Pool", "Private Beach Access"],
            ["https://images.example.com/a.jpg?w=1200&fit=crop"],
            ['quote " inside', "comma, inside", "back\\slash"],
            ["Café", "屋顶花园", ""],
            ["   padded   "],
        ],
    )
    def test_round_trip(self, values: list[str]) -> None:
        """Test that decode(encode(x)) returns x exactly."""
        assert decode_list(encode_list(values)) == values

    @pytest.mark.parametrize(
        "raw",
        [None, "", "not json", "[\"unterminated", "{\"a\": 1}", "[1, 2]", "\"pool\"", "null"],
    )
    def test_unusable_values_decode_to_empty(self, raw: str | None) -> None:
        """Test that absent or garbled stored values read as an empty list."""
        assert decode_list(raw) == []

    def test_legacy_json_array(self) -> None:
        """Test decoding a value written by another JSON encoder."""
        assert decode_list('["pool","gym"]') == ["pool", "gym"]

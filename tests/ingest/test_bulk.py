"""Tests for bulk coercion and all-or-nothing batch building."""

import pytest

from ratings_spine.core.errors import (
    BatchItemError,
    InputError,
    InvalidTimestampError,
    MissingFieldError,
    UnsupportedFieldTypeError,
)
from ratings_spine.ingest.bulk import build_ratings, coerce_fields, render_value


def _item(**overrides):
    item = {
        "ticker": "MSFT",
        "target_from": 400,
        "target_to": "$450.00",
        "company": "Microsoft",
        "action": "upgraded by",
        "brokerage": "Morgan Stanley",
        "rating_from": "Hold",
        "rating_to": "Buy",
        "time": "2024-03-01",
    }
    item.update(overrides)
    return item


class TestRenderValue:
    """Tests for render_value."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ("AAPL", "AAPL"),
            ("", ""),
            (None, ""),
            (150, "150"),
            (150.0, "150"),
            (150.5, "150.5"),
            (-0.25, "-0.25"),
            (1e20, "1e+20"),
        ],
    )
    def test_supported(self, value, expected):
        assert render_value(value) == expected

    @pytest.mark.parametrize("value", [True, False, [1, 2], {"a": 1}])
    def test_unsupported(self, value):
        assert render_value(value) is None


class TestCoerceFields:
    """Tests for coerce_fields."""

    def test_mixed_types(self):
        fields = coerce_fields(
            {"ticker": "AAPL", "target_from": 150, "target_to": "$160.00", "company": None},
            index=0,
        )
        assert fields == {
            "ticker": "AAPL",
            "target_from": "150",
            "target_to": "$160.00",
            "company": "",
        }

    def test_boolean_rejected(self):
        with pytest.raises(UnsupportedFieldTypeError) as exc_info:
            coerce_fields({"ticker": "AAPL", "verified": True}, index=3)

        error = exc_info.value
        assert error.field == "verified"
        assert error.index == 3
        assert error.type_name == "bool"
        assert str(error) == "Field 'verified' in item 3 has unsupported type: bool"

    def test_non_object_item(self):
        with pytest.raises(InputError):
            coerce_fields(["AAPL"], index=0)


class TestBuildRatings:
    """Tests for build_ratings."""

    def test_all_valid(self):
        ratings = build_ratings([_item(), _item(ticker="NVDA", target_from="1.234,5")])

        assert [r.ticker for r in ratings] == ["MSFT", "NVDA"]
        assert ratings[0].target_from == 400.0
        assert ratings[0].target_to == 450.0
        assert ratings[1].target_from == pytest.approx(1.2345)

    def test_empty_batch(self):
        assert build_ratings([]) == []

    def test_invalid_item_fails_whole_batch(self):
        bad = _item(time="not a time")
        items = [_item(), _item(), bad, _item()]

        with pytest.raises(BatchItemError) as exc_info:
            build_ratings(items)

        error = exc_info.value
        assert error.index == 2
        assert error.item is bad
        assert isinstance(error.cause, InvalidTimestampError)
        assert error.message.startswith("Error in item 2: invalid time format")

    def test_null_required_field(self):
        with pytest.raises(BatchItemError) as exc_info:
            build_ratings([_item(company=None)])

        assert exc_info.value.index == 0
        assert isinstance(exc_info.value.cause, MissingFieldError)
        assert exc_info.value.cause.field == "company"

    def test_unsupported_type_stops_at_first_offender(self):
        items = [_item(), _item(target_from=True), _item(target_to=[1])]

        with pytest.raises(UnsupportedFieldTypeError) as exc_info:
            build_ratings(items)

        assert exc_info.value.index == 1
        assert exc_info.value.field == "target_from"

    def test_builder_error_before_later_type_error(self):
        items = [_item(time="bad"), _item(target_from=True)]

        with pytest.raises(BatchItemError) as exc_info:
            build_ratings(items)
        assert exc_info.value.index == 0

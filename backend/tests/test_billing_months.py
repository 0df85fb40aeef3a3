"""Tests for usage month parsing and calendar arithmetic."""

from datetime import date

import pytest

from app.core.errors import InvalidUsageMonth
from app.services.billing_months import (
    due_date_for,
    format_usage_month,
    next_usage_month,
    parse_usage_month,
    previous_usage_month,
)


class TestParseUsageMonth:
    def test_valid(self):
        assert parse_usage_month("2025-06") == date(2025, 6, 1)

    @pytest.mark.parametrize(
        "value", ["2025-13", "2025-00", "2025-6", "25-06", "2025/06", "2025-06-01", "", "june"]
    )
    def test_invalid(self, value):
        with pytest.raises(InvalidUsageMonth):
            parse_usage_month(value)

    def test_error_is_a_validation_error(self):
        with pytest.raises(InvalidUsageMonth) as exc_info:
            parse_usage_month("2025-13")
        assert exc_info.value.status_code == 422
        assert "2025-13" in exc_info.value.message

    def test_format_round_trip(self):
        assert format_usage_month(parse_usage_month("2024-02")) == "2024-02"


class TestMonthArithmetic:
    def test_previous_month(self):
        assert previous_usage_month("2025-06") == "2025-05"

    def test_previous_month_across_year(self):
        assert previous_usage_month("2025-01") == "2024-12"

    def test_next_month_across_year(self):
        assert next_usage_month("2024-12") == "2025-01"


class TestDueDate:
    def test_due_in_following_month(self):
        assert due_date_for("2025-06", 20) == date(2025, 7, 20)

    def test_december_rolls_into_next_year(self):
        assert due_date_for("2024-12", 20) == date(2025, 1, 20)

    def test_day_clamped_to_short_month(self):
        assert due_date_for("2025-01", 31) == date(2025, 2, 28)

    def test_day_clamped_in_leap_year(self):
        assert due_date_for("2024-01", 31) == date(2024, 2, 29)

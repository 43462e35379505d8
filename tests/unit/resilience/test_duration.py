"""Unit tests for the nanosecond duration model."""

from __future__ import annotations

from datetime import timedelta

import pytest

from typhoon.resilience.retry.duration import (
    MAX_NANOSECONDS,
    TimeInterval,
    TimeUnit,
    saturate,
    to_nanoseconds,
    to_seconds,
)


# ---------------------------------------------------------------------------
# TimeInterval conversions
# ---------------------------------------------------------------------------


class TestTimeIntervalSeconds:
    def test_seconds(self) -> None:
        assert TimeInterval.seconds(1000).seconds_value == 1000.0

    def test_milliseconds(self) -> None:
        assert TimeInterval.milliseconds(1000).seconds_value == pytest.approx(1.0)

    def test_microseconds(self) -> None:
        assert TimeInterval.microseconds(1000).seconds_value == pytest.approx(1e-3)

    def test_nanoseconds(self) -> None:
        assert TimeInterval.nanoseconds(1000).seconds_value == pytest.approx(1e-6)

    def test_never_is_none(self) -> None:
        assert TimeInterval.NEVER.seconds_value is None


class TestTimeIntervalNanoseconds:
    def test_each_unit_is_exact(self) -> None:
        assert TimeInterval.seconds(2).nanoseconds_value == 2_000_000_000
        assert TimeInterval.milliseconds(500).nanoseconds_value == 500_000_000
        assert TimeInterval.microseconds(7).nanoseconds_value == 7_000
        assert TimeInterval.nanoseconds(3).nanoseconds_value == 3

    def test_never_is_none(self) -> None:
        assert TimeInterval.NEVER.nanoseconds_value is None
        assert TimeInterval.NEVER.is_never

    def test_negative_clamps_to_zero(self) -> None:
        assert TimeInterval.seconds(-5).nanoseconds_value == 0

    def test_huge_value_saturates(self) -> None:
        assert TimeInterval.seconds(2**70).nanoseconds_value == MAX_NANOSECONDS

    def test_fractional_magnitudes_are_whole_nanoseconds(self) -> None:
        half = TimeInterval.seconds(0.5).nanoseconds_value
        assert half == 500_000_000
        assert isinstance(half, int)
        assert TimeInterval.milliseconds(1.5).nanoseconds_value == 1_500_000
        assert TimeInterval.nanoseconds(2.9).nanoseconds_value == 2

    def test_astronomical_int_saturates(self) -> None:
        assert TimeInterval.seconds(2**1100).nanoseconds_value == MAX_NANOSECONDS

    def test_str(self) -> None:
        assert str(TimeInterval.milliseconds(250)) == "250ms"
        assert str(TimeInterval.NEVER) == "never"

    def test_unit_enum(self) -> None:
        assert TimeInterval.microseconds(1).unit is TimeUnit.MICROSECONDS


# ---------------------------------------------------------------------------
# to_nanoseconds / to_seconds
# ---------------------------------------------------------------------------


class TestToNanoseconds:
    def test_time_interval(self) -> None:
        assert to_nanoseconds(TimeInterval.milliseconds(1)) == 1_000_000

    def test_timedelta(self) -> None:
        assert to_nanoseconds(timedelta(seconds=1, microseconds=5)) == 1_000_005_000

    def test_int_is_seconds(self) -> None:
        assert to_nanoseconds(3) == 3_000_000_000

    def test_float_is_seconds(self) -> None:
        assert to_nanoseconds(0.25) == 250_000_000

    def test_infinity_saturates(self) -> None:
        assert to_nanoseconds(float("inf")) == MAX_NANOSECONDS

    def test_negative_float_is_zero(self) -> None:
        assert to_nanoseconds(-1.5) == 0

    def test_never_is_none(self) -> None:
        assert to_nanoseconds(TimeInterval.NEVER) is None

    def test_rejects_unknown_type(self) -> None:
        with pytest.raises(TypeError):
            to_nanoseconds("1s")  # type: ignore[arg-type]

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            to_nanoseconds(True)

    def test_to_seconds(self) -> None:
        assert to_seconds(TimeInterval.milliseconds(1500)) == pytest.approx(1.5)
        assert to_seconds(TimeInterval.NEVER) is None


# ---------------------------------------------------------------------------
# saturate
# ---------------------------------------------------------------------------


class TestSaturate:
    def test_truncates_fraction(self) -> None:
        assert saturate(41.9) == 41

    def test_zero_and_negative(self) -> None:
        assert saturate(0.0) == 0
        assert saturate(-10.0) == 0

    def test_nan_is_zero(self) -> None:
        assert saturate(float("nan")) == 0

    def test_at_or_above_max_clamps(self) -> None:
        assert saturate(float(MAX_NANOSECONDS)) == MAX_NANOSECONDS
        assert saturate(1e30) == MAX_NANOSECONDS
        assert saturate(float("inf")) == MAX_NANOSECONDS

"""Tests for bounded and list time specifications."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from horizons_query.errors import InvalidTimeSpec
from horizons_query.time_spec import BoundedTimeSpec, ListTimeSpec, TimeSpec
from horizons_query.wire import StepSize, StepSizeUnit

START = datetime(2022, 8, 28, tzinfo=timezone.utc)


def test_bounded_renders_three_fields() -> None:
    """Bounded spec emits step_size, start_time and stop_time separately."""
    spec = TimeSpec.bounded((6, StepSizeUnit.HOURS), START, START + timedelta(days=2))
    assert isinstance(spec, BoundedTimeSpec)
    assert spec.step_size == StepSize(6, StepSizeUnit.HOURS)
    assert spec.fields() == [
        ('step_size', '6h'),
        ('start_time', '2022-08-28T00:00:00Z'),
        ('stop_time', '2022-08-30T00:00:00Z'),
    ]


def test_list_renders_one_comma_joined_field() -> None:
    """List spec keeps caller order in a single tlist field."""
    later = START + timedelta(hours=1, milliseconds=250)
    spec = TimeSpec.from_list([later, START])
    assert isinstance(spec, ListTimeSpec)
    assert spec.fields() == [('tlist', '2022-08-28T01:00:00.250Z,2022-08-28T00:00:00Z')]


def test_from_list_accepts_any_iterable() -> None:
    """Generators are consumed into an immutable tuple."""
    spec = TimeSpec.from_list(START + timedelta(days=i) for i in range(3))
    assert len(spec.times) == 3
    assert spec.times[2] == datetime(2022, 8, 30, tzinfo=timezone.utc)


def test_instants_normalized_to_utc() -> None:
    """Timezone-aware instants are stored in UTC."""
    local = datetime(2022, 8, 28, 9, 0, tzinfo=timezone(timedelta(hours=9)))
    spec = TimeSpec.from_list([local])
    assert spec.fields() == [('tlist', '2022-08-28T00:00:00Z')]


def test_string_instants_are_parsed() -> None:
    """Date/time strings go through the julian parser."""
    spec = TimeSpec.bounded((1, StepSizeUnit.DAYS), '2022-08-28T00:00:00Z', '2022-08-30 00:00:00')
    assert spec.start_time == START
    assert spec.stop_time == START + timedelta(days=2)


def test_lenient_policy_accepts_reversed_and_empty(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """By default reversed ranges and empty lists pass with a warning."""
    monkeypatch.delenv('HORIZONS_STRICT_TIME_SPEC', raising=False)

    reversed_spec = TimeSpec.bounded((6, StepSizeUnit.HOURS), START, START)
    empty = TimeSpec.from_list([])

    assert reversed_spec.start_time == reversed_spec.stop_time
    assert empty.fields() == [('tlist', '')]
    assert 'not after start time' in caplog.text
    assert 'Time list is empty' in caplog.text


def test_strict_argument_rejects_reversed_and_empty() -> None:
    """strict=True raises InvalidTimeSpec for both open-question cases."""
    with pytest.raises(InvalidTimeSpec):
        TimeSpec.bounded((6, StepSizeUnit.HOURS), START, START - timedelta(hours=1), strict=True)
    with pytest.raises(InvalidTimeSpec):
        TimeSpec.from_list([], strict=True)


def test_strict_env_var(monkeypatch: pytest.MonkeyPatch) -> None:
    """HORIZONS_STRICT_TIME_SPEC turns on strict mode; strict=False overrides it."""
    monkeypatch.setenv('HORIZONS_STRICT_TIME_SPEC', 'yes')
    with pytest.raises(InvalidTimeSpec):
        TimeSpec.from_list([])
    assert TimeSpec.from_list([], strict=False).times == ()


def test_time_specs_compare_by_value() -> None:
    """Equal inputs produce equal, hashable specs."""
    a = TimeSpec.from_list([START])
    b = TimeSpec.from_list([START])
    assert a == b
    assert hash(a) == hash(b)


def test_time_spec_base_cannot_be_instantiated() -> None:
    """Only the bounded and list shapes exist; the base class is abstract."""
    with pytest.raises(TypeError):
        TimeSpec()  # type: ignore[abstract]


def test_offset_strings_normalized_to_utc() -> None:
    """RFC 3339 strings with numeric offsets become UTC instants."""
    spec = TimeSpec.from_list(['2022-08-28T02:00:00+02:00', '2022-08-27T19:00:00-05:00'])
    assert spec.fields() == [('tlist', '2022-08-28T00:00:00Z,2022-08-28T00:00:00Z')]

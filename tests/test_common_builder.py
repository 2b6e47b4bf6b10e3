"""Tests for the common parameter builder state machine."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from horizons_query.bodies import MajorBody
from horizons_query.ephemeris.common import Common, CommonBuilder
from horizons_query.errors import UninitializedField
from horizons_query.targets import Center, Command
from horizons_query.time_spec import TimeSpec
from horizons_query.wire import EphemType, Format, HzBool, RefSystem, StepSizeUnit

NOW = datetime(2024, 3, 1, 6, 30, tzinfo=timezone.utc)


def _time_spec() -> TimeSpec:
    return TimeSpec.bounded((6, StepSizeUnit.HOURS), NOW, NOW + timedelta(days=2))


def test_common_builder() -> None:
    """Fully set builder produces the expected Common block with defaults."""
    case = (
        CommonBuilder()
        .command(MajorBody.EUROPA)
        .ephem_type(EphemType.VECTORS)
        .center(MajorBody.JUPITER)
        .time_spec(_time_spec())
        .csv_format(True)
        .obj_data(False)
        .build()
    )
    assert case == Common(
        command=Command.coerce(MajorBody.EUROPA),
        ephem_type=EphemType.VECTORS,
        center=Center.coerce(MajorBody.JUPITER),
        ref_system=RefSystem.ICRF,
        format=Format.TEXT,
        obj_data=HzBool.NO,
        make_ephem=HzBool.YES,
        csv_format=HzBool.YES,
        time_spec=_time_spec(),
    )


@pytest.mark.parametrize(
    ('setup', 'missing'),
    [
        (lambda b: b, 'command'),
        (lambda b: b.command(MajorBody.MARS), 'ephem_type'),
        (lambda b: b.command(MajorBody.MARS).ephem_type(EphemType.ELEMENTS), 'center'),
        (
            lambda b: b.command(MajorBody.MARS)
            .ephem_type(EphemType.ELEMENTS)
            .center(MajorBody.SUN),
            'time_spec',
        ),
        (lambda b: b.center(MajorBody.SUN).time_spec(_time_spec()), 'command'),
        (lambda b: b.command(MajorBody.MARS).time_spec(_time_spec()), 'ephem_type'),
    ],
)
def test_build_reports_first_missing_field(setup, missing: str) -> None:
    """build() names the first unset required field in declared order."""
    builder = setup(CommonBuilder())
    with pytest.raises(UninitializedField) as excinfo:
        builder.build()
    assert excinfo.value.field_name == missing
    assert str(excinfo.value) == f'Uninitialized field `{missing}`'


def test_missing_fields_lists_all() -> None:
    """missing_fields() reports every unset required field."""
    builder = CommonBuilder().center(MajorBody.SUN)
    assert builder.missing_fields() == ['command', 'ephem_type', 'time_spec']
    builder.command(MajorBody.MARS).ephem_type(EphemType.VECTORS).time_spec(_time_spec())
    assert builder.missing_fields() == []


def test_build_is_idempotent_and_builder_reusable() -> None:
    """Repeated builds are equal; later mutation does not affect earlier results."""
    builder = (
        CommonBuilder()
        .command(MajorBody.MOON)
        .ephem_type(EphemType.VECTORS)
        .center(MajorBody.EARTH)
        .time_spec(_time_spec())
    )
    first = builder.build()
    second = builder.build()
    assert first == second

    builder.format(Format.JSON).ref_system(RefSystem.B1950).make_ephem(False)
    third = builder.build()
    assert first.format is Format.TEXT
    assert third.format is Format.JSON
    assert third.ref_system is RefSystem.B1950
    assert third.make_ephem is HzBool.NO


def test_fields_order() -> None:
    """Common fields come in wire order with the time spec last."""
    common = (
        CommonBuilder()
        .command(MajorBody.MOON)
        .ephem_type(EphemType.OBSERVER)
        .center((675, MajorBody.EARTH))
        .time_spec(TimeSpec.from_list([NOW]))
        .build()
    )
    assert common.fields() == [
        ('command', '301'),
        ('ephem_type', 'O'),
        ('center', '675@399'),
        ('ref_system', 'ICRF'),
        ('format', 'text'),
        ('obj_data', 'yes'),
        ('make_ephem', 'yes'),
        ('csv_format', 'no'),
        ('tlist', '2024-03-01T06:30:00Z'),
    ]


def test_time_spec_setter_type_checked() -> None:
    """Passing a non-TimeSpec is rejected at set time."""
    with pytest.raises(TypeError):
        CommonBuilder().time_spec([NOW])  # type: ignore[arg-type]


def test_time_spec_setter_rejects_bare_base_class() -> None:
    """The abstract TimeSpec base cannot reach the builder."""
    with pytest.raises(TypeError):
        CommonBuilder().time_spec(TimeSpec())  # type: ignore[abstract]

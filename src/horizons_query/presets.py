"""Ready-made vectors queries for common table formats."""

from __future__ import annotations

from horizons_query.ephemeris.vectors import VectorsBuilder
from horizons_query.query import Query, QueryBuilder
from horizons_query.targets import CenterLike, CommandLike
from horizons_query.time_spec import TimeSpec
from horizons_query.wire import TableFormat


def state_vectors(target: CommandLike, center: CenterLike, time_spec: TimeSpec) -> Query:
    """Position and velocity of target relative to center (table format 2)."""
    return _vectors(target, center, time_spec, TableFormat.STATE)


def position_vectors(target: CommandLike, center: CenterLike, time_spec: TimeSpec) -> Query:
    """Position of target relative to center (table format 1)."""
    return _vectors(target, center, time_spec, TableFormat.POSITION)


def velocity_vectors(target: CommandLike, center: CenterLike, time_spec: TimeSpec) -> Query:
    """Velocity of target relative to center (table format 5)."""
    return _vectors(target, center, time_spec, TableFormat.VELOCITY)


def light_time_vectors(target: CommandLike, center: CenterLike, time_spec: TimeSpec) -> Query:
    """One-way light-time, range and range-rate (table format 6)."""
    return _vectors(target, center, time_spec, TableFormat.LT)


def _vectors(
    target: CommandLike,
    center: CenterLike,
    time_spec: TimeSpec,
    table_format: TableFormat,
) -> Query:
    """Build a vectors query with protocol defaults and the given table format.

    Every required field is supplied here, so build() cannot raise
    UninitializedField.
    """
    builder: QueryBuilder[VectorsBuilder] = Query.vectors()
    builder.common.command(target).center(center).time_spec(time_spec)
    builder.specific.table_format(table_format)
    return builder.build()

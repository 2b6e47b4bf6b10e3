"""Primitive values and the literal tokens the Horizons protocol expects.

Every type here renders through ``str()`` as its wire token. The tokens are
dictated by the remote service and are not derived from member names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from horizons_query.constants import (
    AU_PER_DAY,
    KILOMETRE_PER_DAY,
    KILOMETRE_PER_SECOND,
)


class WireEnum(Enum):
    """Enum whose value is its wire token."""

    def __str__(self) -> str:
        return str(self.value)


class HzBool(WireEnum):
    """Horizons boolean: ``yes`` / ``no``."""

    YES = 'yes'
    NO = 'no'

    @classmethod
    def from_bool(cls, flag: bool) -> HzBool:
        """Return YES for a truthy flag, NO otherwise."""
        return cls.YES if flag else cls.NO

    def __bool__(self) -> bool:
        return self is HzBool.YES


class EphemType(WireEnum):
    """Kind of ephemeris to generate."""

    OBSERVER = 'O'
    ELEMENTS = 'E'
    VECTORS = 'V'


class Format(WireEnum):
    """Response body format."""

    TEXT = 'text'
    JSON = 'json'


class RefPlane(WireEnum):
    """Reference plane for vectors and elements."""

    ECLIPTIC = 'E'
    FRAME = 'F'
    BODY_EQUATOR = 'B'


class RefSystem(WireEnum):
    """Reference frame / epoch system."""

    ICRF = 'ICRF'
    B1950 = 'B1950'


class OutUnits(WireEnum):
    """Output distance and velocity units."""

    KM_D = 'km-d'
    KM_S = 'km-s'
    AU_D = 'au-d'

    @property
    def coefficient(self) -> float:
        """Velocity conversion coefficient in m/s."""
        return _OUT_UNITS_COEFFICIENTS[self]


_OUT_UNITS_COEFFICIENTS: dict[OutUnits, float] = {
    OutUnits.KM_D: KILOMETRE_PER_DAY,
    OutUnits.KM_S: KILOMETRE_PER_SECOND,
    OutUnits.AU_D: AU_PER_DAY,
}


class Correction(WireEnum):
    """Aberration correction applied to vectors."""

    NONE = 'NONE'
    LT = 'LT'
    LT_S = 'LT+S'


class TableFormat(WireEnum):
    """Quantities returned by a vectors table."""

    # Position components {x,y,z} only
    POSITION = 1
    # State vector {x,y,z,Vx,Vy,Vz}
    STATE = 2
    # State vector, 1-way light-time, range, and range-rate
    STATE_LT = 3
    # Position, 1-way light-time, range, and range-rate
    POSITION_LT = 4
    # Velocity components {vx,vy,vz} only
    VELOCITY = 5
    # 1-way light-time, range, and range-rate
    LT = 6


class TpType(WireEnum):
    """Periapsis time (Tp) convention for osculating elements."""

    ABSOLUTE = 'Absolute'
    RELATIVE = 'Relative'


class StepSizeUnit(Enum):
    """Unit of a bounded time spec's step size."""

    UNITLESS = ''
    MINUTES = 'm'
    HOURS = 'h'
    DAYS = 'd'
    MONTHS = 'mo'
    YEARS = 'y'

    @property
    def abbreviation(self) -> str:
        """Suffix appended to the step value on the wire."""
        return self.value


@dataclass(frozen=True)
class StepSize:
    """Positive step magnitude plus unit, rendered like ``6h``.

    Parameters:
        value: Number of units per step (positive integer). A unitless step
            is the number of equal intervals between start and stop.
        unit: Step unit.
    """

    value: int
    unit: StepSizeUnit = StepSizeUnit.UNITLESS

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f'step size must be an integer, got {self.value!r}')
        if self.value <= 0:
            raise ValueError(f'step size must be positive, got {self.value}')
        if not isinstance(self.unit, StepSizeUnit):
            raise ValueError(f'Invalid step size unit {self.unit!r}')

    @classmethod
    def coerce(cls, step: StepSize | tuple[int, StepSizeUnit]) -> StepSize:
        """Accept a StepSize or a ``(value, unit)`` pair."""
        if isinstance(step, StepSize):
            return step
        value, unit = step
        return cls(value, unit)

    def __str__(self) -> str:
        return f'{self.value}{self.unit.abbreviation}'

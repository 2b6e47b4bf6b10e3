"""Typed request construction for the JPL Horizons ephemeris service.

Callers describe a target, a reference center, a time range or list, and an
output representation with typed values. Builders reject incomplete requests
before anything is sent, and a finished ``Query`` renders to the exact
query string the Horizons API expects. No network I/O happens here.
"""

from horizons_query.bodies import MajorBody
from horizons_query.ephemeris import (
    Common,
    CommonBuilder,
    Elements,
    ElementsBuilder,
    Vectors,
    VectorsBuilder,
)
from horizons_query.errors import (
    EphemTypeMismatch,
    HorizonsQueryError,
    InvalidBodyCode,
    InvalidTimeSpec,
    QueryBuilderError,
    UninitializedField,
)
from horizons_query.query import Query, QueryBuilder
from horizons_query.targets import CENTER_SITE, Body, Center, Command, Site
from horizons_query.time_spec import BoundedTimeSpec, ListTimeSpec, TimeSpec
from horizons_query.wire import (
    Correction,
    EphemType,
    Format,
    HzBool,
    OutUnits,
    RefPlane,
    RefSystem,
    StepSize,
    StepSizeUnit,
    TableFormat,
    TpType,
)

__all__ = [
    'Body',
    'BoundedTimeSpec',
    'Center',
    'Command',
    'Common',
    'CommonBuilder',
    'Correction',
    'Elements',
    'ElementsBuilder',
    'EphemType',
    'EphemTypeMismatch',
    'Format',
    'HorizonsQueryError',
    'HzBool',
    'InvalidBodyCode',
    'InvalidTimeSpec',
    'ListTimeSpec',
    'MajorBody',
    'OutUnits',
    'Query',
    'QueryBuilder',
    'QueryBuilderError',
    'RefPlane',
    'RefSystem',
    'Site',
    'CENTER_SITE',
    'StepSize',
    'StepSizeUnit',
    'TableFormat',
    'TimeSpec',
    'TpType',
    'UninitializedField',
    'Vectors',
    'VectorsBuilder',
]

"""Parameters shared by every ephemeris type, and their builder."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from horizons_query.errors import UninitializedField
from horizons_query.targets import Center, CenterLike, Command, CommandLike
from horizons_query.time_spec import TimeSpec
from horizons_query.wire import EphemType, Format, HzBool, RefSystem

logger = logging.getLogger(__name__)

# Required fields in the order build() checks them.
REQUIRED_FIELDS = ('command', 'ephem_type', 'center', 'time_spec')


@dataclass(frozen=True)
class Common:
    """Finished common parameter block."""

    command: Command
    ephem_type: EphemType
    center: Center
    ref_system: RefSystem
    format: Format
    obj_data: HzBool
    make_ephem: HzBool
    csv_format: HzBool
    time_spec: TimeSpec

    def fields(self) -> list[tuple[str, str]]:
        """Return ``(key, token)`` pairs in wire order, time spec fields last."""
        out = [
            ('command', str(self.command)),
            ('ephem_type', str(self.ephem_type)),
            ('center', str(self.center)),
            ('ref_system', str(self.ref_system)),
            ('format', str(self.format)),
            ('obj_data', str(self.obj_data)),
            ('make_ephem', str(self.make_ephem)),
            ('csv_format', str(self.csv_format)),
        ]
        out.extend(self.time_spec.fields())
        return out


class CommonBuilder:
    """Mutable accumulator for the common block.

    Setters return the builder for chaining. ``command``, ``ephem_type``,
    ``center`` and ``time_spec`` must be set before ``build()``; the rest
    default to ICRF, text, obj_data=yes, make_ephem=yes, csv_format=no.
    """

    def __init__(self) -> None:
        self._command: Command | None = None
        self._ephem_type: EphemType | None = None
        self._center: Center | None = None
        self._ref_system = RefSystem.ICRF
        self._time_spec: TimeSpec | None = None
        self._format = Format.TEXT
        self._obj_data = True
        self._make_ephem = True
        self._csv_format = False

    def command(self, command: CommandLike) -> CommonBuilder:
        self._command = Command.coerce(command)
        return self

    def ephem_type(self, ephem_type: EphemType) -> CommonBuilder:
        self._ephem_type = ephem_type
        return self

    def center(self, center: CenterLike) -> CommonBuilder:
        self._center = Center.coerce(center)
        return self

    def ref_system(self, ref_system: RefSystem) -> CommonBuilder:
        self._ref_system = ref_system
        return self

    def time_spec(self, time_spec: TimeSpec) -> CommonBuilder:
        if not isinstance(time_spec, TimeSpec):
            raise TypeError(f'expected TimeSpec, got {type(time_spec).__name__}')
        self._time_spec = time_spec
        return self

    def format(self, format: Format) -> CommonBuilder:
        self._format = format
        return self

    def obj_data(self, obj_data: bool) -> CommonBuilder:
        self._obj_data = bool(obj_data)
        return self

    def make_ephem(self, make_ephem: bool) -> CommonBuilder:
        self._make_ephem = bool(make_ephem)
        return self

    def csv_format(self, csv_format: bool) -> CommonBuilder:
        self._csv_format = bool(csv_format)
        return self

    @property
    def current_ephem_type(self) -> EphemType | None:
        """Ephemeris type set so far, or None."""
        return self._ephem_type

    def missing_fields(self) -> list[str]:
        """Return every unset required field, in declared order."""
        values = {
            'command': self._command,
            'ephem_type': self._ephem_type,
            'center': self._center,
            'time_spec': self._time_spec,
        }
        return [name for name in REQUIRED_FIELDS if values[name] is None]

    def build(self) -> Common:
        """Validate and return an immutable Common block.

        The builder is left unchanged, so build() may be called again.

        Raises:
            UninitializedField: Naming the first unset required field.
        """
        command = self._command
        if command is None:
            raise UninitializedField('command')
        ephem_type = self._ephem_type
        if ephem_type is None:
            raise UninitializedField('ephem_type')
        center = self._center
        if center is None:
            raise UninitializedField('center')
        time_spec = self._time_spec
        if time_spec is None:
            raise UninitializedField('time_spec')
        common = Common(
            command=command,
            ephem_type=ephem_type,
            center=center,
            ref_system=self._ref_system,
            format=self._format,
            obj_data=HzBool.from_bool(self._obj_data),
            make_ephem=HzBool.from_bool(self._make_ephem),
            csv_format=HzBool.from_bool(self._csv_format),
            time_spec=time_spec,
        )
        logger.debug('Built common block for command %s', common.command)
        return common

"""State vector table parameters."""

from __future__ import annotations

from dataclasses import dataclass

from horizons_query.wire import Correction, HzBool, OutUnits, RefPlane, TableFormat


@dataclass(frozen=True)
class Vectors:
    """Finished vectors block."""

    vec_table: TableFormat = TableFormat.STATE_LT
    vec_labels: HzBool = HzBool.YES
    vec_delta_t: HzBool = HzBool.NO
    vec_corr: Correction = Correction.NONE
    out_units: OutUnits = OutUnits.KM_S
    ref_plane: RefPlane = RefPlane.ECLIPTIC

    def fields(self) -> list[tuple[str, str]]:
        return [
            ('vec_table', str(self.vec_table)),
            ('vec_labels', str(self.vec_labels)),
            ('vec_delta_t', str(self.vec_delta_t)),
            ('vec_corr', str(self.vec_corr)),
            ('out_units', str(self.out_units)),
            ('ref_plane', str(self.ref_plane)),
        ]


class VectorsBuilder:
    """Mutable accumulator for the vectors block; every field has a default.

    Defaults: table format 3 (state, light-time, range, range-rate), labels
    on, delta-T off, no aberration correction, km/s, ecliptic plane.
    """

    def __init__(self) -> None:
        self._table_format = TableFormat.STATE_LT
        self._vec_labels = True
        self._vec_delta_t = False
        self._vec_corr = Correction.NONE
        self._out_units = OutUnits.KM_S
        self._ref_plane = RefPlane.ECLIPTIC

    def table_format(self, table_format: TableFormat) -> VectorsBuilder:
        self._table_format = table_format
        return self

    def vec_labels(self, vec_labels: bool) -> VectorsBuilder:
        self._vec_labels = bool(vec_labels)
        return self

    def vec_delta_t(self, vec_delta_t: bool) -> VectorsBuilder:
        self._vec_delta_t = bool(vec_delta_t)
        return self

    def vec_corr(self, vec_corr: Correction) -> VectorsBuilder:
        self._vec_corr = vec_corr
        return self

    def out_units(self, out_units: OutUnits) -> VectorsBuilder:
        self._out_units = out_units
        return self

    def ref_plane(self, ref_plane: RefPlane) -> VectorsBuilder:
        self._ref_plane = ref_plane
        return self

    def build(self) -> Vectors:
        return Vectors(
            vec_table=self._table_format,
            vec_labels=HzBool.from_bool(self._vec_labels),
            vec_delta_t=HzBool.from_bool(self._vec_delta_t),
            vec_corr=self._vec_corr,
            out_units=self._out_units,
            ref_plane=self._ref_plane,
        )

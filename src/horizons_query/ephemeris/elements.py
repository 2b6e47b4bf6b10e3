"""Osculating orbital elements parameters."""

from __future__ import annotations

from dataclasses import dataclass

from horizons_query.wire import HzBool, OutUnits, RefPlane, TpType


@dataclass(frozen=True)
class Elements:
    """Finished elements block."""

    tp_type: TpType = TpType.ABSOLUTE
    out_units: OutUnits = OutUnits.KM_S
    ref_plane: RefPlane = RefPlane.ECLIPTIC
    elm_labels: HzBool = HzBool.YES

    def fields(self) -> list[tuple[str, str]]:
        return [
            ('tp_type', str(self.tp_type)),
            ('out_units', str(self.out_units)),
            ('ref_plane', str(self.ref_plane)),
            ('elm_labels', str(self.elm_labels)),
        ]


class ElementsBuilder:
    """Mutable accumulator for the elements block; every field has a default."""

    def __init__(self) -> None:
        self._tp_type = TpType.ABSOLUTE
        self._out_units = OutUnits.KM_S
        self._ref_plane = RefPlane.ECLIPTIC
        self._elm_labels = True

    def tp_type(self, tp_type: TpType) -> ElementsBuilder:
        self._tp_type = tp_type
        return self

    def out_units(self, out_units: OutUnits) -> ElementsBuilder:
        self._out_units = out_units
        return self

    def ref_plane(self, ref_plane: RefPlane) -> ElementsBuilder:
        self._ref_plane = ref_plane
        return self

    def elm_labels(self, elm_labels: bool) -> ElementsBuilder:
        self._elm_labels = bool(elm_labels)
        return self

    def build(self) -> Elements:
        return Elements(
            tp_type=self._tp_type,
            out_units=self._out_units,
            ref_plane=self._ref_plane,
            elm_labels=HzBool.from_bool(self._elm_labels),
        )

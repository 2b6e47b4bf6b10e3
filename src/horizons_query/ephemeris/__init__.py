"""Parameter blocks and builders: the common block plus one block per ephemeris type."""

from horizons_query.ephemeris.common import Common, CommonBuilder
from horizons_query.ephemeris.elements import Elements, ElementsBuilder
from horizons_query.ephemeris.vectors import Vectors, VectorsBuilder

__all__ = [
    'Common',
    'CommonBuilder',
    'Elements',
    'ElementsBuilder',
    'Vectors',
    'VectorsBuilder',
]

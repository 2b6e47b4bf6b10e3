"""Query assembly and URL query-string serialization."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, TypeVar, Union
from urllib.parse import urlencode

from horizons_query.config import get_api_url
from horizons_query.ephemeris.common import Common, CommonBuilder
from horizons_query.ephemeris.elements import Elements, ElementsBuilder
from horizons_query.ephemeris.vectors import Vectors, VectorsBuilder
from horizons_query.errors import EphemTypeMismatch, QueryBuilderError, UninitializedField
from horizons_query.wire import EphemType

logger = logging.getLogger(__name__)

Ephemeris = Union[Elements, Vectors]

# Ephemeris type each specific block belongs to.
_EPHEM_TYPE_OF: dict[type, EphemType] = {
    Elements: EphemType.ELEMENTS,
    Vectors: EphemType.VECTORS,
}

SpecificBuilder = TypeVar('SpecificBuilder', ElementsBuilder, VectorsBuilder)


@dataclass(frozen=True)
class Query:
    """Immutable Horizons request: one common block plus one specific block.

    Build one with ``Query.vectors()`` or ``Query.elements()``::

        builder = Query.vectors()
        builder.common.command(MajorBody.JUPITER).center(MajorBody.SOLAR_SYSTEM_BARYCENTER)
        builder.common.time_spec(TimeSpec.from_list([start]))
        builder.specific.vec_labels(False)
        query = builder.build()
    """

    common: Common
    specific: Ephemeris

    @staticmethod
    def elements() -> QueryBuilder[ElementsBuilder]:
        """Return a builder for an osculating elements query."""
        return QueryBuilder(
            CommonBuilder().ephem_type(EphemType.ELEMENTS),
            ElementsBuilder(),
        )

    @staticmethod
    def vectors() -> QueryBuilder[VectorsBuilder]:
        """Return a builder for a state vectors query."""
        return QueryBuilder(
            CommonBuilder().ephem_type(EphemType.VECTORS),
            VectorsBuilder(),
        )

    def fields(self) -> list[tuple[str, str]]:
        """Flatten to ordered ``(key, token)`` pairs.

        Order: command, ephem_type, center, ref_system, format, obj_data,
        make_ephem, csv_format, the time spec fields, then the specific block.
        """
        return self.common.fields() + self.specific.fields()

    def to_query_string(self) -> str:
        """Percent-encoded ``key=value&...`` string."""
        return urlencode(self.fields())

    def url(self, base_url: str | None = None) -> str:
        """Full request URL.

        Parameters:
            base_url: Endpoint; defaults to ``config.get_api_url()``.

        Returns:
            ``{base_url}?{query string}``.
        """
        base = base_url if base_url is not None else get_api_url()
        return f'{base}?{self.to_query_string()}'

    def __str__(self) -> str:
        return self.to_query_string()


class QueryBuilder(Generic[SpecificBuilder]):
    """Pair of builders for one Query; obtain via ``Query.vectors()``/``Query.elements()``.

    Parameters:
        common: Builder for the common block.
        specific: Builder for the ephemeris-specific block.
    """

    def __init__(self, common: CommonBuilder, specific: SpecificBuilder) -> None:
        self.common = common
        self.specific = specific

    def build(self) -> Query:
        """Validate both blocks and return a Query. The builders are unchanged.

        Raises:
            QueryBuilderError: Wrapping ``UninitializedField`` from the common
                builder, or when the common ephemeris type does not match the
                specific block.
        """
        try:
            common = self.common.build()
        except UninitializedField as e:
            raise QueryBuilderError(e) from e
        specific = self.specific.build()
        expected = _EPHEM_TYPE_OF[type(specific)]
        if common.ephem_type is not expected:
            raise QueryBuilderError(EphemTypeMismatch(str(common.ephem_type), str(expected)))
        query = Query(common, specific)
        logger.debug('Built %s query: %s', expected.name.lower(), query)
        return query


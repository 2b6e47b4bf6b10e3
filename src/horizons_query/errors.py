"""Exceptions raised while building Horizons queries."""

from __future__ import annotations


class HorizonsQueryError(Exception):
    """Base class for all errors raised by horizons_query."""


class InvalidBodyCode(HorizonsQueryError, ValueError):
    """Integer does not correspond to any body in the registry.

    Parameters:
        code: The offending integer code.
    """

    def __init__(self, code: int) -> None:
        super().__init__(f'{code} is not a valid body code in the horizons system')
        self.code = code


class UninitializedField(HorizonsQueryError):
    """A required builder field was never set before ``build()``.

    Parameters:
        field_name: Wire name of the missing field (e.g. ``'command'``).
    """

    def __init__(self, field_name: str) -> None:
        super().__init__(f'Uninitialized field `{field_name}`')
        self.field_name = field_name


class QueryBuilderError(HorizonsQueryError):
    """Error propagated from a nested builder while assembling a Query.

    Parameters:
        error: The underlying builder error.
    """

    def __init__(self, error: HorizonsQueryError) -> None:
        super().__init__(str(error))
        self.error = error


class InvalidTimeSpec(HorizonsQueryError, ValueError):
    """Time specification rejected by the strict time policy."""


class EphemTypeMismatch(HorizonsQueryError):
    """Common block's ephemeris type disagrees with the specific block.

    Parameters:
        actual: Ephemeris type token set on the common builder.
        expected: Ephemeris type token the specific block belongs to.
    """

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(f'ephem_type `{actual}` does not match specific parameters `{expected}`')
        self.actual = actual
        self.expected = expected

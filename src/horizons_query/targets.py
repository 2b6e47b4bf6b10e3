"""Target and center addressing: bodies, observing sites, and ``site@body``."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Union

from horizons_query.bodies import MajorBody
from horizons_query.constants import CENTER_SITE_CODE


@dataclass(frozen=True)
class Body:
    """A registered major body or a free-form Horizons identifier.

    Parameters:
        major: Registered body, or None for the free-form variant.
        text: Free-form identifier sent verbatim (e.g. ``'DES=2000001;'``).
            Not validated.
    """

    major: MajorBody | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if (self.major is None) == (self.text is None):
            raise ValueError('Body needs exactly one of major or text')

    @classmethod
    def custom(cls, text: str) -> Body:
        """Free-form identifier; correctness is the caller's responsibility."""
        return cls(text=text)

    @classmethod
    def coerce(cls, value: BodyLike) -> Body:
        """Convert a Body, MajorBody, or integer-like code to a Body.

        Integer codes go through ``operator.index`` like ``MajorBody.from_code``,
        so NumPy integers and other ``__index__`` types are accepted.

        Raises:
            InvalidBodyCode: If an integer is not a registered code.
            TypeError: For any other type (use ``Body.custom`` for strings).
        """
        if isinstance(value, Body):
            return value
        if isinstance(value, MajorBody):
            return cls(major=value)
        if not isinstance(value, (bool, str)):
            try:
                code = operator.index(value)
            except TypeError:
                pass
            else:
                return cls(major=MajorBody.from_code(code))
        raise TypeError(
            f'cannot use {type(value).__name__} as a body; use Body.custom for free-form ids'
        )

    @property
    def is_custom(self) -> bool:
        return self.major is None

    def __str__(self) -> str:
        if self.major is not None:
            return str(int(self.major))
        return str(self.text)


BodyLike = Union[Body, MajorBody, int]


@dataclass(frozen=True)
class Site:
    """Observing site on the center body; None means the body's center (500)."""

    code: int | None = None

    def __str__(self) -> str:
        return str(CENTER_SITE_CODE if self.code is None else self.code)


# The center body itself (wire site 500).
CENTER_SITE = Site()


@dataclass(frozen=True)
class Center:
    """Reference center: a site on a body, sent as ``{site}@{body}``."""

    body: Body
    site: Site = CENTER_SITE

    @classmethod
    def coerce(cls, value: CenterLike) -> Center:
        """Build a Center from a body or a ``(site, body)`` pair.

        Parameters:
            value: Center; body-like value (site defaults to 500); or a
                ``(site, body)`` tuple where site is a Site or an integer code.

        Returns:
            Center.
        """
        if isinstance(value, Center):
            return value
        if isinstance(value, tuple):
            site, body = value
            if not isinstance(site, Site):
                site = Site(operator.index(site))
            return cls(Body.coerce(body), site)
        return cls(Body.coerce(value))

    def __str__(self) -> str:
        return f'{self.site}@{self.body}'


CenterLike = Union[Center, BodyLike, tuple[Union[Site, int], BodyLike]]


@dataclass(frozen=True)
class Command:
    """Query target: a Body or a free-form Horizons command string."""

    body: Body | None = None
    text: str | None = None

    def __post_init__(self) -> None:
        if (self.body is None) == (self.text is None):
            raise ValueError('Command needs exactly one of body or text')

    @classmethod
    def custom(cls, text: str) -> Command:
        """Free-form command sent verbatim; not validated."""
        return cls(text=text)

    @classmethod
    def coerce(cls, value: CommandLike) -> Command:
        """Convert a Command or any body-like value to a Command."""
        if isinstance(value, Command):
            return value
        return cls(body=Body.coerce(value))

    def __str__(self) -> str:
        if self.body is not None:
            return str(self.body)
        return str(self.text)


CommandLike = Union[Command, BodyLike]

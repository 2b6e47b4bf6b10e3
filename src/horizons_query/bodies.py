"""Major body registry: Horizons body codes and their names.

Unnamed objects use the designation form (e.g. ``S2010_J1`` for S/2010 J 1).
Small bodies and spacecraft are not covered; address them with
``Body.custom`` instead.
"""

from __future__ import annotations

import operator
from enum import IntEnum

from horizons_query.errors import InvalidBodyCode


class MajorBody(IntEnum):
    """Closed table of major bodies keyed by their Horizons integer code."""

    # Sun
    SOLAR_SYSTEM_BARYCENTER = 0
    SUN = 10

    # Mercury and Venus
    MERCURY_BARYCENTER = 1
    MERCURY = 199
    VENUS_BARYCENTER = 2
    VENUS = 299

    # Terran system
    EARTH_BARYCENTER = 3
    EARTH = 399
    MOON = 301

    # Lagrange points
    LAGRANGE_1 = 31
    LAGRANGE_2 = 32
    LAGRANGE_4 = 34
    LAGRANGE_5 = 35

    # Martian system
    MARS_BARYCENTER = 4
    MARS = 499
    PHOBOS = 401
    DEIMOS = 402

    # Jovian system
    JUPITER_BARYCENTER = 5
    JUPITER = 599
    IO = 501
    EUROPA = 502
    GANYMEDE = 503
    CALLISTO = 504

    # Other named jovian moons
    AMALTHEA = 505
    HIMALIA = 506
    ELARA = 507
    PASIPHAE = 508
    SINOPE = 509
    LYSITHEA = 510
    CARME = 511
    ANANKE = 512
    LEDA = 513
    THEBE = 514
    ADRASTEA = 515
    METIS = 516
    CALLIRRHOE = 517
    THEMISTO = 518
    MEGACLITE = 519
    TAYGETE = 520
    CHALDENE = 521
    HARPALYKE = 522
    KALYKE = 523
    IOCASTE = 524
    ERINOME = 525
    ISONOE = 526
    PRAXIDIKE = 527
    AUTONOE = 528
    THYONE = 529
    HERMIPPE = 530
    AITNE = 531
    EURYDOME = 532
    EUANTHE = 533
    EUPORIE = 534
    ORTHOSIE = 535
    SPONDE = 536
    KALE = 537
    PASITHEE = 538
    HEGEMONE = 539
    MNEME = 540
    AOEDE = 541
    THELXINOE = 542
    ARCHE = 543
    KALLICHORE = 544
    HELIKE = 545
    CARPO = 546
    EUKELADE = 547
    CYLLENE = 548
    KORE = 549
    HERSE = 550
    DIA = 553
    EIRENE = 557
    PHILOPHROSYNE = 558
    EUPHEME = 560
    VALETUDO = 562
    PANDIA = 565
    ERSA = 571

    # Unnamed jovian moons
    S2010_J1 = 551
    S2010_J2 = 552
    S2016_J1 = 554
    S2003_J18 = 555
    S2011_J2 = 556
    S2017_J1 = 559
    S2003_J19 = 561
    S2017_J2 = 563
    S2017_J3 = 564
    S2017_J5 = 566
    S2017_J6 = 567
    S2017_J7 = 568
    S2017_J8 = 569
    S2017_J9 = 570

    # Saturnian system
    SATURN_BARYCENTER = 6
    SATURN = 699

    # Uranian system
    URANUS_BARYCENTER = 7
    URANUS = 799

    # Neptunian system
    NEPTUNE_BARYCENTER = 8
    NEPTUNE = 899

    # Plutonian system
    PLUTO_BARYCENTER = 9
    PLUTO = 999
    CHARON = 901
    NIX = 902
    HYDRA = 903
    KERBEROS = 904
    STYX = 905

    @classmethod
    def from_code(cls, code: object) -> MajorBody:
        """Look up a body by its Horizons code.

        Parameters:
            code: Any integer-like value (int, NumPy integer, or an object
                implementing ``__index__``).

        Returns:
            The matching body.

        Raises:
            InvalidBodyCode: If the code is not in the table.
            TypeError: If code is a bool or not integer-like.
        """
        if isinstance(code, bool):
            raise TypeError('body code must be an integer, not bool')
        num = operator.index(code)
        try:
            return cls(num)
        except ValueError:
            raise InvalidBodyCode(num) from None

    @classmethod
    def from_name(cls, name: str) -> MajorBody:
        """Look up a body by member name or display name (case-insensitive).

        Raises:
            KeyError: If no body has that name.
        """
        key = name.strip().upper().replace(' ', '_')
        try:
            return _BY_NAME[key]
        except KeyError:
            raise KeyError(f'Unknown body name {name!r}') from None

    @property
    def code(self) -> int:
        """Horizons integer code."""
        return int(self)

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. ``Jupiter Barycenter`` or ``S2010 J1``."""
        if self.name.startswith('S20'):
            return self.name.replace('_', ' ')
        return self.name.replace('_', ' ').title()

    def __str__(self) -> str:
        return str(int(self))


# Reverse index by name, built once at import.
_BY_NAME: dict[str, MajorBody] = {body.name: body for body in MajorBody}


def decode(code: object) -> MajorBody:
    """Return the body for an integer code; see ``MajorBody.from_code``."""
    return MajorBody.from_code(code)


def encode(body: MajorBody) -> int:
    """Return the integer code of a body."""
    return int(body)

"""Time conversion wrappers around rms-julian and RFC 3339 timestamp formatting."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

import julian

from horizons_query.config import get_leapsecs_path
from horizons_query.constants import JULIAN_EPOCH_YEAR

logger = logging.getLogger(__name__)

_JULIAN_EPOCH = datetime(JULIAN_EPOCH_YEAR, 1, 1, tzinfo=timezone.utc)

# RFC 3339 numeric offset after a time of day, e.g. "T00:00:00+02:00"
_OFFSET_RE = re.compile(r'\d{2}:\d{2}(:\d{2}(\.\d+)?)?[+-]\d{2}:?\d{2}$')

# Leap seconds loaded once at first use.
_leapsecs_loaded = False


def _ensure_leapsecs() -> None:
    """Load leap seconds if not already loaded.

    Uses the LSK named by JULIAN_LEAPSECS when set; if that file is missing or
    not in LSK format, falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    if path is not None:
        try:
            julian.load_lsk(path)
            _leapsecs_loaded = True
            return
        except (OSError, KeyError, ValueError) as e:
            logger.info(
                'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
                path,
                e,
            )
    julian.load_lsk()
    _leapsecs_loaded = True


def parse_datetime(string: str) -> datetime | None:
    """Parse a date/time string as a UTC datetime.

    Parameters:
        string: Date/time string in any format accepted by rms-julian, plus
            ISO-8601 with a trailing ``Z`` or a numeric ``+HH:MM`` offset, and
            ``YYYY HH:MM:SS``.

    Returns:
        Timezone-aware UTC datetime, or None on parse failure. A leap second
        (23:59:60) rolls over into the next day.
    """
    _ensure_leapsecs()
    candidate_strings = [string]
    stripped = string.strip()
    if stripped.endswith(('Z', 'z')):
        # rms-julian does not parse the ISO UTC suffix "Z".
        candidate_strings.append(stripped[:-1])
    if _OFFSET_RE.search(stripped) is not None:
        # rms-julian has no numeric UTC offsets; RFC 3339 offsets go through fromisoformat.
        try:
            return datetime.fromisoformat(stripped).astimezone(timezone.utc)
        except ValueError:
            return None
    year_hms_match = re.fullmatch(r'(\d{4})\s+(\d{1,2}:\d{2}:\d{2})', stripped)
    if year_hms_match is not None:
        year, hms = year_hms_match.groups()
        candidate_strings.append(f'{year}-01-01 {hms}')
    for candidate in candidate_strings:
        try:
            result = julian.day_sec_from_string(candidate)
            day, sec = result[0], result[1]
        except (ValueError, TypeError, LookupError, OSError):
            continue
        return _JULIAN_EPOCH + timedelta(days=int(day), seconds=float(sec))
    return None


def to_utc(value: datetime | str) -> datetime:
    """Normalize an instant to a timezone-aware UTC datetime.

    Parameters:
        value: A datetime (naive values are taken as UTC) or a date/time string.

    Returns:
        UTC datetime.

    Raises:
        ValueError: If a string cannot be parsed.
        TypeError: If value is neither a datetime nor a string.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, str):
        parsed = parse_datetime(value)
        if parsed is None:
            raise ValueError(f'Invalid time: {value!r}')
        return parsed
    raise TypeError(f'expected datetime or str, got {type(value).__name__}')


def format_timestamp(value: datetime) -> str:
    """Format a UTC instant as RFC 3339 with a ``Z`` suffix.

    Seconds are always present. Fractional seconds appear only when non-zero:
    three digits for whole milliseconds, six otherwise.

    Parameters:
        value: Instant to format; converted to UTC first.

    Returns:
        Timestamp such as ``2022-08-28T00:00:00Z``.
    """
    utc = to_utc(value)
    base = utc.replace(microsecond=0, tzinfo=None).isoformat()
    micro = utc.microsecond
    if micro == 0:
        return base + 'Z'
    if micro % 1000 == 0:
        return f'{base}.{micro // 1000:03d}Z'
    return f'{base}.{micro:06d}Z'

"""
Datetime utility functions for normalizing dt-* property strings

Published markup is loose about dates: single-digit months, a space
instead of 'T', fractional seconds, offsets with or without a colon, a
trailing weekday or zone abbreviation. normalize_dt turns all of these
into one profile:

    YYYY-MM-DD
    YYYY-MM-DDTHH:MM:SS
    YYYY-MM-DDTHH:MM:SS(Z|+HH:MM|-HH:MM)
"""
import re


class DateFormatError(ValueError):
    """Raised when a date string matches none of the recognized layouts."""
    pass


DATE_RE = r'(?P<year>\d{4,})-(?P<month>\d{1,2})-(?P<day>\d{1,2})'
TIME_RE = r'(?P<hour>\d{1,2}):(?P<minute>\d{2})(:(?P<second>\d{2})(\.(?P<microsecond>\d+))?)?'
TZ_RE = r'(?P<tzz>Z)|(?P<tzsign>[+-])(?P<tzhour>\d{1,2}):?(?P<tzminute>\d{2})'
DATETIME_RE = re.compile(rf'{DATE_RE}((T| ){TIME_RE} ?({TZ_RE})?)?( .{{3}})?$')


def normalize_dt(s: str) -> str:
    """
    Normalize a loosely formatted date/time string.

    The fraction of a second is dropped. A trailing three-character token
    (e.g. "Mon" or "PST") is tolerated and ignored.

    Args:
        s: date string from a dt-* property

    Returns:
        Canonical date or datetime string

    Raises:
        DateFormatError: the string has no recognizable date
    """
    if not s:
        raise DateFormatError("empty date string")

    s = ' '.join(s.split())
    m = DATETIME_RE.search(s)
    if not m:
        raise DateFormatError(f"unrecognized date format {s}")

    year = m.group('year').zfill(2)
    month = m.group('month').zfill(2)
    day = m.group('day').zfill(2)

    hour = m.group('hour')
    if hour is None:
        return f"{year}-{month}-{day}"

    minute = (m.group('minute') or '0').zfill(2)
    second = (m.group('second') or '0').zfill(2)
    date_str = f"{year}-{month}-{day}T{hour.zfill(2)}:{minute}:{second}"

    if m.group('tzz'):
        return f"{date_str}Z"

    tzsign = m.group('tzsign')
    tzhour = m.group('tzhour')
    if tzsign is not None and tzhour is not None:
        tzminute = (m.group('tzminute') or '0').zfill(2)
        return f"{date_str}{tzsign}{tzhour.zfill(2)}:{tzminute}"

    return date_str

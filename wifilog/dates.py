"""Controller timestamp normalization: 'Oct 11 23:50:53 2013' -> '2013-10-11 23:50:53'."""

import logging
import re
from types import MappingProxyType

logger = logging.getLogger(__name__)

MONTHS = MappingProxyType({
    "Jan": "01", "Feb": "02", "Mar": "03", "Apr": "04",
    "May": "05", "Jun": "06", "Jul": "07", "Aug": "08",
    "Sep": "09", "Oct": "10", "Nov": "11", "Dec": "12",
})

DATE_PATTERN = re.compile(
    r"(?P<month>\w+)\s+"
    r"(?P<day>\d+)\s+"
    r"(?P<time>(?:\d{1,2}:){2}\d{1,2})\s+"
    r"(?P<year>\d{4})"
)


def normalize_date(raw: str) -> str | None:
    """Convert 'Mon D HH:MM:SS YYYY' to 'YYYY-MM-DD HH:MM:SS'.

    Returns None when *raw* does not look like a controller timestamp.
    An unknown month name is passed through verbatim (and logged) instead
    of failing, so the caller still gets a record.
    """
    m = DATE_PATTERN.search(raw)
    if not m:
        return None

    month = m.group("month")
    month_num = MONTHS.get(month)
    if month_num is None:
        logger.warning("Unknown month name %r in timestamp %r", month, raw)
        month_num = month

    day = f"{int(m.group('day')):02d}"
    return f"{m.group('year')}-{month_num}-{day} {m.group('time')}"

"""Line classifier — routes a raw controller line to an event kind and formats it.

Steps for one line:
  1. Envelope check: split on the first two '<'; the code segment must start with '5'
  2. Parse the message code up to the next '>'
  3. Code -> event kind (reserved and unknown codes are dropped)
  4. Search the kind's pattern anywhere in the line
  5. Normalize the timestamp, strip MAC separators, build the record
"""

import logging

from wifilog.codes import EventKind, is_reserved, lookup_code
from wifilog.dates import normalize_date
from wifilog.models import NormalizedRecord
from wifilog.patterns import PATTERNS

logger = logging.getLogger(__name__)

# Rejection reasons reported by LineClassifier.explain()
REJECT_ENVELOPE = "envelope"
REJECT_RESERVED_CODE = "reserved_code"
REJECT_UNKNOWN_CODE = "unknown_code"
REJECT_PATTERN_MISMATCH = "pattern_mismatch"
REJECT_BAD_DATE = "bad_date"

# Trailing output columns per kind, after usermac/time/eventCode.
TRAILING_FIELDS = {
    EventKind.AUTH_REQUEST: ("apname",),
    EventKind.DEAUTH: ("apname",),
    EventKind.ASSOC_REQUEST: ("apname",),
    EventKind.DISASSOC: ("apname",),
    EventKind.USER_AUTH: ("apname", "username", "userip"),
    EventKind.IP_ALLOCATION: ("userip",),
    EventKind.IP_RECYCLE: ("userip",),
}


class MessageCodeError(ValueError):
    """Raised when a line's message code segment is not a number."""

    def __init__(self, segment: str):
        super().__init__(f"Non-numeric message code: {segment!r}")
        self.segment = segment


def extract_message_code(line: str) -> int | None:
    """Return the message code of *line*, or None if it fails the envelope check.

    Raises MessageCodeError if the code segment is not numeric.
    """
    parts = line.split("<", 2)
    if len(parts) < 3 or not parts[2] or parts[2][0] != "5":
        return None

    segment = parts[2].split(">", 1)[0]
    if not segment.isdecimal():
        raise MessageCodeError(segment)
    return int(segment)


class LineClassifier:
    """Stateless after construction; safe to share between threads and workers."""

    def __init__(self, patterns=PATTERNS):
        missing = [kind.name for kind in EventKind if kind not in patterns]
        if missing:
            raise ValueError(f"No pattern for event kind(s): {', '.join(missing)}")
        self._patterns = patterns

    def explain(self, line: str) -> tuple[NormalizedRecord | None, str | None]:
        """Classify *line*, returning (record, None) or (None, rejection reason)."""
        code = extract_message_code(line)
        if code is None:
            return None, REJECT_ENVELOPE

        kind = lookup_code(code)
        if kind is None:
            if is_reserved(code):
                return None, REJECT_RESERVED_CODE
            return None, REJECT_UNKNOWN_CODE

        m = self._patterns[kind].search(line)
        if not m:
            logger.debug("Code %d (%s) did not match its line shape: %r",
                         code, kind.name, line)
            return None, REJECT_PATTERN_MISMATCH

        time = normalize_date(m.group("time"))
        if time is None:
            return None, REJECT_BAD_DATE

        record = NormalizedRecord(
            usermac=m.group("usermac").replace(":", ""),
            time=time,
            kind=kind,
            fields=tuple(m.group(name) for name in TRAILING_FIELDS[kind]),
        )
        return record, None

    def classify(self, line: str) -> NormalizedRecord | None:
        """Return the normalized record for *line*, or None if it is not exported."""
        record, _ = self.explain(line)
        return record

    def clean(self, line: str) -> str | None:
        """Return the tab-separated output line for *line*, or None."""
        record = self.classify(line)
        if record is None:
            return None
        return record.to_line()


_default_classifier = LineClassifier()


def classify(line: str) -> NormalizedRecord | None:
    """Classify a line with the default pattern set."""
    return _default_classifier.classify(line)


def clean_line(line: str) -> str | None:
    """Format a line with the default pattern set."""
    return _default_classifier.clean(line)

"""Drives the classifier over a stream of lines, isolating per-line failures."""

import logging
from typing import Iterable, Iterator

from wifilog.classifier import LineClassifier
from wifilog.stats import CleanseStats

logger = logging.getLogger(__name__)

REJECT_BAD_CODE = "bad_code"


def cleanse_lines(
    lines: Iterable[str],
    classifier: LineClassifier,
    stats: CleanseStats | None = None,
) -> Iterator[str]:
    """Yield one output line per recognized input line.

    A line that fails to parse is logged and counted; the stream continues.
    """
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        try:
            record, reason = classifier.explain(line)
        except ValueError as e:
            logger.warning("Line %d skipped: %s", lineno, e)
            if stats is not None:
                stats.record_rejected(REJECT_BAD_CODE)
            continue

        if record is None:
            if stats is not None:
                stats.record_rejected(reason)
            continue

        if stats is not None:
            stats.record_emitted(record.kind)
        yield record.to_line()

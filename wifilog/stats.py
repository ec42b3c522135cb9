"""Statistics — emitted records per event kind and rejections per reason."""

import json
from collections import Counter
from dataclasses import dataclass, field

from wifilog.codes import EventKind


@dataclass
class CleanseStats:
    total_lines: int = 0
    emitted: int = 0
    kind_counts: Counter = field(default_factory=Counter)
    reject_counts: Counter = field(default_factory=Counter)

    def record_emitted(self, kind: EventKind) -> None:
        self.total_lines += 1
        self.emitted += 1
        self.kind_counts[kind.name] += 1

    def record_rejected(self, reason: str) -> None:
        self.total_lines += 1
        self.reject_counts[reason] += 1

    @property
    def rejected(self) -> int:
        return self.total_lines - self.emitted

    def to_dict(self) -> dict:
        return {
            "total_lines": self.total_lines,
            "emitted": self.emitted,
            "rejected": self.rejected,
            "kind_counts": {
                kind.name: self.kind_counts.get(kind.name, 0) for kind in EventKind
            },
            "reject_counts": dict(self.reject_counts.most_common()),
        }


def format_stats_text(stats: CleanseStats) -> str:
    """Human-readable stats summary."""
    lines = []
    lines.append(f"Total lines: {stats.total_lines}")
    lines.append(f"Emitted:     {stats.emitted}")
    lines.append(f"Rejected:    {stats.rejected}")
    lines.append("")

    lines.append("Events:")
    for kind in EventKind:
        lines.append(f"  {kind.code} {kind.name:14s} {stats.kind_counts.get(kind.name, 0)}")
    lines.append("")

    if stats.reject_counts:
        lines.append("Rejections:")
        for reason, count in stats.reject_counts.most_common():
            lines.append(f"  {reason:17s} {count}")
    else:
        lines.append("No rejected lines.")

    return "\n".join(lines)


def format_stats_json(stats: CleanseStats) -> str:
    """JSON stats output."""
    return json.dumps(stats.to_dict(), indent=2)

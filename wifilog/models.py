"""Normalized session-event record — one per recognized controller line."""

from dataclasses import dataclass

from wifilog.codes import EventKind

FIELD_SEPARATOR = "\t"


@dataclass(frozen=True)
class NormalizedRecord:
    usermac: str                 # 12 hex digits, no separators
    time: str                    # YYYY-MM-DD HH:MM:SS
    kind: EventKind
    fields: tuple[str | None, ...] = ()  # kind-specific trailing columns

    @property
    def event_code(self) -> str:
        return self.kind.code

    def columns(self) -> list[str]:
        """All output columns in order; a missing optional field is an empty column."""
        trailing = ["" if value is None else value for value in self.fields]
        return [self.usermac, self.time, self.event_code, *trailing]

    def to_line(self) -> str:
        """Tab-separated, newline-terminated output line."""
        return FIELD_SEPARATOR.join(self.columns()) + "\n"

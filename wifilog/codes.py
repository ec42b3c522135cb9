"""Controller message codes and the event kinds they route to.

Output encoding:
  0 AuthRequest   client authentication attempt
  1 Deauth        client deauthenticated
  2 AssocRequest  client association attempt
  3 Disassoc      client disassociated
  4 UserAuth      portal/username authentication
  5 IPAllocation  client IP bound
  6 IPRecycle     client IP released

AuthResponse, AssocResponse and UserRoam codes are known but produce no output.
"""

from enum import IntEnum
from types import MappingProxyType


class EventKind(IntEnum):
    AUTH_REQUEST = 0
    DEAUTH = 1
    ASSOC_REQUEST = 2
    DISASSOC = 3
    USER_AUTH = 4
    IP_ALLOCATION = 5
    IP_RECYCLE = 6

    @property
    def code(self) -> str:
        """The digit written to the eventCode column."""
        return str(self.value)


# ---------------------------------------------------------------------------
# Code groups
# ---------------------------------------------------------------------------

AUTH_REQUEST = frozenset({501091, 501092, 501109})
AUTH_RESPONSE = frozenset({501093, 501094, 501110})  # reserved
DEAUTH = frozenset({501105, 501080, 501098, 501099, 501106, 501107, 501108, 501111})
ASSOC_REQUEST = frozenset({501095, 501096, 501097})
ASSOC_RESPONSE = frozenset({501100, 501101, 501112})  # reserved
DISASSOC = frozenset({501102, 501104, 501113})
USER_AUTH = frozenset({522008, 522042, 522038})  # successful and failed
USER_ENTRY_RECYCLE = frozenset({522005})  # user entry deleted
USER_ENTRY_ALLOCATION = frozenset({522006, 522026})  # user entry added, user miss
USER_ROAM = frozenset({500010})  # reserved

USER_STATUS = USER_ENTRY_RECYCLE | USER_ENTRY_ALLOCATION

# (codes, kind); kind None marks a group that is recognized but never emitted.
CODE_TABLE: tuple[tuple[frozenset, EventKind | None], ...] = (
    (AUTH_REQUEST, EventKind.AUTH_REQUEST),
    (AUTH_RESPONSE, None),
    (DEAUTH, EventKind.DEAUTH),
    (ASSOC_REQUEST, EventKind.ASSOC_REQUEST),
    (ASSOC_RESPONSE, None),
    (DISASSOC, EventKind.DISASSOC),
    (USER_AUTH, EventKind.USER_AUTH),
    (USER_ENTRY_ALLOCATION, EventKind.IP_ALLOCATION),
    (USER_ENTRY_RECYCLE, EventKind.IP_RECYCLE),
    (USER_ROAM, None),
)


def build_code_index(
    table: tuple[tuple[frozenset, EventKind | None], ...],
) -> MappingProxyType:
    """Flatten a code table into a read-only code -> kind mapping.

    Raises ValueError if a code appears in more than one group.
    """
    index: dict[int, EventKind | None] = {}
    for codes, kind in table:
        for code in codes:
            if code in index:
                raise ValueError(f"Message code {code} is listed in more than one group")
            index[code] = kind
    return MappingProxyType(index)


_CODE_INDEX = build_code_index(CODE_TABLE)


def lookup_code(code: int) -> EventKind | None:
    """Return the event kind for *code*, or None for reserved and unknown codes."""
    return _CODE_INDEX.get(code)


def is_reserved(code: int) -> bool:
    """True for codes the controller emits but that are deliberately not exported."""
    return code in _CODE_INDEX and _CODE_INDEX[code] is None

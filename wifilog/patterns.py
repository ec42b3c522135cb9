"""Compiled extraction patterns, one per event kind.

Every pattern is searched (not anchored) against the full raw line and
captures at least ``time`` and ``usermac``. AP-facing events read the AP
descriptor ``<ip>-<mac>-<name>`` and keep ``apname``.
"""

import re
from types import MappingProxyType

from wifilog.codes import EventKind

# ---------------------------------------------------------------------------
# Building blocks
# ---------------------------------------------------------------------------

TIME_RE = r"(?P<time>[a-z]{3}\s+\d{1,2}\s+(?:\d{1,2}:){2}\d{1,2}\s+\d{4})"
USERMAC_RE = r"(?P<usermac>(?:[0-9a-f]{2}:){5}[0-9a-f]{2})"
AP_INFO_RE = (
    r"(?P<apip>(?:\d{1,3}\.){3}\d{1,3})-"
    r"(?P<apmac>(?:[0-9a-f]{2}:){5}[0-9a-f]{2})-"
    r"(?P<apname>[\w-]+)"
)
IPV4_RE = r"(?:\d{1,3}\.){3}\d{1,3}"

# Wireless address space before and after the Oct 2013 renumbering:
# the public 111.186.0.0/18 pool was replaced by 10.184.0.0/16 - 10.188.0.0/16.
DEFAULT_IP_PREFIXES = ("111", "10.184", "10.185", "10.186", "10.187", "10.188")

_PREFIX_RE = re.compile(r"\d{1,3}(?:\.\d{1,3}){0,3}")


def build_ip_range_pattern(prefixes) -> str:
    """Build the ``userip`` capture restricted to the given dotted-octet prefixes.

    A prefix covers whole octets: ``"10.184"`` accepts 10.184.x.y but not
    10.1840.x.y. Raises ValueError for an empty list or a malformed prefix.
    """
    prefixes = [str(p).strip().rstrip(".") for p in prefixes]
    if not prefixes:
        raise ValueError("At least one permitted IP prefix is required")

    alternatives = []
    for prefix in prefixes:
        if not _PREFIX_RE.fullmatch(prefix):
            raise ValueError(f"Invalid IP prefix: {prefix!r}")
        remaining = 4 - (prefix.count(".") + 1)
        alt = re.escape(prefix)
        if remaining:
            alt += rf"(?:\.\d+){{{remaining}}}"
        alternatives.append(alt)

    # (?!\d): a full-address prefix must not match the start of a longer octet.
    return r"(?P<userip>(?:" + "|".join(alternatives) + r")(?!\d))"


def _compile(body: str) -> re.Pattern:
    return re.compile(body, re.IGNORECASE)


def build_patterns(ip_prefixes=DEFAULT_IP_PREFIXES) -> MappingProxyType:
    """Compile the full pattern set. IPAllocation and IPRecycle share one pattern."""
    auth_request = _compile(
        rf"{TIME_RE}.*Auth\s+request:\s+{USERMAC_RE}:?\s+.*AP\s+{AP_INFO_RE}"
    )
    deauth = _compile(
        rf"{TIME_RE}.*Deauth.*:\s+{USERMAC_RE}:?\s+.*AP\s+{AP_INFO_RE}"
    )
    assoc_request = _compile(
        rf"{TIME_RE}.*Assoc.*:\s+{USERMAC_RE}.*:?\s+.*AP {AP_INFO_RE}"
    )
    disassoc = _compile(
        rf"{TIME_RE}.*Disassoc.*:\s+{USERMAC_RE}:?\s+AP\s+{AP_INFO_RE}"
    )
    user_auth = _compile(
        rf"{TIME_RE}.*\s+username=(?P<username>\S+)\s+MAC={USERMAC_RE}"
        rf"\s+IP=(?P<userip>{IPV4_RE})"
        r"(?:.*?\sAP=(?P<apname>\S+))?"
    )
    user_status = _compile(
        rf"{TIME_RE}.*MAC={USERMAC_RE}\s+IP={build_ip_range_pattern(ip_prefixes)}"
    )

    return MappingProxyType({
        EventKind.AUTH_REQUEST: auth_request,
        EventKind.DEAUTH: deauth,
        EventKind.ASSOC_REQUEST: assoc_request,
        EventKind.DISASSOC: disassoc,
        EventKind.USER_AUTH: user_auth,
        EventKind.IP_ALLOCATION: user_status,
        EventKind.IP_RECYCLE: user_status,
    })


PATTERNS = build_patterns()

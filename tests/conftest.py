import pytest

from wifilog.classifier import LineClassifier

HEADER = "<190>Oct 11 23:50:53 2013 10.50.1.2"
AP = "10.190.8.21-00:24:6c:c0:12:34-XXY-3F-09"


@pytest.fixture
def classifier():
    return LineClassifier()


@pytest.fixture
def lines():
    """One well-formed controller line per event kind, keyed by kind name."""
    return {
        "AUTH_REQUEST": (
            f"{HEADER} stm[2042]: <501091> <NOTI> |AP XXY-3F-09@10.190.8.21 stm|  "
            f"Auth request: 6c:71:d9:6d:8c:4d: AP {AP} auth_alg 0"
        ),
        "DEAUTH": (
            f"{HEADER} stm[2042]: <501105> <NOTI> |AP XXY-3F-09@10.190.8.21 stm|  "
            f"Deauth from sta: 6c:71:d9:6d:8c:4d: AP {AP} Reason STA has left"
        ),
        "ASSOC_REQUEST": (
            f"{HEADER} stm[2042]: <501095> <NOTI> |AP XXY-3F-09@10.190.8.21 stm|  "
            f"Assoc request @ 23:50:54.120422: 6c:71:d9:6d:8c:4d (SN 1234): AP {AP} ssid SJTU"
        ),
        "DISASSOC": (
            f"{HEADER} stm[2042]: <501102> <NOTI> |AP XXY-3F-09@10.190.8.21 stm|  "
            f"Disassoc from sta: 6c:71:d9:6d:8c:4d: AP {AP} Reason STA has left"
        ),
        "USER_AUTH": (
            f"{HEADER} authmgr[1756]: <522008> <NOTI> |authmgr|  User Authentication Successful: "
            "username=alice MAC=6c:71:d9:6d:8c:4d IP=111.186.16.25 role=authenticated "
            "VLAN=1001 AP=XXY-3F-09 SSID=SJTU"
        ),
        "IP_ALLOCATION": (
            f"{HEADER} authmgr[1756]: <522006> <INFO> |authmgr|  "
            "MAC=6c:71:d9:6d:8c:4d IP=10.185.3.77 User entry added: reason=Authentication"
        ),
        "IP_RECYCLE": (
            f"{HEADER} authmgr[1756]: <522005> <INFO> |authmgr|  "
            "MAC=6c:71:d9:6d:8c:4d IP=111.186.16.25 User entry deleted: reason=idle timeout"
        ),
    }

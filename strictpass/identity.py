"""
strictpass.identity

Pull the login name (uid) and display name (gecos) out of a directory entry.
An entry is any mapping of attribute name -> list of values, e.g.
{"uid": ["jdoe"], "gecos": ["John Doe"], "cn": [...]}.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

LOGIN_ATTR = "uid"
DISPLAY_ATTR = "gecos"


@dataclass(frozen=True)
class IdentityHint:
    login: Optional[str] = None
    display: Optional[str] = None


def first_value(entry: Mapping[str, Sequence[Any]], name: str) -> Optional[str]:
    """First value of an attribute, matched by exact name. bytes are decoded as UTF-8."""
    values = entry.get(name)
    if not values:
        return None
    if isinstance(values, (str, bytes)):
        values = [values]
    value = values[0]
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return str(value)


def extract_identity(entry: Mapping[str, Sequence[Any]]) -> Optional[IdentityHint]:
    """
    Return the entry's IdentityHint, or None when it carries no login name.
    A missing display name is fine.
    """
    login = first_value(entry, LOGIN_ATTR)
    if login is None:
        return None
    return IdentityHint(login=login, display=first_value(entry, DISPLAY_ATTR))

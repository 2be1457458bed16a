"""
strictpass.dictionary

Word-list based crackability check. check_dictionary() returns a reason
string when the password is derived from the user's login or display name or
from a dictionary word, and None otherwise.
"""

import re
from functools import lru_cache
from typing import FrozenSet, Optional

from .storage import read_bytes

# small built-in dictionary (offline), used when no word list is configured
COMMON_WORDS = frozenset({
    "password", "123456", "qwerty", "letmein", "admin", "welcome", "iloveyou",
    "monkey", "dragon", "sunshine", "princess", "football", "baseball",
    "trustno1", "master", "hello", "freedom", "whatever", "secret", "password1",
})

# leetspeak map for simple inverse substitution (digits/symbols -> letters)
LEET_MAP = str.maketrans("4301$5@7", "aeolssat")

MIN_HINT_LEN = 3

_EDGE_JUNK = re.compile(r"^[^a-z]+|[^a-z]+$")


@lru_cache(maxsize=8)
def load_wordlist(path: Optional[str]) -> FrozenSet[str]:
    """Read a newline separated word list, lower-cased. None gives COMMON_WORDS."""
    if path is None:
        return COMMON_WORDS
    text = read_bytes(path).decode("utf-8", errors="replace")
    return frozenset(w.strip().lower() for w in text.splitlines() if w.strip())


def _candidates(password: str):
    lower = password.lower()
    de_leet = lower.translate(LEET_MAP)
    stripped = _EDGE_JUNK.sub("", lower)
    # the raw forms first, then with leading/trailing digits and symbols removed
    seen = []
    for s in (lower, de_leet, stripped, stripped.translate(LEET_MAP), _EDGE_JUNK.sub("", de_leet)):
        if s and s not in seen:
            seen.append(s)
    return seen


def _based_on(password: str, hint: str) -> bool:
    hint = hint.lower()
    if len(hint) < MIN_HINT_LEN:
        return False
    for candidate in _candidates(password):
        if hint in candidate or hint[::-1] in candidate:
            return True
    return False


def check_dictionary(
    password: str,
    dictionary_path: Optional[str],
    login: Optional[str] = None,
    display: Optional[str] = None,
) -> Optional[str]:
    if isinstance(password, (bytes, bytearray)):
        password = bytes(password).decode("utf-8", errors="replace")

    if login and _based_on(password, login):
        return "it is based on your username"

    if display:
        for word in re.split(r"[\s,]+", display):
            if _based_on(password, word):
                return "it is based upon your password entry"

    words = load_wordlist(dictionary_path)
    candidates = _candidates(password)
    if any(c in words for c in candidates):
        return "it is based on a dictionary word"
    if any(c[::-1] in words for c in candidates):
        return "it is based on a (reversed) dictionary word"
    return None

"""
strictpass.evaluator

Structural password checks, independent of any dictionary:
- analyze(password): per-class and per-byte frequency tables plus percentages
- is_palindrome(password): case-insensitive palindrome test (length >= 2)
- classify(password): length gate, class-percentage bounds and single
  character dominance; returns a Verdict

Classification is byte based. A str password is encoded as UTF-8 and every
byte outside printable ASCII lands in the "other" class.
"""

import string
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .verdict import Bound, CharClass, RejectionKind, Verdict

Password = Union[str, bytes, bytearray]

MIN_LENGTH = 8

# percentage of "other" bytes at which class bounds are no longer enforced
OTHER_ESCAPE_PERCENT = 20

# a single byte value may make up at most this share of the password
MAX_SINGLE_CHAR_PERCENT = 60

# (class, max %, min %, too-many reason, too-few reason), checked in this order
CLASS_BOUNDS: List[Tuple[CharClass, int, Optional[int], str, Optional[str]]] = [
    (CharClass.DIGIT, 40, 5,
     "Password contains too many digits", "Password contains too few digits"),
    (CharClass.LOWER, 60, 10,
     "Password contains too many lowercase letters", "Password contains too few lowercase letters"),
    (CharClass.UPPER, 60, 10,
     "Password contains too many uppercase letters", "Password contains too few uppercase letters"),
    (CharClass.PUNCT, 70, 5,
     "Password contains too much punctuation", "Password contains too little punctuation"),
    (CharClass.SPACE, 10, None,
     "Password contains too much whitespace", None),
]

TOO_SHORT_REASON = "Password is too short"
DOMINANCE_REASON = "Password contains too many of a single character"

_DIGITS = frozenset(string.digits.encode("ascii"))
_LOWER = frozenset(string.ascii_lowercase.encode("ascii"))
_UPPER = frozenset(string.ascii_uppercase.encode("ascii"))
_PUNCT = frozenset(string.punctuation.encode("ascii"))
_SPACE = frozenset(string.whitespace.encode("ascii"))


def _as_bytes(password: Password) -> bytes:
    if isinstance(password, str):
        return password.encode("utf-8")
    if isinstance(password, (bytes, bytearray)):
        return bytes(password)
    raise TypeError(f"password must be str or bytes, not {type(password).__name__}")


def char_class(byte: int) -> CharClass:
    """Map a byte value to its character class (C locale semantics)."""
    if byte in _DIGITS:
        return CharClass.DIGIT
    if byte in _LOWER:
        return CharClass.LOWER
    if byte in _UPPER:
        return CharClass.UPPER
    if byte in _PUNCT:
        return CharClass.PUNCT
    if byte in _SPACE:
        return CharClass.SPACE
    return CharClass.OTHER


def percent(count: int, total: int) -> int:
    """Integer percentage, truncated: percent(1, 8) == 12, percent(1, 9) == 11."""
    return (count * 100) // total


@dataclass
class PasswordStats:
    length: int = 0
    classes: Dict[CharClass, int] = field(default_factory=lambda: {c: 0 for c in CharClass})
    bytes_seen: List[int] = field(default_factory=lambda: [0] * 256)

    def class_percent(self, cls: CharClass) -> int:
        if self.length == 0:
            return 0
        return percent(self.classes[cls], self.length)

    def percentages(self) -> Dict[CharClass, int]:
        return {c: self.class_percent(c) for c in CharClass}


def analyze(password: Password) -> PasswordStats:
    """
    Count character classes and byte values in a single pass.
    sum(stats.classes.values()) == stats.length == sum(stats.bytes_seen)
    """
    data = _as_bytes(password)
    stats = PasswordStats(length=len(data))
    for b in data:
        stats.classes[char_class(b)] += 1
        stats.bytes_seen[b] += 1
    return stats


def class_frequencies(password: Password) -> Dict[CharClass, int]:
    return analyze(password).classes


def byte_frequencies(password: Password) -> List[int]:
    return analyze(password).bytes_seen


def is_palindrome(password: Password) -> bool:
    """
    True if the password reads the same in both directions, ignoring ASCII case.
    Empty and single-character passwords are not palindromes.
    """
    data = _as_bytes(password).lower()
    if len(data) < 2:
        return False
    i, j = 0, len(data) - 1
    while i < j:
        if data[i] != data[j]:
            return False
        i += 1
        j -= 1
    return True


def _check_class_bounds(stats: PasswordStats) -> Optional[Verdict]:
    for cls, max_pct, min_pct, too_many, too_few in CLASS_BOUNDS:
        pct = stats.class_percent(cls)
        if pct > max_pct:
            return Verdict.reject(RejectionKind.CLASS_IMBALANCE, too_many, cls, Bound.ABOVE_MAX)
        if min_pct is not None and pct < min_pct:
            return Verdict.reject(RejectionKind.CLASS_IMBALANCE, too_few, cls, Bound.BELOW_MIN)
    return None


def _check_dominance(stats: PasswordStats) -> Optional[Verdict]:
    seen = 0
    for count in stats.bytes_seen:
        if seen >= stats.length:
            break
        seen += count
        if percent(count, stats.length) > MAX_SINGLE_CHAR_PERCENT:
            return Verdict.reject(RejectionKind.CHARACTER_DOMINANCE, DOMINANCE_REASON)
    return None


def classify(password: Password) -> Verdict:
    """
    Structural complexity check. Gates run in a fixed order and the first
    failure is returned:

    1. length below MIN_LENGTH
    2. class percentage bounds (skipped when >= 20% of bytes are "other")
    3. a single byte value above MAX_SINGLE_CHAR_PERCENT
    """
    stats = analyze(password)

    if stats.length < MIN_LENGTH:
        return Verdict.reject(RejectionKind.TOO_SHORT, TOO_SHORT_REASON)

    if stats.class_percent(CharClass.OTHER) < OTHER_ESCAPE_PERCENT:
        rejected = _check_class_bounds(stats)
        if rejected is not None:
            return rejected

    rejected = _check_dominance(stats)
    if rejected is not None:
        return rejected

    return Verdict.accept()

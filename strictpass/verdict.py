"""
strictpass.verdict

Result types shared by the classifier and the policy layer:
- CharClass: the six ASCII character classes a password byte falls into
- RejectionKind / Bound: why a password was rejected
- Verdict: accept, or reject with a human-readable reason
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class CharClass(str, Enum):
    DIGIT = "digit"
    LOWER = "lower"
    UPPER = "upper"
    PUNCT = "punct"
    SPACE = "space"
    OTHER = "other"


class RejectionKind(str, Enum):
    TOO_SHORT = "too_short"
    CLASS_IMBALANCE = "class_imbalance"
    CHARACTER_DOMINANCE = "character_dominance"
    PALINDROME = "palindrome"
    DICTIONARY_MATCH = "dictionary_match"


class Bound(str, Enum):
    ABOVE_MAX = "above_max"
    BELOW_MIN = "below_min"


@dataclass(frozen=True)
class Verdict:
    accepted: bool
    reason: Optional[str] = None
    kind: Optional[RejectionKind] = None
    char_class: Optional[CharClass] = None
    bound: Optional[Bound] = None

    @classmethod
    def accept(cls) -> "Verdict":
        return cls(accepted=True)

    @classmethod
    def reject(
        cls,
        kind: RejectionKind,
        reason: str,
        char_class: Optional[CharClass] = None,
        bound: Optional[Bound] = None,
    ) -> "Verdict":
        return cls(accepted=False, reason=reason, kind=kind, char_class=char_class, bound=bound)

    def __bool__(self) -> bool:
        return self.accepted

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly form used by the CLI and the HTTP API."""
        return {
            "accepted": self.accepted,
            "reason": self.reason,
            "kind": self.kind.value if self.kind else None,
            "char_class": self.char_class.value if self.char_class else None,
            "bound": self.bound.value if self.bound else None,
        }

"""
strictpass.suggestions

Turn a policy verdict into concrete advice and produce example replacement
passwords (using generator) that pass the structural checks.
"""

from typing import Dict, List, Optional

from .evaluator import CLASS_BOUNDS, MIN_LENGTH, Password
from .generator import generate_compliant
from .policy import evaluate_password
from .verdict import Bound, CharClass, RejectionKind, Verdict

CLASS_NAMES = {
    CharClass.DIGIT: "digits (0-9)",
    CharClass.LOWER: "lowercase letters (a-z)",
    CharClass.UPPER: "uppercase letters (A-Z)",
    CharClass.PUNCT: "punctuation (e.g. ! @ # $ %)",
    CharClass.SPACE: "whitespace",
}


def _bounds_for(cls: CharClass):
    for c, max_pct, min_pct, _, _ in CLASS_BOUNDS:
        if c is cls:
            return max_pct, min_pct
    return None, None


def advice_for(verdict: Verdict) -> List[str]:
    """Human-readable fixes for a rejected verdict. Empty for an accepted one."""
    if verdict:
        return []
    if verdict.kind is RejectionKind.TOO_SHORT:
        return [f"Use at least {MIN_LENGTH} characters; 12-16 is better."]
    if verdict.kind is RejectionKind.PALINDROME:
        return ["Don't use a password that reads the same backwards (e.g. 'abccba')."]
    if verdict.kind is RejectionKind.CHARACTER_DOMINANCE:
        return ["No single character may make up more than 60% of the password; vary the characters."]
    if verdict.kind is RejectionKind.DICTIONARY_MATCH:
        return [
            "Avoid common words and your own name or username, even with digits or symbols added.",
            "Combine unrelated words or use a generated password.",
        ]
    if verdict.kind is RejectionKind.CLASS_IMBALANCE and verdict.char_class is not None:
        name = CLASS_NAMES.get(verdict.char_class, verdict.char_class.value)
        max_pct, min_pct = _bounds_for(verdict.char_class)
        if verdict.bound is Bound.ABOVE_MAX:
            return [f"Use fewer {name}: at most {max_pct}% of the password."]
        return [f"Add more {name}: at least {min_pct}% of the password."]
    return [verdict.reason] if verdict.reason else []


def suggest_improvements(password: Password, dictionary_path: Optional[str] = None, examples: int = 1) -> Dict:
    """
    Return a suggestion object for a password:
    {
        "accepted": bool,
        "reason": Optional[str],
        "suggestions": [str],
        "examples": [str],  # generated passwords that pass the structural checks
    }
    """
    verdict = evaluate_password(password, dictionary_path=dictionary_path)
    suggestions = advice_for(verdict)
    if verdict:
        suggestions.append("Your password meets the policy. Good job!")

    length = max(16, len(password) + 4)
    return {
        "accepted": verdict.accepted,
        "reason": verdict.reason,
        "suggestions": suggestions,
        "examples": [generate_compliant(length=length) for _ in range(examples)] if not verdict else [],
    }

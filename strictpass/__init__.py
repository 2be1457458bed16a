"""StrictPass: structural password policy checks for password changes."""

from .evaluator import analyze, classify, is_palindrome
from .identity import IdentityHint, extract_identity
from .policy import check_password, evaluate_password
from .verdict import Bound, CharClass, RejectionKind, Verdict

__all__ = [
    "analyze",
    "classify",
    "is_palindrome",
    "IdentityHint",
    "extract_identity",
    "check_password",
    "evaluate_password",
    "Bound",
    "CharClass",
    "RejectionKind",
    "Verdict",
]

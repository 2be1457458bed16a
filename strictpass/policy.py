"""
strictpass.policy

Password-change policy: palindrome check, structural complexity, then the
dictionary oracle. The first rejection wins.

evaluate_password() is the pure decision. check_password() is what a
directory server calls on a password change: it reads identity from the
entry, runs the decision and writes one audit line.
"""

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from .dictionary import check_dictionary
from .evaluator import Password, classify, is_palindrome
from .identity import extract_identity, IdentityHint
from .log import audit_logger
from .verdict import RejectionKind, Verdict

# (password, dictionary_path, login, display) -> reason or None
DictionaryOracle = Callable[[Password, Optional[str], Optional[str], Optional[str]], Optional[str]]

PALINDROME_REASON = "Password is a palindrome"


def evaluate_password(
    password: Password,
    identity_hint: Optional[IdentityHint] = None,
    *,
    oracle: DictionaryOracle = check_dictionary,
    dictionary_path: Optional[str] = None,
) -> Verdict:
    if is_palindrome(password):
        return Verdict.reject(RejectionKind.PALINDROME, PALINDROME_REASON)

    verdict = classify(password)
    if not verdict:
        return verdict

    hint = identity_hint or IdentityHint()
    reason = oracle(password, dictionary_path, hint.login, hint.display)
    if reason:
        return Verdict.reject(RejectionKind.DICTIONARY_MATCH, reason)

    return Verdict.accept()


def check_password(
    password: Password,
    entry: Optional[Mapping[str, Sequence[Any]]] = None,
    *,
    oracle: DictionaryOracle = check_dictionary,
    dictionary_path: Optional[str] = None,
    audit: Optional[logging.Logger] = None,
) -> Verdict:
    """
    Host entry point. A missing login name on the entry is logged and never
    blocks the change.

    Identity hints are cleared right after extraction, so the dictionary
    oracle and the audit line never see the user's login or display name.
    """
    audit = audit or audit_logger

    if entry is not None and extract_identity(entry) is None:
        audit.error("Could not update password for user: couldn't find username")

    # Out of an abundance of caution
    login = None
    verdict = evaluate_password(password, None, oracle=oracle, dictionary_path=dictionary_path)

    if verdict:
        audit.info("User %s changed password", login)
    elif verdict.kind is RejectionKind.PALINDROME:
        audit.info("User %s attempted to change password to a bad password (palindrome)", login)
    elif verdict.kind is RejectionKind.DICTIONARY_MATCH:
        audit.info("User %s attempted to change password to a bad password (dictionary: %s)", login, verdict.reason)
    else:
        audit.info(
            "User %s attempted to change password to a bad password (insufficiently complex: %s)",
            login, verdict.reason,
        )
    return verdict

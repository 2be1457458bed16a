import logging

from strictpass.identity import IdentityHint
from strictpass.policy import check_password, evaluate_password
from strictpass.verdict import RejectionKind


class RecordingOracle:
    def __init__(self, reason=None):
        self.reason = reason
        self.calls = []

    def __call__(self, password, dictionary_path, login, display):
        self.calls.append((password, dictionary_path, login, display))
        return self.reason


def test_too_short():
    v = evaluate_password("short1!")
    assert v.kind is RejectionKind.TOO_SHORT
    assert "too short" in v.reason


def test_palindrome_checked_first():
    v = evaluate_password("Ab1!!1bA")
    assert v.kind is RejectionKind.PALINDROME
    assert v.reason == "Password is a palindrome"
    # the palindrome check also runs before the length and class gates
    assert evaluate_password("abba").kind is RejectionKind.PALINDROME
    assert evaluate_password("11111111").kind is RejectionKind.PALINDROME


def test_racecar_with_digit_reaches_complexity_check():
    v = evaluate_password("racecar1")
    assert v.kind is RejectionKind.CLASS_IMBALANCE
    assert v.reason == "Password contains too many lowercase letters"


def test_accept_and_idempotent():
    oracle = RecordingOracle()
    first = evaluate_password("Ab1!Ab1!", oracle=oracle)
    second = evaluate_password("Ab1!Ab1!", oracle=oracle)
    assert first.accepted
    assert first == second
    assert evaluate_password("Ab1!Ab1!").accepted


def test_oracle_gets_hints_and_path():
    oracle = RecordingOracle()
    evaluate_password("Ab1!Ab1!", IdentityHint("jdoe", "John Doe"), oracle=oracle, dictionary_path="/words")
    assert oracle.calls == [("Ab1!Ab1!", "/words", "jdoe", "John Doe")]


def test_oracle_rejection():
    oracle = RecordingOracle("it is based on a dictionary word")
    v = evaluate_password("Ab1!Ab1!", oracle=oracle)
    assert v.kind is RejectionKind.DICTIONARY_MATCH
    assert v.reason == "it is based on a dictionary word"


def test_oracle_not_called_after_rejection():
    oracle = RecordingOracle()
    evaluate_password("abba", oracle=oracle)
    evaluate_password("abcdefgh", oracle=oracle)
    assert oracle.calls == []


def test_builtin_dictionary_rejects_common_password():
    v = evaluate_password("P@ssW0rd1")
    assert v.kind is RejectionKind.DICTIONARY_MATCH


def test_missing_username_is_logged_not_fatal(caplog):
    caplog.set_level(logging.INFO, logger="strictpass.audit")
    v = check_password("Ab1!Ab1!", {"gecos": ["John Doe"]}, oracle=RecordingOracle())
    assert v.accepted
    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "couldn't find username" in errors[0].getMessage()


def test_identity_hints_are_not_passed_on(caplog):
    caplog.set_level(logging.INFO, logger="strictpass.audit")
    oracle = RecordingOracle()
    check_password("Ab1!Ab1!", {"uid": ["jdoe"], "gecos": ["John Doe"]}, oracle=oracle)
    assert oracle.calls == [("Ab1!Ab1!", None, None, None)]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_audit_lines(caplog):
    caplog.set_level(logging.INFO, logger="strictpass.audit")
    check_password("Ab1!!1bA", oracle=RecordingOracle())
    check_password("short1!", oracle=RecordingOracle())
    check_password("Ab1!Ab1!", oracle=RecordingOracle("it is too simplistic"))
    check_password("Ab1!Ab1!", oracle=RecordingOracle())
    messages = [r.getMessage() for r in caplog.records]
    assert messages == [
        "User None attempted to change password to a bad password (palindrome)",
        "User None attempted to change password to a bad password (insufficiently complex: Password is too short)",
        "User None attempted to change password to a bad password (dictionary: it is too simplistic)",
        "User None changed password",
    ]


def test_custom_audit_logger(caplog):
    audit = logging.getLogger("tests.audit")
    caplog.set_level(logging.INFO, logger="tests.audit")
    check_password("short1!", audit=audit)
    assert [r.name for r in caplog.records] == ["tests.audit"]

import string

from strictpass.evaluator import (
    analyze,
    byte_frequencies,
    char_class,
    class_frequencies,
    classify,
    is_palindrome,
    percent,
)
from strictpass.verdict import Bound, CharClass, RejectionKind


def test_char_classes_follow_c_locale():
    assert char_class(ord("5")) is CharClass.DIGIT
    assert char_class(ord("a")) is CharClass.LOWER
    assert char_class(ord("Z")) is CharClass.UPPER
    assert char_class(ord("!")) is CharClass.PUNCT
    assert char_class(ord("~")) is CharClass.PUNCT
    assert char_class(ord(" ")) is CharClass.SPACE
    assert char_class(ord("\t")) is CharClass.SPACE
    assert char_class(0x00) is CharClass.OTHER
    assert char_class(0x7F) is CharClass.OTHER
    assert char_class(0xE9) is CharClass.OTHER
    assert sum(char_class(ord(c)) is CharClass.PUNCT for c in map(chr, range(128))) == len(string.punctuation)


def test_percent_truncates():
    assert percent(1, 8) == 12
    assert percent(1, 9) == 11
    assert percent(2, 3) == 66


def test_tables_sum_to_length():
    for pw in ["", "Ab1! \x7f", "pässwörd", b"\xff\x00abc"]:
        raw = pw.encode("utf-8") if isinstance(pw, str) else pw
        stats = analyze(pw)
        assert stats.length == len(raw)
        assert sum(stats.classes.values()) == len(raw)
        assert sum(stats.bytes_seen) == len(raw)
    assert sum(class_frequencies("Ab1!Ab1!").values()) == sum(byte_frequencies("Ab1!Ab1!")) == 8


def test_non_ascii_counts_as_other():
    stats = analyze("aé")  # é is two bytes in UTF-8
    assert stats.length == 3
    assert stats.classes[CharClass.OTHER] == 2


def test_palindromes():
    assert not is_palindrome("")
    assert not is_palindrome("a")
    assert is_palindrome("aa")
    assert is_palindrome("Abcba")
    assert is_palindrome("Ab1!!1bA")
    assert not is_palindrome("racecar1")
    assert not is_palindrome("ab")


def test_too_short():
    for pw in ["", "a", "short1!", "Ab1!Ab1"]:
        v = classify(pw)
        assert not v
        assert v.kind is RejectionKind.TOO_SHORT
        assert v.reason == "Password is too short"


def test_all_digits_reports_digits_before_dominance():
    v = classify("11111111")
    assert v.reason == "Password contains too many digits"
    assert v.kind is RejectionKind.CLASS_IMBALANCE
    assert v.char_class is CharClass.DIGIT
    assert v.bound is Bound.ABOVE_MAX


def test_balanced_password_accepted():
    assert classify("Ab1!Ab1!").accepted
    assert classify("Ab1!Ab1!") == classify("Ab1!Ab1!")


def test_class_bound_precedence():
    cases = {
        "abcdefgh": "Password contains too few digits",
        "12345678": "Password contains too many digits",
        "racecar1": "Password contains too many lowercase letters",
        "abcdefgA1!": "Password contains too many lowercase letters",
        "1234ABCD!!": "Password contains too few lowercase letters",
        "ABCDEFGa1!": "Password contains too many uppercase letters",
        "1234abcd!!": "Password contains too few uppercase letters",
        "1abAB" + string.punctuation[:15]: "Password contains too much punctuation",
        "AbcDEf12": "Password contains too little punctuation",
        "Ab1! Ab1! ": "Password contains too much whitespace",
    }
    for pw, reason in cases.items():
        assert classify(pw).reason == reason, pw


def test_minimum_bounds_accepted():
    # 5% digits, 50% lower, 40% upper, 5% punctuation
    assert classify("1abcdefghijABCDEFGH!").accepted


def test_truncation_not_rounding():
    # one digit in 21 characters is 4.76%, which truncates to 4% (< 5%)
    v = classify("1abcdefghijABCDEFGH!?")
    assert v.reason == "Password contains too few digits"
    assert v.bound is Bound.BELOW_MIN


def test_other_bytes_skip_class_bounds():
    assert classify(b"1abAB!" + bytes(range(0x80, 0x8E))).accepted
    assert classify(b"abcdefgh\x80\x81").accepted
    # 4 of 21 bytes is 19%: bounds still apply
    v = classify(b"abcdefghijklmnopq" + bytes(range(0x80, 0x84)))
    assert v.kind is RejectionKind.CLASS_IMBALANCE
    assert v.char_class is CharClass.DIGIT


def test_single_character_dominance():
    v = classify("!" * 13 + "1abcABC")
    assert v.kind is RejectionKind.CHARACTER_DOMINANCE
    assert v.reason == "Password contains too many of a single character"
    # exactly 60% is allowed
    assert classify("!" * 12 + "1abcdABC").accepted


def test_dominance_applies_with_other_bytes():
    assert classify(b"\x80" * 7 + b"aB1").kind is RejectionKind.CHARACTER_DOMINANCE
    assert classify(b"\xff" * 7 + b"a").kind is RejectionKind.CHARACTER_DOMINANCE

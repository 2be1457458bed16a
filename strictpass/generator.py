"""
strictpass.generator
Secure password generator using Python's secrets module. Every password mixes
all four printable classes the policy asks for; generate_compliant() only
returns passwords the structural checks accept.
"""

from secrets import choice, SystemRandom
import string
from typing import Optional

from .evaluator import MIN_LENGTH, classify, is_palindrome


DEFAULT_SYMBOLS = "!@#$%^&*()-_=+[]{};:,.<>/?"
_sysrand = SystemRandom()

def generate(length: int = 16, symbols: Optional[str] = None) -> str:
    """
    Random password with at least one uppercase, lowercase, digit and symbol.
    """
    symbols = symbols or DEFAULT_SYMBOLS
    pools = [string.ascii_uppercase, string.ascii_lowercase, string.digits, symbols]
    if length < len(pools):
        raise ValueError(f"length must be at least {len(pools)}")

    password_chars = [choice(p) for p in pools]
    all_chars = "".join(pools)
    password_chars += [choice(all_chars) for _ in range(length - len(pools))]

    _sysrand.shuffle(password_chars)
    return "".join(password_chars)


def generate_compliant(length: int = 16, symbols: Optional[str] = None, attempts: int = 1000) -> str:
    """
    Draw random passwords until one passes is_palindrome() and classify().
    The dictionary check is not applied.
    """
    if length < MIN_LENGTH:
        raise ValueError(f"length must be at least {MIN_LENGTH}")
    for _ in range(attempts):
        pw = generate(length=length, symbols=symbols)
        if not is_palindrome(pw) and classify(pw):
            return pw
    raise RuntimeError(f"no policy-compliant password found in {attempts} attempts")

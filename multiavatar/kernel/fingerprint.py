import hashlib
import string
from typing import List

DIGITS_NEEDED = 12
GROUPS = 6


def sha256_hex(s: str) -> str:
    # unpaired surrogates become "?" instead of raising
    return hashlib.sha256(s.encode("utf-8", errors="replace")).hexdigest()


def digits(hexdigest: str) -> str:
    """Keep only the numeral characters of a hex digest, a-f are dropped."""
    return "".join(ch for ch in hexdigest if ch in string.digits)


def fingerprint_hex(hexdigest: str) -> List[int]:
    head = digits(hexdigest)[:DIGITS_NEEDED]
    # short digests are clamped; a missing group reads as 0
    return [int(head[2 * i:2 * i + 2] or 0) for i in range(GROUPS)]


def fingerprint(identifier: str) -> List[int]:
    """
    Six two-digit decimals (0-99) derived from the SHA-256 of the identifier.
    fingerprint("Binx Bond") -> [79, 83, 13, 12, 81, 83]
    """
    return fingerprint_hex(sha256_hex(identifier))

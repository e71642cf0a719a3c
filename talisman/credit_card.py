"""Detection of credit card numbers."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable

CREDIT_CARD_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(pattern, re.ASCII)
    for pattern in (
        r"(?:3[47][0-9]{13})",
        r"(?:3(?:0[0-5]|[68][0-9])[0-9]{11})",
        r"^65[4-9][0-9]{13}|64[4-9][0-9]{13}|6011[0-9]{12}"
        r"|(622(?:12[6-9]|1[3-9][0-9]|[2-8][0-9][0-9]|9[01][0-9]|92[0-5])[0-9]{10})$",
        r"^(?:2131|1800|35\d{3})\d{11}$",
        r"^(5018|5020|5038|6304|6759|6761|6763)[0-9]{8,15}$",
        r"(?:(?:5[1-5][0-9]{2}|222[1-9]|22[3-9][0-9]|2[3-6][0-9]{2}|27[01][0-9]|2720)[0-9]{12})",
        r"((?:4[0-9]{12})(?:[0-9]{3})?)",
    )
)


def is_luhn_number(content: str) -> bool:
    """Return whether ``content`` passes the Luhn checksum, read byte by byte."""
    checksum = 0
    for alternate, byte in zip(itertools.cycle((False, True)), reversed(content.encode("utf-8"))):
        digit = (byte - ord("0")) % 256
        if alternate:
            digit *= 2
            if digit > 9:
                digit = digit % 10 + 1
        checksum += digit
    return checksum % 10 == 0


class CreditCardDetector:
    """Flags words that pass the Luhn check and match a known card pattern."""

    def __init__(self, patterns: Iterable[re.Pattern[str]] = CREDIT_CARD_PATTERNS) -> None:
        self.patterns = tuple(patterns)

    def check(self, content: str) -> str | None:
        """Return ``content`` if it looks like a card number, else ``None``."""
        if not is_luhn_number(content):
            return None
        if any(pattern.search(content) for pattern in self.patterns):
            return content
        return None
"""Detection of hex encoded text with high entropy."""

from __future__ import annotations

from .entropy import entropy_candidates, shannon_entropy

HEX_CHARS = "1234567890abcdefABCDEF"
HEX_ENTROPY_THRESHOLD = 2.7
MIN_HEX_SECRET_LENGTH = 20

_HEX_SET = frozenset(HEX_CHARS)


class HexDetector:
    """Flags words holding long hex runs whose entropy exceeds the threshold."""

    def check(self, word: str) -> str | None:
        """Return ``word`` if it looks like hex encoded data, else ``None``."""
        for candidate in entropy_candidates(word, MIN_HEX_SECRET_LENGTH, _HEX_SET):
            if shannon_entropy(candidate, HEX_CHARS) > HEX_ENTROPY_THRESHOLD:
                return word
        return None
"""Detection of base64 encoded text."""

from __future__ import annotations

import base64
import binascii
import logging
from collections.abc import Callable

from .entropy import entropy_candidates, shannon_entropy

logger = logging.getLogger(__name__)

BASE64_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/="
BASE64_ENTROPY_THRESHOLD = 4.5
MIN_BASE64_SECRET_LENGTH = 20

AGGRESSIVENESS_THRESHOLD = 15
_DELIMITERS = (".", "-", "=")
_BASE64_SET = frozenset(BASE64_CHARS)


def _decodes_as_base64(text: str) -> bool:
    if len(text.encode("utf-8")) <= AGGRESSIVENESS_THRESHOLD:
        return False
    try:
        base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError):
        return False
    return True


class Base64AggressiveDetector:
    """Flags any long delimited piece of a word that decodes as base64."""

    def test(self, text: str) -> str | None:
        """Return the first suspicious piece of ``text``, or ``None``."""
        for delimiter in _DELIMITERS:
            for piece in text.split(delimiter):
                if _decodes_as_base64(piece):
                    return piece
        return None


class Base64Detector:
    """Flags words holding long base64 runs whose entropy exceeds the threshold.

    ``words_only`` is an optional predicate that exempts candidates made only
    of dictionary words; when it is ``None`` no candidate is exempted.
    """

    def __init__(self, entropy_threshold: float | None = None, aggressive: bool = False) -> None:
        self.entropy_threshold = BASE64_ENTROPY_THRESHOLD
        if entropy_threshold is not None and entropy_threshold > 0.0:
            self.entropy_threshold = entropy_threshold
            logger.debug("Setting b64 entropy threshold to %f", entropy_threshold)
        self.aggressive_detector = Base64AggressiveDetector() if aggressive else None
        self.words_only: Callable[[str], bool] | None = None

    def _is_words_only(self, candidate: str) -> bool:
        return self.words_only is not None and self.words_only(candidate)

    def check(self, word: str) -> str | None:
        """Return ``word`` (or its suspicious piece in aggressive mode) if it looks encoded."""
        for candidate in entropy_candidates(word, MIN_BASE64_SECRET_LENGTH, _BASE64_SET):
            entropy = shannon_entropy(candidate, BASE64_CHARS)
            logger.debug("Detected entropy for word %s = %f", candidate, entropy)
            if entropy > self.entropy_threshold and not self._is_words_only(candidate):
                return word
        if self.aggressive_detector is not None:
            return self.aggressive_detector.test(word)
        return None
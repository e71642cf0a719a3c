"""Shannon entropy of strings and high-entropy runs inside words."""

from __future__ import annotations

import math
from collections.abc import Container, Iterable


def _byte_length(text: str) -> int:
    return len(text.encode("utf-8"))


def shannon_entropy(text: str, superset: Iterable[str]) -> float:
    """Return the Shannon entropy of ``text`` measured over the characters of ``superset``."""
    if not text:
        return 0.0
    length = _byte_length(text)
    entropy = 0.0
    for char in superset:
        probability = text.count(char) / length
        if probability > 0:
            entropy -= probability * math.log2(probability)
    return entropy


def entropy_candidates(word: str, min_length: int, superset: Container[str]) -> list[str]:
    """Return the runs of ``superset`` characters in ``word`` longer than ``min_length``."""
    if _byte_length(word) < min_length:
        return []
    candidates: list[str] = []
    run: list[str] = []
    for char in word:
        if char in superset:
            run.append(char)
            continue
        if len(run) > min_length:
            candidates.append("".join(run))
        run = []
    if len(run) > min_length:
        candidates.append("".join(run))
    return candidates
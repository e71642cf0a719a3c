"""Line and word scanning of file content for encoded secrets."""

from __future__ import annotations

import re
from collections.abc import Callable
from enum import Enum

_CHECKSUM_LINE = re.compile(r"checksum[ \t]*:[ \t]*[0-9a-fA-F]+", re.IGNORECASE)

REPORT_LIMIT = 50


def format_for_reporting(text: str) -> str:
    """Shorten ``text`` to at most fifty characters, ending with an ellipsis when cut."""
    if len(text) > REPORT_LIMIT:
        return text[: REPORT_LIMIT - 3] + "..."
    return text


class ContentType(Enum):
    """Kinds of suspicious content, with their log and report wording."""

    BASE64 = (
        "Failing file as it contains a base64 encoded text.",
        "Expected file to not to contain base64 encoded texts such as: {}",
    )
    HEX = (
        "Failing file as it contains a hex encoded text.",
        "Expected file to not to contain hex encoded texts such as: {}",
    )
    CREDIT_CARD = (
        "Failing file as it contains a potential credit card number.",
        "Expected file to not to contain credit card numbers such as: {}",
    )

    def info(self) -> str:
        """Return the log line for this kind of finding."""
        return self.value[0]

    def message(self, finding: str) -> str:
        """Return the report message for ``finding``."""
        return self.value[1].format(format_for_reporting(finding))


def strip_checksums(text: str) -> str:
    """Remove ``checksum: <hex>`` entries, as found in ignore files."""
    return _CHECKSUM_LINE.sub("", text)


def scan_content(data: bytes | str, check: Callable[[str], str | None]) -> list[str]:
    """Apply ``check`` to every whitespace separated word and collect its findings."""
    text = data.decode("utf-8", errors="replace") if isinstance(data, bytes) else data
    return [
        finding
        for line in text.split("\n")
        for word in line.split()
        if (finding := check(word))
    ]
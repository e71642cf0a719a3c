"""Detectors for encoded secrets and card numbers in file content, and a collector for their results."""

__version__ = "0.1.0"

__all__ = [
    "entropy",
    "hex_detector",
    "base64_detector",
    "credit_card",
    "content_scan",
    "results",
]
"""Collected findings of a detection run, grouped by file path."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

MESSAGE_WRAP_WIDTH = 150

_FAILURE_CATEGORIES = ("filecontent", "filename", "filesize")


@dataclass
class Details:
    """One finding: its category, message, commits and severity."""

    category: str
    message: str
    commits: list[str] = field(default_factory=list)
    severity: Any = None

    def matches(self, category: str, message: str) -> bool:
        """Return whether this finding has the given category and message."""
        return self.category == category and self.message == message

    def to_dict(self) -> dict[str, Any]:
        """Return the finding in report form."""
        data: dict[str, Any] = {
            "type": self.category,
            "message": self.message,
            "commits": list(self.commits),
        }
        if self.severity is not None:
            data["severity"] = str(self.severity)
        return data


@dataclass
class ResultsDetails:
    """All failures, warnings and ignores recorded against one file path."""

    filename: str
    failure_list: list[Details] = field(default_factory=list)
    warning_list: list[Details] = field(default_factory=list)
    ignore_list: list[Details] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the file's results in report form."""
        return {
            "filename": self.filename,
            "failure_list": [detail.to_dict() for detail in self.failure_list],
            "warning_list": [detail.to_dict() for detail in self.warning_list],
            "ignore_list": [detail.to_dict() for detail in self.ignore_list],
        }


@dataclass
class FailureTypes:
    """Counts of recorded findings by kind."""

    filecontent: int = 0
    filesize: int = 0
    filename: int = 0
    warnings: int = 0
    ignores: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the counts in report form."""
        return {
            "filecontent": self.filecontent,
            "filesize": self.filesize,
            "filename": self.filename,
            "warnings": self.warnings,
            "ignores": self.ignores,
        }


def _record(details: list[Details], category: str, message: str,
            commits: Iterable[str], severity: Any) -> None:
    commits = list(commits)
    existing = [detail for detail in details if detail.matches(category, message)]
    for detail in existing:
        detail.commits.extend(commits)
    if not existing:
        details.append(Details(category, message, commits, severity))


def _wrap_message(message: str) -> str:
    if len(message) > MESSAGE_WRAP_WIDTH:
        return message[:MESSAGE_WRAP_WIDTH] + "\n" + message[MESSAGE_WRAP_WIDTH:]
    return message


class DetectionResults:
    """Collecting parameter for the findings of all detectors in a run."""

    def __init__(self) -> None:
        self.summary = FailureTypes()
        self.results: list[ResultsDetails] = []

    def _find(self, file_path: str) -> ResultsDetails | None:
        return next((r for r in self.results if r.filename == file_path), None)

    def _entry(self, file_path: str) -> ResultsDetails:
        entry = self._find(file_path)
        if entry is None:
            entry = ResultsDetails(file_path)
            self.results.append(entry)
        return entry

    def fail(self, file_path: str, category: str, message: str,
             commits: Iterable[str], severity: Any) -> None:
        """Record a failure; repeated category and message merge their commits."""
        _record(self._entry(file_path).failure_list, category, message, commits, severity)
        if category in _FAILURE_CATEGORIES:
            setattr(self.summary, category, getattr(self.summary, category) + 1)

    def warn(self, file_path: str, category: str, message: str,
             commits: Iterable[str], severity: Any) -> None:
        """Record a warning; repeated category and message merge their commits."""
        _record(self._entry(file_path).warning_list, category, message, commits, severity)
        self.summary.warnings += 1

    def ignore(self, file_path: str, category: str) -> None:
        """Record that ``file_path`` was ignored by the detector of ``category``."""
        entry = self._entry(file_path)
        if not any(detail.category == category for detail in entry.ignore_list):
            entry.ignore_list.append(Details(category, ""))
        self.summary.ignores += 1

    def has_failures(self) -> bool:
        """Return whether any failure was recorded."""
        return (self.summary.filesize > 0 or self.summary.filename > 0
                or self.summary.filecontent > 0)

    def has_ignores(self) -> bool:
        """Return whether any file was ignored."""
        return self.summary.ignores > 0

    def has_warnings(self) -> bool:
        """Return whether any warning was recorded."""
        return self.summary.warnings > 0

    def has_detection_messages(self) -> bool:
        """Return whether anything at all was recorded."""
        return self.has_warnings() or self.has_failures() or self.has_ignores()

    def successful(self) -> bool:
        """Return whether the run has no failures."""
        return not self.has_failures()

    def get_failures(self, file_path: str) -> list[Details]:
        """Return the failures recorded against ``file_path``."""
        entry = self._find(file_path)
        return entry.failure_list if entry is not None else []

    def _report_rows(self, file_path: str, details: list[Details]) -> list[list[str]]:
        return [
            [file_path, _wrap_message(detail.message),
             "" if detail.severity is None else str(detail.severity)]
            for detail in details
        ]

    def _require(self, file_path: str) -> ResultsDetails:
        entry = self._find(file_path)
        if entry is None:
            raise KeyError(file_path)
        return entry

    def report_file_failures(self, file_path: str) -> list[list[str]]:
        """Return table rows of file, message and severity for each failure of ``file_path``."""
        return self._report_rows(file_path, self._require(file_path).failure_list)

    def report_file_warnings(self, file_path: str) -> list[list[str]]:
        """Return table rows of file, message and severity for each warning of ``file_path``."""
        return self._report_rows(file_path, self._require(file_path).warning_list)

    def to_dict(self) -> dict[str, Any]:
        """Return the whole run in report form."""
        return {
            "summary": {"types": self.summary.to_dict()},
            "results": [entry.to_dict() for entry in self.results],
        }
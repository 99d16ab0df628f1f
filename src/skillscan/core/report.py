"""Report aggregation and exit-status derivation for a scan run.

A ``Report`` is built once, after traversal has finished, from the ordered
findings of one ``FindingCollector``. It groups findings by severity
(most severe first, discovery order preserved within a group), computes the
summary counts, and derives the process exit status:

    2 -- at least one CRITICAL finding ("do not use without review").
    1 -- no CRITICAL, at least one HIGH ("review recommended").
    0 -- anything else, including MEDIUM/LOW/INFO-only reports.

Unreadable files travel with the report for display but never influence the
exit status.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from skillscan.config import ScanConfig
from skillscan.core.analyzer import Finding, FindingCollector, ScanError, Severity

EXIT_CLEAN = 0
EXIT_REVIEW = 1
EXIT_CRITICAL = 2

CLEAN_MESSAGE = "No security issues detected"

_VERDICTS: dict[int, str] = {
    EXIT_CRITICAL: "CRITICAL issues found - DO NOT USE this skill without review!",
    EXIT_REVIEW: "HIGH severity issues found - careful review recommended",
}


@dataclass(frozen=True)
class Report:
    """The aggregated, read-only result of one scan run.

    Attributes:
        findings: Every finding in discovery order.
        errors: Files that could not be read during traversal.
        files_scanned: Number of files analyzed.
    """

    findings: tuple[Finding, ...]
    errors: tuple[ScanError, ...] = ()
    files_scanned: int = 0
    groups: dict[Severity, tuple[Finding, ...]] = field(init=False, compare=False)

    def __post_init__(self) -> None:
        groups: dict[Severity, tuple[Finding, ...]] = {}
        for severity in Severity.descending():
            items = tuple(f for f in self.findings if f.severity == severity)
            if items:
                groups[severity] = items
        object.__setattr__(self, "groups", groups)

    @classmethod
    def from_findings(
        cls,
        findings: Iterable[Finding],
        errors: Iterable[ScanError] = (),
        files_scanned: int = 0,
    ) -> Report:
        return cls(
            findings=tuple(findings),
            errors=tuple(errors),
            files_scanned=files_scanned,
        )

    @property
    def is_clean(self) -> bool:
        return not self.findings

    @property
    def total(self) -> int:
        return len(self.findings)

    def count(self, severity: Severity) -> int:
        return len(self.groups.get(severity, ()))

    @property
    def critical_count(self) -> int:
        return self.count(Severity.CRITICAL)

    @property
    def high_count(self) -> int:
        return self.count(Severity.HIGH)

    @property
    def exit_status(self) -> int:
        """Exit code derived from the most severe finding."""
        if self.critical_count:
            return EXIT_CRITICAL
        if self.high_count:
            return EXIT_REVIEW
        return EXIT_CLEAN

    @property
    def verdict(self) -> str | None:
        """Closing verdict line, or None when no escalation is needed."""
        return _VERDICTS.get(self.exit_status)

    def to_dict(self) -> dict[str, Any]:
        """Convert the report to a JSON-serializable dict."""
        return {
            "summary": {
                "total": self.total,
                "files_scanned": self.files_scanned,
                "counts": {s.name: self.count(s) for s in Severity.descending()},
                "exit_status": self.exit_status,
                "verdict": self.verdict or (CLEAN_MESSAGE if self.is_clean else None),
            },
            "findings": [
                {
                    "severity": f.severity.name,
                    "category": f.category.value,
                    "label": f.label,
                    "message": f.message,
                    "file": str(f.file),
                    "line": f.line,
                    "snippet": f.snippet,
                }
                for severity in Severity.descending()
                for f in self.groups.get(severity, ())
            ],
            "errors": [
                {"path": str(e.path), "message": e.message} for e in self.errors
            ],
        }


def scan_path(path: str | Path, config: ScanConfig | None = None) -> Report:
    """Scan a file or directory and return its aggregated report.

    Each call owns a fresh ``FindingCollector``, so repeated scans in one
    process never share findings.

    Args:
        path: File or directory to scan.
        config: Scan settings. Defaults to the built-in contract.

    Returns:
        The ``Report`` for this scan run.
    """
    from skillscan.discovery import ArtifactWalker

    collector = FindingCollector()
    result = ArtifactWalker(config).walk(Path(path), collector)
    return Report.from_findings(
        collector.snapshot(),
        errors=result.errors,
        files_scanned=len(result.files_scanned),
    )

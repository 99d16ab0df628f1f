"""Data models for the static analyzer: Severity, Category, Rule, Finding.

These are the core data types produced and consumed by the scan pipeline.
They are intentionally decoupled from the matching engine so that downstream
modules (report aggregator, CLI formatters) can import them without pulling
in the pattern catalogs.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path


# ---------------------------------------------------------------------------
# Severity: Ordered threat severity levels
# ---------------------------------------------------------------------------


class Severity(IntEnum):
    """Five-level severity scale for scan findings.

    The integer encoding enables direct comparison:
    INFO < LOW < MEDIUM < HIGH < CRITICAL.
    """

    INFO = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @classmethod
    def descending(cls) -> tuple[Severity, ...]:
        """Return all levels from most to least severe (report order)."""
        return tuple(sorted(cls, reverse=True))


# ---------------------------------------------------------------------------
# Category: Fixed rule-group tags
# ---------------------------------------------------------------------------


class Category(Enum):
    """The rule group a rule or finding belongs to."""

    EXECUTION = "execution"
    EXFILTRATION = "exfiltration"
    SECRETS = "secrets"
    PROMPT_INJECTION = "prompt_injection"
    WALLET = "wallet"
    NETWORK = "network"
    FILE_OPERATIONS = "file_operations"
    # Structural checks emitted only by the manifest analyzer.
    STRUCTURE = "structure"
    SCRIPTS = "scripts"
    TOOLS = "tools"
    BROWSER = "browser"


def _first_word(message: str) -> str:
    words = message.split()
    return words[0] if words else ""


# ---------------------------------------------------------------------------
# Rule: One detectable risk signature
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rule:
    """A single lexical detection rule.

    Attributes:
        pattern: Compiled regex evaluated against the whole file content.
        severity: Severity assigned to every match.
        category: Rule group the rule belongs to.
        message: Human-readable explanation shown in the report.
        extensions: Optional set of lowercase file suffixes (``".sh"``) the
            rule is restricted to. ``None`` applies the rule to every file.
    """

    pattern: re.Pattern[str]
    severity: Severity
    category: Category
    message: str
    extensions: frozenset[str] | None = None

    @property
    def label(self) -> str:
        """Display label: the first word of the message."""
        return _first_word(self.message)

    def applies_to(self, path: Path) -> bool:
        """Check whether the rule should run against ``path``."""
        if self.extensions is None:
            return True
        return path.suffix.lower() in self.extensions


# ---------------------------------------------------------------------------
# Finding: A single security observation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Finding:
    """A single security finding produced by the matcher or manifest analyzer.

    Findings are immutable (frozen) and are never mutated after creation.

    Attributes:
        severity: Threat severity (INFO through CRITICAL).
        category: Rule group that produced the finding.
        message: Human-readable description of the finding.
        file: Path of the scanned file.
        line: 1-based line of the match, or None for file-level findings.
        snippet: Trimmed source line (at most 100 characters), or None.
    """

    severity: Severity
    category: Category
    message: str
    file: Path
    line: int | None = None
    snippet: str | None = None

    @property
    def label(self) -> str:
        """Display label: the first word of the message."""
        return _first_word(self.message)

    @property
    def location(self) -> str:
        """``file:line`` when a line is known, else just the file."""
        if self.line:
            return f"{self.file}:{self.line}"
        return str(self.file)


# ---------------------------------------------------------------------------
# ScanError: An unreadable artifact
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScanError:
    """A file or directory that could not be read during traversal."""

    path: Path
    message: str


# ---------------------------------------------------------------------------
# FindingCollector: Per-run accumulation
# ---------------------------------------------------------------------------


class FindingCollector:
    """Ordered, append-only collection of findings for one scan run.

    A collector is created per scan and passed by reference to the matcher
    and manifest analyzer. Nothing outlives the run that created it.
    """

    def __init__(self) -> None:
        self._findings: list[Finding] = []

    def add(self, finding: Finding) -> None:
        self._findings.append(finding)

    def snapshot(self) -> tuple[Finding, ...]:
        """Return the findings collected so far, in discovery order."""
        return tuple(self._findings)

    def __iter__(self) -> Iterator[Finding]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._findings)

"""Lexical matching engine for skill artifacts.

This module implements the two analyzers that turn raw text into findings:

1. ``ContentMatcher`` -- applies every catalog rule to the whole content of
   one file and records each non-overlapping match with its line number and
   a trimmed snippet.
2. ``ManifestAnalyzer`` -- runs structural heuristics specific to
   ``SKILL.md`` manifests (missing description, embedded script blocks,
   tool usage, browser evaluation) and then delegates to the matcher.

Both append to a caller-owned ``FindingCollector``. Neither keeps any state
between calls: ``re.Pattern.finditer`` starts every scan at offset zero, so a
rule reused across files cannot carry a match position from one file into
the next.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from skillscan.core.analyzer.models import (
    Category,
    Finding,
    FindingCollector,
    Rule,
    Severity,
)
from skillscan.core.analyzer.patterns import ALL_RULES

logger = logging.getLogger(__name__)

SNIPPET_LENGTH = 100

# Fenced blocks in a manifest whose language tag marks them as runnable.
_SCRIPT_BLOCK_PATTERN = re.compile(
    r"```(bash|sh|shell|javascript|js|python|py)\n[\s\S]*?```",
    re.IGNORECASE,
)


def line_number(content: str, offset: int) -> int:
    """Return the 1-based line containing ``offset``.

    Counts newline characters strictly before the offset.
    """
    return content.count("\n", 0, offset) + 1


def make_snippet(line: str, length: int = SNIPPET_LENGTH) -> str:
    """Trim a source line and cut it to ``length`` characters."""
    return line.strip()[:length]


class ContentMatcher:
    """Applies the rule catalog to the content of a single file.

    Every rule is evaluated against the full content, not line by line, and
    every non-overlapping occurrence produces one finding. A rule that
    matches k times in one file therefore yields k findings.

    Usage::

        collector = FindingCollector()
        ContentMatcher().scan(text, Path("install.sh"), collector)
        for finding in collector:
            print(f"[{finding.severity.name}] {finding.location}")
    """

    def __init__(
        self,
        rules: tuple[Rule, ...] = ALL_RULES,
        snippet_length: int = SNIPPET_LENGTH,
    ) -> None:
        self.rules = rules
        self.snippet_length = snippet_length

    def scan(self, content: str, path: Path, collector: FindingCollector) -> int:
        """Match every applicable rule against ``content``.

        Args:
            content: Raw text of the file.
            path: Source identifier recorded on each finding.
            collector: Collection the findings are appended to.

        Returns:
            Number of findings added.
        """
        lines = content.split("\n")
        added = 0
        for rule in self.rules:
            if not rule.applies_to(path):
                continue
            for match in rule.pattern.finditer(content):
                line = line_number(content, match.start())
                collector.add(Finding(
                    severity=rule.severity,
                    category=rule.category,
                    message=rule.message,
                    file=path,
                    line=line,
                    snippet=make_snippet(lines[line - 1], self.snippet_length),
                ))
                added += 1
        logger.debug("%s: %d pattern match(es)", path, added)
        return added


class ManifestAnalyzer:
    """Structural checks for ``SKILL.md`` manifests, then full matching.

    Checks run in a fixed order so the findings of one manifest always come
    out in the same sequence:

    1. Missing description (LOW).
    2. Embedded runnable code blocks (INFO, with the block count).
    3. Exec tool usage (INFO).
    4. Browser automation combined with script evaluation (MEDIUM).

    Fenced blocks are counted, not scanned as separate artifacts. Their text
    is still covered by the content matcher pass over the whole manifest.
    """

    def __init__(self, matcher: ContentMatcher | None = None) -> None:
        self.matcher = matcher or ContentMatcher()

    def scan(self, content: str, path: Path, collector: FindingCollector) -> int:
        """Run structural checks and pattern matching over a manifest.

        Returns:
            Number of findings added (structural plus pattern matches).
        """
        structural = self._structural_findings(content, path)
        for finding in structural:
            collector.add(finding)
        return len(structural) + self.matcher.scan(content, path, collector)

    def _structural_findings(self, content: str, path: Path) -> list[Finding]:
        findings: list[Finding] = []

        if "description:" not in content and "## Description" not in content:
            findings.append(Finding(
                severity=Severity.LOW,
                category=Category.STRUCTURE,
                message="Missing skill description",
                file=path,
            ))

        blocks = len(_SCRIPT_BLOCK_PATTERN.findall(content))
        if blocks > 0:
            findings.append(Finding(
                severity=Severity.INFO,
                category=Category.SCRIPTS,
                message=(
                    f"Contains {blocks} embedded script block(s) - review manually"
                ),
                file=path,
            ))

        if "exec" in content and "command" in content:
            findings.append(Finding(
                severity=Severity.INFO,
                category=Category.TOOLS,
                message="Uses exec tool - verify commands are safe",
                file=path,
            ))

        if "browser" in content and (
            "evaluate" in content or "javascript" in content
        ):
            findings.append(Finding(
                severity=Severity.MEDIUM,
                category=Category.BROWSER,
                message="Browser JS evaluation - potential XSS/data access",
                file=path,
            ))

        return findings

"""Property-based tests for matcher and report invariants.

Verifies with Hypothesis that:
    - Line numbers are exact for a match placed on any line.
    - A rule with k occurrences yields exactly k findings.
    - The exit status depends only on the most severe finding.
    - Scanning is deterministic.
"""
from __future__ import annotations

from pathlib import Path

from hypothesis import given
from hypothesis import strategies as st

from skillscan.core.analyzer import (
    Category,
    ContentMatcher,
    Finding,
    FindingCollector,
    Severity,
)
from skillscan.core.report import Report


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

# Letters that cannot form any rule's trigger text on their own.
clean_lines = st.lists(st.text(alphabet="qxz \t", max_size=30), max_size=40)
severities = st.lists(st.sampled_from(list(Severity)), max_size=30)

SCRIPT = Path("run.sh")


def _scan(content: str) -> list[Finding]:
    collector = FindingCollector()
    ContentMatcher().scan(content, SCRIPT, collector)
    return list(collector)


# ---------------------------------------------------------------------------
# Matcher properties
# ---------------------------------------------------------------------------


class TestLineNumberExactness:

    @given(lines=clean_lines, data=st.data())
    def test_match_reports_its_line(self, lines: list[str], data: st.DataObject) -> None:
        """A trigger inserted as line N (1-based) is reported with line = N."""
        index = data.draw(st.integers(min_value=0, max_value=len(lines)))
        content = "\n".join(lines[:index] + ["sudo now"] + lines[index:])
        findings = _scan(content)
        assert [f.line for f in findings] == [index + 1]
        assert findings[0].snippet == "sudo now"


class TestExhaustiveness:

    @given(k=st.integers(min_value=0, max_value=25))
    def test_k_occurrences_yield_k_findings(self, k: int) -> None:
        findings = _scan("sudo x\n" * k)
        assert len(findings) == k
        assert [f.line for f in findings] == list(range(1, k + 1))

    @given(lines=clean_lines)
    def test_clean_content_yields_nothing(self, lines: list[str]) -> None:
        assert _scan("\n".join(lines)) == []

    @given(lines=clean_lines, k=st.integers(min_value=0, max_value=5))
    def test_scanning_is_deterministic(self, lines: list[str], k: int) -> None:
        content = "\n".join(lines + ["chmod 777 a"] * k)
        assert _scan(content) == _scan(content)


# ---------------------------------------------------------------------------
# Report properties
# ---------------------------------------------------------------------------


def _findings(levels: list[Severity]) -> list[Finding]:
    return [
        Finding(
            severity=level,
            category=Category.EXECUTION,
            message=f"finding {i}",
            file=SCRIPT,
            line=i + 1,
        )
        for i, level in enumerate(levels)
    ]


class TestExitStatusLaws:

    @given(levels=severities)
    def test_exit_status_from_most_severe(self, levels: list[Severity]) -> None:
        report = Report.from_findings(_findings(levels))
        if Severity.CRITICAL in levels:
            assert report.exit_status == 2
        elif Severity.HIGH in levels:
            assert report.exit_status == 1
        else:
            assert report.exit_status == 0

    @given(levels=severities, extra=st.sampled_from(list(Severity)))
    def test_adding_a_finding_never_lowers_status(
        self, levels: list[Severity], extra: Severity
    ) -> None:
        before = Report.from_findings(_findings(levels)).exit_status
        after = Report.from_findings(_findings(levels + [extra])).exit_status
        assert after >= before

    @given(levels=severities)
    def test_grouping_preserves_every_finding(self, levels: list[Severity]) -> None:
        findings = _findings(levels)
        report = Report.from_findings(findings)
        regrouped = [f for group in report.groups.values() for f in group]
        assert sorted(regrouped, key=lambda f: f.line) == findings
        assert list(report.groups) == sorted(report.groups, reverse=True)

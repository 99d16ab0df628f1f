"""Rich output formatting helpers for the SkillScan CLI.

Provides consistent, severity-colored terminal output for scan reports. The
report goes to stdout; unreadable-file errors go to a separate stderr console
so they never mix with the severity-grouped findings.

Severity Color Mapping:
    CRITICAL = bold red, HIGH = yellow, MEDIUM = cyan, LOW = green, INFO = dim
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.text import Text

from skillscan.core.analyzer import ScanError, Severity
from skillscan.core.report import CLEAN_MESSAGE, Report

_SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: "bold red",
    Severity.HIGH: "yellow",
    Severity.MEDIUM: "cyan",
    Severity.LOW: "green",
    Severity.INFO: "dim",
}

RULE_WIDTH = 60

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def severity_style(severity: Severity) -> str:
    """Return the Rich style string for a given severity level."""
    return _SEVERITY_STYLES.get(severity, "white")


def print_banner(target: Path) -> None:
    """Print the line announcing which path is being scanned."""
    console.print(Text.assemble(("Scanning: ", "bold"), str(target)))


def print_report(report: Report) -> None:
    """Print the severity-grouped report, summary, and verdict.

    Args:
        report: Aggregated report for the finished scan run.
    """
    console.print()
    console.print("=" * RULE_WIDTH)
    console.print(Text("SKILL SECURITY SCAN REPORT", style="bold"))
    console.print("=" * RULE_WIDTH)
    console.print()

    if report.is_clean:
        console.print(Text(f"{CLEAN_MESSAGE}!", style="bold green"))
        console.print()
        return

    for severity, items in report.groups.items():
        style = severity_style(severity)
        console.print(Text(f"{severity.name} ({len(items)})", style=style))
        console.print("-" * 40)
        for finding in items:
            console.print(Text(f"  {finding.location}", style="bold"))
            console.print(Text(f"     {finding.message}"))
            if finding.snippet:
                console.print(Text(f"     > {finding.snippet}...", style="dim"))
            console.print()

    _print_summary(report)


def _print_summary(report: Report) -> None:
    console.print("=" * RULE_WIDTH)
    console.print(Text("SUMMARY", style="bold"))
    console.print(f"  Total findings: {report.total}")
    console.print(
        f"  Critical: {report.critical_count}, High: {report.high_count}"
    )
    if report.verdict:
        style = severity_style(
            Severity.CRITICAL if report.critical_count else Severity.HIGH
        )
        console.print()
        console.print(Text(report.verdict, style=style))


def print_errors(errors: tuple[ScanError, ...]) -> None:
    """Print unreadable-file errors to stderr."""
    for error in errors:
        err_console.print(
            Text(f"Error reading {error.path}: {error.message}", style="red")
        )


"""SkillScan CLI — Static security scan for agent skills.

Entry point for the ``skillscan`` command-line tool.

Usage::

    skillscan ./my-skill/                 # Scan a skill directory
    skillscan ./my-skill/SKILL.md         # Scan a single manifest
    skillscan ./my-skill --format json    # Machine-readable report
    skillscan ./my-skill --config skillscan.yaml

Exit Codes:
    0 — No CRITICAL or HIGH findings.
    1 — HIGH findings (review recommended), or a usage/config error.
    2 — CRITICAL findings (do not use the skill without review).
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from skillscan import __version__
from skillscan.config import ScanConfig, load_config
from skillscan.core.report import scan_path
from skillscan.exceptions import ConfigError

_USAGE_ERROR = 1

_EXAMPLES = (
    "\nExamples:\n"
    "  skillscan ./my-skill/\n"
    "  skillscan ./my-skill/SKILL.md"
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config(config_path: str | None) -> ScanConfig:
    if config_path is None:
        return ScanConfig()
    try:
        return load_config(config_path)
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(_USAGE_ERROR)


@click.command("skillscan")
@click.version_option(version=__version__)
@click.argument("path", required=False, default=None)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format: text (default) or json.",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="YAML file with extra extensions, ignored dirs, or enabled categories.",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    default=False,
    help="Log traversal and matching details to stderr.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    path: str | None,
    output_format: str,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Scan a skill folder or file for malicious or risky patterns.

    PATH may be a skill directory or a single file. Findings are grouped by
    severity; the exit code is 2 for CRITICAL findings, 1 for HIGH, else 0.
    """
    if path is None:
        click.echo(ctx.get_usage())
        click.echo(_EXAMPLES)
        sys.exit(_USAGE_ERROR)

    _configure_logging(verbose)

    target = Path(path).resolve()
    if not target.exists():
        click.echo(f"Error: Path not found: {target}", err=True)
        sys.exit(_USAGE_ERROR)

    config = _load_config(config_path)

    from skillscan.cli.output import print_banner, print_errors, print_report

    if output_format == "text":
        print_banner(target)

    report = scan_path(target, config)
    print_errors(report.errors)

    if output_format == "json":
        click.echo(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report)

    sys.exit(report.exit_status)

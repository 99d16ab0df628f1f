"""Lexical static analyzer for agent skill artifacts.

This package implements the detection engine of SkillScan. Given the raw
text of a file, the analyzer applies a catalog of regex rules and appends a
``Finding`` for every match to a caller-owned ``FindingCollector``.

Submodules
----------
- ``models``: Data types (Severity, Category, Rule, Finding, FindingCollector,
  ScanError).
- ``patterns``: Compiled rule catalogs grouped by category.
- ``engine``: ``ContentMatcher`` and ``ManifestAnalyzer``.

All public names are re-exported here::

    from skillscan.core.analyzer import ContentMatcher, Finding, Severity
"""

from skillscan.core.analyzer.models import (
    Category,
    Finding,
    FindingCollector,
    Rule,
    ScanError,
    Severity,
)
from skillscan.core.analyzer.engine import ContentMatcher, ManifestAnalyzer
from skillscan.core.analyzer.patterns import ALL_RULES, RULE_GROUPS, rules_for

__all__ = [
    "ALL_RULES",
    "Category",
    "ContentMatcher",
    "Finding",
    "FindingCollector",
    "ManifestAnalyzer",
    "RULE_GROUPS",
    "Rule",
    "ScanError",
    "Severity",
    "rules_for",
]

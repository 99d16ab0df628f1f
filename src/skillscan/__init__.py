"""SkillScan: Static security scanning for agent skill manifests and scripts."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

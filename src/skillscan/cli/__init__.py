"""Command-line interface for SkillScan."""

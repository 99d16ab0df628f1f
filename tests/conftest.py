"""Shared fixtures for skillscan tests."""

import pathlib

import pytest


@pytest.fixture
def sample_skill_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary directory simulating a skill folder."""
    skill_dir = tmp_path / "sample-skill"
    skill_dir.mkdir()
    return skill_dir


@pytest.fixture
def clean_manifest(sample_skill_dir: pathlib.Path) -> pathlib.Path:
    """Create a SKILL.md with a description and no risky content."""
    manifest = sample_skill_dir / "SKILL.md"
    manifest.write_text(
        "---\n"
        "name: formatter\n"
        "description: Formats Markdown tables.\n"
        "---\n\n"
        "# Formatter\n\n"
        "Reformat the table the user pastes into aligned columns.\n"
    )
    return manifest

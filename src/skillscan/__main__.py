"""Allow ``python -m skillscan <path>``."""

from skillscan.cli.main import cli

if __name__ == "__main__":
    cli()

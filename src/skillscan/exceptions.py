"""SkillScan exception hierarchy.

All public exceptions inherit from SkillScanError, giving callers a single
base class to catch when they want to handle any SkillScan-specific failure
without swallowing unrelated errors.

Detection results are never exceptions. A rule match is a ``Finding`` and an
unreadable file is a ``ScanError`` record returned alongside the report.
"""


class SkillScanError(Exception):
    """Base exception for all SkillScan errors."""


class ConfigError(SkillScanError):
    """Raised when a scan configuration file is missing or malformed.

    Covers YAML syntax errors, unknown keys, and values of the wrong type
    (e.g. an extension list that is not a list of strings).
    """

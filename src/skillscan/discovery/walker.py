"""Best-effort file-system traversal feeding skill artifacts to the analyzers.

Traversal Algorithm:
    1. A file root is dispatched directly, whatever its extension.
    2. A directory root is walked recursively in sorted name order, so the
       same tree always yields findings in the same order.
    3. Hidden entries (leading ``.``) and ignored directory names such as
       ``node_modules`` are skipped at every depth.
    4. Files are dispatched when their suffix is recognized or their name is
       the manifest name. Manifests go to ``ManifestAnalyzer``, everything
       else to ``ContentMatcher``.
    5. Symbolic links inside the tree are skipped, so the walk cannot cycle
       or read outside the root.

An unreadable file or directory never aborts the walk. It is logged and
recorded as a ``ScanError`` on the returned ``WalkResult`` so the caller
decides how strict to be.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from skillscan.config import ScanConfig
from skillscan.core.analyzer import (
    ContentMatcher,
    FindingCollector,
    ManifestAnalyzer,
    ScanError,
    rules_for,
)

logger = logging.getLogger(__name__)


@dataclass
class WalkResult:
    """Outcome of one traversal.

    Attributes:
        root: The path the walk started from.
        files_scanned: Files read and analyzed, in visit order.
        errors: Files or directories that could not be read.
    """

    root: Path
    files_scanned: list[Path] = field(default_factory=list)
    errors: list[ScanError] = field(default_factory=list)


class ArtifactWalker:
    """Discovers scannable files under a root and dispatches them.

    Usage::

        collector = FindingCollector()
        result = ArtifactWalker().walk(Path("./my-skill"), collector)
        for error in result.errors:
            print(f"Error reading {error.path}: {error.message}")
    """

    def __init__(
        self,
        config: ScanConfig | None = None,
        matcher: ContentMatcher | None = None,
        manifest_analyzer: ManifestAnalyzer | None = None,
    ) -> None:
        self.config = config or ScanConfig()
        self.matcher = matcher or ContentMatcher(rules=rules_for(self.config.categories))
        self.manifest_analyzer = manifest_analyzer or ManifestAnalyzer(self.matcher)

    def walk(self, root: Path, collector: FindingCollector) -> WalkResult:
        """Scan ``root`` (a file or directory) into ``collector``."""
        result = WalkResult(root=root)
        if root.is_dir():
            self._walk_directory(root, collector, result)
        else:
            self._scan_file(root, collector, result)
        return result

    def _walk_directory(
        self, directory: Path, collector: FindingCollector, result: WalkResult,
    ) -> None:
        try:
            entries = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            self._record_error(directory, exc, result)
            return

        for entry in entries:
            if entry.name.startswith("."):
                continue
            try:
                # Links are never followed: the walk stays inside the root.
                if entry.is_symlink():
                    logger.debug("Skipping symlink: %s", entry)
                    continue
                is_dir = entry.is_dir()
                is_file = entry.is_file()
            except OSError as exc:
                self._record_error(entry, exc, result)
                continue
            if is_dir:
                if entry.name in self.config.ignore_dirs:
                    logger.debug("Skipping ignored directory: %s", entry)
                    continue
                self._walk_directory(entry, collector, result)
            elif is_file and self.config.is_scannable(entry):
                self._scan_file(entry, collector, result)

    def _scan_file(
        self, path: Path, collector: FindingCollector, result: WalkResult,
    ) -> None:
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            self._record_error(path, exc, result)
            return

        if self.config.is_manifest(path):
            logger.debug("Analyzing manifest: %s", path)
            self.manifest_analyzer.scan(content, path, collector)
        else:
            logger.debug("Matching content: %s", path)
            self.matcher.scan(content, path, collector)
        result.files_scanned.append(path)

    @staticmethod
    def _record_error(path: Path, exc: OSError, result: WalkResult) -> None:
        message = exc.strerror or str(exc)
        logger.debug("Failed to read: %s (%s)", path, message)
        result.errors.append(ScanError(path=path, message=message))

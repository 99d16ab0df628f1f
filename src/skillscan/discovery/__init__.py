"""File-system discovery of skill artifacts.

Exports ``ArtifactWalker`` (recursive, best-effort traversal) and the
``WalkResult`` it returns.
"""

from skillscan.discovery.walker import ArtifactWalker, WalkResult

__all__ = ["ArtifactWalker", "WalkResult"]

"""
objectstore - An in-memory, git-like object store
"""

__version__ = "0.1.0"
__logo__ = "🗃️"

from objectstore.store import Branch, BranchManager, Commit, Repository, Result, init

__all__ = [
    "Branch",
    "BranchManager",
    "Commit",
    "Repository",
    "Result",
    "init",
]

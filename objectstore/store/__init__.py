"""
Git-like object store.

This module provides an in-memory versioned store for named objects,
supporting:
- Staging of additions and removals
- Commits holding full snapshots with hash identifiers
- Independent branch histories
- Destructive checkout of earlier commits
"""

from objectstore.store.result import Result
from objectstore.store.commit import Commit
from objectstore.store.branch import Branch
from objectstore.store.branches import BranchManager
from objectstore.store.repository import Repository, init

__all__ = [
    "Result",
    "Commit",
    "Branch",
    "BranchManager",
    "Repository",
    "init",
]

"""
Branch manager for the object store.

Owns the branch collection, the current-branch pointer and the staging
area, and implements every mutating and query operation of a repository.
"""

from typing import Any

from loguru import logger

from objectstore.config.schema import StoreConfig
from objectstore.store import messages
from objectstore.store.branch import Branch
from objectstore.store.commit import Commit
from objectstore.store.result import Result


class BranchManager:
    """
    Manages branches and staged changes.
    
    Staged state consists of:
    - added objects (name -> object) waiting for the next commit
    - names scheduled for removal
    - a counter of changes, which decides whether there is anything to commit
    
    The staging containers are private; callers only see copies.
    """
    
    def __init__(self, config: StoreConfig | None = None):
        self.config = config or StoreConfig()
        
        self._current = Branch(self.config.default_branch, config=self.config)
        self._branches: dict[str, Branch] = {self._current.name: self._current}
        
        self._added: dict[str, Any] = {}
        self._removed: set[str] = set()
        self._changed = 0
    
    # =========================================================================
    # Accessors
    # =========================================================================
    
    @property
    def current_branch(self) -> Branch:
        return self._current
    
    @property
    def branches(self) -> dict[str, Branch]:
        """Copy of the branch collection."""
        return dict(self._branches)
    
    def is_dirty(self) -> bool:
        """Check if there are staged changes."""
        return self._changed > 0
    
    def staged_names(self) -> list[str]:
        return sorted(self._added)
    
    def removed_names(self) -> list[str]:
        return sorted(self._removed)
    
    def _last_snapshot(self) -> dict[str, Any] | None:
        head = self._current.head
        return head.snapshot if head is not None else None
    
    # =========================================================================
    # Staging and commits
    # =========================================================================
    
    def add(self, name: str, obj: Any) -> Result[Any]:
        """Stage an object. Re-staging a name does not count as a new change."""
        if name not in self._added:
            self._changed += 1
        self._added[name] = obj
        logger.debug(f"Staged {name}")
        return Result.ok(messages.ADD.format(name=name), obj)
    
    def _clear_stage(self) -> None:
        self._added = {}
        self._removed = set()
        self._changed = 0
    
    def _merged_snapshot(self) -> dict[str, Any]:
        merged = dict(self._last_snapshot() or {})
        merged.update(self._added)
        for name in self._removed:
            merged.pop(name, None)
        return merged
    
    def commit(self, message: str) -> Result[Commit]:
        """
        Commit staged changes to the current branch.
        
        The new commit holds the previous snapshot overlaid with the added
        objects, minus everything scheduled for removal. The stage is
        cleared afterwards.
        """
        if self._changed == 0:
            return Result.fail(messages.COMMIT_NOTHING)
        
        result = self._current.make_new_commit(message, self._merged_snapshot(), self._changed)
        self._clear_stage()
        return result
    
    def remove_file(self, name: str) -> Result[Any]:
        """
        Schedule an object for removal.
        
        A staged object is unstaged right away; a committed one is dropped
        by the next commit.
        """
        if name in self._added:
            removed = self._added.pop(name)
            self._removed.add(name)
            self._changed += 1
            logger.debug(f"Unstaged {name} and scheduled it for removal")
            return Result.ok(messages.REMOVE.format(name=name), removed)
        
        snapshot = self._last_snapshot()
        if snapshot is not None and name in snapshot:
            self._removed.add(name)
            self._changed += 1
            logger.debug(f"Scheduled {name} for removal")
            return self._current.remove_file(name)
        
        return Result.fail(messages.REMOVE_NOT_COMMITTED.format(name=name))
    
    def checkout_hash(self, hash: str) -> Result[Commit]:
        """Reset the current branch to an earlier commit."""
        return self._current.checkout(hash)
    
    # =========================================================================
    # Branch operations
    # =========================================================================
    
    def create(self, branch_name: str) -> Result[Branch]:
        """Create a branch from the current branch's history."""
        if branch_name in self._branches:
            return Result.fail(messages.BRANCH_EXISTS.format(branch=branch_name))
        
        branch = self._current.copy(branch_name)
        self._branches[branch_name] = branch
        logger.info(f"Created branch {branch_name} from {self._current.name} ({len(branch)} commits)")
        return Result.ok(messages.BRANCH_CREATED.format(branch=branch_name), branch)
    
    def checkout(self, branch_name: str) -> Result[Branch]:
        """Switch the current branch."""
        branch = self._branches.get(branch_name)
        if branch is None:
            return Result.fail(messages.BRANCH_NOT_EXISTS.format(branch=branch_name))
        
        self._current = branch
        logger.info(f"Switched to branch {branch_name}")
        return Result.ok(messages.BRANCH_SWITCHED.format(branch=branch_name), branch)
    
    def remove(self, branch_name: str) -> Result[Branch]:
        """Delete a branch. The current branch cannot be deleted."""
        if branch_name not in self._branches:
            return Result.fail(messages.BRANCH_NOT_EXISTS.format(branch=branch_name))
        if branch_name == self._current.name:
            return Result.fail(messages.BRANCH_CANNOT_REMOVE)
        
        branch = self._branches.pop(branch_name)
        logger.info(f"Removed branch {branch_name}")
        return Result.ok(messages.BRANCH_REMOVED.format(branch=branch_name), branch)
    
    def list(self) -> Result[None]:
        """List branch names, marking the current one."""
        blank = " " * len(self.config.current_marker)
        lines = []
        for name in sorted(self._branches):
            prefix = self.config.current_marker if name == self._current.name else blank
            lines.append(prefix + name)
        return Result.ok("\n".join(lines))
    
    # =========================================================================
    # History queries
    # =========================================================================
    
    def _no_commits(self) -> Result[Any]:
        return Result.fail(messages.BRANCH_NO_COMMITS.format(branch=self._current.name))
    
    def log(self) -> Result[None]:
        """Render the current branch's history, newest first."""
        if self._current.is_empty():
            return self._no_commits()
        
        entries = [
            commit.render(self.config.date_format)
            for commit in reversed(self._current.commits)
        ]
        return Result.ok("\n\n".join(entries))
    
    def head(self) -> Result[Commit]:
        """The latest commit of the current branch."""
        last = self._current.head
        if last is None:
            return self._no_commits()
        return Result.ok(last.message, last)
    
    def get(self, name: str) -> Result[Any]:
        """Read a committed object from the current branch's head."""
        snapshot = self._last_snapshot()
        if snapshot is None or name not in snapshot:
            return Result.fail(messages.REMOVE_NOT_COMMITTED.format(name=name))
        return Result.ok(messages.FOUND.format(name=name), snapshot[name])

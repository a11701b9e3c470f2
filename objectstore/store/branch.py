"""Branch data structure."""

from typing import Any

from loguru import logger

from objectstore.config.schema import StoreConfig
from objectstore.store import messages
from objectstore.store.commit import Commit
from objectstore.store.result import Result


class Branch:
    """
    A named, ordered history of commits (oldest first).
    
    History only grows by appending a commit and only shrinks by
    truncating a suffix on checkout. It is never reordered.
    
    Attributes:
        name: Unique branch name.
        commits: Commit history, oldest first.
        config: Store settings used when hashing new commits.
    """
    
    def __init__(
        self,
        name: str,
        commits: list[Commit] | None = None,
        config: StoreConfig | None = None,
    ):
        self.name = name
        self.commits: list[Commit] = commits if commits is not None else []
        self.config = config or StoreConfig()
    
    @property
    def head(self) -> Commit | None:
        """The latest commit, or None for an empty branch."""
        return self.commits[-1] if self.commits else None
    
    def is_empty(self) -> bool:
        return not self.commits
    
    def copy(self, name: str) -> "Branch":
        """
        Fork this branch under a new name.
        
        The new branch gets its own list holding the same commit
        instances, so later commits on either branch stay invisible to
        the other.
        """
        return Branch(name, list(self.commits), config=self.config)
    
    def make_new_commit(
        self,
        message: str,
        merged_snapshot: dict[str, Any],
        changed_count: int,
    ) -> Result[Commit]:
        """
        Append a commit holding ``merged_snapshot``.
        
        Args:
            message: Commit message.
            merged_snapshot: Complete object mapping for the new commit.
            changed_count: Number of staged changes, reported back.
        
        Returns:
            Successful result carrying the new commit.
        """
        commit = Commit(merged_snapshot, message)
        commit.assign_hash(
            algorithm=self.config.hash_algorithm,
            content_addressed=self.config.content_addressed,
            date_format=self.config.date_format,
        )
        self.commits.append(commit)
        logger.info(f"[{self.name}] {commit.hash[:8]} {message} ({changed_count} objects changed)")
        return Result.ok(
            messages.COMMIT.format(message=message, changed=changed_count),
            commit,
        )
    
    def remove_file(self, name: str) -> Result[Any]:
        """
        Report the committed value of an object scheduled for removal.
        
        Nothing is mutated here; the object is dropped by the next commit.
        
        Raises:
            ValueError: If the branch has no commits.
        """
        if self.head is None:
            raise ValueError(f"Branch {self.name} has no commits to remove {name} from")
        return Result.ok(messages.REMOVE.format(name=name), self.head.snapshot.get(name))
    
    def checkout(self, hash: str) -> Result[Commit]:
        """
        Reset the branch to the commit with the given hash.
        
        Every commit after it is discarded for good.
        """
        for index, commit in enumerate(self.commits):
            if commit.hash == hash:
                break
        else:
            return Result.fail(messages.COMMIT_NOT_EXISTS.format(hash=hash))
        
        dropped = len(self.commits) - index - 1
        del self.commits[index + 1:]
        if dropped:
            logger.info(f"[{self.name}] HEAD reset to {hash[:8]}, dropped {dropped} commit(s)")
        return Result.ok(messages.CHECKOUT.format(hash=hash), self.commits[-1])
    
    def __len__(self) -> int:
        return len(self.commits)
    
    def __str__(self) -> str:
        head_short = self.head.hash[:8] if self.head else "empty"
        return f"{self.name} -> {head_short}"
    
    def __repr__(self) -> str:
        return f"Branch(name={self.name}, commits={len(self.commits)})"

"""Repository facade over the branch manager."""

from typing import Any, Callable

from objectstore.config.schema import StoreConfig
from objectstore.store.branches import BranchManager
from objectstore.store.commit import Commit
from objectstore.store.result import Result


class Repository:
    """
    In-memory, git-like object store.
    
    Object-level operations live here; branch operations are reached
    through ``branch()``:
    
        repo = Repository()
        repo.add("README", "hello")
        repo.commit("Initial commit")
        repo.branch().create("dev")
    """
    
    def __init__(self, config: StoreConfig | None = None):
        self.config = config or StoreConfig()
        self._branch_manager = BranchManager(self.config)
    
    @property
    def branch_manager(self) -> BranchManager:
        return self._branch_manager
    
    def branch(self) -> BranchManager:
        return self._branch_manager
    
    def add(self, name: str, obj: Any) -> Result[Any]:
        return self._branch_manager.add(name, obj)
    
    def commit(self, message: str) -> Result[Commit]:
        return self._branch_manager.commit(message)
    
    def remove(self, name: str) -> Result[Any]:
        return self._branch_manager.remove_file(name)
    
    def checkout(self, hash: str) -> Result[Commit]:
        return self._branch_manager.checkout_hash(hash)
    
    def log(self) -> Result[None]:
        return self._branch_manager.log()
    
    def head(self) -> Result[Commit]:
        return self._branch_manager.head()
    
    def get(self, name: str) -> Result[Any]:
        return self._branch_manager.get(name)
    
    def __repr__(self) -> str:
        return f"Repository(branch={self._branch_manager.current_branch.name})"


def init(
    configure: Callable[[Repository], Any] | None = None,
    config: StoreConfig | None = None,
) -> Repository:
    """
    Create a repository, optionally running a setup routine on it first.
    
    Args:
        configure: Called with the new repository before it is returned.
        config: Store settings.
    
    Returns:
        The new repository.
    """
    repo = Repository(config)
    if configure is not None:
        configure(repo)
    return repo

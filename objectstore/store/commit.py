"""Commit data structure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from objectstore.store import messages
from objectstore.store.hash import compute_digest, snapshot_digest

DATE_FORMAT = "%a %b %d %H:%M %Y %z"


def _now() -> datetime:
    return datetime.now().astimezone()


def compute_commit_hash(
    timestamp: datetime,
    message: str,
    snapshot: dict[str, Any] | None = None,
    algorithm: str = "sha1",
    date_format: str = DATE_FORMAT,
) -> str:
    """
    Compute the identifier of a commit.
    
    The identifier covers the formatted timestamp followed by the message.
    Snapshot contents are only folded in when ``snapshot`` is given, so two
    commits with the same message made within the same minute collide
    unless content addressing is enabled.
    
    Args:
        timestamp: Commit creation time.
        message: Commit message.
        snapshot: Optional snapshot to include in the hashed text.
        algorithm: hashlib algorithm name.
        date_format: strftime format applied to the timestamp.
    
    Returns:
        Hexadecimal digest.
    """
    text = timestamp.strftime(date_format) + message
    if snapshot is not None:
        text += snapshot_digest(snapshot, algorithm)
    return compute_digest(text, algorithm)


@dataclass
class Commit:
    """
    A full snapshot of every tracked object at one point in history.
    
    Commits never store deltas: ``snapshot`` is the complete name -> object
    mapping. Apart from the hash, which is assigned right after
    construction, a commit does not change once created, so branches may
    share commit instances freely.
    
    Attributes:
        snapshot: Complete mapping of object names to objects.
        message: Human-readable description.
        timestamp: When the commit was created.
        hash: Identifier, empty until ``assign_hash`` runs.
    """
    
    snapshot: dict[str, Any]
    message: str
    timestamp: datetime = field(default_factory=_now)
    hash: str = field(default="", init=False)
    
    def __post_init__(self) -> None:
        # Detach from the caller's mapping
        self.snapshot = dict(self.snapshot)
    
    def assign_hash(
        self,
        algorithm: str = "sha1",
        content_addressed: bool = False,
        date_format: str = DATE_FORMAT,
    ) -> str:
        """Compute and store this commit's hash."""
        self.hash = compute_commit_hash(
            self.timestamp,
            self.message,
            snapshot=self.snapshot if content_addressed else None,
            algorithm=algorithm,
            date_format=date_format,
        )
        return self.hash
    
    def objects(self) -> list[Any]:
        """All objects tracked by this commit."""
        return list(self.snapshot.values())
    
    def render(self, date_format: str = DATE_FORMAT) -> str:
        """Format the commit as a log entry."""
        return messages.LOG_ENTRY.format(
            hash=self.hash,
            date=self.timestamp.strftime(date_format),
            message=self.message,
        )
    
    def to_dict(self) -> dict[str, Any]:
        return {
            "hash": self.hash,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "objects": sorted(self.snapshot),
        }
    
    def __str__(self) -> str:
        return self.render()
    
    def __repr__(self) -> str:
        short_hash = self.hash[:8] if self.hash else "??????"
        return f"Commit(hash={short_hash}..., message={self.message!r}, objects={len(self.snapshot)})"

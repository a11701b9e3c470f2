"""Configuration schema using Pydantic."""

import hashlib

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StoreConfig(BaseModel):
    """Object store configuration."""
    default_branch: str = "master"
    hash_algorithm: str = "sha1"
    content_addressed: bool = False  # Also hash snapshot contents, not only date + message
    date_format: str = "%a %b %d %H:%M %Y %z"
    current_marker: str = "* "  # Prefix of the current branch in branch listings

    @field_validator("default_branch")
    @classmethod
    def validate_default_branch(cls, v: str) -> str:
        """Validate the default branch name is not blank."""
        if not v.strip():
            raise ValueError("default_branch must not be empty")
        return v

    @field_validator("hash_algorithm")
    @classmethod
    def validate_hash_algorithm(cls, v: str) -> str:
        """Validate the algorithm is available in hashlib and has a fixed digest size."""
        v = v.lower()
        if v not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash algorithm: {v}")
        try:
            hashlib.new(v).hexdigest()
        except ValueError:
            raise ValueError(f"Unsupported hash algorithm: {v}")
        except TypeError:
            # shake_* digests need an explicit length
            raise ValueError(f"Hash algorithm {v} has no fixed digest size")
        return v

    @field_validator("current_marker")
    @classmethod
    def validate_current_marker(cls, v: str) -> str:
        """Validate the marker is exactly two characters wide."""
        if len(v) != 2:
            raise ValueError("current_marker must be exactly two characters")
        return v


class CliConfig(BaseModel):
    """Command-line front end configuration."""
    keep_going: bool = False  # Continue a script after a failed command
    verbose: bool = False


class Config(BaseSettings):
    """Root configuration for objectstore."""
    store: StoreConfig = Field(default_factory=StoreConfig)
    cli: CliConfig = Field(default_factory=CliConfig)

    model_config = SettingsConfigDict(
        env_prefix="OBJECTSTORE_",
        env_nested_delimiter="__",
    )

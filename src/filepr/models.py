"""Pydantic models for filepr configuration data."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _default_if_blank(value: object, default: str) -> object:
    if value is None:
        return default
    if isinstance(value, str):
        normalized = value.strip()
        return normalized or default
    return value


class SelectorSection(BaseModel):
    """Fuzzy finder settings.

    Attributes:
        path: Finder executable (default ``fzf``).
        height: Value passed to ``--height``.

    Example:
        >>> SelectorSection(height="60%").path
        'fzf'
    """

    model_config = ConfigDict(extra="forbid")

    path: str = "fzf"
    height: str = "40%"

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        return _default_if_blank(value, "fzf")

    @field_validator("height", mode="before")
    @classmethod
    def normalize_height(cls, value: object) -> object:
        return _default_if_blank(value, "40%")


class GitSection(BaseModel):
    """Git settings.

    Attributes:
        path: Git executable (default ``git``).
        remote: Remote the new branch is pushed to.
    """

    model_config = ConfigDict(extra="forbid")

    path: str = "git"
    remote: str = "origin"

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        return _default_if_blank(value, "git")

    @field_validator("remote", mode="before")
    @classmethod
    def normalize_remote(cls, value: object) -> object:
        return _default_if_blank(value, "origin")


class GithubSection(BaseModel):
    """GitHub CLI settings.

    Attributes:
        path: ``gh`` executable.
        browse: Whether to open the repository in the browser at the end.
    """

    model_config = ConfigDict(extra="forbid")

    path: str = "gh"
    browse: bool = True

    @field_validator("path", mode="before")
    @classmethod
    def normalize_path(cls, value: object) -> object:
        return _default_if_blank(value, "gh")


class FileprConfig(BaseModel):
    """Top-level configuration.

    Example:
        >>> FileprConfig().git.remote
        'origin'
    """

    model_config = ConfigDict(extra="forbid")

    selector: SelectorSection = Field(default_factory=SelectorSection)
    git: GitSection = Field(default_factory=GitSection)
    github: GithubSection = Field(default_factory=GithubSection)

    def required_tools(self) -> tuple[str, ...]:
        return (self.selector.path, self.git.path, self.github.path)

"""Lock file models.

This module defines the Pydantic models for the resolver's lock file,
which names every vendored project and the packages the consuming
project actually imports from it.
"""

from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LockedProject(BaseModel):
    """A single resolved dependency.

    Attributes:
        name: Import path of the project root.
        version: Resolved version, if any.
        revision: Resolved revision, if any.
        packages: Package paths used by the consuming project; "." is the root.
    """

    model_config = ConfigDict(extra="ignore")

    name: Annotated[str, Field(min_length=1, description="Project root import path")]
    version: Annotated[str | None, Field(description="Resolved version")] = None
    revision: Annotated[str | None, Field(description="Resolved revision")] = None
    packages: Annotated[
        list[str],
        Field(default_factory=list, description="Used package paths"),
    ]

    @field_validator("packages")
    @classmethod
    def validate_packages(cls, v: list[str]) -> list[str]:
        """Validate that package paths are non-empty."""
        if any(not pkg for pkg in v):
            msg = "Package paths cannot be empty"
            raise ValueError(msg)
        return v


class Lock(BaseModel):
    """Resolver lock file.

    Attributes:
        projects: Locked projects, in lock file order.
    """

    model_config = ConfigDict(extra="ignore")

    projects: Annotated[list[LockedProject], Field(default_factory=list)]

    @model_validator(mode="after")
    def validate_unique_projects(self) -> Self:
        """Validate that each project is locked at most once."""
        names = [p.name for p in self.projects]
        duplicates = {name for name in names if names.count(name) > 1}
        if duplicates:
            msg = f"Projects locked more than once: {sorted(duplicates)}"
            raise ValueError(msg)
        return self

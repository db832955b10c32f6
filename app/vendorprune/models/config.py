"""Prune configuration models.

This module defines the Pydantic models representing the prune
configuration file: global prune flags plus per-project overrides.

Example:
    [prune]
    go-tests = true
    unused-packages = true

    [[prune.project]]
    name = "github.com/foo/bar"
    non-go = true
"""

from typing import Annotated, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from vendorprune.prune.models import PruneOptions


class ProjectPruneConfig(BaseModel):
    """Prune flag overrides for a single vendored project.

    Flags left unset inherit the global value.

    Attributes:
        name: Import path of the project root (e.g., "github.com/foo/bar").
        nested_vendor: Override for nested vendor directory pruning.
        unused_packages: Override for unused package pruning.
        non_go: Override for non-Go file pruning.
        go_tests: Override for Go test file pruning.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: Annotated[str, Field(min_length=1, description="Project root import path")]
    nested_vendor: Annotated[bool | None, Field(alias="nested-vendor")] = None
    unused_packages: Annotated[bool | None, Field(alias="unused-packages")] = None
    non_go: Annotated[bool | None, Field(alias="non-go")] = None
    go_tests: Annotated[bool | None, Field(alias="go-tests")] = None


class PruneConfig(BaseModel):
    """The [prune] section of the configuration file.

    Attributes:
        nested_vendor: Remove vendor directories nested in dependencies.
        unused_packages: Remove packages the project does not import.
        non_go: Remove files that are not build inputs or legal files.
        go_tests: Remove Go test files.
        projects: Per-project overrides.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    nested_vendor: Annotated[bool, Field(alias="nested-vendor")] = True
    unused_packages: Annotated[bool, Field(alias="unused-packages")] = False
    non_go: Annotated[bool, Field(alias="non-go")] = False
    go_tests: Annotated[bool, Field(alias="go-tests")] = False
    projects: Annotated[
        list[ProjectPruneConfig],
        Field(default_factory=list, alias="project", description="Per-project overrides"),
    ]

    @model_validator(mode="after")
    def validate_unique_projects(self) -> Self:
        """Validate that each project is configured at most once."""
        seen: set[str] = set()
        duplicates: set[str] = set()
        for project in self.projects:
            if project.name in seen:
                duplicates.add(project.name)
            seen.add(project.name)
        if duplicates:
            msg = f"Projects configured more than once: {sorted(duplicates)}"
            raise ValueError(msg)
        return self

    def default_options(self) -> PruneOptions:
        """Return the options applied to projects without overrides."""
        return PruneOptions.from_flags(
            nested_vendor=self.nested_vendor,
            unused_packages=self.unused_packages,
            non_go=self.non_go,
            go_tests=self.go_tests,
        )

    def options_for(self, name: str) -> PruneOptions:
        """Resolve the prune options for one project.

        Args:
            name: Project root import path.

        Returns:
            Global options with the project's overrides applied.
        """
        project = next((p for p in self.projects if p.name == name), None)
        if project is None:
            return self.default_options()

        def pick(override: bool | None, default: bool) -> bool:
            return default if override is None else override

        return PruneOptions.from_flags(
            nested_vendor=pick(project.nested_vendor, self.nested_vendor),
            unused_packages=pick(project.unused_packages, self.unused_packages),
            non_go=pick(project.non_go, self.non_go),
            go_tests=pick(project.go_tests, self.go_tests),
        )


class Config(BaseModel):
    """Complete prune configuration file.

    Attributes:
        prune: Global prune flags and per-project overrides.
    """

    model_config = ConfigDict(extra="forbid")

    prune: Annotated[PruneConfig, Field(default_factory=PruneConfig)]

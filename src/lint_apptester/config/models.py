"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, lint-apptester.toml only
contains overrides. A working setup needs the four [paths] segments and
[locator] class_path.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from lint_apptester.domain.roles import DirectoryRole

DEFAULT_EXTENSIONS = ("feature", "java", "js")


class PathsConfig(BaseModel):
    """[paths] section.

    Each segment sits between the project root and the feature name, so
    ``/src/test/java/steps/`` resolves to ``<root>/src/test/java/steps/<feature>``.
    """

    model_config = {"frozen": True}

    features: str | None = None
    interactions: str | None = None
    pages: str | None = None
    steps: str | None = None

    def segment_for(self, role: DirectoryRole) -> str | None:
        return getattr(self, role.value)


class LocatorConfig(BaseModel):
    """[locator] section."""

    model_config = {"frozen": True}

    class_path: str | None = None


class ScanConfig(BaseModel):
    """[scan] section."""

    model_config = {"frozen": True}

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS

    @field_validator("extensions")
    @classmethod
    def _strip_dots(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(ext.lstrip(".").lower() for ext in value)


class ProjectConfig(BaseModel):
    """[project] section."""

    model_config = {"frozen": True}

    repository_name: str | None = None


class LintConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    paths: PathsConfig = Field(default_factory=PathsConfig)
    locator: LocatorConfig = Field(default_factory=LocatorConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    project: ProjectConfig = Field(default_factory=ProjectConfig)

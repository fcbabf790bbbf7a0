"""Feature layout resolution.

A feature lives in four role-tagged subdirectories. Each path is the
project root, the role's configured segment and the lowercased feature
name joined as plain strings, so segments carry their own separators.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lint_apptester.config.models import PathsConfig
from lint_apptester.domain.roles import DirectoryRole
from lint_apptester.errors import ConfigurationError, LayoutError, MissingDirectoryError


@dataclass(frozen=True)
class Subdirectory:
    """A role-tagged directory that existed when the layout was resolved."""

    path: Path
    role: DirectoryRole


@dataclass(frozen=True)
class ProjectLayout:
    """The resolved subdirectories for one feature, in role order."""

    feature: str
    subdirectories: tuple[Subdirectory, ...]

    def subdirectory(self, role: DirectoryRole) -> Subdirectory:
        for subdir in self.subdirectories:
            if subdir.role is role:
                return subdir
        raise KeyError(role)


def normalize_feature(feature: str) -> str:
    """Lowercase *feature*; surrounding whitespace is kept as part of the name."""
    if not feature.strip():
        msg = "Feature name must not be empty"
        raise LayoutError(msg)
    return feature.lower()


def resolve_layout(project_root: Path | str, feature: str, paths: PathsConfig) -> ProjectLayout:
    """Locate every role subdirectory of *feature* under *project_root*.

    Raises:
        LayoutError: *feature* is empty.
        ConfigurationError: a role has no configured path segment.
        MissingDirectoryError: a computed subdirectory does not exist.
    """
    normalized = normalize_feature(feature)
    subdirs: list[Subdirectory] = []
    for role in DirectoryRole:
        segment = paths.segment_for(role)
        if segment is None:
            env_name = f"LINT_APPTESTER_PATHS__{role.value.upper()}"
            msg = f"No path configured for {role.label} (set [paths] {role.value} or {env_name})"
            raise ConfigurationError(msg)
        path = Path(f"{project_root}{segment}{normalized}")
        if not path.exists():
            raise MissingDirectoryError(path)
        subdirs.append(Subdirectory(path=path, role=role))
    return ProjectLayout(feature=normalized, subdirectories=tuple(subdirs))

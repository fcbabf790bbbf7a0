"""Tests for config section models."""

import pytest

from lint_apptester.config.models import (
    DEFAULT_EXTENSIONS,
    LintConfig,
    LocatorConfig,
    PathsConfig,
    ScanConfig,
)
from lint_apptester.domain.roles import DirectoryRole


class TestPathsConfig:
    def test_defaults_are_unset(self) -> None:
        paths = PathsConfig()
        assert all(paths.segment_for(role) is None for role in DirectoryRole)

    def test_segment_for_role(self) -> None:
        paths = PathsConfig(pages="/pages/", steps="/steps/")
        assert paths.segment_for(DirectoryRole.PAGES) == "/pages/"
        assert paths.segment_for(DirectoryRole.STEPS) == "/steps/"
        assert paths.segment_for(DirectoryRole.FEATURES) is None

    def test_frozen(self) -> None:
        with pytest.raises(Exception):
            PathsConfig().pages = "/x/"  # type: ignore[misc]


class TestScanConfig:
    def test_default_extensions(self) -> None:
        assert ScanConfig().extensions == DEFAULT_EXTENSIONS == ("feature", "java", "js")

    def test_extensions_are_normalized(self) -> None:
        assert ScanConfig(extensions=(".JAVA", "kt")).extensions == ("java", "kt")


def test_root_config_composes_sections() -> None:
    config = LintConfig.model_validate(
        {"paths": {"steps": "/steps/"}, "locator": {"class_path": "com.app.Locator"}}
    )
    assert config.paths.steps == "/steps/"
    assert config.locator == LocatorConfig(class_path="com.app.Locator")
    assert config.scan.extensions == DEFAULT_EXTENSIONS
    assert config.project.repository_name is None

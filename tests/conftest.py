"""Shared pytest fixtures and test helpers for lint-apptester tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lint_apptester.config.models import LocatorConfig, PathsConfig
from lint_apptester.config.settings import LintSettings

LOCATOR = "com.app.Locator"
FEATURE = "login"

PATHS = PathsConfig(
    features="/src/test/resources/features/",
    interactions="/src/test/java/interactions/",
    pages="/src/test/java/pages/",
    steps="/src/test/java/steps/",
)

CONFIG_TOML = f"""\
[paths]
features = "{PATHS.features}"
interactions = "{PATHS.interactions}"
pages = "{PATHS.pages}"
steps = "{PATHS.steps}"

[locator]
class_path = "{LOCATOR}"
"""

# ---------------------------------------------------------------------------
# Compliant sample sources, one per role
# ---------------------------------------------------------------------------

FEATURE_SOURCE = """\
Feature: Login
  Scenario: Valid user
    Given the user opens the app
"""

INTERACTION_SOURCE = """\
package com.app.interactions;

import com.app.pages.LoginPage;

public class LoginInteraction {
    // System.out.println("debug");
    public void login() {
        log.info("logging in");
    }
}
"""

PAGE_SOURCE = """\
package com.app.pages;

public class LoginPage {
    private final Element button = Locator.findPlatform("login");
    private final Element rows = Locator.findChildren("rows");
}
"""

STEP_SOURCE = """\
package com.app.steps;

import com.app.interactions.LoginInteraction;

public class LoginSteps {
    public void userLogsIn() {
        interaction.login();
    }
}
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop LINT_APPTESTER_* variables so the host environment never leaks in."""
    for name in list(os.environ):
        if name.startswith("LINT_APPTESTER_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Temporary project with every role directory for the ``login`` feature.

    Each directory holds one source file that satisfies every rule.
    """
    root = tmp_path / "app-tests"
    write_source(root, PATHS.features, "login.feature", FEATURE_SOURCE)
    write_source(root, PATHS.interactions, "LoginInteraction.java", INTERACTION_SOURCE)
    write_source(root, PATHS.pages, "LoginPage.java", PAGE_SOURCE)
    write_source(root, PATHS.steps, "LoginSteps.java", STEP_SOURCE)
    return root


@pytest.fixture
def settings(project_root: Path) -> LintSettings:
    """Settings pointing at ``project_root`` with every path configured."""
    return LintSettings.from_cli(
        cwd=project_root,
        project_root=project_root,
        paths=PATHS,
        locator=LocatorConfig(class_path=LOCATOR),
    )


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Write lint-apptester.toml into the project and chdir there.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command
    test classes.
    """
    (project_root / "lint-apptester.toml").write_text(CONFIG_TOML, encoding="utf-8")
    monkeypatch.chdir(project_root)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def role_dir(root: Path, segment: str | None, feature: str = FEATURE) -> Path:
    """Directory for *segment* under *root*, mirroring layout resolution."""
    assert segment is not None
    return Path(f"{root}{segment}{feature}")


def write_source(
    root: Path, segment: str | None, name: str, text: str, feature: str = FEATURE
) -> Path:
    """Write *text* to ``<root><segment><feature>/<name>``, creating directories."""
    directory = role_dir(root, segment, feature)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(text, encoding="utf-8")
    return path

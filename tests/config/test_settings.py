"""Tests for LintSettings — unified settings with TOML and env sources."""

from pathlib import Path

import click
import pytest

from lint_apptester.config.settings import LintSettings


class TestLintSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = LintSettings.from_cli(cwd=tmp_path)
        assert settings.project_root is None
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.verbose is False
        assert settings.paths.steps is None
        assert settings.locator.class_path is None
        assert settings.scan.extensions == ("feature", "java", "js")

    def test_frozen(self, tmp_path: Path) -> None:
        settings = LintSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_none_flags_are_dropped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINT_APPTESTER_PROJECT_ROOT", str(tmp_path))
        settings = LintSettings.from_cli(cwd=tmp_path, project_root=None)
        assert settings.project_root == tmp_path


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "lint-apptester.toml").write_text(
            '[paths]\nsteps = "/steps/"\n[locator]\nclass_path = "com.app.Locator"\n',
            encoding="utf-8",
        )
        settings = LintSettings.from_cli(cwd=tmp_path)
        assert settings.paths.steps == "/steps/"
        assert settings.paths.pages is None
        assert settings.locator.class_path == "com.app.Locator"
        assert settings.config_path == (tmp_path / "lint-apptester.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "lint.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[project]\nrepository_name = "app-tests"\n', encoding="utf-8")
        settings = LintSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.project.repository_name == "app-tests"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "lint-apptester.toml").write_text("[paths\n", encoding="utf-8")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LintSettings.from_cli(cwd=tmp_path)


class TestEnvSource:
    def test_nested_env_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINT_APPTESTER_PATHS__PAGES", "/pages/")
        monkeypatch.setenv("LINT_APPTESTER_LOCATOR__CLASS_PATH", "com.app.Locator")
        settings = LintSettings.from_cli(cwd=tmp_path)
        assert settings.paths.pages == "/pages/"
        assert settings.locator.class_path == "com.app.Locator"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "lint-apptester.toml").write_text(
            '[locator]\nclass_path = "from.toml"\n', encoding="utf-8"
        )
        monkeypatch.setenv("LINT_APPTESTER_LOCATOR__CLASS_PATH", "from.env")
        settings = LintSettings.from_cli(cwd=tmp_path)
        assert settings.locator.class_path == "from.env"

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LINT_APPTESTER_QUIET", "true")
        settings = LintSettings.from_cli(cwd=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_dotenv_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".env").write_text(
            "LINT_APPTESTER_PATHS__STEPS=/steps/\nUNRELATED=1\n", encoding="utf-8"
        )
        monkeypatch.chdir(tmp_path)
        settings = LintSettings.from_cli(cwd=tmp_path)
        assert settings.paths.steps == "/steps/"

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_widget_export import cli as cli_module
from lib_widget_export import config as export_config


@pytest.fixture(autouse=True)
def _reset_dotenv_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset shared dotenv state around each test."""

    monkeypatch.delenv(export_config.LOG_LEVEL_ENV_VAR, raising=False)
    export_config._reset_dotenv_state_for_testing()
    yield
    export_config._reset_dotenv_state_for_testing()


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Loading the nearest .env injects values into the environment."""

    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("LIB_WIDGET_EXPORT_PATH=dotenv.csv\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv(export_config.PATH_ENV_VAR, raising=False)

    loaded = export_config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ[export_config.PATH_ENV_VAR] == "dotenv.csv"
    assert export_config.load_settings().default_path == Path("dotenv.csv")

    os.environ.pop(export_config.PATH_ENV_VAR, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Existing environment variables keep precedence over .env entries."""

    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".env").write_text("LIB_WIDGET_EXPORT_PATH=dotenv.csv\n")
    monkeypatch.chdir(nested)
    monkeypatch.setenv(export_config.PATH_ENV_VAR, "real.csv")

    result = export_config.enable_dotenv()

    assert result is not None
    assert os.environ[export_config.PATH_ENV_VAR] == "real.csv"


def test_enable_dotenv_runs_once_per_process(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("LIB_WIDGET_EXPORT_PATH=first.csv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(export_config.PATH_ENV_VAR, raising=False)

    first = export_config.enable_dotenv()
    monkeypatch.delenv(export_config.PATH_ENV_VAR)
    env_file.write_text("LIB_WIDGET_EXPORT_PATH=second.csv\n")
    second = export_config.enable_dotenv()

    assert first == second == env_file.resolve()
    assert export_config.PATH_ENV_VAR not in os.environ


@pytest.mark.parametrize(
    "explicit, env_value, expected",
    [
        (True, None, True),
        (False, "1", False),
        (None, "on", True),
        (None, " TRUE ", True),
        (None, "0", False),
        (None, "", False),
        (None, None, False),
    ],
)
def test_should_use_dotenv_precedence(explicit: bool | None, env_value: str | None, expected: bool) -> None:
    assert export_config.should_use_dotenv(explicit=explicit, env_value=env_value) is expected


def test_load_settings_defaults() -> None:
    settings = export_config.load_settings({})

    assert settings.default_path == Path("widgets.csv")
    assert settings.log_level == "WARNING"


def test_load_settings_reads_environment_mapping() -> None:
    settings = export_config.load_settings(
        {
            export_config.PATH_ENV_VAR: " exports/widgets.csv ",
            export_config.LOG_LEVEL_ENV_VAR: "debug",
        }
    )

    assert settings.default_path == Path("exports/widgets.csv")
    assert settings.log_level == "DEBUG"
    assert settings.log_level_number == 10


def test_load_settings_rejects_unknown_log_level() -> None:
    with pytest.raises(ValueError, match="Invalid log level"):
        export_config.load_settings({export_config.LOG_LEVEL_ENV_VAR: "chatty"})


def test_cli_dotenv_toggle_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI flag wins over environment toggle when deciding whether to load .env."""

    runner = CliRunner()

    calls: list[tuple[tuple[object, ...], dict[str, object]]] = []

    def record_enable(*args: object, **kwargs: object) -> None:
        calls.append((args, kwargs))

    monkeypatch.setattr(export_config, "enable_dotenv", record_enable)
    monkeypatch.delenv(export_config.DOTENV_ENV_VAR, raising=False)

    result = runner.invoke(cli_module.cli, ["--use-dotenv", "info"])
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    env = {export_config.DOTENV_ENV_VAR: "1"}
    result = runner.invoke(cli_module.cli, ["info"], env=env)
    assert result.exit_code == 0
    assert len(calls) == 1

    calls.clear()
    result = runner.invoke(cli_module.cli, ["--no-use-dotenv", "info"], env=env)
    assert result.exit_code == 0
    assert calls == []

    calls.clear()
    result = runner.invoke(cli_module.cli, ["info"])
    assert result.exit_code == 0
    assert calls == []


def test_load_settings_explicit_log_level_skips_environment() -> None:
    settings = export_config.load_settings(
        {export_config.LOG_LEVEL_ENV_VAR: "chatty"},
        log_level="error",
    )

    assert settings.log_level == "ERROR"
    assert settings.log_level_number == 40


def test_load_settings_rejects_unknown_explicit_log_level() -> None:
    with pytest.raises(ValueError, match="Invalid log level"):
        export_config.load_settings({}, log_level="chatty")

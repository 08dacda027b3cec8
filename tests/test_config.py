from __future__ import annotations

from pathlib import Path

import pytest

from minishell.config import AppConfig, load_config, load_config_or_defaults
from minishell.errors import ConfigurationError


def test_defaults(tmp_path: Path) -> None:
    config = load_config(config_dir=tmp_path, environ={})

    assert config.prompt == "$ "
    assert config.log_level == "WARNING"
    assert config.log_file_path is None
    assert config.enable_completion is True
    assert config.frontend == "auto"
    assert config.history_file_path == Path("~/.minishell_history").expanduser().resolve()
    assert config.extra == {}


def test_toml_nested_keys_are_flattened(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text(
        'prompt = "> "\n[log]\nlevel = "debug"\n', encoding="utf-8")

    config = load_config(config_dir=tmp_path, environ={})

    assert config.prompt == "> "
    assert config.log_level == "DEBUG"


def test_ini_and_json_sources(tmp_path: Path) -> None:
    (tmp_path / "config.ini").write_text(
        "[shell]\nfrontend = plain\nenable_completion = no\n", encoding="utf-8")
    (tmp_path / "config.json").write_text('{"LOG_LEVEL": "error"}', encoding="utf-8")

    config = load_config(config_dir=tmp_path, environ={})

    assert config.frontend == "plain"
    assert config.enable_completion is False
    assert config.log_level == "ERROR"


def test_toml_overrides_json(tmp_path: Path) -> None:
    (tmp_path / "config.json").write_text('{"PROMPT": "json> "}', encoding="utf-8")
    (tmp_path / "config.toml").write_text('PROMPT = "toml> "\n', encoding="utf-8")

    assert load_config(config_dir=tmp_path, environ={}).prompt == "toml> "


def test_environment_overrides_files(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('PROMPT = "file> "\n', encoding="utf-8")

    config = load_config(
        config_dir=tmp_path,
        environ={"MINISHELL_PROMPT": "env> ", "PROMPT": "ignored", "PATH": "/bin"},
    )

    assert config.prompt == "env> "
    assert "PATH" not in config.extra


def test_paths_are_expanded(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = load_config(
        config_dir=tmp_path,
        environ={"MINISHELL_LOG_FILE_PATH": "~/shell.log", "MINISHELL_HISTORY_FILE_PATH": "none"},
    )

    assert config.log_file_path == (tmp_path / "shell.log").resolve()
    assert config.history_file_path is None


def test_unknown_keys_are_kept(tmp_path: Path) -> None:
    config = load_config(config_dir=tmp_path, environ={"MINISHELL_COLOR": "1"})
    assert config.extra == {"COLOR": "1"}


@pytest.mark.parametrize(
    "environ",
    [
        {"MINISHELL_ENABLE_COMPLETION": "maybe"},
        {"MINISHELL_LOG_LEVEL": "loud"},
        {"MINISHELL_FRONTEND": "curses"},
    ],
)
def test_invalid_values_raise(tmp_path: Path, environ: dict[str, str]) -> None:
    with pytest.raises(ConfigurationError):
        load_config(config_dir=tmp_path, environ=environ)


def test_malformed_file_raises(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("prompt = \n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(config_dir=tmp_path, environ={})


def test_fallback_to_defaults(tmp_path: Path) -> None:
    config = load_config_or_defaults(
        config_dir=tmp_path, environ={"MINISHELL_FRONTEND": "curses"})
    assert config.frontend == "auto"
    assert isinstance(config, AppConfig)

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

import pytest

from minishell.commands import Builtin, RedirectTarget
from minishell.ui.sink import OutputSink


def _run(builtin: Builtin, *args: str) -> None:
    with OutputSink() as sink:
        builtin.execute(list(args), sink)


def test_lookup_is_exact_and_case_sensitive() -> None:
    assert Builtin.lookup("echo") is Builtin.ECHO
    assert Builtin.lookup("cd") is Builtin.CD
    assert Builtin.lookup("ECHO") is None
    assert Builtin.lookup("ls") is None
    assert Builtin.lookup("") is None


def test_names_cover_the_closed_set() -> None:
    assert sorted(Builtin.names()) == ["cd", "echo", "exit", "pwd", "type"]


def test_echo_joins_with_single_spaces(capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.ECHO, "hello", "big  world")
    assert capsys.readouterr().out == "hello big  world\n"


def test_echo_without_arguments_prints_empty_line(capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.ECHO)
    assert capsys.readouterr().out == "\n"


def test_echo_into_redirect(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    target = tmp_path / "out.txt"
    with OutputSink(RedirectTarget(str(target))) as sink:
        Builtin.ECHO.execute(["to", "file"], sink)
    assert target.read_text(encoding="utf-8") == "to file\n"
    assert capsys.readouterr().out == ""


def test_exit_zero_terminates() -> None:
    with pytest.raises(SystemExit) as excinfo:
        _run(Builtin.EXIT, "0")
    assert excinfo.value.code == 0


@pytest.mark.parametrize("args", [(), ("1",), ("00",), ("abc",)])
def test_exit_with_other_arguments_is_a_no_op(args: tuple[str, ...], capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.EXIT, *args)
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


@pytest.mark.parametrize("name", ["exit", "echo", "type", "pwd", "cd"])
def test_type_reports_builtins(name: str, capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.TYPE, name)
    assert capsys.readouterr().out == f"{name} is a shell builtin\n"


def test_type_reports_path_of_executables(
    bin_dir: Path,
    make_script: Callable[..., Path],
    capsys: pytest.CaptureFixture[str],
) -> None:
    script = make_script(bin_dir, "tool", "true")
    _run(Builtin.TYPE, "tool")
    assert capsys.readouterr().out == f"tool is {script}\n"


def test_type_reports_not_found(bin_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.TYPE, "doesnotexist123")
    assert capsys.readouterr().out == "doesnotexist123: not found\n"


def test_type_without_argument_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.TYPE)
    assert capsys.readouterr().out == ""


def test_pwd_prints_working_directory(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.PWD)
    assert capsys.readouterr().out == f"{os.getcwd()}\n"


def test_cd_changes_directory(workdir: Path) -> None:
    (workdir / "sub").mkdir()
    _run(Builtin.CD, "sub")
    assert Path.cwd() == (workdir / "sub").resolve()

    _run(Builtin.CD, "..")
    assert Path.cwd() == workdir.resolve()


def test_cd_tilde_goes_home(workdir: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    _run(Builtin.CD, "~")
    assert Path.cwd() == home.resolve()


def test_cd_tilde_without_home_is_taken_literally(workdir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("HOME", raising=False)
    (workdir / "~").mkdir()

    _run(Builtin.CD, "~")
    assert Path.cwd() == (workdir / "~").resolve()


def test_cd_failure_reports_and_stays(workdir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _run(Builtin.CD, "/nonexistent/path")

    captured = capsys.readouterr()
    assert captured.err == "cd: /nonexistent/path: No such file or directory\n"
    assert captured.out == ""
    assert Path.cwd() == workdir.resolve()


def test_cd_failure_goes_to_stderr_redirect(workdir: Path) -> None:
    target = workdir / "err.txt"
    with OutputSink(stderr_redirect=RedirectTarget(str(target))) as sink:
        Builtin.CD.execute(["missing"], sink)
    assert target.read_text(encoding="utf-8") == "cd: missing: No such file or directory\n"


def test_cd_without_argument_is_a_no_op(workdir: Path) -> None:
    _run(Builtin.CD)
    assert Path.cwd() == workdir.resolve()

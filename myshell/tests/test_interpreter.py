"""Tests for evaluating parsed lines."""

import io
import os

import pytest

from myshell.exceptions import HomeDirectoryException, ShellRuntimeException
from myshell.interpreter import Interpreter, Status
from myshell.parser import parse_line
from myshell.tests.utils import FakeLauncher, run_source


def test_empty_line_does_nothing(workdir):
    status, out, launcher = run_source("")
    assert status is Status.OK
    assert out == b""
    assert not launcher.calls


def test_exit_stops(workdir):
    status, out, _ = run_source("exit")
    assert status is Status.EXIT
    assert out == b""


def test_exit_short_circuits_sequence(workdir):
    status, out, launcher = run_source("echo a ; exit ; echo b")
    assert status is Status.EXIT
    assert out == b"a\n"
    assert [call[0] for call in launcher.calls] == ["echo"]


def test_sequence_runs_left_to_right(workdir):
    status, out, _ = run_source("echo a ; echo b")
    assert status is Status.OK
    assert out == b"a\nb\n"


def test_error_short_circuits_sequence(workdir):
    launcher = FakeLauncher()
    with pytest.raises(ShellRuntimeException, match="Failed to run 'fail'"):
        run_source("echo a ; fail ; echo b", launcher)
    assert [call[0] for call in launcher.calls] == ["echo", "fail"]


def test_launcher_receives_arguments_and_cwd(workdir):
    _, _, launcher = run_source("ls -la some/dir")
    assert launcher.calls == [("ls", ["-la", "some/dir"], os.getcwd())]


def test_pwd(workdir):
    _, out, _ = run_source("pwd")
    assert out == os.fsencode(os.getcwd()) + b"\n"


def test_cd_with_path(workdir):
    target = workdir / "sub"
    target.mkdir()
    run_source(f"cd {target}")
    assert os.path.samefile(os.getcwd(), target)


def test_cd_relative_then_pwd(workdir):
    (workdir / "sub").mkdir()
    _, out, _ = run_source("cd sub ; pwd")
    assert os.path.samefile(out.decode().rstrip("\n"), workdir / "sub")


def test_cd_without_argument_goes_home(workdir, monkeypatch):
    home = workdir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    run_source("cd")
    assert os.path.samefile(os.getcwd(), home)


def test_cd_without_home(workdir, monkeypatch):
    monkeypatch.delenv("HOME", raising=False)
    with pytest.raises(HomeDirectoryException, match="home directory"):
        run_source("cd")


def test_cd_missing_directory(workdir):
    with pytest.raises(ShellRuntimeException, match="change directory to 'nope'"):
        run_source("cd nope")
    assert os.path.samefile(os.getcwd(), workdir)


def test_redirect_truncates(workdir):
    target = workdir / "out.txt"
    target.write_text("previous contents\n")
    status, out, _ = run_source("pwd > out.txt")
    assert status is Status.OK
    assert out == b""
    assert target.read_bytes() == os.fsencode(os.getcwd()) + b"\n"


def test_redirect_append(workdir):
    target = workdir / "log.txt"
    run_source("echo one >> log.txt")
    run_source("echo two>>log.txt")
    assert target.read_text() == "one\ntwo\n"


def test_redirect_per_command(workdir):
    status, out, _ = run_source("echo a > a.txt ; echo b ; echo c >> a.txt")
    assert status is Status.OK
    assert out == b"b\n"
    assert (workdir / "a.txt").read_text() == "a\nc\n"


def test_redirect_of_builtin_without_output_creates_file(workdir):
    run_source("cd . > empty.txt")
    assert (workdir / "empty.txt").read_bytes() == b""


def test_redirect_into_missing_directory(workdir):
    with pytest.raises(ShellRuntimeException, match="Failed to create 'nodir/out.txt'"):
        run_source("pwd > nodir/out.txt")


def test_insert_prepends(workdir):
    target = workdir / "f.txt"
    target.write_text("OLD")
    status, out, _ = run_source("echo a >+ f.txt")
    assert status is Status.OK
    assert out == b""
    assert target.read_text() == "a\nOLD"
    assert sorted(os.listdir(workdir)) == ["f.txt"]


def test_insert_requires_existing_file(workdir):
    with pytest.raises(ShellRuntimeException, match="Failed to open 'f.txt'"):
        run_source("echo a >+ f.txt")
    assert not os.listdir(workdir)


def test_insert_keeps_original_when_command_fails(workdir):
    target = workdir / "f.txt"
    target.write_text("OLD")
    with pytest.raises(ShellRuntimeException):
        run_source("fail >+ f.txt")
    assert target.read_text() == "OLD"
    assert sorted(os.listdir(workdir)) == ["f.txt"]


def test_insert_keeps_file_mode(workdir):
    target = workdir / "f.txt"
    target.write_text("OLD")
    target.chmod(0o640)
    run_source("echo new >+ f.txt")
    assert (target.stat().st_mode & 0o777) == 0o640


def test_interpreter_keeps_working_across_lines(workdir):
    out = io.BytesIO()
    interpreter = Interpreter(out, launcher=FakeLauncher())
    (workdir / "sub").mkdir()
    interpreter.execute(parse_line("cd sub"))
    interpreter.execute(parse_line("echo x > x.txt"))
    assert (workdir / "sub" / "x.txt").read_text() == "x\n"


def test_redirect_releases_file_when_command_fails(workdir):
    target = workdir / "out.txt"
    with pytest.raises(ShellRuntimeException, match="Failed to run 'fail'"):
        run_source("fail > out.txt")
    assert target.read_bytes() == b""
    with open(target, "ab") as f:
        f.write(b"reopened")
    os.remove(target)
    assert not os.listdir(workdir)


def test_null_byte_in_cd_path(workdir):
    with pytest.raises(ShellRuntimeException, match="change directory to"):
        run_source("cd a\x00b")
    assert os.path.samefile(os.getcwd(), workdir)


def test_null_byte_in_redirect_target(workdir):
    with pytest.raises(ShellRuntimeException, match="Failed to create"):
        run_source("pwd > out\x00.txt")
    assert not os.listdir(workdir)

"""
Utility functions shared across myshell tests.
"""
import io

from myshell.exceptions import ShellRuntimeException
from myshell.interpreter import Interpreter, Status
from myshell.lexer import tokenize
from myshell.parser import parse_line


def kinds(line: str) -> list[tuple]:
    """
    Tokenize a line and return (type, value) pairs.
    """
    return [(tok.type, tok.value) for tok in tokenize(line)]


class FakeLauncher:
    """
    Stand-in for the process launcher.

    Behaves like `echo` for every program except `fail`, which cannot be
    started. Every call is recorded.
    """
    def __init__(self):
        self.calls = []

    def __call__(self, name, args, cwd):
        self.calls.append((name, args, cwd))
        if name == "fail":
            raise ShellRuntimeException("run", name, FileNotFoundError(2, "No such file or directory"))
        return (" ".join(args) + "\n").encode()


def run_source(line: str, launcher=None) -> tuple[Status, bytes, FakeLauncher]:
    """
    Parse and evaluate a line against an in-memory sink.

    Returns:
        The evaluation status, the bytes written to the sink and the launcher.
    """
    launcher = launcher if launcher is not None else FakeLauncher()
    out = io.BytesIO()
    interpreter = Interpreter(out, launcher=launcher)
    status = interpreter.execute(parse_line(line))
    return status, out.getvalue(), launcher

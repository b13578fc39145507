"""Interpreter.

This is a tree-walk evaluator for the AST produced by the parser. One line is
evaluated to completion before the next one is read.

1. Execution Model
`execute()` walks the `;`-separated sequence left to right. Each combinator
chooses the sink its command writes to (the ambient output or a redirected
file) and `run_command()` dispatches to a built-in or the external program
launcher. Evaluation yields a `Status`: `OK` to continue, `EXIT` to stop the
read-eval loop. Errors are raised, and they short-circuit the rest of the
sequence just like `EXIT` does.

2. Sinks
A sink is any binary writable stream. Redirected files are opened for the
duration of the inner command only and are closed on every path.

3. Insert redirection (`>+`)
The command's output is written to a temporary file next to the target, the
target's existing bytes are copied after it, the target is removed and the
temporary file renamed over it. If the command fails the target is left
untouched and the temporary file is removed. There is no atomic fallback
between the remove and the rename.

4. Error Handling
OS failures surface as `ShellRuntimeException` naming the failed operation
and its target.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import contextlib
import os
import shutil
import tempfile
from enum import Enum
from typing import BinaryIO, Callable

from myshell.environment import WorkingDirectory
from myshell.exceptions import ShellRuntimeException
from myshell.launcher import launch
from myshell.nodes import Node


class Status(Enum):
    """Outcome of evaluating a node."""
    OK = "ok"
    EXIT = "exit"


class Interpreter:
    """Tree-walk evaluator for myshell."""

    def __init__(
        self,
        out: BinaryIO,
        launcher: Callable[[str, list[str], str], bytes] = launch,
        workdir: WorkingDirectory | None = None,
    ):
        """
        Initialize the interpreter.

        Parameters:
            out (BinaryIO): The ambient sink.
            launcher: Runs an external program as ``launcher(name, args, cwd)``
                and returns its captured standard output.
            workdir (WorkingDirectory): Working directory accessor.
        """
        self.out = out
        self.launcher = launcher
        self.workdir = workdir if workdir is not None else WorkingDirectory()

    def execute(self, expr: tuple) -> Status:
        """
        Evaluate an expression node.

        Parameters:
            expr (tuple): ('seq', combinator, rest) or ('noop',)

        Returns:
            Status: EXIT if an `exit` command ran, otherwise OK.

        Raises:
            ShellRuntimeException: If any command fails. Commands after the
                failing one are not run.
        """
        node = expr
        while node[0] == Node.SEQ:
            _, combinator, node = node
            if self.run_combinator(combinator) is Status.EXIT:
                return Status.EXIT

        if node[0] != Node.NOOP:
            raise TypeError(f"Unknown expression type: {node[0]}")
        return Status.OK

    def run_combinator(self, node: tuple) -> Status:
        """
        Evaluate a command, routing its output according to the combinator.
        """
        kind = node[0]
        if kind == Node.IDENTITY:
            return self.run_command(node[1], self.out)

        _, command, path = node
        if kind == Node.REDIRECT:
            with _open(path, 'wb', "create") as sink:
                return self.run_command(command, sink)
        elif kind == Node.REDIRECT_APPEND:
            with _open(path, 'ab', "open for appending") as sink:
                return self.run_command(command, sink)
        elif kind == Node.REDIRECT_INSERT:
            return self._run_insert(command, path)

        raise TypeError(f"Unknown combinator type: {kind}")

    def _run_insert(self, command: tuple, path: str) -> Status:
        with _open(path, 'rb', "open") as original:
            # Absolute, in case the command changes the working directory
            target = os.path.abspath(path)
            directory = os.path.dirname(target)
            try:
                fd, temp_path = tempfile.mkstemp(prefix='.myshell-', dir=directory)
            except OSError as e:
                raise ShellRuntimeException("create temporary file in", directory, e) from e

            try:
                with os.fdopen(fd, 'wb') as temp:
                    status = self.run_command(command, temp)
                    try:
                        shutil.copyfileobj(original, temp)
                        shutil.copymode(target, temp_path)
                    except OSError as e:
                        raise ShellRuntimeException("copy contents of", path, e) from e
            except BaseException:
                with contextlib.suppress(FileNotFoundError):
                    os.remove(temp_path)
                raise

        try:
            os.remove(target)
        except OSError as e:
            raise ShellRuntimeException("remove", path, e) from e
        try:
            os.rename(temp_path, target)
        except OSError as e:
            raise ShellRuntimeException(f"rename '{temp_path}' to", path, e) from e
        return status

    def run_command(self, node: tuple, out: BinaryIO) -> Status:
        """
        Run a single command, writing whatever it produces to `out`.

        Parameters:
            node (tuple): A command node.
            out (BinaryIO): The sink for this command.

        Returns:
            Status: EXIT for the `exit` built-in, otherwise OK.
        """
        kind = node[0]

        if kind == Node.NOOP:
            return Status.OK

        elif kind == Node.EXIT:
            return Status.EXIT

        elif kind == Node.PWD:
            _write(out, os.fsencode(self.workdir.current()) + b"\n")
            return Status.OK

        elif kind == Node.CD:
            _, path = node
            self.workdir.change(path)
            return Status.OK

        elif kind == Node.OTHER:
            _, name, args = node
            _write(out, self.launcher(name, args, self.workdir.current()))
            return Status.OK

        raise TypeError(f"Unknown command type: {kind}")


def _open(path: str, mode: str, operation: str) -> BinaryIO:
    try:
        return open(path, mode)  # pylint: disable=consider-using-with
    except (OSError, ValueError) as e:
        raise ShellRuntimeException(operation, path, e) from e


def _write(out: BinaryIO, data: bytes) -> None:
    try:
        out.write(data)
        out.flush()
    except OSError as e:
        raise ShellRuntimeException("write to", getattr(out, 'name', None), e) from e

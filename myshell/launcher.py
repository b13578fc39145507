"""External program launcher.

Runs a program by name with its argument list, waits for it to finish and
returns the bytes it wrote to standard output. Standard error and standard
input are inherited from the shell and are never captured. A nonzero exit
status is not treated as an error; only failing to start or wait for the
program is.


File: launcher.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import subprocess

from myshell.exceptions import ShellRuntimeException


def launch(name: str, args: list[str], cwd: str) -> bytes:
    """
    Run an external program and capture its standard output.

    Parameters:
        name (str): Program name, looked up on PATH.
        args (list[str]): Positional arguments.
        cwd (str): Working directory for the child.

    Returns:
        bytes: Everything the program wrote to standard output.

    Raises:
        ShellRuntimeException: If the program cannot be started or waited on.
    """
    try:
        completed = subprocess.run(
            [name, *args],
            cwd=cwd,
            stdout=subprocess.PIPE,
            check=False,
        )
    except (OSError, ValueError) as e:
        raise ShellRuntimeException("run", name, e) from e
    return completed.stdout

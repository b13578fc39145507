"""Working directory access.

The process working directory is the one piece of state that survives from
one line to the next. Only the `cd` and `pwd` built-ins and the external
command launcher go through this module to read or change it.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os

from myshell.exceptions import HomeDirectoryException, ShellRuntimeException


class WorkingDirectory:
    """Accessor for the process-wide working directory."""

    def current(self) -> str:
        """
        Return the current working directory.

        Raises:
            ShellRuntimeException: If the directory cannot be determined,
                e.g. because it was removed.
        """
        try:
            return os.getcwd()
        except OSError as e:
            raise ShellRuntimeException("read working directory", error=e) from e

    def change(self, path: str | None) -> None:
        """
        Change the working directory.

        Parameters:
            path (str | None): Target directory. None means the home directory
                from the environment.

        Raises:
            HomeDirectoryException: If `path` is None and HOME is unset.
            ShellRuntimeException: If the directory cannot be entered.
        """
        if path is None:
            path = self.home()
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            raise ShellRuntimeException("change directory to", path, e) from e

    def home(self) -> str:
        home = os.environ.get('HOME')
        if not home:
            raise HomeDirectoryException()
        return home

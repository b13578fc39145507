"""Errors.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class ParseException(SyntaxError):
    """
    Error for lines that do not match the command grammar.
    """
    def __init__(self, reason, col=None):
        self.reason = reason
        self.col = col
        message = reason
        if col is not None:
            message += f" at column {col + 1}"
        super().__init__(message)


class ShellRuntimeException(RuntimeError):
    """
    Error for failing OS-level operations during evaluation.
    """
    def __init__(self, operation, target=None, error=None):
        self.operation = operation
        self.target = target
        self.error = error
        message = f"Failed to {operation}"
        if target is not None:
            message += f" '{target}'"
        if error is not None:
            message += f": {getattr(error, 'strerror', None) or error}"
        super().__init__(message)


class HomeDirectoryException(ShellRuntimeException):
    """
    Error for `cd` without arguments when no home directory is set.
    """
    def __init__(self):
        super().__init__("determine home directory (HOME is not set)")

"""Shared definitions for token kinds and AST node identifiers.

This module centralizes the string constants used by the lexer, parser and
interpreter. Keeping them in one place prevents the three components from
drifting apart when an operator or command is added.


File: nodes.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Tok(str, Enum):
    """
    Enumeration of token kinds produced by the lexer.
    """

    TEXT = "text"

    # Operators
    SEQ = ";"
    REDIRECT = ">"
    REDIRECT_APPEND = ">>"
    REDIRECT_INSERT = ">+"
    PIPE = "|"

    EOF = "eof"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


class Node(str, Enum):
    """
    Enumeration of AST node names.
    """

    # Expression
    SEQ = "seq"
    NOOP = "noop"

    # Combinators
    IDENTITY = "identity"
    REDIRECT = "redirect"
    REDIRECT_APPEND = "redirect_append"
    REDIRECT_INSERT = "redirect_insert"

    # Commands
    EXIT = "exit"
    CD = "cd"
    PWD = "pwd"
    OTHER = "other"

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Redirection operator token -> combinator node
REDIRECTIONS = {
    Tok.REDIRECT: Node.REDIRECT,
    Tok.REDIRECT_APPEND: Node.REDIRECT_APPEND,
    Tok.REDIRECT_INSERT: Node.REDIRECT_INSERT,
}

__all__ = ["Tok", "Node", "REDIRECTIONS"]

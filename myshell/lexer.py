"""Lexer for myshell.

The lexer turns one line of input into a lazy stream of :class:`Token`
objects. Whitespace only separates chunks and never produces a token. Each
whitespace-delimited chunk is then scanned for operators, because operators
do not need to be surrounded by whitespace: ``echo hi>out.txt`` yields
``echo``, ``hi``, ``>`` and ``out.txt``.

Operators are matched at the earliest offset inside a chunk. When several
operators start at the same offset the longer ones win, in the order ``>>``,
``>+``, ``>``, ``;``, ``|``, so ``a>>b`` is never read as two ``>`` tokens.
Text to the right of an operator is queued and rescanned on the next pull
exactly as if it were the next chunk.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from myshell.nodes import Tok

# Priority order matters: '>' is a prefix of both '>>' and '>+'.
OPERATORS = (
    Tok.REDIRECT_APPEND,
    Tok.REDIRECT_INSERT,
    Tok.REDIRECT,
    Tok.SEQ,
    Tok.PIPE,
)

_OP_REGEX = re.compile('|'.join(re.escape(op.value) for op in OPERATORS))
_CHUNK_REGEX = re.compile(r'\S+')


class Token:
    """
    Represents a lexical token with a type, value and column.
    """
    def __init__(self, type_, value, col):
        """
        Initialize a new token.

        Parameters:
            type_ (Tok): The token type.
            value (str | None): The token text.
            col (int): Offset of the token's first character in the line.
        """
        self.type = type_
        self.value = value
        self.col = col

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, col={self.col})"


class Lexer:
    """
    Iterator over the tokens of a single line.

    The lexer is single pass: once exhausted it stays exhausted.
    """
    def __init__(self, line: str):
        self.line = line
        self._chunks = _CHUNK_REGEX.finditer(line)
        self._rest: tuple[str, int] | None = None
        self._pending_op: Token | None = None

    def __iter__(self):
        return self

    def __next__(self) -> Token:
        if self._pending_op is not None:
            token, self._pending_op = self._pending_op, None
            return token

        if self._rest is not None:
            chunk, col = self._rest
            self._rest = None
        else:
            match = next(self._chunks, None)
            if match is None:
                raise StopIteration
            chunk, col = match.group(), match.start()

        return self._scan(chunk, col)

    def _scan(self, chunk: str, col: int) -> Token:
        """
        Return the next token of ``chunk``, queueing whatever follows it.

        Parameters:
            chunk (str): Non-empty text without whitespace.
            col (int): Offset of ``chunk`` in the line.

        Returns:
            Token: A TEXT token for the text left of the first operator, or
                the operator itself when the chunk starts with one.
        """
        op_match = _OP_REGEX.search(chunk)
        if op_match is None:
            return Token(Tok.TEXT, chunk, col)

        start, end = op_match.span()
        op_token = Token(Tok(op_match.group()), op_match.group(), col + start)
        if end < len(chunk):
            self._rest = (chunk[end:], col + end)

        if start == 0:
            return op_token
        self._pending_op = op_token
        return Token(Tok.TEXT, chunk[:start], col)


def tokenize(line: str) -> list[Token]:
    """
    Convert a line of input into a list of tokens.

    Parameters:
        line (str): The line to tokenize.

    Returns:
        list[Token]: The tokens in source order. No EOF marker is appended.
    """
    return list(Lexer(line))

"""
Parser.

This is a recursive descent parser over the token stream of a single line.

1. Grammar
    Expression := Combinator ';' Expression | Combinator | <empty>
    Combinator := Command ( '>' Path | '>>' Path | '>+' Path )?
    Command    := 'exit' | 'cd' Path? | 'pwd' | Name Arg*

2. Token Consumption
The parser pulls tokens lazily from the lexer and keeps exactly one token of
lookahead in `curr_token`. Tokens are consumed with `eat()`, which checks the
expected type, or `accept()`, which consumes only on a match. There is no
backtracking.

3. AST
Nodes are tuples tagged with a `Node` value:
    ('noop',)
    ('seq', combinator, rest)
    ('identity', command) | ('redirect', command, path)
    ('redirect_append', command, path) | ('redirect_insert', command, path)
    ('exit',) | ('cd', path_or_None) | ('pwd',) | ('other', name, args)

The `;`-separated part of the grammar is parsed with a loop rather than by
recursion, so a line with thousands of commands does not grow the call stack.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import Iterable

from myshell.exceptions import ParseException
from myshell.lexer import Lexer, Token
from myshell.nodes import Node, Tok
from myshell.parser.commands import parse_combinator


class Parser:
    """
    myshell parser.
    """
    def __init__(self, tokens: Iterable[Token]):
        """
        Initialize the parser with a token stream.

        Parameters:
            tokens (Iterable[Token]): The tokens of one line, e.g. a `Lexer`.
        """
        self._tokens = iter(tokens)
        self.curr_token = self._pull()

    def _pull(self) -> Token:
        token = next(self._tokens, None)
        if token is None:
            return Token(Tok.EOF, None, None)
        return token

    def at_end(self) -> bool:
        """
        Return True once every token has been consumed.
        """
        return self.curr_token.type == Tok.EOF

    def eat(self, token_type: Tok) -> Token:
        """
        Consume the current token if it matches the expected type.

        Parameters:
            token_type (Tok): The expected token type.

        Returns:
            Token: The consumed token.

        Raises:
            ParseException: If the token does not match the expected type.
        """
        tok = self.curr_token
        if tok.type != token_type:
            raise self.unexpected(
                "command" if token_type == Tok.TEXT else f"'{token_type.value}'"
            )
        self.curr_token = self._pull()
        return tok

    def accept(self, *token_types: Tok) -> Token | None:
        """
        Consume and return the current token if it is one of `token_types`.

        Returns:
            Token | None: The consumed token, or None if nothing was consumed.
        """
        tok = self.curr_token
        if tok.type not in token_types:
            return None
        self.curr_token = self._pull()
        return tok

    def unexpected(self, expected: str) -> ParseException:
        """
        Build the error for a token that does not fit the grammar here.
        """
        tok = self.curr_token
        if tok.type == Tok.EOF:
            return ParseException(f"Expected {expected} but reached end of input")
        if tok.type == Tok.PIPE:
            return ParseException("Pipelines are not supported", tok.col)
        return ParseException(f"Expected {expected} but got '{tok.value}'", tok.col)

    def parse(self) -> tuple:
        """
        Parse the whole token stream into an expression.

        Returns:
            tuple: The root expression node.

        Raises:
            ParseException: If the tokens do not form a valid line.
        """
        combinators = []
        while not self.at_end():
            combinators.append(parse_combinator(self))
            if self.accept(Tok.SEQ) is None and not self.at_end():
                raise self.unexpected("';' or end of input")

        expr = (Node.NOOP,)
        for combinator in reversed(combinators):
            expr = (Node.SEQ, combinator, expr)
        return expr


def parse_line(line: str) -> tuple:
    """
    Tokenize and parse a single line of input.

    Parameters:
        line (str): The raw input line.

    Returns:
        tuple: The root expression node.
    """
    return Parser(Lexer(line)).parse()

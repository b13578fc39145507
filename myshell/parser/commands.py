"""Command parsing utilities for myshell.

These functions operate on a `myshell.parser.parser.Parser` instance and
handle the combinator (command plus optional redirection) and the command
forms: the `exit`, `cd` and `pwd` built-ins and external programs.


File: commands.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typing import TYPE_CHECKING

from myshell.exceptions import ParseException
from myshell.nodes import Node, Tok, REDIRECTIONS

if TYPE_CHECKING:
    from myshell.lexer import Token
    from myshell.parser import Parser


def parse_combinator(parser: 'Parser') -> tuple:
    """
    Parse a command with at most one redirection.

    Syntax:
        <command> [ ('>' | '>>' | '>+') <path> ]

    Args:
        parser: The parser instance.

    Returns:
        tuple: ('identity', command) or (<redirect kind>, command, path)

    Raises:
        ParseException: If a redirection operator has no target path.
    """
    command = parse_command(parser)
    op = parser.accept(*REDIRECTIONS)
    if op is None:
        return (Node.IDENTITY, command)

    target = parser.accept(Tok.TEXT)
    if target is None:
        raise ParseException(f"Missing redirect target after '{op.value}'", op.col)
    return (REDIRECTIONS[op.type], command, target.value)


def parse_command(parser: 'Parser') -> tuple:
    """
    Parse a command name followed by every contiguous argument.

    Syntax:
        <name> <arg>*

    Args:
        parser: The parser instance.

    Returns:
        tuple: representing the command node.
    """
    if parser.at_end():
        return (Node.NOOP,)

    name = parser.eat(Tok.TEXT)
    args = []
    while parser.curr_token.type == Tok.TEXT:
        args.append(parser.eat(Tok.TEXT).value)
    return build_command(name, args)


def _check_arity(name: 'Token', args: list[str], most: int) -> None:
    if len(args) > most:
        raise ParseException(
            f"wrong number of arguments supplied to '{name.value}'", name.col
        )


def build_command(name: 'Token', args: list[str]) -> tuple:
    """
    Turn a command name and its arguments into a command node.

    Reserved names are only recognised here, in leading position. The same
    words appearing as arguments are ordinary text.

    Args:
        name: The leading TEXT token.
        args: The argument strings following it.

    Returns:
        tuple: ('exit',) | ('cd', path_or_None) | ('pwd',) | ('other', name, args)

    Raises:
        ParseException: If a built-in receives too many arguments.
    """
    if name.value == 'exit':
        _check_arity(name, args, 0)
        return (Node.EXIT,)
    elif name.value == 'cd':
        _check_arity(name, args, 1)
        return (Node.CD, args[0] if args else None)
    elif name.value == 'pwd':
        _check_arity(name, args, 0)
        return (Node.PWD,)
    return (Node.OTHER, name.value, args)

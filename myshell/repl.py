"""Line sources for myshell.

`run_line` takes one line through the whole pipeline: tokenize, parse,
evaluate and report. `run_interactive` feeds it from standard input and
`run_batch` from a script file. Parse and runtime errors are printed and the
next line is processed in both modes; only a batch file that cannot be
opened stops the shell.


File: repl.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os

from myshell.exceptions import ParseException, ShellRuntimeException
from myshell.interpreter import Interpreter, Status
from myshell.lexer import tokenize
from myshell.parser import Parser, parse_line

PROMPT = "myshell> "


def debug_print_tokens_ast(tokens, ast):
    """
    Print tokenized line and AST
    """
    print("\nTokens:\n")
    print(tokens)
    print("\nAST:\n")
    print(ast)
    print(" ", flush=True)


def report(e: Exception) -> None:
    print(f"{type(e).__name__}: {e}", flush=True)


def run_line(interpreter: Interpreter, line: str) -> Status:
    """
    Tokenize, parse and evaluate a single line.

    Parameters:
        interpreter (Interpreter): The evaluator to run the line with.
        line (str): The raw line, without its newline.

    Returns:
        Status: EXIT if the line ran `exit`, otherwise OK (errors included).
    """
    try:
        if os.environ.get('MYSHELL_DEBUG'):
            tokens = tokenize(line)
            ast = Parser(tokens).parse()
            debug_print_tokens_ast(tokens, ast)
        else:
            ast = parse_line(line)
        return interpreter.execute(ast)
    except (ParseException, ShellRuntimeException) as e:
        report(e)
        return Status.OK


def run_interactive(interpreter: Interpreter) -> None:
    """
    Run the interactive loop until `exit` or end of input.
    """
    while True:
        try:
            line = input(PROMPT)
        except KeyboardInterrupt:
            print("\nInterrupted.")
            break
        except EOFError:
            print()
            break
        except UnicodeDecodeError as e:
            report(ShellRuntimeException("decode input", error=e))
            continue
        if run_line(interpreter, line.strip()) is Status.EXIT:
            break


def run_batch(path: str, interpreter: Interpreter) -> None:
    """
    Run every line of a script file, echoing each one before its output.

    Lines are decoded one at a time, so a line that is not valid UTF-8 is
    reported and skipped without affecting the others. Empty lines are
    skipped. Processing stops early on `exit`.

    Raises:
        ShellRuntimeException: If the script cannot be opened.
    """
    try:
        script = open(path, "rb")  # pylint: disable=consider-using-with
    except (OSError, ValueError) as e:
        raise ShellRuntimeException("open script", path, e) from e

    with script:
        for line_num, raw in enumerate(script, start=1):
            try:
                line = raw.rstrip(b"\r\n").decode("utf-8")
            except UnicodeDecodeError as e:
                report(ShellRuntimeException(f"decode line {line_num} of", path, e))
                continue
            if not line:
                continue
            print(line, flush=True)
            if run_line(interpreter, line) is Status.EXIT:
                break

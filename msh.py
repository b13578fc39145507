"""
myshell

This is the main entry point for the myshell command interpreter.

Workflow:
1. A line is read from standard input (interactive) or from a script file (batch).
2. The Lexer splits the line into text and operator tokens.
3. The Parser turns the tokens into an AST of sequenced, optionally redirected commands.
4. The Interpreter walks the AST, running built-ins or launching external programs.
"""
import sys

from myshell.exceptions import ShellRuntimeException
from myshell.interpreter import Interpreter
from myshell.repl import report, run_batch, run_interactive


def print_usage():
    """
    Print usage.
    """
    print()
    print("myshell")
    print()
    print("Usage:")
    print("    msh [<script>]")
    print()
    print("Arguments:")
    print("    <script>")
    print("        Path to a file of commands to run line by line. Each line is")
    print("        echoed before its output. Processing stops at `exit`.")
    print()
    print("Run with no arguments to enter interactive mode.")
    print()
    print("Options:")
    print("    -h, --help")
    print("        Show this help message and exit.")
    print()
    print("Environment:")
    print("    MYSHELL_DEBUG")
    print("        When set, print the tokens and AST of every line before running it.")


def main(argv: list[str]) -> int:
    """
    Entry point for the CLI.

    Behaviour:
    - No arguments: enter interactive mode.
    - One argument equal to ``-h`` or ``--help``: print usage and exit.
    - One argument that is not an option: treat it as the path to a script and run it.
    - Any other pattern: print usage and return a non-zero exit code.
    """
    args = argv[1:]
    interpreter = Interpreter(sys.stdout.buffer)
    if not args:
        run_interactive(interpreter)
        return 0
    if len(args) == 1 and args[0] in ('-h', '--help'):
        print_usage()
        return 0
    if len(args) == 1:
        try:
            run_batch(args[0], interpreter)
        except ShellRuntimeException as e:
            report(e)
            return 1
        return 0
    print_usage()
    return 1


def run():
    sys.exit(main(sys.argv))


if __name__ == "__main__":
    run()

"""
Run the myshell quality checks: flake8, pylint and the pytest suite.

Usage:
    python scripts/lint.py [--no-tests]
"""
import argparse
import subprocess
import sys

SOURCES = ["./myshell", "./msh.py"]

CHECKS = [
    ("flake8", ["flake8", *SOURCES, "--max-line-length=110", "--exclude=myshell/tests"]),
    ("pylint", ["pylint", *SOURCES, "--ignore=tests", "--max-line-length=110"]),
]


def main(argv: list[str]) -> int:
    """
    Run every check and report which ones failed.

    Returns:
        int: 0 if all checks passed, 1 otherwise.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--no-tests", action="store_true", help="skip the pytest run")
    args = parser.parse_args(argv)

    checks = list(CHECKS)
    if not args.no_tests:
        checks.append(("pytest", [sys.executable, "-m", "pytest", "-q", "myshell/tests"]))

    failed = []
    for name, command in checks:
        print(f"Running {name}...")
        if subprocess.run(command, check=False).returncode != 0:
            failed.append(name)

    if failed:
        print(f"Failed: {', '.join(failed)}")
        return 1
    print("All checks passed")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))

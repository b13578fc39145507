"""Parser package for myshell.

The parser is split into the token cursor and expression loop
(:mod:`myshell.parser.parser`) and the combinator and command productions
(:mod:`myshell.parser.commands`). The :class:`Parser` class is exposed at the
package level for convenience.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from .parser import Parser, parse_line

__all__ = ["Parser", "parse_line"]

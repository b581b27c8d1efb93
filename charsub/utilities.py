"""
# charsub: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def format_code_points(string: str) -> str:
    """
    Format a string as space-separated `U+«hex»` code points.

    Useful where a string consists of whitespace or combining characters.
    """
    return ' '.join(f'U+{ord(character):04X}' for character in string)


def is_whitespace_only(line: str) -> bool:
    return bool(re.fullmatch(pattern=r'[\s]*', string=line, flags=re.ASCII))

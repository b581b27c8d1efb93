"""
# charsub: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that governs the parsing of substitution tables.
"""

import re
import warnings
from typing import Optional

from charsub.escapes import decode_escapes
from charsub.exceptions import EscapeException, MalformedLineException, TableException
from charsub.tables import CompiledTable, TableBuilder
from charsub.utilities import is_whitespace_only

TOKEN_UNIT_REGEX = r'(?: [\\] (?: [\s\S] | \Z ) | [^\s\\] )'


class TableAuthority:
    """
    Object governing the parsing of a substitution table.

    ## `legislate`

    Parses charsub table syntax, see the constant `TABLE_SYNTAX_HELP` in `constants.py`.
    A line is a rule if it begins with non-whitespace and contains a tab;
    every other line is commentary, which allows for literate tables.
    Rules are accumulated in order and may be legislated over several calls.

    ## `commit`

    Compiles the legislated rules into a table.
    """
    _builder: 'TableBuilder'
    _skip_invalid_lines: bool

    def __init__(self, skip_invalid_lines: bool = False):
        self._builder = TableBuilder()
        self._skip_invalid_lines = skip_invalid_lines

    @staticmethod
    def split_lines(table_text: str) -> list[str]:
        """
        Split table text at line endings (CRLF, CR or LF) only.

        Other characters that `str.splitlines()` would break at (U+001E, U+2028 etc.)
        remain part of the line, so that they may be used literally in a column.
        """
        lines = re.split(pattern=r'\r\n|\r|\n', string=table_text)
        if lines[-1] == '':
            lines.pop()

        return lines

    @staticmethod
    def is_commentary(line: str) -> bool:
        return bool(re.match(pattern=r'[\s]', string=line, flags=re.ASCII)) or '\t' not in line

    @staticmethod
    def compute_rule_match(line: str) -> Optional[re.Match]:
        return re.fullmatch(
            pattern=fr'''
                (?P<pattern> {TOKEN_UNIT_REGEX}+ )
                [^\S\n]+
                (?P<replacement> {TOKEN_UNIT_REGEX}* )
                [^\S\n]*
            ''',
            string=line,
            flags=re.ASCII | re.VERBOSE,
        )

    @staticmethod
    def decode_column(token: str, column: str, line_number: int) -> str:
        try:
            return decode_escapes(token)
        except EscapeException as escape_exception:
            escape_exception.locate(line_number, column)
            raise

    def process_rule_line(self, line: str, line_number: int):
        rule_match = TableAuthority.compute_rule_match(line)
        if rule_match is None:
            raise MalformedLineException(line, line_number)

        pattern = TableAuthority.decode_column(rule_match.group('pattern'), 'pattern', line_number)
        replacement = TableAuthority.decode_column(rule_match.group('replacement'), 'replacement', line_number)

        self._builder.add_entry(pattern, replacement, line_number)

    def legislate(self, table_text: Optional[str]):
        if table_text is None:
            return

        for line_number, line in enumerate(TableAuthority.split_lines(table_text), start=1):
            if is_whitespace_only(line) or TableAuthority.is_commentary(line):
                continue

            try:
                self.process_rule_line(line, line_number)
            except TableException as table_exception:
                if not self._skip_invalid_lines:
                    raise

                warnings.warn(f'warning: skipped invalid rule at {table_exception}')

    def commit(self) -> 'CompiledTable':
        return self._builder.commit()

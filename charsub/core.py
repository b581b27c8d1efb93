"""
# charsub: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core substitution logic.

A substitution table is parsed as lines of the form
````
«pattern»«whitespace»«replacement»
````
amid commentary; see `TABLE_SYNTAX_HELP` in `constants.py`.
The table is then applied to text by greedy longest-match substitution.
"""

from typing import Iterable, Iterator

from charsub.authorities import TableAuthority
from charsub.engines import SubstitutionEngine
from charsub.tables import CompiledTable


def build_table(table_text: str, skip_invalid_lines: bool = False) -> CompiledTable:
    """
    Build a compiled table from table text.

    Raises a `TableException` for the first invalid rule,
    unless `skip_invalid_lines` is set, in which case invalid rules are warned about and skipped.
    """
    table_authority = TableAuthority(skip_invalid_lines)
    table_authority.legislate(table_text)

    return table_authority.commit()


def substitute(table: CompiledTable, string: str, verbose_mode_enabled: bool = False) -> str:
    return SubstitutionEngine(table, verbose_mode_enabled).substitute(string)


def iter_substitute(table: CompiledTable, chunks: Iterable[str]) -> Iterator[str]:
    return SubstitutionEngine(table).iter_substitute(chunks)

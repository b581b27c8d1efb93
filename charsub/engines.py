"""
# charsub: engines.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Substitution engines applying a compiled table to text.

At each position of the input, the longest pattern matching there is replaced;
failing any match, the character at that position passes through unchanged.
Output is never re-examined once emitted.
"""

import collections
from typing import Iterable, Iterator, Optional

from charsub.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from charsub.tables import CompiledTable, PatternMatch, TrieNode


class SubstitutionMachine:
    """
    Push-mode substitution over text supplied in chunks.

    Characters are held back only while they form a prefix of some pattern,
    so that `process(...)` returns everything that has been decided so far.
    Call `flush()` at the end of the input to resolve any held-back characters.
    """
    _table: 'CompiledTable'
    _node: 'TrieNode'
    _pending: str
    _match: Optional['PatternMatch']

    def __init__(self, table: 'CompiledTable'):
        self._table = table
        self._reset()

    @property
    def pending(self) -> str:
        return self._pending

    def process(self, chunk: str) -> str:
        output_pieces: list[str] = []
        self._consume(chunk, output_pieces)

        return ''.join(output_pieces)

    def flush(self) -> str:
        output_pieces: list[str] = []
        while self._pending != '':
            leftover = self._resolve(output_pieces)
            self._consume(leftover, output_pieces)

        return ''.join(output_pieces)

    def _reset(self):
        self._node = self._table.start_node()
        self._pending = ''
        self._match = None

    def _resolve(self, output_pieces: list[str]) -> str:
        """
        Emit the longest match among the pending characters (or else the first of them).

        Returns the pending characters beyond what was emitted, which must be scanned afresh.
        """
        if self._match is None:
            output_pieces.append(self._pending[0])
            leftover = self._pending[1:]
        else:
            output_pieces.append(self._match.replacement)
            leftover = self._pending[self._match.length:]

        self._reset()

        return leftover

    def _consume(self, string: str, output_pieces: list[str]):
        backlog = collections.deque(string)
        while len(backlog) > 0:
            character = backlog.popleft()

            child = self._node.get_child(character)
            if child is not None:
                self._pending += character
                self._node = child
                if child.replacement is not None:
                    self._match = PatternMatch(len(self._pending), child.replacement)
                if not child.has_children():
                    backlog.extendleft(reversed(self._resolve(output_pieces)))
                continue

            if self._pending == '':
                output_pieces.append(character)
                continue

            backlog.appendleft(character)
            backlog.extendleft(reversed(self._resolve(output_pieces)))


class SubstitutionEngine:
    """
    Applies a compiled table to text, either all at once or incrementally.

    The table is shared read-only; every call owns its own cursor and output.
    """
    _table: 'CompiledTable'
    _verbose_mode_enabled: bool

    def __init__(self, table: 'CompiledTable', verbose_mode_enabled: bool = False):
        self._table = table
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def table(self) -> 'CompiledTable':
        return self._table

    def substitute(self, string: str) -> str:
        output_pieces: list[str] = []

        cursor = 0
        while cursor < len(string):
            match = self._table.match_at(string, cursor)
            if match is None:
                output_pieces.append(string[cursor])
                cursor += 1
            else:
                output_pieces.append(match.replacement)
                cursor += match.length

        result = ''.join(output_pieces)

        if self._verbose_mode_enabled:
            SubstitutionEngine.print_before_and_after(string, result)

        return result

    def machine(self) -> 'SubstitutionMachine':
        return SubstitutionMachine(self._table)

    def iter_substitute(self, chunks: Iterable[str]) -> Iterator[str]:
        """
        Lazily substitute text supplied as an iterable of chunks.

        The consumer may stop early; nothing beyond the in-progress match is read ahead.
        """
        machine = self.machine()

        for chunk in chunks:
            output = machine.process(chunk)
            if output != '':
                yield output

        output = machine.flush()
        if output != '':
            yield output

    @staticmethod
    def print_before_and_after(string_before: str, string_after: str):
        if string_before == string_after:
            no_change_indicator = ' (no change)'
        else:
            no_change_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' BEFORE')
        print(string_before)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
        print(string_after)
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' AFTER')
        print('\n\n\n\n')

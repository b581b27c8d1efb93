"""
# charsub: tables.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Definition entries and the compiled (prefix-organised) substitution table.
"""

import warnings
from typing import Iterable, NamedTuple, Optional

from charsub.exceptions import CommittedMutateException, EmptyPatternException
from charsub.utilities import format_code_points


class DefinitionEntry(NamedTuple):
    pattern: str
    replacement: str
    line_number: Optional[int] = None


class PatternMatch(NamedTuple):
    length: int
    replacement: str


class TrieNode:
    """
    A node of the substitution trie.

    Each node is keyed (by its parent) on a single character,
    and carries a replacement if the path to it spells a complete pattern.
    """
    _child_from_character: dict[str, 'TrieNode']
    _replacement: Optional[str]

    def __init__(self):
        self._child_from_character = {}
        self._replacement = None

    @property
    def replacement(self) -> Optional[str]:
        return self._replacement

    def get_child(self, character: str) -> Optional['TrieNode']:
        return self._child_from_character.get(character)

    def has_children(self) -> bool:
        return len(self._child_from_character) > 0


class CompiledTable:
    """
    Immutable substitution table organised as a trie.

    Built once from an ordered sequence of definition entries,
    where the first occurrence of a pattern prevails over any later duplicates.
    The entries are retained (in order, duplicates included) for introspection only.
    """
    _root: 'TrieNode'
    _entries: tuple['DefinitionEntry', ...]
    _max_pattern_length: int

    def __init__(self, entries: Iterable['DefinitionEntry'] = ()):
        self._root = TrieNode()
        self._entries = tuple(entries)
        self._max_pattern_length = 0

        for entry in self._entries:
            if entry.pattern == '':
                raise EmptyPatternException(entry.line_number)

            if not self._insert(entry.pattern, entry.replacement):
                CompiledTable.warn_duplicate(entry, self._entries)
                continue

            self._max_pattern_length = max(self._max_pattern_length, len(entry.pattern))

    @staticmethod
    def warn_duplicate(entry: 'DefinitionEntry', entries: tuple['DefinitionEntry', ...]):
        earlier_entry = next(
            earlier_entry
            for earlier_entry in entries
            if earlier_entry.pattern == entry.pattern
        )
        warnings.warn(
            f'warning: pattern `{entry.pattern}` ({format_code_points(entry.pattern)}) '
            f'on line {entry.line_number} is a duplicate of line {earlier_entry.line_number}; '
            f'keeping the earlier replacement `{earlier_entry.replacement}`'
        )

    def _insert(self, pattern: str, replacement: str) -> bool:
        """
        Insert a pattern into the trie, returning False if the pattern was already present.

        An already-recorded replacement is never overwritten.
        """
        node = self._root
        for character in pattern:
            child = node._child_from_character.get(character)
            if child is None:
                child = TrieNode()
                node._child_from_character[character] = child
            node = child

        if node._replacement is not None:
            return False

        node._replacement = replacement
        return True

    @property
    def entries(self) -> tuple['DefinitionEntry', ...]:
        return self._entries

    @property
    def max_pattern_length(self) -> int:
        return self._max_pattern_length

    def __len__(self) -> int:
        return len(self._entries)

    def start_node(self) -> 'TrieNode':
        """
        The root of the trie, from which every match begins.

        Nodes expose lookups only; the table cannot be changed through them.
        """
        return self._root

    def find_node(self, prefix: str) -> Optional['TrieNode']:
        node = self._root
        for character in prefix:
            node = node.get_child(character)
            if node is None:
                return None

        return node

    def has_prefix(self, prefix: str) -> bool:
        """
        Whether any pattern begins with `prefix`.
        """
        return self.find_node(prefix) is not None

    def lookup(self, sequence: str) -> Optional[str]:
        """
        The replacement for `sequence` if it is a complete pattern, otherwise None.
        """
        node = self.find_node(sequence)
        if node is None:
            return None

        return node.replacement

    def match_at(self, string: str, position: int) -> Optional['PatternMatch']:
        """
        Find the longest pattern matching `string` at `position`.

        Extension stops as soon as no pattern begins with the characters seen so far.
        """
        node = self._root
        longest_match = None

        index = position
        while index < len(string):
            node = node.get_child(string[index])
            if node is None:
                break

            index += 1
            if node.replacement is not None:
                longest_match = PatternMatch(index - position, node.replacement)

        return longest_match


class TableBuilder:
    """
    Accumulates definition entries in order, then commits them to a compiled table.
    """
    _is_committed: bool
    _entries: list['DefinitionEntry']

    def __init__(self):
        self._is_committed = False
        self._entries = []

    @property
    def entries(self) -> tuple['DefinitionEntry', ...]:
        return tuple(self._entries)

    def add_entry(self, pattern: str, replacement: str, line_number: Optional[int] = None):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_entry(...)` after `commit()`')

        if pattern == '':
            raise EmptyPatternException(line_number)

        self._entries.append(DefinitionEntry(pattern, replacement, line_number))

    def commit(self) -> 'CompiledTable':
        self._is_committed = True
        return CompiledTable(self._entries)

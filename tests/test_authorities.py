"""
# charsub: test_authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `authorities.py`.
"""

import unittest
import warnings

from charsub.authorities import TableAuthority
from charsub.engines import SubstitutionEngine
from charsub.exceptions import (
    CommittedMutateException,
    InvalidEscapeException,
    MalformedLineException,
    UnterminatedEscapeException,
)
from charsub.tables import DefinitionEntry


class TestAuthorities(unittest.TestCase):
    def test_is_commentary(self):
        self.assertTrue(TableAuthority.is_commentary('This be prose.'))
        self.assertTrue(TableAuthority.is_commentary('  indented\tprose'))
        self.assertTrue(TableAuthority.is_commentary('\tleading tab'))
        self.assertTrue(TableAuthority.is_commentary('-- spaces only'))
        self.assertFalse(TableAuthority.is_commentary('--\t–'))
        self.assertFalse(TableAuthority.is_commentary('x\t'))

    def test_compute_rule_match(self):
        rule_match = TableAuthority.compute_rule_match('``\t“')
        self.assertEqual(rule_match.group('pattern'), '``')
        self.assertEqual(rule_match.group('replacement'), '“')

        rule_match = TableAuthority.compute_rule_match('~ \t \\u{a0}  ')
        self.assertEqual(rule_match.group('pattern'), '~')
        self.assertEqual(rule_match.group('replacement'), '\\u{a0}')

        rule_match = TableAuthority.compute_rule_match('a\\ b\tc\\\td')
        self.assertEqual(rule_match.group('pattern'), 'a\\ b')
        self.assertEqual(rule_match.group('replacement'), 'c\\\td')

        rule_match = TableAuthority.compute_rule_match('x\t')
        self.assertEqual(rule_match.group('pattern'), 'x')
        self.assertEqual(rule_match.group('replacement'), '')

        self.assertIsNone(TableAuthority.compute_rule_match('a\tb\tc'))
        self.assertIsNone(TableAuthority.compute_rule_match('a b\tc'))
        self.assertIsNone(TableAuthority.compute_rule_match('a\\\tb'))

    def test_legislate(self):
        table_authority = TableAuthority()
        table_authority.legislate(
            'Quotes and dashes.\n'
            '\n'
            '`\t‘\n'
            '``\t“\n'
            '    A continuation of prose, even with\ta tab.\n'
            '--\t–\n'
            '~\t\\u{a0}\n'
            'x\\ y\t\\u{1f84}\n'
            'zap\t\n'
        )
        table = table_authority.commit()

        self.assertEqual(
            table.entries,
            (
                DefinitionEntry('`', '‘', 3),
                DefinitionEntry('``', '“', 4),
                DefinitionEntry('--', '–', 6),
                DefinitionEntry('~', '\u00a0', 7),
                DefinitionEntry('x y', '\u1f84', 8),
                DefinitionEntry('zap', '', 9),
            ),
        )

    def test_split_lines(self):
        self.assertEqual(TableAuthority.split_lines(''), [])
        self.assertEqual(TableAuthority.split_lines('a\r\nb\rc\nd\n'), ['a', 'b', 'c', 'd'])
        self.assertEqual(TableAuthority.split_lines('a\n\nb'), ['a', '', 'b'])
        self.assertEqual(
            TableAuthority.split_lines('x\tfoo\u2028bar\ny\tfoo\x1ebar\x0c\u0085\n'),
            ['x\tfoo\u2028bar', 'y\tfoo\x1ebar\x0c\u0085'],
        )

    def test_legislate_keeps_unicode_line_separators(self):
        table_authority = TableAuthority()
        table_authority.legislate('x\tfoo\u2028bar\ny\tfoo\x1ebar\r\nz\t\u0085\u2029\rw\tv')
        table = table_authority.commit()

        self.assertEqual(
            table.entries,
            (
                DefinitionEntry('x', 'foo\u2028bar', 1),
                DefinitionEntry('y', 'foo\x1ebar', 2),
                DefinitionEntry('z', '\u0085\u2029', 3),
                DefinitionEntry('w', 'v', 4),
            ),
        )
        self.assertEqual(SubstitutionEngine(table).substitute('xy'), 'foo\u2028barfoo\x1ebar')

    def test_legislate_none(self):
        table_authority = TableAuthority()
        table_authority.legislate(None)
        self.assertEqual(len(table_authority.commit()), 0)

    def test_legislate_over_several_calls(self):
        table_authority = TableAuthority()
        table_authority.legislate("'\t’\n")
        table_authority.legislate("''\t”\n")
        table = table_authority.commit()
        self.assertEqual(table.lookup("'"), '’')
        self.assertEqual(table.lookup("''"), '”')

        with self.assertRaises(CommittedMutateException):
            table_authority.legislate('a\tb')

    def test_legislate_malformed_line(self):
        table_authority = TableAuthority()
        with self.assertRaises(MalformedLineException) as context:
            table_authority.legislate('prose\n`\t‘\na\tb\tc\n')
        self.assertEqual(context.exception.line_number, 3)
        self.assertEqual(context.exception.line, 'a\tb\tc')

    def test_legislate_escape_errors(self):
        table_authority = TableAuthority()
        with self.assertRaises(InvalidEscapeException) as context:
            table_authority.legislate('ok\tfine\n\\u{zz}\tx\n')
        self.assertEqual(context.exception.line_number, 2)
        self.assertEqual(context.exception.column, 'pattern')
        self.assertTrue(str(context.exception).startswith('line 2: '))
        self.assertTrue(str(context.exception).endswith('(in pattern column)'))

        table_authority = TableAuthority()
        with self.assertRaises(UnterminatedEscapeException) as context:
            table_authority.legislate('nbsp\t\\u{a0\n')
        self.assertEqual(context.exception.line_number, 1)
        self.assertEqual(context.exception.column, 'replacement')

    def test_legislate_skip_invalid_lines(self):
        table_authority = TableAuthority(skip_invalid_lines=True)
        with warnings.catch_warnings(record=True) as caught_warnings:
            warnings.simplefilter('always')
            table_authority.legislate('a\tb\tc\n--\t–\n\\q\tx\n')
        table = table_authority.commit()

        self.assertEqual(table.entries, (DefinitionEntry('--', '–', 2),))
        self.assertEqual(len(caught_warnings), 2)
        self.assertIn('line 1', str(caught_warnings[0].message))
        self.assertIn('line 3', str(caught_warnings[1].message))


if __name__ == '__main__':
    unittest.main()

"""
# charsub: test_exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `exceptions.py`.
"""

import unittest

from charsub.exceptions import (
    EmptyPatternException,
    InvalidEscapeException,
    MalformedLineException,
    TableException,
)


class TestExceptions(unittest.TestCase):
    def test_table_exception_str(self):
        table_exception = TableException('something is off')
        self.assertEqual(str(table_exception), 'something is off')

        table_exception.locate(12)
        self.assertEqual(table_exception.line_number, 12)
        self.assertEqual(str(table_exception), 'line 12: something is off')

    def test_escape_exception_str(self):
        escape_exception = InvalidEscapeException('unrecognised escape `\\q` in `\\q`', '\\q', 0)
        self.assertEqual(escape_exception.describe(), 'unrecognised escape `\\q` in `\\q`')

        escape_exception.locate(4, 'replacement')
        self.assertEqual(escape_exception.column, 'replacement')
        self.assertEqual(
            str(escape_exception),
            'line 4: unrecognised escape `\\q` in `\\q` (in replacement column)',
        )

    def test_hierarchy(self):
        self.assertIsInstance(MalformedLineException('a\tb\tc', 1), TableException)
        self.assertIsInstance(EmptyPatternException(), TableException)
        self.assertIsNone(EmptyPatternException().line_number)


if __name__ == '__main__':
    unittest.main()

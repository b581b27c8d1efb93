"""
# charsub: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

STANDARD_TABLE_NAME = 'STANDARD_TABLE'

TABLE_SYNTAX_HELP = '''\
In charsub table syntax, a line is one of the following:
(1) whitespace-only (ignored);
(2) commentary, i.e. a line beginning with whitespace,
    or a line free of tab characters (ignored);
(3) a rule `«pattern»«whitespace»«replacement»`,
    i.e. any other line.
- Note for (3): the first run of unescaped whitespace separates
  «pattern» from «replacement»; an empty «replacement» deletes «pattern».
- Note for (3): the following escapes are recognised in both columns:
  `\\u{«hex»}`, `\\t`, `\\n`, `\\r`, `\\\\`, `\\'`, `\\"`,
  and a backslash followed by a literal space or tab.
'''

STANDARD_TABLE = """\
# STANDARD_TABLE

TeX-style typographic conventions.
Lines free of tab characters, such as these, are commentary.
Quotes come first, then dashes, then spacing.

`\t‘
``\t“
'\t’
''\t”
--\t–
---\t—
...\t…
~\t\\u{a0}
"""

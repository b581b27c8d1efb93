"""
# charsub: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""

from typing import Optional


class CommittedMutateException(Exception):
    pass


class TableException(Exception):
    """
    Base class for errors raised while building a substitution table.

    The line number is attached once known,
    since the escape decoder works on bare columns.
    """
    _message: str
    _line_number: Optional[int]

    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message)
        self._message = message
        self._line_number = line_number

    @property
    def message(self) -> str:
        return self._message

    @property
    def line_number(self) -> Optional[int]:
        return self._line_number

    def locate(self, line_number: int):
        self._line_number = line_number

    def describe(self) -> str:
        return self._message

    def __str__(self) -> str:
        if self._line_number is None:
            return self.describe()

        return f'line {self._line_number}: {self.describe()}'


class MalformedLineException(TableException):
    _line: str

    def __init__(self, line: str, line_number: Optional[int] = None):
        super().__init__(f'rule `{line}` is not of the form `«pattern»«whitespace»«replacement»`', line_number)
        self._line = line

    @property
    def line(self) -> str:
        return self._line


class EmptyPatternException(TableException):
    def __init__(self, line_number: Optional[int] = None):
        super().__init__('empty pattern (can never be matched)', line_number)


class EscapeException(TableException):
    """
    Base class for malformed escapes within a column.

    `position` is the index, within `token`, of the backslash beginning the offending escape.
    `column` is `'pattern'` or `'replacement'`, once known.
    """
    _token: str
    _position: int
    _column: Optional[str]

    def __init__(self, message: str, token: str, position: int):
        super().__init__(message)
        self._token = token
        self._position = position
        self._column = None

    @property
    def token(self) -> str:
        return self._token

    @property
    def position(self) -> int:
        return self._position

    @property
    def column(self) -> Optional[str]:
        return self._column

    def locate(self, line_number: int, column: Optional[str] = None):
        super().locate(line_number)
        self._column = column

    def describe(self) -> str:
        if self._column is None:
            return self._message

        return f'{self._message} (in {self._column} column)'


class InvalidEscapeException(EscapeException):
    pass


class UnterminatedEscapeException(EscapeException):
    pass

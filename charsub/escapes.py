"""
# charsub: escapes.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Escape decoding for the columns of a substitution table.

Recognised escapes are
````
\\u{«hex»}      the code point «hex» (one or more hexadecimal digits)
\\t \\n \\r       tab, line feed, carriage return
\\\\ \\' \\"       backslash, single quote, double quote
\\«space»       a literal space
\\«tab»         a literal tab
````
Anything else following a backslash is an invalid escape.
"""

import re

from charsub.exceptions import InvalidEscapeException, UnterminatedEscapeException

CHARACTER_FROM_ESCAPED_CHARACTER = {
    't': '\t',
    'n': '\n',
    'r': '\r',
    '\\': '\\',
    "'": "'",
    '"': '"',
    ' ': ' ',
    '\t': '\t',
}
MAX_CODE_POINT = 0x10FFFF
MIN_SURROGATE_CODE_POINT = 0xD800
MAX_SURROGATE_CODE_POINT = 0xDFFF

_ESCAPE_PATTERN_COMPILED = re.compile(
    pattern=r'''
        [\\]
        (?:
            u [{] (?P<code_point_hex> [^}]* ) (?P<closing_brace> [}] ) ?
                |
            (?P<escaped_character> [\s\S] )
        ) ?
    ''',
    flags=re.VERBOSE,
)


def decode_code_point(code_point_hex: str, is_closed: bool, token: str, position: int) -> str:
    escape = token[position:]

    if not re.fullmatch(pattern='[0-9a-fA-F]*', string=code_point_hex):
        raise InvalidEscapeException(f'non-hexadecimal digit in `{escape}` of `{token}`', token, position)

    if not is_closed:
        raise UnterminatedEscapeException(f'missing closing brace for `{escape}` of `{token}`', token, position)

    if code_point_hex == '':
        raise InvalidEscapeException(f'empty code point escape `\\u{{}}` in `{token}`', token, position)

    code_point = int(code_point_hex, 16)
    if code_point > MAX_CODE_POINT:
        raise InvalidEscapeException(
            f'code point U+{code_point:X} exceeds U+{MAX_CODE_POINT:X} in `{token}`',
            token, position,
        )
    if MIN_SURROGATE_CODE_POINT <= code_point <= MAX_SURROGATE_CODE_POINT:
        raise InvalidEscapeException(f'surrogate code point U+{code_point:X} in `{token}`', token, position)

    return chr(code_point)


def decode_escape_match(escape_match: re.Match, token: str) -> str:
    position = escape_match.start()

    code_point_hex = escape_match.group('code_point_hex')
    if code_point_hex is not None:
        is_closed = escape_match.group('closing_brace') is not None
        return decode_code_point(code_point_hex, is_closed, token, position)

    escaped_character = escape_match.group('escaped_character')
    if escaped_character is None:
        raise InvalidEscapeException(f'dangling backslash at end of `{token}`', token, position)

    try:
        return CHARACTER_FROM_ESCAPED_CHARACTER[escaped_character]
    except KeyError:
        if escaped_character == 'u':
            message = f'`\\u` not followed by `{{` in `{token}`'
        else:
            message = f'unrecognised escape `\\{escaped_character}` in `{token}`'
        raise InvalidEscapeException(message, token, position)


def decode_escapes(token: str) -> str:
    """
    Decode the escapes in a column token.

    Characters outside of escapes are kept as is.
    """
    if '\\' not in token:
        return token

    def substitute_function(escape_match: re.Match) -> str:
        return decode_escape_match(escape_match, token)

    return _ESCAPE_PATTERN_COMPILED.sub(substitute_function, token)

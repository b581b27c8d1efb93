"""
# charsub: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from charsub._version import __version__
from charsub.constants import (
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    STANDARD_TABLE,
    STANDARD_TABLE_NAME,
    TABLE_SYNTAX_HELP,
)
from charsub.core import build_table
from charsub.engines import SubstitutionEngine
from charsub.exceptions import MalformedLineException, TableException
from charsub.tables import CompiledTable

DESCRIPTION = '''
    Apply a character substitution table to text.
'''
FILE_NAME_HELP = '''
    name of input file to be substituted
    (reads standard input if none given)
'''
TABLE_HELP = '''
    name of table file (defaults to the standard table of TeX-style conventions)
'''
OUTPUT_HELP = '''
    name of output file (defaults to standard output)
'''
LENIENT_MODE_HELP = '''
    skip invalid rules (with a warning) instead of failing
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every input file before and after substitution)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-t', '--table',
        dest='table_file_name',
        default=None,
        help=TABLE_HELP,
        metavar='table.charsub',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_HELP,
        metavar='output.txt',
    )
    argument_parser.add_argument(
        '-l', '--lenient',
        dest='lenient_mode_enabled',
        action='store_true',
        help=LENIENT_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'file_names',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file.txt',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def print_error(message: str, source_name: str, line_number: Optional[int] = None):
    if line_number is None:
        print(f'error: `{source_name}`: {message}', file=sys.stderr)
    else:
        print(f'error: `{source_name}`, line {line_number}: {message}', file=sys.stderr)


def read_file(file_name: str) -> str:
    try:
        with open(file_name, 'r', encoding='utf-8') as file:
            return file.read()
    except FileNotFoundError:
        print(f'error: file `{file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def load_table(table_file_name: Optional[str], lenient_mode_enabled: bool) -> CompiledTable:
    if table_file_name is None:
        table_name = STANDARD_TABLE_NAME
        table_text = STANDARD_TABLE
    else:
        table_name = table_file_name
        table_text = read_file(table_file_name)

    try:
        return build_table(table_text, skip_invalid_lines=lenient_mode_enabled)
    except TableException as table_exception:
        message = table_exception.describe()
        if isinstance(table_exception, MalformedLineException):
            message = f'{message}\n\n{TABLE_SYNTAX_HELP}'
        print_error(message, table_name, table_exception.line_number)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def write_output(output: str, output_file_name: Optional[str]):
    if output_file_name is None:
        sys.stdout.write(output)
        return

    try:
        with open(output_file_name, 'w', encoding='utf-8') as output_file:
            output_file.write(output)
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    file_names = parsed_arguments.file_names
    output_file_name = parsed_arguments.output_file_name

    if output_file_name is not None and output_file_name in file_names:
        print('error: option -o (or --output) cannot name an input file', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    table = load_table(parsed_arguments.table_file_name, parsed_arguments.lenient_mode_enabled)
    substitution_engine = SubstitutionEngine(table, parsed_arguments.verbose_mode_enabled)

    if len(file_names) == 0:
        output = substitution_engine.substitute(sys.stdin.read())
    else:
        output = ''.join(
            substitution_engine.substitute(read_file(file_name))
            for file_name in file_names
        )

    write_output(output, output_file_name)


if __name__ == '__main__':
    main()

"""Parsers for named fields and the interpretation of their values

Which parser is used for a field, and how its raw value is turned into a
Python value, is decided by the FieldKind of the field:

 * SINGLE_LINE fields only consume the rest of the field line.
 * All other kinds consume the field line plus its continuation lines and
   differ only in how the raw value is interpreted.
"""

import enum
from typing import Callable, NamedTuple, Optional, Tuple, Union

from debcopyright.multiline import clean_multiline, join_cleaned_lines
from debcopyright.tokens import (
    Token, field_name, folded_value, horizontal_space, iter_lines, rest_of_line,
)

FieldParser = Callable[[str, int], Optional[Token]]
FieldValue = Union[str, Tuple[str, ...]]


class FieldKind(enum.Enum):
    SINGLE_LINE = 'single-line'
    MULTI_LINE = 'multi-line'
    LINE_LIST = 'line based list'
    # First line is a synopsis, the continuation lines are the license text
    LICENSE = 'license'


def _value_start(name, text, pos):
    # type: (str, str, int) -> Optional[int]
    token = field_name(text, pos)
    if token is None or token.text != name:
        return None
    return horizontal_space(text, token.end).end


def named_single_line_field(name):
    # type: (str) -> FieldParser
    """Create a parser for a single-line field with the given (case-sensitive) name

    The created parser returns the value including the trailing line ending.

        >>> parser = named_single_line_field('Format')
        >>> parser('Format: https://example.com/\\nFiles: *\\n', 0)
        Token(text='https://example.com/\\n', start=8, end=29)
        >>> parser('Files: *\\n', 0) is None
        True
    """

    def _parser(text, pos=0):
        # type: (str, int) -> Optional[Token]
        value_start = _value_start(name, text, pos)
        if value_start is None:
            return None
        return rest_of_line(text, value_start)

    return _parser


def named_multi_line_field(name):
    # type: (str) -> FieldParser
    """Create a parser for a possibly multi-line field with the given name

    The created parser returns the raw value: any newlines and (on the second
    line and beyond) the leading whitespace are left as-is.  If the value
    starts on the line after the field name, the value starts with a newline.
    """

    def _parser(text, pos=0):
        # type: (str, int) -> Optional[Token]
        value_start = _value_start(name, text, pos)
        if value_start is None:
            return None
        return folded_value(text, value_start)

    return _parser


def parse_line_list(value):
    # type: (str) -> Tuple[str, ...]
    """Split a raw value into one entry per line, dropping empty lines

    Order and duplicates are kept.
    """
    entries = (token.text.strip() for token in iter_lines(value))
    return tuple(entry for entry in entries if entry)


def parse_text(text, token):
    # type: (str, Token) -> str
    lines = clean_multiline(text, token.start, token.end)
    if len(lines) > 1 and not lines[0].strip():
        # The value started on the line after the field name
        lines = lines[1:]
    return join_cleaned_lines(lines)


def parse_license(text, token):
    # type: (str, Token) -> Tuple[str, str]
    """Split a License value into its synopsis and its (possibly empty) text"""
    lines = clean_multiline(text, token.start, token.end)
    return lines[0].strip(), join_cleaned_lines(lines[1:])


class FieldSpec(NamedTuple):
    """Describes how one field of a paragraph is parsed"""

    name: str
    kind: FieldKind
    mandatory: bool = False

    @property
    def parser(self):
        # type: () -> FieldParser
        if self.kind is FieldKind.SINGLE_LINE:
            return named_single_line_field(self.name)
        return named_multi_line_field(self.name)

    def interpret(self, text, token):
        # type: (str, Token) -> Union[FieldValue, Tuple[str, str]]
        kind = self.kind
        if kind is FieldKind.SINGLE_LINE:
            return token.text.strip()
        if kind is FieldKind.LINE_LIST:
            return parse_line_list(token.text)
        if kind is FieldKind.LICENSE:
            return parse_license(text, token)
        return parse_text(text, token)

"""Lexical primitives shared by all deb822 style formats

Every function in this module takes the full document plus a start position
and either returns what it matched (with absolute offsets) or None when there
is no match at that position.  Nothing here keeps state between calls.
"""

import re
from typing import Iterator, List, NamedTuple, Optional

from debcopyright.errors import MalformedFieldNameError


_RE_FIELD_NAME = re.compile(r'[A-Za-z0-9][A-Za-z0-9-]*')
_RE_END_OF_LINE_OR_STRING = re.compile(r'\r?\n|\Z')
_RE_LINE = re.compile(r'[^\n]*?(?:\r?\n|\Z)')
# Leading whitespace is insignificant between the colon and the value
_RE_HORIZONTAL_SPACE = re.compile(r'[ \t]*')
_RE_CONTINUATION_LINE = re.compile(r'''
    [ \t]+                  # Mandatory indentation
    [^\s]                   # A continuation line cannot be whitespace only; that
                            # would be a paragraph separator
    [^\n]*?
    (?:\r?\n|\Z)
''', re.VERBOSE)
_RE_BLANK_LINE = re.compile(r'[ \t]*(?:\r?\n|\Z)')
_RE_NON_BLANK_LINE = re.compile(r'[ \t]*[^\s][^\n]*?(?:\r?\n|\Z)')


class Token(NamedTuple):
    """A slice of the input document"""

    text: str
    start: int
    end: int


class Field(NamedTuple):
    """A field name and its raw (uncleaned) value"""

    name: str
    value: Token

    @property
    def end(self):
        # type: () -> int
        return self.value.end


def _match(regex, text, pos):
    # type: (re.Pattern[str], str, int) -> Optional[Token]
    m = regex.match(text, pos)
    if m is None:
        return None
    return Token(m.group(), pos, m.end())


def field_name(text, pos=0):
    # type: (str, int) -> Optional[Token]
    """Match a field name and the colon after it

    The token text is the name without the colon but the token end is after
    the colon.
    """
    m = _RE_FIELD_NAME.match(text, pos)
    if m is None:
        return None
    end = m.end()
    if text[end:end + 1] != ':':
        raise MalformedFieldNameError(
            'Expected ":" after the field name "{name}"'.format(name=m.group()),
            text, end, rule='field name',
        )
    return Token(m.group(), pos, end + 1)


def end_of_line_or_string(text, pos=0):
    # type: (str, int) -> Optional[Token]
    return _match(_RE_END_OF_LINE_OR_STRING, text, pos)


def line(text, pos=0):
    # type: (str, int) -> Token
    """Match the line at pos including its terminator (if any)"""
    m = _RE_LINE.match(text, pos)
    # The pattern can always match (if nothing else, then the empty string at the end)
    assert m is not None
    return Token(m.group(), pos, m.end())


def rest_of_line(text, pos=0):
    # type: (str, int) -> Token
    """Match the remainder of the current line (possibly empty) plus its terminator"""
    return line(text, pos)


def continuation_line(text, pos=0):
    # type: (str, int) -> Optional[Token]
    return _match(_RE_CONTINUATION_LINE, text, pos)


def horizontal_space(text, pos=0):
    # type: (str, int) -> Token
    m = _RE_HORIZONTAL_SPACE.match(text, pos)
    assert m is not None
    return Token(m.group(), pos, m.end())


def blank_line(text, pos=0):
    # type: (str, int) -> Optional[Token]
    """Match a line consisting of nothing but whitespace

    Never matches at the end of the input, where there is no line left.
    """
    if pos >= len(text):
        return None
    return _match(_RE_BLANK_LINE, text, pos)


def skip_blank_lines(text, pos=0):
    # type: (str, int) -> int
    """Return the position after any blank lines at pos"""
    token = blank_line(text, pos)
    while token is not None:
        pos = token.end
        token = blank_line(text, pos)
    return pos


def at_end_of_paragraph(text, pos):
    # type: (str, int) -> bool
    return pos >= len(text) or blank_line(text, pos) is not None


def paragraph(text, pos=0):
    # type: (str, int) -> List[Token]
    """Match the raw lines of the paragraph starting at pos

    A paragraph is the maximal run of non-blank lines; it may be empty.
    """
    lines = []
    token = _match(_RE_NON_BLANK_LINE, text, pos)
    while token is not None:
        lines.append(token)
        token = _match(_RE_NON_BLANK_LINE, text, token.end)
    return lines


def folded_value(text, pos=0):
    # type: (str, int) -> Token
    """Match the rest of the line at pos plus all continuation lines after it"""
    end = rest_of_line(text, pos).end
    token = continuation_line(text, end)
    while token is not None:
        end = token.end
        token = continuation_line(text, end)
    return Token(text[pos:end], pos, end)


def field(text, pos=0):
    # type: (str, int) -> Optional[Field]
    """Match any field (name, colon, optional space and the folded value)"""
    name = field_name(text, pos)
    if name is None:
        return None
    value_start = horizontal_space(text, name.end).end
    return Field(name.text, folded_value(text, value_start))


def iter_lines(text, pos=0, endpos=None):
    # type: (str, int, Optional[int]) -> Iterator[Token]
    """Iterate over the lines between pos and endpos (including terminators)"""
    if endpos is None:
        endpos = len(text)
    while pos < endpos:
        token = line(text, pos)
        if token.end > endpos:
            token = Token(text[pos:endpos], pos, endpos)
        yield token
        pos = token.end

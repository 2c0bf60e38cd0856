"""Unfolding of multi-line field values

A folded value consists of the text on the field line followed by zero or
more continuation lines.  The indentation of the first continuation line is
the indentation of the whole block; it is removed from every continuation
line, while anything indented further keeps the extra whitespace::

    >>> clean_multiline('GPL-2+\\n This program is free software\\n .\\n  - with an indented line')
    ['GPL-2+\\n', 'This program is free software\\n', '\\n', ' - with an indented line']

A continuation line consisting of a single "." (after the indentation) is
how a blank line is written inside a folded value.
"""

import re
from typing import Iterable, List, Optional

from debcopyright.errors import ContinuationIndentError
from debcopyright.tokens import Token, iter_lines


_RE_INDENT = re.compile(r'[ \t]+')
_RE_BLANK_LINE_MARKER = re.compile(r'[ \t]+\.(?P<terminator>\r?\n|\Z)')


def _strip_indent(text, token, indent):
    # type: (str, Token, str) -> str
    line = token.text
    if line.startswith(indent):
        return line[len(indent):]
    # Lines indented less than the block are accepted as long as they are
    # indented at all.
    m = _RE_INDENT.match(line)
    if m is None:
        raise ContinuationIndentError(
            'Continuation line is not indented',
            text, token.start, rule='multi-line value',
        )
    return line[min(m.end(), len(indent)):]


def clean_multiline(text, pos=0, endpos=None):
    # type: (str, int, Optional[int]) -> List[str]
    """Split a folded value into its logical lines

    The value is text[pos:endpos] and must start right after the field name
    (and the space following it).  Every returned line retains its terminator
    if it had one.
    """
    if endpos is None:
        endpos = len(text)
    lines = iter_lines(text, pos, endpos)
    first_line = next(lines, None)
    if first_line is None:
        return ['']

    cleaned = [first_line.text]
    indent = None  # type: Optional[str]
    for token in lines:
        if indent is None:
            m = _RE_INDENT.match(token.text)
            if m is None:
                raise ContinuationIndentError(
                    'Continuation line is not indented',
                    text, token.start, rule='multi-line value',
                )
            indent = m.group()
        marker = _RE_BLANK_LINE_MARKER.fullmatch(token.text)
        if marker is not None:
            cleaned.append(marker.group('terminator'))
            continue
        cleaned.append(_strip_indent(text, token, indent))
    return cleaned


def join_cleaned_lines(lines):
    # type: (Iterable[str]) -> str
    """Join logical lines with newlines after removing trailing whitespace from each"""
    return '\n'.join(line.rstrip() for line in lines)

""" Parser for machine-readable debian/copyright files

The format is defined in
`copyright-format 1.0 <https://www.debian.org/doc/packaging-manuals/copyright-format/1.0/>`_
(also known as DEP-5).  A file consists of a header paragraph followed by
any number of Files paragraphs and stand-alone License paragraphs, in the
order they appear in the file::

    >>> copyright_file = parse_copyright_file(EXAMPLE_COPYRIGHT)
    >>> copyright_file.header_paragraph.upstream_name
    'X Solitaire'
    >>> [p.files for p in copyright_file.all_files_paragraphs()]
    [('*',), ('debian/*',)]
    >>> copyright_file.find_license_paragraph('GPL-2+').text
    '[LICENSE TEXT]'

Parsing is strict: the first syntax error raises a
:class:`debcopyright.errors.ParseError` describing where it happened.
Field values are only checked syntactically; e.g. license names and
glob patterns are returned as-is.
"""

# Copyright (C) 2021 The debcopyright developers
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA

import logging
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple, Union

from debcopyright._util import as_text, position_of
from debcopyright.paragraphs import (
    BodyParagraph, FilesParagraph, HeaderParagraph, LicenseDetailParagraph,
    parse_body_paragraph, parse_header_paragraph,
)
from debcopyright.tokens import paragraph, skip_blank_lines


logger = logging.getLogger(__name__)

AllParagraphTypes = Union[HeaderParagraph, FilesParagraph, LicenseDetailParagraph]


class CopyrightFile(NamedTuple):
    header_paragraph: HeaderParagraph
    body_paragraphs: Tuple[BodyParagraph, ...] = ()

    def all_paragraphs(self):
        # type: () -> Iterator[AllParagraphTypes]
        """Iterate over all paragraphs (header first, then the body in file order)"""
        yield self.header_paragraph
        yield from self.body_paragraphs

    def all_files_paragraphs(self):
        # type: () -> Iterator[FilesParagraph]
        return (p for p in self.body_paragraphs if isinstance(p, FilesParagraph))

    def all_license_paragraphs(self):
        # type: () -> Iterator[LicenseDetailParagraph]
        return (p for p in self.body_paragraphs if isinstance(p, LicenseDetailParagraph))

    def find_license_paragraph(self, name):
        # type: (str) -> Optional[LicenseDetailParagraph]
        """Returns the first stand-alone License paragraph for the given license name"""
        for p in self.all_license_paragraphs():
            if p.name == name:
                return p
        return None


def _log_paragraph(kind, text, start, end):
    # type: (str, str, int, int) -> None
    if logger.isEnabledFor(logging.DEBUG):
        first_line, _ = position_of(text, start)
        raw_lines = paragraph(text, start)
        logger.debug('Parsed %s at line %d (%d lines, %d characters)',
                     kind, first_line, len(raw_lines), end - start)


def parse_copyright_file(sequence,  # type: Union[str, bytes, Iterable[Union[str, bytes]]]
                         *,
                         encoding='utf-8',  # type: str
                         ):
    # type: (...) -> CopyrightFile
    """Parse a machine-readable copyright file

    :param sequence: The content of the file as str or bytes, or an iterable
      over its lines (an open file for reading will do).  The lines must
      include the trailing line ending ("\\n").  The content is read in full
      before parsing starts.
    :param encoding: The encoding used to decode bytes input.
    :raises debcopyright.errors.ParseError: (or one of its subclasses) if the
      file is not syntactically valid.
    :raises UnicodeDecodeError: if bytes input is not valid in `encoding`.
      This happens before parsing starts, so no line or column is reported.
    :raises ValueError: if a line of an iterable input (other than the last
      one) does not end with a newline.
    """
    text = as_text(sequence, encoding=encoding)

    pos = skip_blank_lines(text, 0)
    start = pos
    header, pos = parse_header_paragraph(text, pos)
    _log_paragraph('header paragraph', text, start, pos)
    if header.format.startswith('http://'):
        logger.warning('Format URL uses http instead of https')

    body = []
    while True:
        start = skip_blank_lines(text, pos)
        if start >= len(text):
            break
        # Paragraphs always end on a blank line or at the end of the input
        assert start > pos, "paragraph at offset " + str(pos) + " did not end on a blank line"
        body_paragraph, pos = parse_body_paragraph(text, start)
        _log_paragraph(type(body_paragraph).__name__, text, start, pos)
        body.append(body_paragraph)

    return CopyrightFile(header, tuple(body))

#!/usr/bin/python3
# -*- coding: utf-8 -*- vim: fileencoding=utf-8 :

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

"""Tests for unfolding of multi-line values"""

import pytest

from debcopyright.errors import ContinuationIndentError
from debcopyright.multiline import clean_multiline, join_cleaned_lines


class TestCleanMultiline:

    def test_blank_line_marker(self):
        # type: () -> None
        assert ['0\n', 'a\n', '\n', 'b'] == clean_multiline('0\n  a\n    .\n  b')

    def test_less_indented_line(self):
        # type: () -> None
        # One line is less indented but still indented
        assert ['0\n', 'a\n', '\n', 'b'] == clean_multiline('0\n  a\n  .\n b')

    def test_more_indented_line(self):
        # type: () -> None
        # The extra indentation is kept
        assert ['0\n', 'a\n', '\n', ' b'] == clean_multiline('0\n  a\n    .\n   b')

    def test_indent_is_taken_from_first_continuation_line(self):
        # type: () -> None
        assert ['x\n', 'a\n', 'b'] == clean_multiline('x\n    a\n  b')
        assert ['x\n', 'a\n', '  b'] == clean_multiline('x\n a\n   b')

    def test_tab_indentation(self):
        # type: () -> None
        assert ['x\n', 'a\n', '\tb'] == clean_multiline('x\n\ta\n\t\tb')

    def test_clean_input_is_unchanged(self):
        # type: () -> None
        assert ['foo'] == clean_multiline('foo')
        assert ['foo\n'] == clean_multiline('foo\n')
        assert [''] == clean_multiline('')

    def test_value_starting_on_next_line(self):
        # type: () -> None
        assert ['\n', 'Foo\n', 'Bar'] == clean_multiline('\n Foo\n Bar')

    def test_crlf(self):
        # type: () -> None
        assert ['x\r\n', 'a\r\n', '\r\n', 'b'] == clean_multiline('x\r\n a\r\n .\r\n b')

    def test_region_of_document(self):
        # type: () -> None
        text = 'License: MIT\n foo\n .\n bar\nComment: x\n'
        assert ['MIT\n', 'foo\n', '\n', 'bar\n'] == clean_multiline(text, 9, 26)

    def test_unindented_continuation_line(self):
        # type: () -> None
        with pytest.raises(ContinuationIndentError) as cm:
            clean_multiline('x\n  a\nb')
        assert cm.value.offset == 6
        assert (cm.value.line, cm.value.column) == (3, 1)

    def test_unindented_first_continuation_line(self):
        # type: () -> None
        with pytest.raises(ContinuationIndentError) as cm:
            clean_multiline('x\nb\n')
        assert cm.value.line == 2


class TestJoinCleanedLines:

    def test_join(self):
        # type: () -> None
        assert '0\na\n\nb' == join_cleaned_lines(['0\n', 'a  \n', '\n', 'b'])

    def test_join_crlf(self):
        # type: () -> None
        assert 'a\nb' == join_cleaned_lines(['a\r\n', 'b\r\n'])

    def test_join_nothing(self):
        # type: () -> None
        assert '' == join_cleaned_lines([])

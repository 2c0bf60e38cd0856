"""Exceptions raised while parsing a machine-readable copyright file

Parsing is fail-fast: the first error aborts the parse of the whole document.
Every error knows where it happened (character offset plus line and column)
and which grammar rule was being applied at the time.
"""

from typing import Iterable, Optional

from debcopyright._util import position_of


class ParseError(ValueError):
    """Indicates that the input could not be parsed"""

    is_user_error = True

    def __init__(self,
                 message,  # type: str
                 text,  # type: str
                 offset,  # type: int
                 rule=None,  # type: Optional[str]
                 ):
        # type: (...) -> None
        self.message = message
        self.offset = offset
        self.rule = rule
        # line and column are resolved from the text on demand
        self._text = text
        super().__init__(message)

    @property
    def line(self):
        # type: () -> int
        return position_of(self._text, self.offset)[0]

    @property
    def column(self):
        # type: () -> int
        return position_of(self._text, self.offset)[1]

    def __str__(self):
        # type: () -> str
        location = "line {line}, column {column}".format(line=self.line, column=self.column)
        if self.rule is not None:
            location += ", while parsing " + self.rule
        return "{message} ({location})".format(message=self.message, location=location)


class MalformedFieldNameError(ParseError):
    """A line starts like a field but the name is not followed by a colon"""


class ContinuationIndentError(ParseError):
    """A line inside a folded value has no leading whitespace"""


class UnrecognizedFieldError(ParseError):
    """A paragraph contains a field outside of its recognized set of fields"""


class TrailingContentError(UnrecognizedFieldError):
    """Content that is not a field remains in a paragraph after all fields were consumed"""


class MissingMandatoryFieldError(ParseError):
    """A paragraph lacks one or more of its mandatory fields"""

    def __init__(self,
                 field_names,  # type: Iterable[str]
                 message,  # type: str
                 text,  # type: str
                 offset,  # type: int
                 rule=None,  # type: Optional[str]
                 ):
        # type: (...) -> None
        self.field_names = tuple(field_names)
        super().__init__(message, text, offset, rule=rule)


class UnexpectedEndOfInputError(MissingMandatoryFieldError):
    """The input ended while a paragraph still lacked mandatory fields"""


class NoMatchingParagraphTypeError(ParseError):
    """A body paragraph is neither a Files paragraph nor a stand-alone License paragraph"""

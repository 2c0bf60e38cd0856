# mypy --strict insists on either "from .X import Y" or "from debcopyright.X import Y as Y"
# for re-exporting; pylint on the CI fails on the relative imports, so we use
# the latter.

# pylint: disable=useless-import-alias
from debcopyright.copyright import (
    parse_copyright_file as parse_copyright_file,
    CopyrightFile as CopyrightFile,
)
from debcopyright.paragraphs import (
    HeaderParagraph as HeaderParagraph,
    FilesParagraph as FilesParagraph,
    LicenseDetailParagraph as LicenseDetailParagraph,
    BodyParagraph as BodyParagraph,
)
from debcopyright.multiline import clean_multiline as clean_multiline
from debcopyright.errors import (
    ParseError as ParseError,
    MalformedFieldNameError as MalformedFieldNameError,
    MissingMandatoryFieldError as MissingMandatoryFieldError,
    UnrecognizedFieldError as UnrecognizedFieldError,
    TrailingContentError as TrailingContentError,
    ContinuationIndentError as ContinuationIndentError,
    UnexpectedEndOfInputError as UnexpectedEndOfInputError,
    NoMatchingParagraphTypeError as NoMatchingParagraphTypeError,
)

__all__ = [
    'parse_copyright_file',
    'CopyrightFile',
    'HeaderParagraph',
    'FilesParagraph',
    'LicenseDetailParagraph',
    'BodyParagraph',
    'clean_multiline',
    'ParseError',
    'MalformedFieldNameError',
    'MissingMandatoryFieldError',
    'UnrecognizedFieldError',
    'TrailingContentError',
    'ContinuationIndentError',
    'UnexpectedEndOfInputError',
    'NoMatchingParagraphTypeError',
]

"""Assembly of fields into the typed paragraphs of a copyright file

Each paragraph type has a closed set of recognized fields (its schema).  The
fields of a paragraph may appear in any order, but every field in the
paragraph must be a recognized one and appear at most once, and all of the
mandatory fields must be present.
"""

from typing import Dict, NamedTuple, Optional, Tuple, Union

from debcopyright.errors import (
    MissingMandatoryFieldError, NoMatchingParagraphTypeError, ParseError,
    TrailingContentError, UnexpectedEndOfInputError, UnrecognizedFieldError,
)
from debcopyright.fields import FieldKind, FieldSpec
from debcopyright.tokens import Token, at_end_of_paragraph, field, field_name


class ParagraphSchema(NamedTuple):
    name: str
    fields: Tuple[FieldSpec, ...]

    def interpret(self, text, tokens):
        # type: (str, Dict[str, Token]) -> Dict[str, object]
        """Interpret the raw values of the fields present in the paragraph"""
        return {spec.name: spec.interpret(text, tokens[spec.name])
                for spec in self.fields if spec.name in tokens}


HEADER_SCHEMA = ParagraphSchema('header paragraph', (
    FieldSpec('Format', FieldKind.SINGLE_LINE, mandatory=True),
    FieldSpec('Upstream-Name', FieldKind.SINGLE_LINE),
    FieldSpec('Upstream-Contact', FieldKind.LINE_LIST),
    FieldSpec('Source', FieldKind.MULTI_LINE),
    FieldSpec('Disclaimer', FieldKind.MULTI_LINE),
    FieldSpec('Comment', FieldKind.MULTI_LINE),
    FieldSpec('License', FieldKind.LICENSE),
    FieldSpec('Copyright', FieldKind.LINE_LIST),
))

FILES_SCHEMA = ParagraphSchema('Files paragraph', (
    FieldSpec('Files', FieldKind.LINE_LIST, mandatory=True),
    FieldSpec('Copyright', FieldKind.LINE_LIST, mandatory=True),
    FieldSpec('License', FieldKind.LICENSE, mandatory=True),
    FieldSpec('Comment', FieldKind.MULTI_LINE),
))

LICENSE_DETAIL_SCHEMA = ParagraphSchema('License paragraph', (
    FieldSpec('License', FieldKind.LICENSE, mandatory=True),
    FieldSpec('Comment', FieldKind.MULTI_LINE),
))


def _unconsumed_content_error(schema, text, pos, seen):
    # type: (ParagraphSchema, str, int, Dict[str, Token]) -> ParseError
    leftover = field(text, pos)
    if leftover is None:
        return TrailingContentError('Unexpected content that is not part of any field',
                                    text, pos, rule=schema.name)
    if leftover.name in seen:
        msg = 'Duplicate field "{field}" in {paragraph}'
    else:
        msg = 'Unrecognized field "{field}" in {paragraph}'
    return UnrecognizedFieldError(msg.format(field=leftover.name, paragraph=schema.name),
                                  text, pos, rule=schema.name)


def assemble_paragraph(schema, text, pos=0):
    # type: (ParagraphSchema, str, int) -> Tuple[Dict[str, Token], int]
    """Consume the fields of one paragraph in any order

    Every field parser of the schema, which has not matched yet, is attempted
    at the current position until none of them match.  At that point the
    paragraph must end and all mandatory fields must have been seen.

    :returns: The raw value of each field seen (keyed by field name) and the
      position right after the paragraph.
    """
    seen = {}  # type: Dict[str, Token]
    parsers = [(spec.name, spec.parser) for spec in schema.fields]
    progress = True
    while progress:
        progress = False
        for name, parser in parsers:
            if name in seen:
                continue
            token = parser(text, pos)
            if token is not None:
                seen[name] = token
                pos = token.end
                progress = True
                break

    if not at_end_of_paragraph(text, pos):
        raise _unconsumed_content_error(schema, text, pos, seen)

    missing = [spec.name for spec in schema.fields if spec.mandatory and spec.name not in seen]
    if missing:
        msg = 'Missing mandatory field(s) {fields} in {paragraph}'.format(
            fields=', '.join('"' + m + '"' for m in missing),
            paragraph=schema.name,
        )
        if seen and pos >= len(text):
            raise UnexpectedEndOfInputError(missing, 'Input ended early. ' + msg,
                                            text, pos, rule=schema.name)
        raise MissingMandatoryFieldError(missing, msg, text, pos, rule=schema.name)
    return seen, pos


class HeaderParagraph(NamedTuple):
    """The first paragraph of a copyright file"""

    format: str
    upstream_name: Optional[str] = None
    upstream_contact: Tuple[str, ...] = ()
    source: Optional[str] = None
    disclaimer: Optional[str] = None
    comment: Optional[str] = None
    license: Optional[str] = None
    license_text: str = ''
    copyright: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text, pos=0):
        # type: (str, int) -> Tuple[HeaderParagraph, int]
        tokens, end = assemble_paragraph(HEADER_SCHEMA, text, pos)
        values = HEADER_SCHEMA.interpret(text, tokens)
        license, license_text = values.get('License', (None, ''))
        header = cls(
            format=values['Format'],
            upstream_name=values.get('Upstream-Name'),
            upstream_contact=values.get('Upstream-Contact', ()),
            source=values.get('Source'),
            disclaimer=values.get('Disclaimer'),
            comment=values.get('Comment'),
            license=license,
            license_text=license_text,
            copyright=values.get('Copyright', ()),
        )
        return header, end


class FilesParagraph(NamedTuple):
    """Copyright and license of the files matching one or more glob patterns"""

    files: Tuple[str, ...]
    copyright: Tuple[str, ...]
    license: str
    license_text: str = ''
    comment: Optional[str] = None

    @classmethod
    def parse(cls, text, pos=0):
        # type: (str, int) -> Tuple[FilesParagraph, int]
        tokens, end = assemble_paragraph(FILES_SCHEMA, text, pos)
        values = FILES_SCHEMA.interpret(text, tokens)
        license, license_text = values['License']
        paragraph = cls(
            files=values['Files'],
            copyright=values['Copyright'],
            license=license,
            license_text=license_text,
            comment=values.get('Comment'),
        )
        return paragraph, end


class LicenseDetailParagraph(NamedTuple):
    """The full text of a license referenced by name elsewhere in the file"""

    name: str
    text: str
    comment: Optional[str] = None

    @classmethod
    def parse(cls, text, pos=0):
        # type: (str, int) -> Tuple[LicenseDetailParagraph, int]
        tokens, end = assemble_paragraph(LICENSE_DETAIL_SCHEMA, text, pos)
        values = LICENSE_DETAIL_SCHEMA.interpret(text, tokens)
        name, license_text = values['License']
        return cls(name=name, text=license_text, comment=values.get('Comment')), end


BodyParagraph = Union[FilesParagraph, LicenseDetailParagraph]


def parse_header_paragraph(text, pos=0):
    # type: (str, int) -> Tuple[HeaderParagraph, int]
    return HeaderParagraph.parse(text, pos)


def parse_body_paragraph(text, pos=0):
    # type: (str, int) -> Tuple[BodyParagraph, int]
    """Parse a Files paragraph or, failing that, a stand-alone License paragraph

    When both fail, the error from the attempt that got furthest into the
    paragraph is raised (the Files paragraph wins ties).
    """
    try:
        return FilesParagraph.parse(text, pos)
    except ParseError as e:
        files_error = e
    try:
        return LicenseDetailParagraph.parse(text, pos)
    except ParseError as e:
        license_error = e

    if license_error.offset > files_error.offset:
        raise license_error
    if isinstance(files_error, UnrecognizedFieldError) and files_error.offset == pos:
        name = field_name(text, pos)
        msg = 'Paragraph is neither a Files paragraph nor a License paragraph'
        if name is not None:
            msg += ' (it starts with the field "' + name.text + '")'
        raise NoMatchingParagraphTypeError(msg, text, pos, rule='body paragraph') from files_error
    raise files_error

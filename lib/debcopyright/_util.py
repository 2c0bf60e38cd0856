import logging
from typing import Callable, Iterable, Optional, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from debcopyright.copyright import CopyrightFile


def position_of(text, offset):
    # type: (str, int) -> Tuple[int, int]
    """Translate a character offset into a 1-based (line, column) pair"""
    line_start = text.rfind('\n', 0, offset) + 1
    return text.count('\n', 0, offset) + 1, offset - line_start + 1


def as_text(sequence, encoding='utf-8'):
    # type: (Union[str, bytes, Iterable[Union[str, bytes]]], str) -> str
    """Materialize the input into a single str

    :param sequence: Either the full text (str or bytes) or an iterable of lines
      (a file open for reading will do).  Lines must include their trailing
      newline except for the last one.
    :param encoding: Used to decode bytes (both for the full text and for lines).
    :raises UnicodeDecodeError: if the bytes are not valid in the encoding.
    """
    if isinstance(sequence, bytes):
        return sequence.decode(encoding)
    if isinstance(sequence, str):
        return sequence

    lines = []
    for no, line in enumerate(sequence, start=1):
        if isinstance(line, bytes):
            line = line.decode(encoding)
        if lines and not lines[-1].endswith('\n'):
            # We expect newlines at the end of each line except the last.
            raise ValueError("Invalid line iterator: Line " + str(no - 1) + " did not end on a"
                             " newline and it is not the last line in the stream!")
        lines.append(line)
    return ''.join(lines)


def print_copyright_file(copyright_file,  # type: CopyrightFile
                         *,
                         output_function=None,  # type: Optional[Callable[[str], None]]
                         ):
    # type: (...) -> None
    """Debugging aid, which dumps a parsed copyright file paragraph by paragraph

    :param copyright_file: The parsed file to dump.
    :param output_function: Callable that receives a single str argument and is responsible
      for "displaying" that line. The callable may be invoked multiple times (one per line
      of output).  Defaults to logging.info if omitted.
    """
    if output_function is None:
        output_function = logging.info
    for paragraph in copyright_file.all_paragraphs():
        output_function(paragraph.__class__.__name__)
        for attribute, value in zip(paragraph._fields, paragraph):
            if value is None or value == '' or value == ():
                continue
            output_function('  ' + attribute + ': ' + repr(value))

import logging
import os
import sys
from typing import Iterator, List, Optional, TextIO

from .binary_check import is_binary_file, get_file_encoding

logger = logging.getLogger(__name__)

STDIN_NAME = '-'


def _check_readable(filepath: str) -> None:
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"File not found: {filepath}")
    if os.path.isdir(filepath):
        raise ValueError(f"Is a directory: {filepath}")
    if is_binary_file(filepath):
        raise ValueError(f"Cannot read binary file: {filepath}")


def _strip_newline(line: str) -> str:
    if line.endswith('\r\n'):
        return line[:-2]
    if line.endswith('\n') or line.endswith('\r'):
        return line[:-1]
    return line


def read_file_lines(filepath: str, encoding: Optional[str] = None) -> List[str]:
    _check_readable(filepath)
    enc = encoding or get_file_encoding(filepath)
    logger.debug("Reading %s as %s", filepath, enc)
    with open(filepath, 'r', encoding=enc, errors='replace', newline='') as f:
        return list(iter_stream_lines(f))


def iter_stream_lines(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield _strip_newline(line)


def iter_file_lines(filepath: str, encoding: Optional[str] = None) -> Iterator[str]:
    """Lazily yield the lines of a text file without their line endings.

    ``-`` reads standard input. The file is checked when this is called, and
    opened on the first pull; it is closed once the lines run out or the
    generator is discarded.
    """
    if filepath == STDIN_NAME:
        return iter_stream_lines(sys.stdin)
    _check_readable(filepath)
    enc = encoding or get_file_encoding(filepath)
    return _iter_open_file(filepath, enc)


def _iter_open_file(filepath: str, encoding: str) -> Iterator[str]:
    logger.debug("Streaming %s as %s", filepath, encoding)
    with open(filepath, 'r', encoding=encoding, errors='replace', newline='') as f:
        yield from iter_stream_lines(f)

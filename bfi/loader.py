"""
Program source loading.

Sources are read as raw bytes and decoded as Latin-1, so every byte of the
file becomes exactly one program character and nothing is ever rejected
for its encoding. Files at or above READ_MAX_LEN bytes are refused.
"""

import io
import logging
import os
from enum import Enum
from typing import BinaryIO, Optional

logger = logging.getLogger(__name__)

READ_MAX_LEN = 1 << 20


class ReadFileStatus(Enum):
    OK = 0
    FSEEK_ERROR = 1
    MAXLEN_ERROR = 2
    MALLOC_ERROR = 3
    FREAD_ERROR = 4

    @property
    def label(self) -> str:
        return f"READFILE_{self.name}"


class ProgramLoadError(Exception):
    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class OpenFileError(ProgramLoadError):
    """The source file could not be opened at all."""


class ReadFileError(ProgramLoadError):
    """The source file was opened but its contents could not be read."""

    def __init__(self, status: ReadFileStatus, message: str, path: Optional[str] = None):
        super().__init__(message, path)
        self.status = status


def read_program(f: BinaryIO, max_len: int = READ_MAX_LEN, path: Optional[str] = None) -> str:
    """Read a whole program from an open binary file."""
    try:
        length = f.seek(0, io.SEEK_END)
        f.seek(0)
    except (OSError, ValueError) as e:
        raise ReadFileError(ReadFileStatus.FSEEK_ERROR, f"cannot seek source: {e}", path) from e

    if length >= max_len:
        raise ReadFileError(ReadFileStatus.MAXLEN_ERROR,
                            f"source is {length} bytes, limit is {max_len}", path)

    try:
        data = f.read(length)
    except MemoryError as e:
        raise ReadFileError(ReadFileStatus.MALLOC_ERROR, "cannot allocate source buffer", path) from e
    except OSError as e:
        raise ReadFileError(ReadFileStatus.FREAD_ERROR, f"cannot read source: {e}", path) from e

    if data is None or len(data) != length:
        got = 0 if data is None else len(data)
        raise ReadFileError(ReadFileStatus.FREAD_ERROR, f"short read: {got} of {length} bytes", path)

    return data.decode("latin-1")


def load_program(path: str, max_len: int = READ_MAX_LEN) -> str:
    """Open a source file and return its program text."""
    try:
        f = open(path, "rb")
    except OSError as e:
        raise OpenFileError(f"Error: Reading file '{path}'", os.fspath(path)) from e

    with f:
        program = read_program(f, max_len=max_len, path=os.fspath(path))

    logger.debug(f"Loaded program: {len(program)} bytes from {path}")
    return program

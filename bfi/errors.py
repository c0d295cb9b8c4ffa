"""
Execution outcomes for the Brainfuck interpreter.

Every run ends in exactly one of four states:

    OK                    the program counter ran off the end of the program
    OVERFLOW              '>' was executed on the last tape cell
    UNDERFLOW             '<' was executed on the first tape cell
    UNBALANCED_BRACKETS   a '[' or ']' had no partner inside the program

Failures are raised as exceptions at the instruction that triggered them.
Hosts translate them back to a Status (and an exit code) at the boundary.
"""

from enum import Enum
from typing import Optional


class Status(Enum):
    OK = 0
    OVERFLOW = 1
    UNDERFLOW = 2
    UNBALANCED_BRACKETS = 3

    @property
    def label(self) -> str:
        """Diagnostic name, e.g. BF_ERROR_OVERFLOW."""
        if self is Status.OK:
            return "BF_OK"
        return f"BF_ERROR_{self.name}"


class BrainfuckError(Exception):
    """Base class for errors that abort a running program."""

    status: Status = Status.OK

    def __init__(self, message: str, pc: Optional[int] = None, pointer: Optional[int] = None):
        super().__init__(message)
        self.pc = pc
        self.pointer = pointer


class PointerOverflow(BrainfuckError):
    status = Status.OVERFLOW


class PointerUnderflow(BrainfuckError):
    status = Status.UNDERFLOW


class UnbalancedBrackets(BrainfuckError):
    status = Status.UNBALANCED_BRACKETS

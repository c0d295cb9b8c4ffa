"""bfi: a Brainfuck interpreter with a bounded, non-wrapping data pointer."""

from .brainfuck import TAPE_SIZE, BrainfuckInterpreter, EofPolicy, Tape
from .errors import BrainfuckError, PointerOverflow, PointerUnderflow, Status, UnbalancedBrackets

__version__ = "0.1.0"

__all__ = [
    "TAPE_SIZE",
    "BrainfuckError",
    "BrainfuckInterpreter",
    "EofPolicy",
    "PointerOverflow",
    "PointerUnderflow",
    "Status",
    "Tape",
    "UnbalancedBrackets",
]

"""
Brainfuck Interpreter

Brainfuck is an esoteric programming language with only 8 commands:
    >   Move the pointer to the right
    <   Move the pointer to the left
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    .   Output the byte in the cell at the pointer
    ,   Input a byte and store it in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back past the matching [ if the cell at the pointer is nonzero

All other characters are treated as comments: they are stepped over.

The tape is a fixed run of byte cells. Cells wrap modulo 256, the pointer
does not: moving off either end of the tape aborts the program.
"""

import sys
from enum import Enum
from typing import BinaryIO, Optional

import numpy as np

from .errors import PointerOverflow, PointerUnderflow, UnbalancedBrackets

TAPE_SIZE = 30000


class EofPolicy(Enum):
    """What ',' stores when the input stream is exhausted."""
    UNCHANGED = "unchanged"
    ZERO = "zero"
    MAX = "max"


class Tape:
    """Fixed-size byte tape with a single data pointer."""

    def __init__(self, size: int = TAPE_SIZE):
        if size < 1:
            raise ValueError(f"tape size must be positive, got {size}")
        self.cells = np.zeros(size, dtype=np.uint8)
        self.pointer = 0

    def __len__(self) -> int:
        return len(self.cells)

    def __getitem__(self, index: int) -> int:
        return int(self.cells[index])

    def move_right(self):
        if self.pointer == len(self.cells) - 1:
            raise PointerOverflow(f"pointer moved past cell {self.pointer}", pointer=self.pointer)
        self.pointer += 1

    def move_left(self):
        if self.pointer == 0:
            raise PointerUnderflow("pointer moved before cell 0", pointer=self.pointer)
        self.pointer -= 1

    def increment_cell(self):
        self.cells[self.pointer] = (int(self.cells[self.pointer]) + 1) & 0xFF

    def decrement_cell(self):
        self.cells[self.pointer] = (int(self.cells[self.pointer]) - 1) & 0xFF

    def read_cell(self) -> int:
        return int(self.cells[self.pointer])

    def write_cell(self, byte: int):
        self.cells[self.pointer] = byte & 0xFF

    def window(self, start: int, end: int) -> list:
        """Cell values in [start, end), clipped to the tape."""
        start = max(0, start)
        end = min(len(self.cells), end)
        return [int(v) for v in self.cells[start:end]]


class BrainfuckInterpreter:
    def __init__(self, tape_size: int = TAPE_SIZE, stdin: Optional[BinaryIO] = None,
                 stdout: Optional[BinaryIO] = None, eof_policy: EofPolicy = EofPolicy.UNCHANGED):
        self.tape_size = tape_size
        self.stdin = stdin if stdin is not None else sys.stdin.buffer
        self.stdout = stdout if stdout is not None else sys.stdout.buffer
        self.eof_policy = eof_policy
        self.program = ""
        self.pc = 0
        self.tape: Optional[Tape] = None

    def run(self, program: str, tape: Optional[Tape] = None) -> Tape:
        """Execute a program until the program counter runs off its end.

        A fresh tape is allocated unless one is handed in. Failures are
        raised as BrainfuckError subclasses; cells already written stay
        written.
        """
        self.program = program
        self.pc = 0
        self.tape = tape if tape is not None else Tape(self.tape_size)

        try:
            while self.pc < len(self.program):
                self.step()
        except (PointerOverflow, PointerUnderflow) as exc:
            exc.pc = self.pc
            raise
        finally:
            self.stdout.flush()

        return self.tape

    def step(self):
        """Execute the instruction at the program counter."""
        cmd = self.program[self.pc]
        tape = self.tape

        if cmd == '>':
            tape.move_right()
        elif cmd == '<':
            tape.move_left()
        elif cmd == '+':
            tape.increment_cell()
        elif cmd == '-':
            tape.decrement_cell()
        elif cmd == '.':
            self.stdout.write(bytes((tape.read_cell(),)))
        elif cmd == ',':
            self._read_input()
        elif cmd == '[':
            if tape.read_cell() == 0:
                self.pc = self._find_matching_close(self.pc)
                return
        elif cmd == ']':
            if tape.read_cell() != 0:
                self.pc = self._find_matching_open(self.pc)
                return

        self.pc += 1

    def _read_input(self):
        # Prompts written so far must be visible before we block on input
        self.stdout.flush()
        data = self.stdin.read(1)
        if data:
            self.tape.write_cell(data[0])
        elif self.eof_policy is EofPolicy.ZERO:
            self.tape.write_cell(0)
        elif self.eof_policy is EofPolicy.MAX:
            self.tape.write_cell(0xFF)

    def _find_matching_close(self, start: int) -> int:
        """Scan forward from the '[' at start; return the index just past its ']'."""
        depth = 1
        i = start
        while depth > 0:
            i += 1
            if i == len(self.program):
                raise UnbalancedBrackets(f"unmatched '[' at position {start}", pc=start,
                                         pointer=self.tape.pointer)
            if self.program[i] == '[':
                depth += 1
            elif self.program[i] == ']':
                depth -= 1
        return i + 1

    def _find_matching_open(self, start: int) -> int:
        """Scan backward from the ']' at start; return the index just past its '['."""
        depth = 1
        i = start
        while depth > 0:
            if i == 0:
                raise UnbalancedBrackets(f"unmatched ']' at position {start}", pc=start,
                                         pointer=self.tape.pointer)
            i -= 1
            if self.program[i] == ']':
                depth += 1
            elif self.program[i] == '[':
                depth -= 1
        return i + 1

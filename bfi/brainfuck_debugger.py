"""
Brainfuck Step-by-Step Tracer

Runs a program exactly like BrainfuckInterpreter while logging, before each
instruction, the position in the program and a window of the tape around
the data pointer. Output goes through the `logging` module at DEBUG level.
"""

import logging
from typing import Optional

from .brainfuck import BrainfuckInterpreter

logger = logging.getLogger(__name__)


class BrainfuckDebugger(BrainfuckInterpreter):
    """Extended Brainfuck interpreter with step-by-step tracing."""

    def __init__(self, *args, show_memory_range: int = 10, max_trace_steps: Optional[int] = 1000, **kwargs):
        super().__init__(*args, **kwargs)
        self.show_memory_range = show_memory_range
        self.max_trace_steps = max_trace_steps
        self.step_count = 0

    def run(self, program, tape=None):
        self.step_count = 0
        return super().run(program, tape)

    def step(self):
        self.step_count += 1
        if logger.isEnabledFor(logging.DEBUG):
            if self.max_trace_steps is None or self.step_count <= self.max_trace_steps:
                cmd = self.program[self.pc]
                logger.debug(f"Step {self.step_count}: execute {cmd!r} at position {self.pc}\n{self.format_state()}")
            elif self.step_count == self.max_trace_steps + 1:
                logger.debug(f"Trace stopped after {self.max_trace_steps} steps; execution continues")
        super().step()

    def format_state(self) -> str:
        """Show program position, tape window and pointer as text."""
        lines = []

        # Program context around the program counter
        context = 20
        start = max(0, self.pc - context)
        end = min(len(self.program), self.pc + context + 1)
        before = self.program[start:self.pc]
        current = self.program[self.pc] if self.pc < len(self.program) else ""
        after = self.program[self.pc + 1:end]
        lines.append(f"Program:  {before!r}[{current}]{after!r}")

        # Memory window focused around the pointer
        tape = self.tape
        start = max(0, tape.pointer - self.show_memory_range // 2)
        end = min(len(tape), start + self.show_memory_range)
        if end - start < self.show_memory_range:
            start = max(0, end - self.show_memory_range)

        values = tape.window(start, end)
        memory_vals = [f"{v:3d}" for v in values]
        memory_ptrs = [" ^ " if i == tape.pointer else "   " for i in range(start, end)]
        memory_addrs = [f"{i:3d}" for i in range(start, end)]

        lines.append("Memory:   [" + "|".join(memory_vals) + "]")
        lines.append("Pointer:   " + " ".join(memory_ptrs))
        lines.append("Address:   " + " ".join(memory_addrs))
        return "\n".join(lines)

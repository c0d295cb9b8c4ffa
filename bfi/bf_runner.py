import io
from dataclasses import dataclass
from typing import Optional

from .brainfuck import BrainfuckInterpreter, Tape
from .config import InterpreterConfig
from .errors import BrainfuckError, Status


@dataclass
class RunResult:
    status: Status
    output: bytes
    tape: Optional[Tape]
    error: Optional[BrainfuckError] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


def run_once(code: str, input_data: bytes = b"", config: Optional[InterpreterConfig] = None) -> RunResult:
    """Execute BF code against in-memory input, collecting output and final status.
    Uses a fresh tape each time (stateless), so repeated calls are independent.
    """
    cfg = config or InterpreterConfig()
    stdout = io.BytesIO()
    itp = BrainfuckInterpreter(
        tape_size=cfg.tape_size,
        stdin=io.BytesIO(input_data),
        stdout=stdout,
        eof_policy=cfg.eof_policy,
    )
    try:
        tape = itp.run(code)
    except BrainfuckError as e:
        return RunResult(status=e.status, output=stdout.getvalue(), tape=itp.tape, error=e)
    return RunResult(status=Status.OK, output=stdout.getvalue(), tape=tape)

"""
run_once tests: end-to-end programs against in-memory streams.
"""

from bfi.bf_runner import run_once
from bfi.brainfuck import EofPolicy
from bfi.config import InterpreterConfig
from bfi.errors import PointerOverflow, Status

HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


class TestRunOnce:

    def test_echo_succeeds(self):
        result = run_once(",.", b"A")
        assert result.ok
        assert result.status is Status.OK
        assert result.output == b"A"
        assert result.error is None

    def test_doubling(self):
        result = run_once(",[->++<]>.", bytes([21]))
        assert result.output == bytes([42])

    def test_failure_is_captured(self):
        result = run_once("+.<", b"")
        assert not result.ok
        assert result.status is Status.UNDERFLOW
        assert result.output == b"\x01"
        assert result.tape.read_cell() == 1

    def test_unbalanced(self):
        assert run_once("[").status is Status.UNBALANCED_BRACKETS
        assert run_once("+]").status is Status.UNBALANCED_BRACKETS

    def test_config_is_applied(self):
        cfg = InterpreterConfig(tape_size=2, eof_policy=EofPolicy.MAX)
        result = run_once(",.>>", b"", config=cfg)
        assert result.output == b"\xff"
        assert result.status is Status.OVERFLOW
        assert isinstance(result.error, PointerOverflow)

    def test_hello_world(self):
        result = run_once(HELLO_WORLD)
        assert result.ok
        assert result.output == b"Hello World!\n"

    def test_repeat_runs_are_identical(self):
        """Independent fresh tapes give identical output and status."""
        program = "+++[>+++++<-]>[.-]" + "<<"
        first = run_once(program)
        second = run_once(program)
        assert first.output == second.output
        assert first.status is second.status is Status.UNDERFLOW
        assert first.tape is not second.tape

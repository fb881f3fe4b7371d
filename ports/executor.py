"""
Port: Executor
Odpowiedzialność: wykonanie komendy Com do stanu końcowego.
"""
from typing import Protocol, runtime_checkable

from contracts import Com
from ports.state import ProgramState


@runtime_checkable
class Executor(Protocol):
    def execute(self, c: Com, state: ProgramState) -> ProgramState:
        """
        Runs a command to completion and returns the final state.
        The given state is not mutated.
        Errors raised by expression evaluation abort the whole run and
        propagate unchanged; no partial state is returned.
        May not terminate for a diverging While loop unless a step budget
        or cancellation callback is configured on the adapter.
        """
        ...

"""
Port: Evaluator
Odpowiedzialność: deterministyczne liczenie wyrażeń Aexp/Bexp względem stanu, bez jego zmiany.
"""
from typing import Protocol, runtime_checkable

from contracts import Aexp, Bexp, Number, Truth
from ports.state import ProgramState


@runtime_checkable
class Evaluator(Protocol):
    def eval_aexp(self, a: Aexp, state: ProgramState) -> Number:
        """
        Evaluates an arithmetic expression against a read-only state.
        Operands are evaluated left to right.
        Raises UndefinedVariable for a read of an unbound variable.
        Raises IntegerOverflow only under the checked overflow policy.
        """
        ...

    def eval_bexp(self, b: Bexp, state: ProgramState) -> Truth:
        """
        Evaluates a boolean expression against a read-only state.
        And/Or short-circuit: the right operand is never evaluated when the
        left operand already decides the result.
        Raises PoisonEvaluated if a Poison node is reached.
        """
        ...

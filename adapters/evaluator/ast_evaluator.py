"""
Adapter: ASTEvaluator
Implementuje port Evaluator — rekurencyjne przejście Aexp/Bexp względem stanu.

Stan jest tylko czytany: ewaluacja wyrażenia nigdy nie zmienia związanych
zmiennych ani ich wartości.

eval_aexp()  wartość Number; lewy operand liczony przed prawym
eval_bexp()  wartość Truth; and/or ze skróconą ewaluacją (prawy operand
             nie jest nawet oglądany, gdy lewy rozstrzyga wynik)

Polityka przepełnienia (OverflowPolicy) dotyczy wyników Add/Sub/Mul:
  unbounded  int Pythona bez ograniczeń
  wrap       zawijanie U2 do int_width bitów
  checked    IntegerOverflow poza zakresem
"""
from __future__ import annotations

import logging
import operator

from contracts import (
    FALSE,
    TRUE,
    Add,
    Aexp,
    And,
    Bexp,
    Eq,
    IntegerOverflow,
    Le,
    Lit,
    Mul,
    N,
    Not,
    Number,
    Or,
    OverflowPolicy,
    Poison,
    PoisonEvaluated,
    Sub,
    Truth,
    UndefinedVariable,
    Var,
)
from ports.state import ProgramState

logger = logging.getLogger("imp.evaluator")

# Mapowanie typów węzłów na operacje Number
_OP_FUNCS = {
    Add: operator.add,
    Sub: operator.sub,
    Mul: operator.mul,
}


class ASTEvaluator:
    """Ewaluator wyrażeń arytmetycznych i logicznych IMP."""

    def __init__(
        self,
        overflow: OverflowPolicy = OverflowPolicy.UNBOUNDED,
        int_width: int = 32,
    ) -> None:
        if int_width < 2:
            raise ValueError(f"int_width must be at least 2, got {int_width}")
        self.overflow = OverflowPolicy(overflow)
        self.int_width = int_width
        self._min = -(1 << (int_width - 1))
        self._max = (1 << (int_width - 1)) - 1
        self._modulus = 1 << int_width

    # -- Evaluator protocol ------------------------------------------------

    def eval_aexp(self, a: Aexp, state: ProgramState) -> Number:
        if isinstance(a, N):
            return a.value

        if isinstance(a, Var):
            value = state.lookup(a.name)
            if value is None:
                raise UndefinedVariable(a.name)
            return value

        fn = _OP_FUNCS.get(type(a))
        if fn is None:
            raise TypeError(f"Nieznany typ węzła Aexp: {type(a)}")

        left = self.eval_aexp(a.left, state)     # type: ignore[union-attr]
        right = self.eval_aexp(a.right, state)   # type: ignore[union-attr]
        result = fn(left, right)
        if self.overflow is not OverflowPolicy.UNBOUNDED:
            result = self._fit(result)
        return result

    def eval_bexp(self, b: Bexp, state: ProgramState) -> Truth:
        if isinstance(b, Lit):
            return b.value

        if isinstance(b, Le):
            return TRUE if self.eval_aexp(b.left, state) <= self.eval_aexp(b.right, state) else FALSE

        if isinstance(b, Eq):
            return TRUE if self.eval_aexp(b.left, state) == self.eval_aexp(b.right, state) else FALSE

        if isinstance(b, Not):
            return ~self.eval_bexp(b.operand, state)

        if isinstance(b, And):
            if not self.eval_bexp(b.left, state).value:
                return FALSE
            return self.eval_bexp(b.right, state)

        if isinstance(b, Or):
            if self.eval_bexp(b.left, state).value:
                return TRUE
            return self.eval_bexp(b.right, state)

        if isinstance(b, Poison):
            raise PoisonEvaluated()

        raise TypeError(f"Nieznany typ węzła Bexp: {type(b)}")

    # -- Prywatne ----------------------------------------------------------

    def _fit(self, n: Number) -> Number:
        """Stosuje politykę przepełnienia do wyniku operacji."""
        if self._min <= n.value <= self._max:
            return n
        if self.overflow is OverflowPolicy.CHECKED:
            logger.debug("Overflow: %d poza zakresem %d bitów", n.value, self.int_width)
            raise IntegerOverflow(n.value, self.int_width)
        return Number(value=(n.value - self._min) % self._modulus + self._min)

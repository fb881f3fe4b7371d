"""
Adapter: TrampolineExecutor
Implementuje port Executor — maszyna małych kroków dla komend IMP.

Konfiguracja maszyny: stos oczekujących komend + bieżący stan.
W każdym kroku zdejmowana jest jedna komenda:

  skip                nic
  X := a              a liczone w stanie sprzed przypisania, potem σ[X ↦ a]
  c0 ; c1             na stos c1, potem c0 (c0 kończy się przed startem c1)
  if b then c0 else c1
                      na stos c0 albo c1 zależnie od b
  while b do c        b fałszywe: koniec; prawdziwe: na stos ta sama pętla, potem c

Ani iteracja pętli, ani zagnieżdżenie ';' nie zużywa stosu wywołań Pythona,
więc milion obrotów pętli kosztuje tyle samo stosu co jeden.

Między krokami sprawdzany jest opcjonalny limit kroków (max_steps)
i opcjonalny callback should_cancel().
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from adapters.evaluator.ast_evaluator import ASTEvaluator
from contracts import (
    Assign,
    Com,
    ExecutionCancelled,
    If,
    Seq,
    Skip,
    StepBudgetExceeded,
    While,
)
from ports.evaluator import Evaluator
from ports.state import ProgramState

logger = logging.getLogger("imp.executor")


@dataclass(frozen=True)
class ExecutionResult:
    state: ProgramState
    steps: int


class TrampolineExecutor:
    """Iteracyjny (bez rekursji) wykonawca komend IMP."""

    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        *,
        max_steps: Optional[int] = None,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> None:
        if max_steps is not None and max_steps < 1:
            raise ValueError(f"max_steps must be positive, got {max_steps}")
        self.evaluator = evaluator or ASTEvaluator()
        self.max_steps = max_steps
        self.should_cancel = should_cancel

    # -- Executor protocol -------------------------------------------------

    def execute(self, c: Com, state: ProgramState) -> ProgramState:
        return self.run(c, state).state

    # -- Publiczne ---------------------------------------------------------

    def run(self, c: Com, state: ProgramState) -> ExecutionResult:
        """Wykonuje komendę do końca; zwraca stan końcowy i liczbę kroków."""
        evaluator = self.evaluator
        max_steps = self.max_steps
        should_cancel = self.should_cancel

        state = state.copy()
        pending: list[Com] = [c]
        steps = 0
        logger.debug("Execution start: %s", type(c).__name__)

        while pending:
            if max_steps is not None and steps >= max_steps:
                logger.warning("Step budget exhausted after %d steps.", steps)
                raise StepBudgetExceeded(steps, max_steps)
            if should_cancel is not None and should_cancel():
                logger.warning("Execution cancelled after %d steps.", steps)
                raise ExecutionCancelled(steps)

            cmd = pending.pop()
            steps += 1

            if isinstance(cmd, Assign):
                state.assign(cmd.name, evaluator.eval_aexp(cmd.expr, state))
            elif isinstance(cmd, While):
                if evaluator.eval_bexp(cmd.cond, state).value:
                    pending.append(cmd)
                    pending.append(cmd.body)
            elif isinstance(cmd, Seq):
                pending.append(cmd.second)
                pending.append(cmd.first)
            elif isinstance(cmd, If):
                if evaluator.eval_bexp(cmd.cond, state).value:
                    pending.append(cmd.then_branch)
                else:
                    pending.append(cmd.else_branch)
            elif isinstance(cmd, Skip):
                pass
            else:
                raise TypeError(f"Nieznany typ węzła Com: {type(cmd)}")

        logger.debug("Execution end: %d steps, %d bound variables.", steps, len(state.bindings()))
        return ExecutionResult(state=state, steps=steps)

"""
interpreter.py — punkty wejścia interpretera IMP.

Składa adaptery (ASTEvaluator, TrampolineExecutor, DictState) według Settings
i wystawia trzy operacje: evaluate_aexp, evaluate_bexp, execute
oraz run_program dla całego Program (także z JSON-a model_dump).

Konfiguracja: zmienne środowiskowe z prefiksem IMP_ lub plik .env
(np. IMP_MAX_STEPS=1000000, IMP_OVERFLOW_POLICY=wrap).
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.executor.trampoline_executor import ExecutionResult, TrampolineExecutor
from adapters.state.dict_state import DictState
from config import Settings
from contracts import Aexp, Bexp, Com, Number, Program, Truth
from ports.state import ProgramState

logger = logging.getLogger("imp")


def configure_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())


def build_evaluator(settings: Optional[Settings] = None) -> ASTEvaluator:
    settings = settings or Settings()
    return ASTEvaluator(overflow=settings.overflow_policy, int_width=settings.int_width)


def build_executor(
    settings: Optional[Settings] = None,
    *,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> TrampolineExecutor:
    settings = settings or Settings()
    return TrampolineExecutor(
        build_evaluator(settings),
        max_steps=settings.max_steps,
        should_cancel=should_cancel,
    )


def evaluate_aexp(
    a: Aexp,
    state: Optional[ProgramState] = None,
    settings: Optional[Settings] = None,
) -> Number:
    return build_evaluator(settings).eval_aexp(a, state if state is not None else DictState())


def evaluate_bexp(
    b: Bexp,
    state: Optional[ProgramState] = None,
    settings: Optional[Settings] = None,
) -> Truth:
    return build_evaluator(settings).eval_bexp(b, state if state is not None else DictState())


def execute(
    c: Com,
    state: Optional[ProgramState] = None,
    settings: Optional[Settings] = None,
) -> ProgramState:
    return build_executor(settings).execute(c, state if state is not None else DictState())


def run_program(
    program: Union[Program, dict[str, Any], str],
    state: Optional[ProgramState] = None,
    settings: Optional[Settings] = None,
    *,
    should_cancel: Optional[Callable[[], bool]] = None,
) -> ExecutionResult:
    """
    Wykonuje cały program. program może być Program, dict (model_dump)
    albo tekstem JSON (model_dump_json).
    """
    if isinstance(program, str):
        program = Program.model_validate_json(program)
    elif isinstance(program, dict):
        program = Program.model_validate(program)

    executor = build_executor(settings, should_cancel=should_cancel)
    result = executor.run(program.body, state if state is not None else DictState())
    logger.info("Program finished in %d steps.", result.steps)
    return result

from __future__ import annotations

import pytest

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.state.dict_state import DictState
from builders import add, and_, eq, le, mul, not_, num, or_, poison, sub, truth, var
from contracts import (
    FALSE,
    TRUE,
    IntegerOverflow,
    Number,
    OverflowPolicy,
    PoisonEvaluated,
    UndefinedVariable,
    VarName,
)
from ports.evaluator import Evaluator


def _init_state() -> DictState:
    return DictState.from_pairs([("Init", 0)])


def test_evaluate_number():
    ev = ASTEvaluator()

    assert ev.eval_aexp(num(2), DictState()) == Number(value=2)
    assert ev.eval_aexp(num(5), DictState()) == Number(value=5)


def test_evaluate_variable():
    ev = ASTEvaluator()

    assert ev.eval_aexp(var("Init"), _init_state()) == Number(value=0)


def test_binary_operators_match_integer_arithmetic():
    ev = ASTEvaluator()
    state = DictState()

    for a, b in [(7, 9), (0, 0), (-3, 4), (123456, -789)]:
        assert ev.eval_aexp(add(a, b), state) == Number(value=a + b)
        assert ev.eval_aexp(sub(a, b), state) == Number(value=a - b)
        assert ev.eval_aexp(mul(a, b), state) == Number(value=a * b)


def test_nested_expressions_with_variables():
    ev = ASTEvaluator()
    state = _init_state()

    # (Init + 5) + (7 + 9)
    assert ev.eval_aexp(add(add("Init", 5), add(7, 9)), state) == Number(value=21)
    # (Init - 5) - (7 - 9)
    assert ev.eval_aexp(sub(sub("Init", 5), sub(7, 9)), state) == Number(value=-3)
    # (Init * 5) * (7 * 9)
    assert ev.eval_aexp(mul(mul("Init", 5), mul(7, 9)), state) == Number(value=0)


def test_unbound_variable_raises_with_name():
    ev = ASTEvaluator()

    with pytest.raises(UndefinedVariable) as exc_info:
        ev.eval_aexp(add(1, "missing"), DictState())

    assert exc_info.value.name == VarName(name="missing")


def test_unbound_variables_reported_left_to_right():
    ev = ASTEvaluator()

    with pytest.raises(UndefinedVariable) as exc_info:
        ev.eval_aexp(mul("a", "b"), DictState())

    assert exc_info.value.name == VarName(name="a")


def test_none_marked_variable_is_unbound():
    ev = ASTEvaluator()

    with pytest.raises(UndefinedVariable):
        ev.eval_aexp(var("x"), DictState.from_pairs([("x", None)]))


def test_evaluation_does_not_change_state():
    ev = ASTEvaluator()
    state = DictState.from_pairs([("x", 3), ("y", 4)])
    before = state.copy()

    ev.eval_aexp(add(mul("x", "y"), sub("y", "x")), state)
    ev.eval_bexp(and_(le("x", "y"), not_(eq("x", "y"))), state)

    assert state == before


def test_evaluate_truth_and_comparisons():
    ev = ASTEvaluator()
    state = DictState()

    assert ev.eval_bexp(truth(True), state) == TRUE
    assert ev.eval_bexp(truth(False), state) == FALSE
    assert ev.eval_bexp(eq(0, 0), state) == TRUE
    assert ev.eval_bexp(eq(0, 1), state) == FALSE
    assert ev.eval_bexp(le(0, 0), state) == TRUE
    assert ev.eval_bexp(le(0, 1), state) == TRUE
    assert ev.eval_bexp(le(1, 0), state) == FALSE


def test_evaluate_not():
    ev = ASTEvaluator()

    assert ev.eval_bexp(not_(truth(True)), DictState()) == FALSE
    assert ev.eval_bexp(not_(truth(False)), DictState()) == TRUE


def test_and_truth_table():
    ev = ASTEvaluator()
    state = DictState()

    assert ev.eval_bexp(and_(truth(True), truth(False)), state) == FALSE
    assert ev.eval_bexp(and_(truth(True), truth(True)), state) == TRUE
    assert ev.eval_bexp(and_(truth(False), truth(True)), state) == FALSE


def test_or_truth_table():
    ev = ASTEvaluator()
    state = DictState()

    assert ev.eval_bexp(or_(truth(False), truth(True)), state) == TRUE
    assert ev.eval_bexp(or_(truth(False), truth(False)), state) == FALSE
    assert ev.eval_bexp(or_(truth(True), truth(False)), state) == TRUE


def test_and_short_circuits_poisoned_right_operand():
    ev = ASTEvaluator()

    assert ev.eval_bexp(and_(truth(False), poison()), DictState()) == FALSE
    # prawy operand czytający niezwiązaną zmienną też nie jest liczony
    assert ev.eval_bexp(and_(le(1, 0), eq("nope", 0)), DictState()) == FALSE


def test_or_short_circuits_poisoned_right_operand():
    ev = ASTEvaluator()

    assert ev.eval_bexp(or_(truth(True), poison()), DictState()) == TRUE
    assert ev.eval_bexp(or_(le(0, 1), eq("nope", 0)), DictState()) == TRUE


def test_poison_is_evaluated_when_not_short_circuited():
    ev = ASTEvaluator()

    with pytest.raises(PoisonEvaluated):
        ev.eval_bexp(and_(truth(True), poison()), DictState())
    with pytest.raises(PoisonEvaluated):
        ev.eval_bexp(or_(truth(False), poison()), DictState())


def test_unbounded_policy_uses_big_integers():
    ev = ASTEvaluator()

    assert ev.eval_aexp(add(2**31 - 1, 1), DictState()) == Number(value=2**31)
    assert ev.eval_aexp(mul(2**40, 2**40), DictState()) == Number(value=2**80)


def test_wrap_policy_wraps_twos_complement():
    ev = ASTEvaluator(overflow=OverflowPolicy.WRAP)

    assert ev.eval_aexp(add(2**31 - 1, 1), DictState()) == Number(value=-(2**31))
    assert ev.eval_aexp(sub(-(2**31), 1), DictState()) == Number(value=2**31 - 1)
    assert ev.eval_aexp(mul(65536, 65536), DictState()) == Number(value=0)
    assert ev.eval_aexp(add(5, 6), DictState()) == Number(value=11)


def test_wrap_policy_respects_width():
    ev = ASTEvaluator(overflow="wrap", int_width=8)

    assert ev.eval_aexp(add(127, 1), DictState()) == Number(value=-128)
    assert ev.eval_aexp(mul(16, 16), DictState()) == Number(value=0)


def test_checked_policy_raises_on_overflow():
    ev = ASTEvaluator(overflow=OverflowPolicy.CHECKED, int_width=8)

    assert ev.eval_aexp(add(100, 27), DictState()) == Number(value=127)
    with pytest.raises(IntegerOverflow) as exc_info:
        ev.eval_aexp(add(100, 28), DictState())

    assert exc_info.value.value == 128
    assert exc_info.value.width == 8


def test_invalid_width_is_rejected():
    with pytest.raises(ValueError):
        ASTEvaluator(int_width=1)


def test_ast_evaluator_satisfies_port():
    assert isinstance(ASTEvaluator(), Evaluator)

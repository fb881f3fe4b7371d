from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from adapters.state.dict_state import DictState
from builders import add, assign, le, mul, program, truth, while_
from config import Settings
from contracts import (
    TRUE,
    ExecutionCancelled,
    Number,
    OverflowPolicy,
    StepBudgetExceeded,
    UndefinedVariable,
    VarName,
)
from interpreter import (
    build_executor,
    configure_logging,
    evaluate_aexp,
    evaluate_bexp,
    execute,
    run_program,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in ("IMP_OVERFLOW_POLICY", "IMP_INT_WIDTH", "IMP_MAX_STEPS", "IMP_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_settings_defaults():
    settings = Settings()

    assert settings.overflow_policy == OverflowPolicy.UNBOUNDED
    assert settings.int_width == 32
    assert settings.max_steps is None
    assert settings.log_level == "INFO"


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("IMP_OVERFLOW_POLICY", "wrap")
    monkeypatch.setenv("IMP_INT_WIDTH", "8")
    monkeypatch.setenv("IMP_MAX_STEPS", "1000")

    settings = Settings()

    assert settings.overflow_policy == OverflowPolicy.WRAP
    assert settings.int_width == 8
    assert settings.max_steps == 1000


def test_settings_reject_invalid_values():
    with pytest.raises(ValidationError):
        Settings(max_steps=0)
    with pytest.raises(ValidationError):
        Settings(overflow_policy="saturate")


def test_evaluate_entry_points_default_to_empty_state():
    assert evaluate_aexp(mul(6, 7)) == Number(value=42)
    assert evaluate_bexp(le(1, 2)) == TRUE
    with pytest.raises(UndefinedVariable):
        evaluate_aexp(add("x", 1))


def test_execute_entry_point():
    state = execute(
        while_(le("X", 3), assign("X", add("X", 1))),
        DictState.from_pairs([("X", 0)]),
    )

    assert state.lookup(VarName(name="X")) == Number(value=4)


def test_overflow_policy_from_environment(monkeypatch):
    monkeypatch.setenv("IMP_OVERFLOW_POLICY", "wrap")
    monkeypatch.setenv("IMP_INT_WIDTH", "8")

    assert evaluate_aexp(add(127, 1)) == Number(value=-128)


def test_max_steps_from_settings_stops_divergent_program():
    settings = Settings(max_steps=50)

    with pytest.raises(StepBudgetExceeded):
        execute(while_(truth(True), assign("X", 1)), settings=settings)


def test_run_program_accepts_model_dict_and_json():
    p = program(assign("X", 0), while_(le("X", 3), assign("X", add("X", 1))))

    for source in (p, p.model_dump(), p.model_dump_json()):
        result = run_program(source)
        assert result.state.lookup(VarName(name="X")) == Number(value=4)
        # ';' + X := 0 + 4 obroty × (while + przypisanie) + końcowe sprawdzenie warunku
        assert result.steps == 11


def test_build_executor_wires_settings():
    executor = build_executor(Settings(max_steps=10, overflow_policy="checked", int_width=16))

    assert executor.max_steps == 10
    assert executor.should_cancel is None
    assert executor.evaluator.overflow == OverflowPolicy.CHECKED
    assert executor.evaluator.int_width == 16


def test_run_program_with_cancellation():
    with pytest.raises(ExecutionCancelled) as exc_info:
        run_program(
            program(while_(truth(True), assign("X", 1))),
            should_cancel=lambda: True,
        )

    assert exc_info.value.steps == 0


def test_run_program_logs_step_count(caplog):
    with caplog.at_level(logging.INFO, logger="imp"):
        run_program(program(assign("X", 1)))

    assert "Program finished in 1 steps." in caplog.text


def test_configure_logging_uses_settings_level(monkeypatch):
    calls = []
    monkeypatch.setattr("interpreter.logging.basicConfig", lambda **kw: calls.append(kw))

    configure_logging(Settings(log_level="debug"))

    assert calls == [{"level": "DEBUG"}]

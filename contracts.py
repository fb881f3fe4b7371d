"""
contracts.py — Jedyne źródło prawdy dla wszystkich typów danych interpretera IMP.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Gramatyka:
    Aexp ::= n | X | Aexp + Aexp | Aexp - Aexp | Aexp * Aexp
    Bexp ::= true | false | Aexp = Aexp | Aexp <= Aexp
           | not Bexp | Bexp and Bexp | Bexp or Bexp
    Com  ::= skip | X := Aexp | Com ; Com
           | if Bexp then Com else Com | while Bexp do Com
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTRACTS_VERSION = "1.0.0"


# ─────────────────────────── Wartości ────────────────────────────────────

class Number(BaseModel):
    """Liczba całkowita ze znakiem."""
    model_config = ConfigDict(frozen=True)

    value: int

    @model_validator(mode="before")
    @classmethod
    def _from_int(cls, data: Any) -> Any:
        if isinstance(data, int) and not isinstance(data, bool):
            return {"value": data}
        return data

    def __add__(self, other: Number) -> Number:
        return Number(value=self.value + other.value)

    def __sub__(self, other: Number) -> Number:
        return Number(value=self.value - other.value)

    def __mul__(self, other: Number) -> Number:
        return Number(value=self.value * other.value)

    def __lt__(self, other: Number) -> bool:
        return self.value < other.value

    def __le__(self, other: Number) -> bool:
        return self.value <= other.value

    def __gt__(self, other: Number) -> bool:
        return self.value > other.value

    def __ge__(self, other: Number) -> bool:
        return self.value >= other.value

    def __str__(self) -> str:
        return str(self.value)


class Truth(BaseModel):
    """Wartość logiczna."""
    model_config = ConfigDict(frozen=True)

    value: bool

    @model_validator(mode="before")
    @classmethod
    def _from_bool(cls, data: Any) -> Any:
        if isinstance(data, bool):
            return {"value": data}
        return data

    def __bool__(self) -> bool:
        return self.value

    def __invert__(self) -> Truth:
        return FALSE if self.value else TRUE

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = Truth(value=True)
FALSE = Truth(value=False)


class VarName(BaseModel):
    """Nazwa zmiennej programu, klucz stanu."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _from_str(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"name": data}
        return data

    def __str__(self) -> str:
        return self.name


# ─────────────────────────── Aexp ────────────────────────────────────────

class N(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["n"] = "n"
    value: Number


class Var(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["var"] = "var"
    name: VarName


class Add(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["add"] = "add"
    left: "Aexp"
    right: "Aexp"


class Sub(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["sub"] = "sub"
    left: "Aexp"
    right: "Aexp"


class Mul(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["mul"] = "mul"
    left: "Aexp"
    right: "Aexp"


Aexp = Union[N, Var, Add, Sub, Mul]
Add.model_rebuild()
Sub.model_rebuild()
Mul.model_rebuild()


# ─────────────────────────── Bexp ────────────────────────────────────────

class Lit(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["lit"] = "lit"
    value: Truth


class Eq(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["eq"] = "eq"
    left: Aexp
    right: Aexp


class Le(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["le"] = "le"
    left: Aexp
    right: Aexp


class Not(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["not"] = "not"
    operand: "Bexp"


class And(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["and"] = "and"
    left: "Bexp"
    right: "Bexp"


class Or(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["or"] = "or"
    left: "Bexp"
    right: "Bexp"


class Poison(BaseModel):
    """Węzeł testowy dla short-circuit: jego ewaluacja zawsze rzuca PoisonEvaluated."""
    model_config = ConfigDict(frozen=True)
    node_type: Literal["poison"] = "poison"


Bexp = Union[Lit, Eq, Le, Not, And, Or, Poison]
Not.model_rebuild()
And.model_rebuild()
Or.model_rebuild()


# ─────────────────────────── Com ─────────────────────────────────────────

class Skip(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["skip"] = "skip"


class Assign(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["assign"] = "assign"
    name: VarName
    expr: Aexp


class Seq(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["seq"] = "seq"
    first: "Com"
    second: "Com"


class If(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["if"] = "if"
    cond: Bexp
    then_branch: "Com"
    else_branch: "Com"


class While(BaseModel):
    model_config = ConfigDict(frozen=True)
    node_type: Literal["while"] = "while"
    cond: Bexp
    body: "Com"


Com = Union[Skip, Assign, Seq, If, While]
Seq.model_rebuild()
If.model_rebuild()
While.model_rebuild()


class Program(BaseModel):
    """Cały program IMP: korzeń AST (serializowalny przez model_dump / model_validate)."""
    model_config = ConfigDict(frozen=True)
    body: Com


# ─────────────────────────── Arytmetyka ──────────────────────────────────

class OverflowPolicy(str, Enum):
    UNBOUNDED = "unbounded"   # int Pythona, dowolna precyzja
    WRAP = "wrap"             # zawijanie U2 do int_width bitów
    CHECKED = "checked"       # IntegerOverflow poza zakresem int_width bitów


# ─────────────────────────── Błędy ───────────────────────────────────────

class ImpError(Exception):
    """Bazowy wyjątek ewaluacji/wykonania programu IMP."""


class UndefinedVariable(ImpError):
    def __init__(self, name: VarName):
        self.name = name
        super().__init__(f"variable {name} is undefined")


class IntegerOverflow(ImpError):
    def __init__(self, value: int, width: int):
        self.value = value
        self.width = width
        super().__init__(f"integer overflow: {value} does not fit in {width} bits")


class PoisonEvaluated(ImpError):
    def __init__(self) -> None:
        super().__init__("poison node was evaluated")


class ExecutionCancelled(ImpError):
    def __init__(self, steps: int, message: str | None = None):
        self.steps = steps
        super().__init__(message or f"execution cancelled after {steps} steps")


class StepBudgetExceeded(ExecutionCancelled):
    def __init__(self, steps: int, max_steps: int):
        self.max_steps = max_steps
        super().__init__(steps, f"step budget of {max_steps} exceeded")

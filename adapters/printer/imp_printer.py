"""
imp_printer.py — wyświetlanie AST i stanu w składni konkretnej IMP.

Nawiasy tylko tam, gdzie wymaga ich priorytet operatorów:
  Aexp:  + -  <  *  <  atomy           (łączność lewostronna)
  Bexp:  or   <  and  <  not  <  = <=
  Com:   ;    <  if / while             (';' łączy w prawo)

Dodatkowo w nawiasach: ujemny literał jako operand, 1 - (-2),
oraz if / while stojące przed ';', (if b then c0 else c1); c2.
"""
from __future__ import annotations

from contracts import (
    Add,
    Aexp,
    And,
    Assign,
    Bexp,
    Com,
    Eq,
    If,
    Le,
    Lit,
    Mul,
    N,
    Not,
    Or,
    Poison,
    Program,
    Seq,
    Skip,
    Sub,
    Var,
    While,
)
from ports.state import ProgramState

_AEXP_OPS = {Add: ("+", 1), Sub: ("-", 1), Mul: ("*", 2)}
_ATOM = 3


def _aexp_prec(a: Aexp) -> int:
    # ujemny literał jako operand zawsze w nawiasach: 1 - (-2)
    if isinstance(a, N) and a.value.value < 0:
        return 0
    op = _AEXP_OPS.get(type(a))
    return op[1] if op else _ATOM


def _paren(text: str, needed: bool) -> str:
    return f"({text})" if needed else text


def show_aexp(a: Aexp) -> str:
    if isinstance(a, N):
        return str(a.value)
    if isinstance(a, Var):
        return str(a.name)
    op = _AEXP_OPS.get(type(a))
    if op is None:
        raise TypeError(f"Nieznany typ węzła Aexp: {type(a)}")
    sym, prec = op
    left = _paren(show_aexp(a.left), _aexp_prec(a.left) < prec)      # type: ignore[union-attr]
    right = _paren(show_aexp(a.right), _aexp_prec(a.right) <= prec)  # type: ignore[union-attr]
    return f"{left} {sym} {right}"


_BEXP_PREC = {Or: 1, And: 2, Not: 3}


def _bexp_prec(b: Bexp) -> int:
    return _BEXP_PREC.get(type(b), 4)


def show_bexp(b: Bexp) -> str:
    if isinstance(b, Lit):
        return str(b.value)
    if isinstance(b, Eq):
        return f"{show_aexp(b.left)} = {show_aexp(b.right)}"
    if isinstance(b, Le):
        return f"{show_aexp(b.left)} <= {show_aexp(b.right)}"
    if isinstance(b, Not):
        return "not " + _paren(show_bexp(b.operand), _bexp_prec(b.operand) < 3)
    if isinstance(b, (And, Or)):
        sym = "and" if isinstance(b, And) else "or"
        prec = _bexp_prec(b)
        left = _paren(show_bexp(b.left), _bexp_prec(b.left) < prec)
        right = _paren(show_bexp(b.right), _bexp_prec(b.right) <= prec)
        return f"{left} {sym} {right}"
    if isinstance(b, Poison):
        return "<poison>"
    raise TypeError(f"Nieznany typ węzła Bexp: {type(b)}")


def show_com(c: Com) -> str:
    if isinstance(c, Skip):
        return "skip"
    if isinstance(c, Assign):
        return f"{c.name} := {show_aexp(c.expr)}"
    if isinstance(c, Seq):
        first = _paren(show_com(c.first), isinstance(c.first, (Seq, If, While)))
        return f"{first}; {show_com(c.second)}"
    if isinstance(c, If):
        then_part = _paren(show_com(c.then_branch), isinstance(c.then_branch, Seq))
        else_part = _paren(show_com(c.else_branch), isinstance(c.else_branch, Seq))
        return f"if {show_bexp(c.cond)} then {then_part} else {else_part}"
    if isinstance(c, While):
        body = _paren(show_com(c.body), isinstance(c.body, Seq))
        return f"while {show_bexp(c.cond)} do {body}"
    raise TypeError(f"Nieznany typ węzła Com: {type(c)}")


def show_program(p: Program) -> str:
    return show_com(p.body)


def format_state(state: ProgramState) -> str:
    items = sorted(state.bindings().items(), key=lambda kv: kv[0].name)
    return "{" + ", ".join(f"{k} ↦ {v}" for k, v in items) + "}"


def print_state(state: ProgramState) -> None:
    """Drukuje stan na stdout."""
    print(format_state(state))

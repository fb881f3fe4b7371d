"""
builders.py — pomocnicze konstruktory AST IMP.

Operandy arytmetyczne mogą być podane skrótowo:
  int → N,  str → Var,  Aexp → bez zmian

    while_(le("x", 3), assign("x", add("x", 1)))
"""
from __future__ import annotations

from typing import Union

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
    Number,
    Or,
    Poison,
    Program,
    Seq,
    Skip,
    Sub,
    Truth,
    Var,
    VarName,
    While,
)

AexpLike = Union[Aexp, int, str]


def _aexp(x: AexpLike) -> Aexp:
    if isinstance(x, bool):
        raise TypeError("bool is not an arithmetic operand; use truth() for Bexp")
    if isinstance(x, int):
        return num(x)
    if isinstance(x, str):
        return var(x)
    return x


def num(n: int) -> N:
    return N(value=Number(value=n))


def var(name: str) -> Var:
    return Var(name=VarName(name=name))


def add(left: AexpLike, right: AexpLike) -> Add:
    return Add(left=_aexp(left), right=_aexp(right))


def sub(left: AexpLike, right: AexpLike) -> Sub:
    return Sub(left=_aexp(left), right=_aexp(right))


def mul(left: AexpLike, right: AexpLike) -> Mul:
    return Mul(left=_aexp(left), right=_aexp(right))


def truth(b: bool) -> Lit:
    return Lit(value=Truth(value=b))


def eq(left: AexpLike, right: AexpLike) -> Eq:
    return Eq(left=_aexp(left), right=_aexp(right))


def le(left: AexpLike, right: AexpLike) -> Le:
    return Le(left=_aexp(left), right=_aexp(right))


def not_(b: Bexp) -> Not:
    return Not(operand=b)


def and_(left: Bexp, right: Bexp) -> And:
    return And(left=left, right=right)


def or_(left: Bexp, right: Bexp) -> Or:
    return Or(left=left, right=right)


def poison() -> Poison:
    return Poison()


def skip() -> Skip:
    return Skip()


def assign(name: str, expr: AexpLike) -> Assign:
    return Assign(name=VarName(name=name), expr=_aexp(expr))


def seq(*coms: Com) -> Com:
    """seq(a, b, c) == Seq(a, Seq(b, c)); seq() == Skip()."""
    if not coms:
        return Skip()
    result = coms[-1]
    for c in reversed(coms[:-1]):
        result = Seq(first=c, second=result)
    return result


def if_(cond: Bexp, then_branch: Com, else_branch: Com | None = None) -> If:
    if else_branch is None:
        else_branch = Skip()
    return If(cond=cond, then_branch=then_branch, else_branch=else_branch)


def while_(cond: Bexp, body: Com) -> While:
    return While(cond=cond, body=body)


def program(*coms: Com) -> Program:
    return Program(body=seq(*coms))

"""
Adapter: DictState
Implementuje port ProgramState — stan programu trzymany w słowniku in-memory.

Klucz obecny z wartością None i klucz nieobecny są nierozróżnialne:
lookup zwraca None, `in` zwraca False, __eq__ porównuje tylko zmienne związane.
"""
from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional, Union

from contracts import Number, VarName

NameLike = Union[VarName, str]
ValueLike = Union[Number, int, None]


def _as_name(name: NameLike) -> VarName:
    return name if isinstance(name, VarName) else VarName(name=name)


def _as_value(value: ValueLike) -> Optional[Number]:
    if value is None or isinstance(value, Number):
        return value
    return Number(value=value)


class DictState:
    """Skończone odwzorowanie VarName → Optional[Number]."""

    def __init__(self, bindings: Optional[Mapping[VarName, Optional[Number]]] = None) -> None:
        self._vars: dict[VarName, Optional[Number]] = dict(bindings or {})

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[NameLike, ValueLike]]) -> DictState:
        """Późniejsze duplikaty nadpisują wcześniejsze."""
        state = cls()
        for name, value in pairs:
            state._vars[_as_name(name)] = _as_value(value)
        return state

    # ── ProgramState protocol ─────────────────────────────────────────────────

    def lookup(self, name: NameLike) -> Optional[Number]:
        if not isinstance(name, VarName):
            name = VarName(name=name)
        return self._vars.get(name)

    def assign(self, name: NameLike, value: ValueLike) -> None:
        self._vars[_as_name(name)] = _as_value(value)

    def copy(self) -> DictState:
        return DictState(self._vars)

    def bindings(self) -> dict[VarName, Number]:
        return {k: v for k, v in self._vars.items() if v is not None}

    def __contains__(self, name: object) -> bool:
        if isinstance(name, str):
            name = VarName(name=name)
        return self._vars.get(name) is not None  # type: ignore[call-overload]

    def __iter__(self) -> Iterator[VarName]:
        return iter(self.bindings())

    # ── pozostałe ─────────────────────────────────────────────────────────────

    def updated(self, name: NameLike, value: ValueLike) -> DictState:
        """Czysto funkcyjna wersja assign: zwraca nowy stan, self bez zmian."""
        new = self.copy()
        new._vars[_as_name(name)] = _as_value(value)
        return new

    def __len__(self) -> int:
        return len(self.bindings())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DictState):
            return NotImplemented
        return self.bindings() == other.bindings()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v}" for k, v in sorted(
            self.bindings().items(), key=lambda kv: kv[0].name
        ))
        return f"DictState({inner})"

"""
Port: ProgramState
Odpowiedzialność: skończone odwzorowanie VarName → Number (stan programu IMP).
"""
from __future__ import annotations

from typing import Iterator, Optional, Protocol, runtime_checkable

from contracts import Number, VarName


@runtime_checkable
class ProgramState(Protocol):
    def lookup(self, name: VarName) -> Optional[Number]:
        """
        Returns the value bound to name, or None if the variable is unbound.
        An absent key and a key explicitly holding None are indistinguishable.
        """
        ...

    def assign(self, name: VarName, value: Number) -> None:
        """
        Binds name to value in place. Every other binding is left unchanged.
        There is no unbind operation.
        """
        ...

    def copy(self) -> ProgramState:
        """Returns an independent state with the same bindings."""
        ...

    def bindings(self) -> dict[VarName, Number]:
        """Returns a snapshot of the bound variables only."""
        ...

    def __contains__(self, name: object) -> bool:
        ...

    def __iter__(self) -> Iterator[VarName]:
        ...

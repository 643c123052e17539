"""Unit - the canonical "no value" response.

Requests that produce nothing meaningful still return exactly one value
through the mediator: the Unit singleton. Callers never have to special-case
a missing response.

Invariants:
- Unit() always returns the same instance (UNIT)
- Every Unit equals every other Unit and hashes to the same value
- copy, deepcopy and pickle preserve the singleton

Usage:
    from src.application.mediator import UNIT, Unit

    async def handle(self, request: Ping, cancellation) -> Unit:
        return UNIT
"""

from __future__ import annotations

from typing import Any, Final, final


@final
class Unit:
    """Singleton value for requests without a meaningful response."""

    __slots__ = ()

    _instance: Unit | None = None

    def __new__(cls) -> Unit:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Unit()"

    def __str__(self) -> str:
        return "()"

    def __copy__(self) -> Unit:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Unit:
        return self

    def __reduce__(self) -> tuple[type[Unit], tuple[()]]:
        return (Unit, ())


UNIT: Final[Unit] = Unit()

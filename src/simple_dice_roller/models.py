from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypeAlias


Mode: TypeAlias = Literal["average", "simulate"]


@dataclass(frozen=True)
class DiceTerm:
    count: int
    sides: int


@dataclass(frozen=True)
class ConstantTerm:
    value: int


@dataclass(frozen=True)
class ParsedFormula:
    formula: str
    mode: Mode
    dice: list[DiceTerm]
    constants: list[ConstantTerm]


@dataclass(frozen=True)
class FormulaResult:
    """Outcome of evaluating one formula found in a block of text.

    Exactly one of ``total`` and ``error`` is set.
    """

    formula: str
    mode: Mode
    total: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def notice(self) -> str:
        if self.error is not None:
            return f"Could not evaluate {self.formula}: {self.error}"
        if self.mode == "average":
            return f"Average of {self.formula}: {self.total}"
        return f"Simulated {self.formula}: {self.total}"

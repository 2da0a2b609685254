from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
from .mfs import FuzzySet
from .types import Float

if TYPE_CHECKING:
    from ..model.variable import LinguisticVariable


@dataclass(frozen=True, eq=False)
class Clause:
    """
    '<variable> is <label>' - atomic operand of a rule.

    Holds references only; evaluate() re-reads the variable's live input on
    every call. Two clauses are equal when they point at the very same
    variable and label objects.
    """
    variable: "LinguisticVariable"
    label: FuzzySet

    def evaluate(self) -> Float:
        return self.variable.membership_of(self.label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Clause):
            return NotImplemented
        return self.variable is other.variable and self.label is other.label

    def __hash__(self) -> int:
        return hash((id(self.variable), id(self.label)))

    def __str__(self) -> str:
        return f"{self.variable.name} is {self.label.name}"

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from .variable import LinguisticVariable
from ..core.types import Float, FuzzyError


@dataclass
class Database:
    """
    Rejestr zmiennych lingwistycznych (nazwa -> zmienna).
    Nazwy są case-sensitive; reguły wyszukują zmienne przez lookup().
    """
    variables: Dict[str, LinguisticVariable] = field(default_factory=dict)

    def add_variable(self, var: LinguisticVariable) -> None:
        if var.name in self.variables:
            raise FuzzyError(f"Duplicate variable: {var.name}")
        self.variables[var.name] = var

    def lookup(self, name: str) -> Optional[LinguisticVariable]:
        return self.variables.get(name)

    def get_variable(self, name: str) -> LinguisticVariable:
        var = self.variables.get(name)
        if var is None:
            raise FuzzyError(f"Unknown variable: {name}")
        return var

    def remove_variable(self, name: str) -> None:
        if self.variables.pop(name, None) is None:
            raise FuzzyError(f"Unknown variable: {name}")

    def clear(self) -> None:
        self.variables.clear()

    def names(self) -> List[str]:
        return list(self.variables)

    def set_inputs(self, inputs: Mapping[str, Float], *, clamp: bool = False) -> None:
        """
        Ustawia numeric_input dla każdej pary nazwa -> wartość.
        clamp=True przycina wartości spoza zakresu zamiast zgłaszać błąd.
        """
        for name, x in inputs.items():
            var = self.get_variable(name)
            var.numeric_input = var.clamp(float(x)) if clamp else x

    def __contains__(self, name: str) -> bool:
        return name in self.variables

    def __len__(self) -> int:
        return len(self.variables)

# LinguisticVariable: zakres, etykiety, bieżące wejście

from __future__ import annotations
import math
from dataclasses import dataclass, field
from typing import Dict, Optional
from ..core.mfs import FuzzySet
from ..core.types import Float, FuzzyError

@dataclass(eq=False)
class LinguisticVariable:
    name: str
    vmin: Float
    vmax: Float
    terms: Dict[str, FuzzySet] = field(default_factory=dict)
    _input: Float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.vmin < self.vmax:
            raise FuzzyError(f"var {self.name}: vmin < vmax required (got {self.vmin} >= {self.vmax})")
        self._input = float(self.vmin)

    # ---------- etykiety ----------

    def add_label(self, label: FuzzySet) -> None:
        if label.name in self.terms:
            raise FuzzyError(f"Duplicate label '{label.name}' on variable '{self.name}'")
        self.terms[label.name] = label

    def add_term(self, name: str, mf) -> FuzzySet:
        label = FuzzySet(name, mf)
        self.add_label(label)
        return label

    def get_label(self, name: str) -> Optional[FuzzySet]:
        return self.terms.get(name)

    def clear_labels(self) -> None:
        self.terms.clear()

    @property
    def labels(self) -> list[FuzzySet]:
        return list(self.terms.values())

    # ---------- wejście ----------

    @property
    def numeric_input(self) -> Float:
        return self._input

    @numeric_input.setter
    def numeric_input(self, x: Float) -> None:
        x = float(x)
        if math.isnan(x) or not (self.vmin <= x <= self.vmax):
            raise FuzzyError(f"Input {x} for '{self.name}' is outside [{self.vmin}, {self.vmax}]")
        self._input = x

    def clamp(self, x: Float) -> Float:
        return max(self.vmin, min(self.vmax, x))

    # ---------- przynależność ----------

    def membership_of(self, label: FuzzySet) -> Float:
        """μ of the current numeric input under ``label``."""
        return label.membership(self._input)

    def label_membership(self, name: str, x: Float) -> Float:
        label = self.get_label(name)
        if label is None:
            raise FuzzyError(f"Unknown label '{name}' on variable '{self.name}'")
        return label.membership(x)

    def __str__(self) -> str:
        return self.name

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .database import Database
from ..core import norms
from ..core.postfix import Operand
from ..core.rule import Rule
from ..core.types import Float, FuzzyError

logger = logging.getLogger(__name__)


@dataclass
class Rulebase:
    """
    Named rules over one variable database.

    tnorm/snorm name the operators that new_rule() binds into each rule.
    Aggregation of rule outputs and defuzzification live outside this class.
    """
    database: Database = field(default_factory=Database)
    rules: Dict[str, Rule] = field(default_factory=dict)
    tnorm: str = "min"
    snorm: str = "max"

    def add_rule(self, rule: Rule) -> None:
        if rule.name in self.rules:
            raise FuzzyError(f"Duplicate rule: {rule.name}")
        self.rules[rule.name] = rule

    def new_rule(self, name: str, text: str) -> Rule:
        rule = Rule(
            self.database, name, text,
            norm=norms.get_norm(self.tnorm),
            conorm=norms.get_conorm(self.snorm),
        )
        self.add_rule(rule)
        return rule

    def get_rule(self, name: str) -> Rule:
        rule = self.rules.get(name)
        if rule is None:
            raise FuzzyError(f"Unknown rule: {name}")
        return rule

    def remove_rule(self, name: str) -> None:
        if self.rules.pop(name, None) is None:
            raise FuzzyError(f"Unknown rule: {name}")

    def clear(self) -> None:
        self.rules.clear()

    def set_engine(self, *, tnorm: Optional[str] = None, snorm: Optional[str] = None) -> None:
        """Switch operators; already built rules are rebound too."""
        norm = norms.get_norm(tnorm) if tnorm is not None else None
        conorm = norms.get_conorm(snorm) if snorm is not None else None
        for rule in self.rules.values():
            if norm is not None:
                rule.norm = norm
            if conorm is not None:
                rule.conorm = conorm
        if tnorm is not None:
            self.tnorm = tnorm.lower()
        if snorm is not None:
            self.snorm = snorm.lower()

    def firing_strengths(self, names: Optional[List[str]] = None) -> Dict[str, Float]:
        selected = self.rules.values() if names is None else [self.get_rule(n) for n in names]
        out = {rule.name: rule.firing_strength() for rule in selected}
        logger.debug("firing strengths: %s", out)
        return out

    def explain(self, threshold: Float = 0.0) -> List[Dict[str, Any]]:
        """
        Szczegóły aktywacji reguł dla bieżących wejść (bez agregacji):
          [
            {
              "rule": str, "text": str, "postfix": str,
              "antecedent": [{"var": str, "label": str, "value": float, "mu": float}, ...],
              "alpha": float,
              "consequent": {"var": str, "label": str}
            }, ...
          ]
        Reguły z alpha < threshold są pomijane.
        """
        infos: List[Dict[str, Any]] = []
        for rule in self.rules.values():
            alpha = rule.firing_strength()
            if alpha < threshold:
                continue
            antecedent_info = [
                {
                    "var": tok.clause.variable.name,
                    "label": tok.clause.label.name,
                    "value": tok.clause.variable.numeric_input,
                    "mu": tok.clause.evaluate(),
                }
                for tok in rule.program if isinstance(tok, Operand)
            ]
            infos.append({
                "rule": rule.name,
                "text": rule.text,
                "postfix": rule.to_postfix_string(),
                "antecedent": antecedent_info,
                "alpha": alpha,
                "consequent": {"var": rule.output.variable.name, "label": rule.output.label.name},
            })
        return infos

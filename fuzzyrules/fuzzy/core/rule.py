from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional
from .clause import Clause
from .evaluator import evaluate_postfix
from .norms import CoNorm, MaximumCoNorm, MinimumNorm, Norm
from .postfix import PostfixProgram, format_postfix
from .types import Float
from ..io.rule_parser import parse_rule

if TYPE_CHECKING:
    from ..io.rule_parser import VariableLookup

logger = logging.getLogger(__name__)


class Rule:
    """
    Fuzzy rule 'IF <antecedent> THEN <variable> is <label>'.

    The text is compiled once, at construction; a bad rule raises a
    RuleParseError and no Rule object is produced. firing_strength()
    re-evaluates the antecedent against the variables' current inputs,
    combining clauses with ``norm`` (AND) and ``conorm`` (OR). Both default
    to min/max and may be swapped later.
    """

    def __init__(
        self,
        database: "VariableLookup",
        name: str,
        rule: str,
        norm: Optional[Norm] = None,
        conorm: Optional[CoNorm] = None,
    ) -> None:
        self.name = name
        self.database = database
        self.norm: Norm = norm if norm is not None else MinimumNorm()
        self.conorm: CoNorm = conorm if conorm is not None else MaximumCoNorm()
        self._text = rule
        self._program, self._output = parse_rule(rule, database)

    @property
    def text(self) -> str:
        return self._text

    @property
    def program(self) -> PostfixProgram:
        return self._program

    @property
    def output(self) -> Clause:
        return self._output

    def output_clause(self) -> Clause:
        return self._output

    def firing_strength(self) -> Float:
        alpha = evaluate_postfix(self._program, self.norm, self.conorm)
        logger.debug("rule %s fired with %.6g", self.name, alpha)
        return alpha

    def to_postfix_string(self) -> str:
        return format_postfix(self._program)

    def __repr__(self) -> str:
        return f"Rule({self.name!r}, {self._text!r})"

"""
Gramatyka reguły:
  rule       := IF antecedent THEN clause
  antecedent := term ((AND | OR) term)*
  term       := clause | '(' antecedent ')'
  clause     := <variable> IS <label>

Uwagi:
- Słowa kluczowe case-insensitive; nazwy zmiennych i etykiet - case-sensitive.
- Antecedent kompilowany algorytmem shunting-yard do postaci postfiksowej (RPN):
  AND wiąże mocniej niż OR, nawiasy grupują.
- Konsekwent to dokładnie jedna klauzula.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional, Protocol, Tuple

from ..core.clause import Clause
from ..core.postfix import Operand, Operator, PostfixProgram, PostfixToken, format_postfix
from ..core.types import (
    ConsequentMustBeSingleClauseError,
    ConsequentMustBeVariableError,
    EmptyAntecedentError,
    MissingConsequentError,
    MissingIfError,
    MissingThenError,
    UnbalancedParenthesisError,
    UnexpectedTokenError,
    UnknownLabelError,
    UnknownVariableError,
)
from ..model.variable import LinguisticVariable

logger = logging.getLogger(__name__)

_OPEN = "("
_CLOSE = ")"
_OPERATORS = {"AND": Operator.AND, "OR": Operator.OR}


class VariableLookup(Protocol):
    def lookup(self, name: str) -> Optional[LinguisticVariable]: ...


class _State(Enum):
    EXPECT_VAR = "a linguistic variable or '('"
    EXPECT_IS = "IS"
    EXPECT_LABEL = "a linguistic label"
    EXPECT_OPERATOR = "AND, OR, ')' or THEN"


def tokenize(text: str) -> List[str]:
    """Pad parentheses with spaces and split on whitespace."""
    return text.replace(_OPEN, f" {_OPEN} ").replace(_CLOSE, f" {_CLOSE} ").split()


def _priority(item) -> int:
    # '(' na stosie ma priorytet 0, więc nigdy nie jest zdejmowany przez operator
    return item.priority if isinstance(item, Operator) else 0


def parse_rule(text: str, variables: VariableLookup) -> Tuple[PostfixProgram, Clause]:
    """
    Compile rule text into (postfix antecedent, consequent clause).

    Raises a RuleParseError subclass describing the first problem found.
    """
    tokens = tokenize(text)
    upper = [t.upper() for t in tokens]

    if not upper or upper[0] != "IF":
        raise MissingIfError(text)
    if "THEN" not in upper[1:]:
        raise MissingThenError(text)

    state = _State.EXPECT_VAR
    consequent = False
    stack: List[object] = []            # Operator | '('
    output: List[PostfixToken] = []
    result: Optional[Clause] = None
    lingvar: Optional[LinguisticVariable] = None

    for token, up in zip(tokens[1:], upper[1:]):
        if up == "THEN":
            if consequent:
                raise UnexpectedTokenError(token, state.value, text)
            if not output and state is _State.EXPECT_VAR:
                raise EmptyAntecedentError(text)
            if state is not _State.EXPECT_OPERATOR:
                raise UnexpectedTokenError(token, state.value, text)
            if _OPEN in stack:
                raise UnbalancedParenthesisError(text)
            consequent = True
            state = _State.EXPECT_VAR

        elif up == _OPEN:
            if consequent:
                raise ConsequentMustBeVariableError(token, text)
            if state is not _State.EXPECT_VAR:
                raise UnexpectedTokenError(token, state.value, text)
            stack.append(_OPEN)

        elif up == _CLOSE:
            if _OPEN not in stack:
                raise UnbalancedParenthesisError(text)
            if consequent:
                raise ConsequentMustBeVariableError(token, text)
            if state is not _State.EXPECT_OPERATOR:
                raise UnexpectedTokenError(token, state.value, text)
            while stack[-1] != _OPEN:
                output.append(stack.pop())
            stack.pop()

        elif up in _OPERATORS:
            if consequent:
                raise ConsequentMustBeVariableError(token, text)
            if state is not _State.EXPECT_OPERATOR:
                raise UnexpectedTokenError(token, state.value, text)
            op = _OPERATORS[up]
            while stack and _priority(stack[-1]) > op.priority:
                output.append(stack.pop())
            stack.append(op)
            state = _State.EXPECT_VAR

        elif state is _State.EXPECT_IS:
            if up != "IS":
                raise UnexpectedTokenError(token, state.value, text)
            state = _State.EXPECT_LABEL

        elif state is _State.EXPECT_LABEL:
            label = lingvar.get_label(token)
            if label is None:
                raise UnknownLabelError(lingvar.name, token, text)
            clause = Clause(lingvar, label)
            if consequent:
                result = clause
            else:
                output.append(Operand(clause))
            state = _State.EXPECT_OPERATOR

        elif state is _State.EXPECT_VAR:
            if up in ("IF", "IS"):
                raise UnexpectedTokenError(token, state.value, text)
            lingvar = variables.lookup(token)
            if lingvar is None:
                raise UnknownVariableError(token, text)
            state = _State.EXPECT_IS

        else:
            # nazwa tuż po klauzuli
            if consequent:
                raise ConsequentMustBeSingleClauseError(token, text)
            raise UnexpectedTokenError(token, state.value, text)

    if result is None:
        raise MissingConsequentError(text)

    while stack:
        output.append(stack.pop())

    program = tuple(output)
    logger.debug("compiled %r -> [%s] => %s", text, format_postfix(program), result)
    return program, result

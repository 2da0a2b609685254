from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union
from .clause import Clause


class Operator(Enum):
    OR = 1
    AND = 2

    @property
    def priority(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Operand:
    clause: Clause

    def __str__(self) -> str:
        return str(self.clause)


PostfixToken = Union[Operand, Operator]
PostfixProgram = Tuple[PostfixToken, ...]


def format_postfix(program: PostfixProgram) -> str:
    """'Steel is Cold, Stove is Hot, AND'"""
    return ", ".join(str(tok) for tok in program)

from __future__ import annotations
import logging
from typing import List
from .norms import Norm, CoNorm
from .postfix import Operand, Operator, PostfixProgram
from .types import Float

logger = logging.getLogger(__name__)


def evaluate_postfix(program: PostfixProgram, norm: Norm, conorm: CoNorm) -> Float:
    """
    Run a postfix program on a value stack.

    Operands push their clause's truth value; AND/OR pop y then x and push
    norm(x, y) / conorm(x, y). The parser only produces runnable programs, so
    a short or leftover stack is a defect, reported with AssertionError.
    """
    stack: List[Float] = []
    for tok in program:
        if isinstance(tok, Operand):
            stack.append(tok.clause.evaluate())
            continue
        if len(stack) < 2:
            raise AssertionError(f"malformed postfix program: stack underflow at {tok}")
        y = stack.pop()
        x = stack.pop()
        if tok is Operator.AND:
            stack.append(norm.evaluate(x, y))
        else:
            stack.append(conorm.evaluate(x, y))

    if len(stack) != 1:
        raise AssertionError(f"malformed postfix program: {len(stack)} values left on the stack")
    logger.debug("postfix evaluated to %.6g", stack[0])
    return stack[0]

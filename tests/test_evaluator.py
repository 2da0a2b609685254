"""Tests for the postfix stack evaluator."""

import pytest

from fuzzyrules.fuzzy.core.evaluator import evaluate_postfix
from fuzzyrules.fuzzy.core.norms import MaximumCoNorm, MinimumNorm
from fuzzyrules.fuzzy.core.postfix import Operand, Operator


class _Const:
    """Stands in for a clause with a fixed truth value."""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    def evaluate(self):
        self.calls += 1
        return self.value


class _Recording:
    def __init__(self):
        self.calls = []

    def evaluate(self, x, y):
        self.calls.append((x, y))
        return x - y


def _ops(*values):
    return [Operand(_Const(v)) for v in values]


class TestEvaluatePostfix:
    def test_and_uses_norm(self):
        program = (*_ops(0.3, 0.8), Operator.AND)
        assert evaluate_postfix(program, MinimumNorm(), MaximumCoNorm()) == 0.3

    def test_or_uses_conorm(self):
        program = (*_ops(0.3, 0.8), Operator.OR)
        assert evaluate_postfix(program, MinimumNorm(), MaximumCoNorm()) == 0.8

    def test_single_operand(self):
        assert evaluate_postfix(tuple(_ops(0.42)), MinimumNorm(), MaximumCoNorm()) == 0.42

    def test_nested_program(self):
        # A and (B or C) -> A B C OR AND
        a, b, c = _ops(0.9, 0.2, 0.6)
        program = (a, b, c, Operator.OR, Operator.AND)
        assert evaluate_postfix(program, MinimumNorm(), MaximumCoNorm()) == 0.6

    def test_operand_order_is_left_then_right(self):
        norm = _Recording()
        program = (*_ops(0.3, 0.8), Operator.AND)

        result = evaluate_postfix(program, norm, MaximumCoNorm())

        assert norm.calls == [(0.3, 0.8)]
        assert result == pytest.approx(0.3 - 0.8)

    def test_clauses_are_evaluated_on_every_run(self):
        a, b = _ops(0.5, 0.5)
        program = (a, b, Operator.OR)

        evaluate_postfix(program, MinimumNorm(), MaximumCoNorm())
        evaluate_postfix(program, MinimumNorm(), MaximumCoNorm())

        assert a.clause.calls == 2
        assert b.clause.calls == 2

    def test_stack_underflow_is_an_assertion(self):
        program = (*_ops(0.5), Operator.AND)
        with pytest.raises(AssertionError):
            evaluate_postfix(program, MinimumNorm(), MaximumCoNorm())

    def test_leftover_values_are_an_assertion(self):
        with pytest.raises(AssertionError):
            evaluate_postfix(tuple(_ops(0.1, 0.2)), MinimumNorm(), MaximumCoNorm())

    def test_empty_program_is_an_assertion(self):
        with pytest.raises(AssertionError):
            evaluate_postfix((), MinimumNorm(), MaximumCoNorm())

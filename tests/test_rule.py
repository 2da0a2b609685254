"""End-to-end tests for Rule: construction, firing strength, operators."""

import pytest

from fuzzyrules.fuzzy.core.clause import Clause
from fuzzyrules.fuzzy.core.norms import (
    BoundedSumCoNorm,
    MaximumCoNorm,
    MinimumNorm,
    ProbabilisticCoNorm,
    ProductNorm,
)
from fuzzyrules.fuzzy.core.rule import Rule
from fuzzyrules.fuzzy.core.types import RuleParseError, UnknownVariableError


RULE1 = "IF Steel is Cold and Stove is Hot THEN Pressure is Low"
RULE2 = "IF Steel is Cold and (Stove is Warm or Stove is Hot) THEN Pressure is Medium"
RULE3 = "IF Steel is Cold and Stove is Warm or Stove is Hot THEN Pressure is High"


class TestConstruction:
    def test_defaults(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1)

        assert rule.name == "Test1"
        assert rule.text == RULE1
        assert isinstance(rule.norm, MinimumNorm)
        assert isinstance(rule.conorm, MaximumCoNorm)

    def test_output_clause(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1)
        pressure = furnace_db.get_variable("Pressure")

        assert rule.output == Clause(pressure, pressure.get_label("Low"))
        assert str(rule.output) == "Pressure is Low"
        assert rule.output_clause() is rule.output

    @pytest.mark.parametrize(
        "text, expected",
        [
            (RULE1, "Steel is Cold, Stove is Hot, AND"),
            (RULE2, "Steel is Cold, Stove is Warm, Stove is Hot, OR, AND"),
            (RULE3, "Steel is Cold, Stove is Warm, AND, Stove is Hot, OR"),
        ],
    )
    def test_to_postfix_string(self, furnace_db, text, expected):
        assert Rule(furnace_db, "r", text).to_postfix_string() == expected

    def test_parse_failure_aborts_construction(self, furnace_db):
        with pytest.raises(UnknownVariableError):
            Rule(furnace_db, "bad", "IF Foo is Cold then Pressure is Low")

    def test_parse_errors_are_recoverable(self, furnace_db):
        try:
            Rule(furnace_db, "bad", "Steel is Cold and Stove is Hot")
        except RuleParseError:
            rule = Rule(furnace_db, "good", RULE1)
        assert rule.firing_strength() == pytest.approx(0.7)


class TestFiringStrength:
    def test_min_of_clauses(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1)
        assert rule.firing_strength() == pytest.approx(0.7)

    def test_idempotent_with_unchanged_inputs(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1)
        assert rule.firing_strength() == rule.firing_strength()

    def test_reads_live_inputs(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1)
        furnace_db.get_variable("Steel").numeric_input = 30

        assert rule.firing_strength() == 0.0

    def test_parenthesised_and_flat_rules(self, furnace_db):
        furnace_db.set_inputs({"Steel": 12, "Stove": 30})

        assert Rule(furnace_db, "Test1", RULE1).firing_strength() == 0.0
        assert Rule(furnace_db, "Test2", RULE2).firing_strength() == pytest.approx(0.9)
        assert Rule(furnace_db, "Test3", RULE3).firing_strength() == pytest.approx(0.9)

    def test_precedence_changes_result(self, furnace_db):
        # Steel Hot=0.0, Stove Warm=0.0, Stove Hot=0.7
        grouped = Rule(furnace_db, "g", "IF Steel is Hot and (Stove is Warm or Stove is Hot) THEN Pressure is Low")
        flat = Rule(furnace_db, "f", "IF Steel is Hot and Stove is Warm or Stove is Hot THEN Pressure is Low")

        assert grouped.firing_strength() == 0.0
        assert flat.firing_strength() == pytest.approx(0.7)

    def test_custom_operators(self, furnace_db):
        rule = Rule(furnace_db, "Test1", RULE1, norm=ProductNorm(), conorm=ProbabilisticCoNorm())
        assert rule.firing_strength() == pytest.approx(0.9 * 0.7)

    def test_operators_can_be_rebound(self, furnace_db):
        rule = Rule(furnace_db, "or", "IF Steel is Cold or Stove is Hot THEN Pressure is High")
        assert rule.firing_strength() == pytest.approx(0.9)

        rule.conorm = BoundedSumCoNorm()
        assert rule.firing_strength() == 1.0

    def test_plain_object_as_operator(self, furnace_db):
        class Average:
            def evaluate(self, x, y):
                return (x + y) / 2.0

        rule = Rule(furnace_db, "avg", RULE1, norm=Average())
        assert rule.firing_strength() == pytest.approx(0.8)

from typing import Optional

Float = float


class FuzzyError(Exception):
    """Domain error for fuzzy framework."""


# ---------- błędy parsowania reguł ----------

class RuleParseError(FuzzyError):
    """Base for every failure while compiling an IF..THEN rule."""

    def __init__(self, msg: str, rule: Optional[str] = None):
        self.rule = rule
        super().__init__(msg if rule is None else f"{msg}\n  >> {rule}")


class MissingIfError(RuleParseError):
    def __init__(self, rule: Optional[str] = None):
        super().__init__("A fuzzy rule must start with an IF statement.", rule)


class MissingThenError(RuleParseError):
    def __init__(self, rule: Optional[str] = None):
        super().__init__("Missing the consequent (THEN) statement.", rule)


class UnknownVariableError(RuleParseError):
    def __init__(self, name: str, rule: Optional[str] = None):
        self.name = name
        super().__init__(f"Linguistic variable '{name}' was not found in the database.", rule)


class UnknownLabelError(RuleParseError):
    def __init__(self, variable: str, label: str, rule: Optional[str] = None):
        self.variable = variable
        self.label = label
        super().__init__(f"Linguistic label '{label}' was not found on variable '{variable}'.", rule)


class UnbalancedParenthesisError(RuleParseError):
    def __init__(self, rule: Optional[str] = None):
        super().__init__("Unbalanced parenthesis.", rule)


class ConsequentMustBeVariableError(RuleParseError):
    def __init__(self, token: str, rule: Optional[str] = None):
        self.token = token
        super().__init__(f"Linguistic variable expected after THEN, got '{token}'.", rule)


class ConsequentMustBeSingleClauseError(RuleParseError):
    def __init__(self, token: str, rule: Optional[str] = None):
        self.token = token
        super().__init__(f"The consequent must be a single clause, got extra '{token}'.", rule)


class EmptyAntecedentError(RuleParseError):
    def __init__(self, rule: Optional[str] = None):
        super().__init__("The antecedent (IF part) has no clauses.", rule)


class MissingConsequentError(RuleParseError):
    def __init__(self, rule: Optional[str] = None):
        super().__init__("The consequent (THEN part) must be '<variable> is <label>'.", rule)


class UnexpectedTokenError(RuleParseError):
    def __init__(self, token: str, expected: str, rule: Optional[str] = None):
        self.token = token
        self.expected = expected
        super().__init__(f"Unexpected token '{token}', expected {expected}.", rule)

"""
Gramatyka (skrót):
  var   <name> <vmin> <vmax>
  mf    <var> <label> (tri a b c | trap a b c d | gauss mu sigma | lshoulder b c | rshoulder a b)
  tnorm <min|prod|lukasiewicz|hamacher>
  snorm <max|prob|bsum|hamacher>
  input <var> <value>       # opcjonalna wartość startowa wejścia
  rule  [<name>] IF <antecedent> THEN <var> is <label>

Uwagi:
- Słowa kluczowe bezwzględnie case-insensitive; nazwy zmiennych, etykiet i reguł - case-sensitive.
- Reguły kompilowane PO wczytaniu całego pliku (kolejność dyrektyw dowolna).
- Reguły bez nazwy dostają nazwy R1, R2, ... wg kolejności w pliku.
"""

from __future__ import annotations
import logging
import shlex
from typing import List, Tuple

from ..core import norms
from ..core.mfs import make_mf
from ..core.types import FuzzyError
from ..model.database import Database
from ..model.rulebase import Rulebase
from ..model.variable import LinguisticVariable
from .rule_parser import tokenize

logger = logging.getLogger(__name__)


class FZParseError(FuzzyError):
    def __init__(self, msg: str, line: int, content: str):
        self.line = line
        self.content = content
        super().__init__(f"[.fz:{line}] {msg}\n  >> {content}")


def _lex_line(raw: str) -> List[str]:
    """Tokenizuj linię: wspiera komentarze '#' i cudzysłowy."""
    lx = shlex.shlex(raw, posix=True)
    lx.whitespace_split = True
    lx.commenters = "#"
    return list(lx)


def parse_fz(path: str) -> Rulebase:
    with open(path, "r", encoding="utf-8") as f:
        src = f.read()
    rb = parse_fz_string(src)
    logger.info("loaded %s: %d variables, %d rules", path, len(rb.database), len(rb.rules))
    return rb


def parse_fz_string(source: str) -> Rulebase:
    rb = Rulebase(database=Database())
    db = rb.database

    # do kompilacji po wszystkim
    pending_rules: List[Tuple[int, str, str, str]] = []
    pending_inputs: List[Tuple[int, str, str, float]] = []
    auto_names = 0

    for lineno, raw in enumerate(source.splitlines(), 1):
        try:
            tokens = _lex_line(raw)
        except ValueError as e:
            # np. niezamknięty cudzysłów
            raise FZParseError(str(e), lineno, raw) from e
        if not tokens:
            continue
        head = tokens[0].lower()

        try:
            if head == "var":
                if len(tokens) != 4:
                    raise FZParseError("var: expected 'var <name> <vmin> <vmax>'", lineno, raw)
                db.add_variable(LinguisticVariable(tokens[1], float(tokens[2]), float(tokens[3])))

            elif head == "mf":
                if len(tokens) < 5:
                    raise FZParseError("mf: expected 'mf <var> <label> <shape> [params...]'", lineno, raw)
                vname, label, shape = tokens[1], tokens[2], tokens[3]
                var = db.lookup(vname)
                if var is None:
                    raise FZParseError(f"MF for unknown variable: {vname}", lineno, raw)
                var.add_term(label, make_mf(shape, tokens[4:]))

            elif head == "tnorm":
                if len(tokens) != 2:
                    raise FZParseError("tnorm: expected a name (e.g. min|prod)", lineno, raw)
                norms.get_norm(tokens[1])  # walidacja nazwy
                rb.tnorm = tokens[1].lower()

            elif head == "snorm":
                if len(tokens) != 2:
                    raise FZParseError("snorm: expected a name (e.g. max|prob)", lineno, raw)
                norms.get_conorm(tokens[1])
                rb.snorm = tokens[1].lower()

            elif head == "input":
                if len(tokens) != 3:
                    raise FZParseError("input: expected 'input <var> <value>'", lineno, raw)
                pending_inputs.append((lineno, raw, tokens[1], float(tokens[2])))

            elif head == "rule":
                words = tokens[1:]
                # "IF(A is Lo)" też zaczyna się od IF, więc sprawdzamy po tokenizacji reguły
                if words and tokenize(" ".join(words))[0].upper() != "IF":
                    name, words = words[0].rstrip(":"), words[1:]
                else:
                    auto_names += 1
                    name = f"R{auto_names}"
                pending_rules.append((lineno, raw, name, " ".join(words)))

            else:
                raise FZParseError(f"Unknown directive: {tokens[0]}", lineno, raw)

        except FZParseError:
            raise
        except (FuzzyError, ValueError) as e:
            # opakuj błąd w FZParseError z kontekstem
            raise FZParseError(str(e), lineno, raw) from e

    for lineno, raw, vname, x in pending_inputs:
        try:
            db.get_variable(vname).numeric_input = x
        except FuzzyError as e:
            raise FZParseError(str(e), lineno, raw) from e

    for lineno, raw, name, text in pending_rules:
        try:
            rb.new_rule(name, text)
        except FuzzyError as e:
            raise FZParseError(str(e), lineno, raw) from e

    return rb

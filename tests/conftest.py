"""
Shared fixtures: a small furnace model.

Steel/Stove in [0, 80] with Cold/Cool/Warm/Hot; Pressure in [0, 100] with
Low/Medium/High. At Steel=12 Cold is 0.9, at Stove=70 Hot is 0.7.
"""

import pytest

from fuzzyrules.fuzzy.core.mfs import LeftShoulder, RightShoulder, Trapezoidal, Triangular
from fuzzyrules.fuzzy.model.database import Database
from fuzzyrules.fuzzy.model.variable import LinguisticVariable


FURNACE_FZ = """\
# furnace model
var Steel 0 80
var Stove 0 80
var Pressure 0 100

mf Steel Cold lshoulder 11 21
mf Steel Cool trap 10 15 20 25
mf Steel Warm trap 20 25 30 35
mf Steel Hot  rshoulder 63 73
mf Stove Cold lshoulder 11 21
mf Stove Cool trap 10 15 20 25
mf Stove Warm trap 20 25 30 35
mf Stove Hot  rshoulder 63 73

mf Pressure Low    tri 0 0 50
mf Pressure Medium tri 25 50 75
mf Pressure High   tri 50 100 100

input Steel 12
input Stove 70

rule Test1 IF Steel is Cold and Stove is Hot THEN Pressure is Low
rule Test2 IF Steel is Cold and (Stove is Warm or Stove is Hot) THEN Pressure is Medium
rule IF Steel is Cold and Stove is Warm or Stove is Hot THEN Pressure is High   # R1
"""


def _temperature(name: str) -> LinguisticVariable:
    var = LinguisticVariable(name, 0, 80)
    var.add_term("Cold", LeftShoulder(11, 21))
    var.add_term("Cool", Trapezoidal(10, 15, 20, 25))
    var.add_term("Warm", Trapezoidal(20, 25, 30, 35))
    var.add_term("Hot", RightShoulder(63, 73))
    return var


@pytest.fixture
def furnace_db() -> Database:
    db = Database()
    db.add_variable(_temperature("Steel"))
    db.add_variable(_temperature("Stove"))
    pressure = LinguisticVariable("Pressure", 0, 100)
    pressure.add_term("Low", Triangular(0, 0, 50))
    pressure.add_term("Medium", Triangular(25, 50, 75))
    pressure.add_term("High", Triangular(50, 100, 100))
    db.add_variable(pressure)
    db.set_inputs({"Steel": 12, "Stove": 70})
    return db


@pytest.fixture
def furnace_source() -> str:
    return FURNACE_FZ


@pytest.fixture
def furnace_fz(tmp_path):
    path = tmp_path / "furnace.fz"
    path.write_text(FURNACE_FZ, encoding="utf-8")
    return str(path)

from __future__ import annotations
import math
from dataclasses import dataclass
from .types import Float, FuzzyError

def _clamp01(x: Float) -> Float:
    if x <= 0.0:
        return 0.0
    elif x >= 1.0:
        return 1.0
    else:
        return x

class MembershipFunction:
    def mu(self, x: Float) -> Float:
        raise NotImplementedError
    def support(self) -> tuple[Float, Float]:
        raise NotImplementedError

@dataclass(frozen=True)
class Triangular(MembershipFunction):
    a: Float; b: Float; c: Float
    def __post_init__(self):
        if not (self.a <= self.b <= self.c):
            raise FuzzyError(f"tri: a <= b <= c required (got {self.a}, {self.b}, {self.c})")
    def mu(self, x: Float) -> Float:
        if x <= self.a or x >= self.c:
            # wierzchołek na krawędzi (a == b lub b == c)
            return 1.0 if x == self.b else 0.0
        if x == self.b: return 1.0
        if x < self.b:  return (x - self.a) / (self.b - self.a)
        return (self.c - x) / (self.c - self.b)
    def support(self) -> tuple[Float, Float]:
        return (self.a, self.c)

@dataclass(frozen=True)
class Trapezoidal(MembershipFunction):
    a: Float; b: Float; c: Float; d: Float
    def __post_init__(self):
        if not (self.a <= self.b <= self.c <= self.d):
            raise FuzzyError("trap: a <= b <= c <= d required")
    def mu(self, x: Float) -> Float:
        if self.b <= x <= self.c: return 1.0
        if x <= self.a or x >= self.d: return 0.0
        if x < self.b: return (x - self.a) / (self.b - self.a)
        return (self.d - x) / (self.d - self.c)
    def support(self) -> tuple[Float, Float]:
        return (self.a, self.d)

@dataclass(frozen=True)
class LeftShoulder(MembershipFunction):
    """1 up to b, linear fall to 0 at c."""
    b: Float; c: Float
    def __post_init__(self):
        if not self.b < self.c:
            raise FuzzyError("lshoulder: b < c required")
    def mu(self, x: Float) -> Float:
        if x <= self.b: return 1.0
        if x >= self.c: return 0.0
        return (self.c - x) / (self.c - self.b)
    def support(self) -> tuple[Float, Float]:
        return (-math.inf, self.c)

@dataclass(frozen=True)
class RightShoulder(MembershipFunction):
    """0 up to a, linear rise to 1 at b."""
    a: Float; b: Float
    def __post_init__(self):
        if not self.a < self.b:
            raise FuzzyError("rshoulder: a < b required")
    def mu(self, x: Float) -> Float:
        if x >= self.b: return 1.0
        if x <= self.a: return 0.0
        return (x - self.a) / (self.b - self.a)
    def support(self) -> tuple[Float, Float]:
        return (self.a, math.inf)

@dataclass(frozen=True)
class Gaussian(MembershipFunction):
    mu0: Float; sigma: Float
    def __post_init__(self):
        if self.sigma <= 0:
            raise FuzzyError("gauss: sigma > 0 required")
    def mu(self, x: Float) -> Float:
        z = (x - self.mu0) / self.sigma
        return _clamp01(math.exp(-0.5 * z * z))
    def support(self) -> tuple[Float, Float]:
        s = 4.0 * self.sigma
        return (self.mu0 - s, self.mu0 + s)


@dataclass(frozen=True, eq=False)
class FuzzySet:
    """Named membership function, i.e. a linguistic label such as 'Cold'."""
    name: str
    function: MembershipFunction

    def membership(self, x: Float) -> Float:
        return _clamp01(float(self.function.mu(float(x))))

    def __str__(self) -> str:
        return self.name


# kształt -> (klasa, liczba parametrów)
SHAPES = {
    "tri": (Triangular, 3),
    "trap": (Trapezoidal, 4),
    "gauss": (Gaussian, 2),
    "lshoulder": (LeftShoulder, 2),
    "rshoulder": (RightShoulder, 2),
}

def make_mf(shape: str, params) -> MembershipFunction:
    shape = shape.lower()
    if shape not in SHAPES:
        raise FuzzyError(f"Unknown MF shape: {shape}")
    cls, arity = SHAPES[shape]
    if len(params) != arity:
        raise FuzzyError(f"{shape}: expected {arity} parameters, got {len(params)}")
    return cls(*(float(p) for p in params))

"""
Pairwise fuzzy operators used by rules:
  - T-normy (AND): min | prod | lukasiewicz | hamacher
  - S-normy (OR):  max | prob | bsum | hamacher

Each operator is an object with ``evaluate(x, y)``; anything with that method
can be injected into a Rule, the classes below are just the stock ones.
"""
from typing import Dict, Protocol
from .types import Float, FuzzyError


class Norm(Protocol):
    def evaluate(self, x: Float, y: Float) -> Float: ...


class CoNorm(Protocol):
    def evaluate(self, x: Float, y: Float) -> Float: ...


# --- T-normy ---
class MinimumNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        return min(x, y)

class ProductNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        return x * y

class LukasiewiczNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        return max(0.0, x + y - 1.0)

class HamacherNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        denom = x + y - x * y
        if denom == 0.0:  # (0,0) -> 0
            return 0.0
        return (x * y) / denom


# --- S-normy ---
class MaximumCoNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        return max(x, y)

class ProbabilisticCoNorm:
    """Algebraic sum: x + y - x*y."""
    def evaluate(self, x: Float, y: Float) -> Float:
        return x + y - x * y

class BoundedSumCoNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        return min(1.0, x + y)

class HamacherCoNorm:
    def evaluate(self, x: Float, y: Float) -> Float:
        denom = 1.0 - x * y
        if denom == 0.0:  # (1,1) -> 1
            return 1.0
        return (x + y - 2.0 * x * y) / denom


TNORMS: Dict[str, Norm] = {
    "min": MinimumNorm(),
    "prod": ProductNorm(),
    "lukasiewicz": LukasiewiczNorm(),
    "hamacher": HamacherNorm(),
}
SNORMS: Dict[str, CoNorm] = {
    "max": MaximumCoNorm(),
    "prob": ProbabilisticCoNorm(),
    "bsum": BoundedSumCoNorm(),
    "hamacher": HamacherCoNorm(),
}


def get_norm(name: str) -> Norm:
    try:
        return TNORMS[name.lower()]
    except KeyError:
        raise FuzzyError(f"tnorm: unsupported '{name}' (choose from {', '.join(TNORMS)})") from None

def get_conorm(name: str) -> CoNorm:
    try:
        return SNORMS[name.lower()]
    except KeyError:
        raise FuzzyError(f"snorm: unsupported '{name}' (choose from {', '.join(SNORMS)})") from None

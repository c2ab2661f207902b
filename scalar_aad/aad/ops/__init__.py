# aad/ops/__init__.py

# Convenience re-exports so users can do: from scalar_aad.aad.ops import mul, tanh, ...
from .arithmetic import add, sub, subtract_from, mul, div, neg, pow
from .transcendental import tanh, exp

__all__ = [
    "add", "sub", "subtract_from", "mul", "div", "neg", "pow",
    "tanh", "exp",
]

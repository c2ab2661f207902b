# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Iterable, List

from .var import Value
from .tape import use_tape
from .engine import reverse


def value(x: Any) -> Any:
    """Return the numeric value of a Value; pass through plain numbers unchanged."""
    return x.val if isinstance(x, Value) else x


def _ensure_value(v: Any, *, name: str) -> Value:
    """Wrap a plain number as a Value if needed; otherwise return the Value itself."""
    return v if isinstance(v, Value) else Value(v, name=name)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Runs one reverse pass within a fresh, isolated tape.
    """
    with use_tape():
        x = _ensure_value(x0, name="x")
        y = f(x)
        if not isinstance(y, Value):
            # f ignored its input: the derivative is zero
            return 0.0
        reverse(y)
        return float(x.grad)


# ----------------------------- multi-input grads ----------------------------- #
def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[float]:
    """
    Gradient of y=f(xs) with respect to every input, from ONE reverse pass.
    Results are in the same order as `x0_list`.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    with use_tape():
        xs: List[Value] = [
            _ensure_value(v, name=f"x{i}") for i, v in enumerate(x0_list)
        ]
        y = f(xs)
        if not isinstance(y, Value):
            return [0.0 for _ in xs]
        reverse(y)
        return [float(x.grad) for x in xs]

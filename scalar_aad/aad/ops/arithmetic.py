# aad/ops/arithmetic.py
import numpy as np
from ..core.var import Value
from ..core.node import Node
from ..core import tape as tape_mod  # Use module access for use_tape() compatibility

def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as a zero-gradient constant leaf."""
    return x if isinstance(x, Value) else Value(x)

def _record(op_tag, val, children, exponent=None, name=None):
    """
    Create the output Value and its Node. The Node snapshots each child's
    value and is pushed on the active tape, if any.
    """
    out = Value(val, name=name)
    children = tuple(children)
    out.op = Node(op_tag=op_tag, out=out, children=children,
                  saved=tuple(c.val for c in children), exponent=exponent)
    if tape_mod.global_tape is not None:
        tape_mod.global_tape.push(out.op)
    return out

def _binary(x, y, f, tag, name=None):
    """
    Generic binary primitive:
      - computes out.val = f(x.val, y.val)
      - records (x, y) as children under `tag`; the engine owns the rule
    """
    x = _as_value(x)
    y = _as_value(y)
    with np.errstate(all="ignore"):
        val = f(x.val, y.val)
    return _record(tag, val, (x, y), name=name)

def add(x, y, *, name=None): return _binary(x, y, lambda a, b: a + b, "add", name)
def sub(x, y, *, name=None): return _binary(x, y, lambda a, b: a - b, "sub", name)
def mul(x, y, *, name=None): return _binary(x, y, lambda a, b: a * b, "mul", name)

def subtract_from(a, b, *, name=None):
    """
    Reference-compatible subtraction: out.val = b - a.

    Backward adds the upstream gradient into BOTH operands with the same
    sign (a.grad += g, b.grad += g), which is only correct for `b`.
    Prefer `sub` / the `-` operator for the mathematically correct rule.
    """
    return _binary(a, b, lambda p, q: q - p, "subtract_from", name)

def pow(x, p, *, name=None):
    """
    Power with a plain numeric exponent:
      out.val = x.val ** p
      ∂out/∂x = p * x^(p-1)

    A Value exponent is read as its current value; no gradient flows to it.
    Negative bases with fractional exponents give nan, 0 ** -1 gives inf.
    """
    x = _as_value(x)
    p = float(p.val) if isinstance(p, Value) else float(p)
    with np.errstate(all="ignore"):
        val = np.power(x.val, p)
    return _record("pow", val, (x,), exponent=p, name=name)

def div(x, y, *, name=None):
    """x / y == x * y**-1; reuses the mul and pow rules. `name` labels the product."""
    return mul(x, pow(y, -1.0), name=name)

def neg(x, *, name=None):
    return mul(x, -1.0, name=name)

# aad/core/var.py
from __future__ import annotations
import itertools
import numpy as np
from typing import Any, Optional

# Process-wide creation counter; a Value's uid is never reused.
_uid_counter = itertools.count()


class Value:
    """
    Scalar node of the computation graph for reverse-mode AD.

    Attributes
    ----------
    val  : np.float64
        Forward value. Mutable only for leaves used as parameters.
    grad : np.float64
        Accumulated upstream gradient; starts at 0.
    name : Optional[str]
        Optional debug/pretty-print label.
    uid  : int
        Creation index, used as the identity key by the backward traversal.
    op   : Optional[Node]
        Node record of the operation that produced this Value
        (None for leaves: inputs, parameters and constants).
    """

    __array_priority__ = 1000  # numpy scalars defer to Value's reflected operators

    def __init__(self, val: Any, *, name: Optional[str] = None):
        # Only real scalars; bool is rejected
        if isinstance(val, bool) or not isinstance(val, (int, float, np.integer, np.floating)):
            raise TypeError(
                f"Value only accepts real numeric scalars (int, float, numpy scalar), "
                f"but got {type(val)}"
            )
        self.val = np.float64(val)
        self.grad = np.float64(0.0)
        self.name = name
        self.uid = next(_uid_counter)
        self.op = None

    @property
    def children(self):
        """Operands that produced this Value; empty for leaves."""
        return self.op.children if self.op is not None else ()

    @property
    def is_leaf(self) -> bool:
        return self.op is None

    def __repr__(self):
        return f"Value({float(self.val)!r}, grad={float(self.grad)!r}, name={self.name!r})"

    def __float__(self):
        return float(self.val)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        # Constant base: the exponent is read as a plain number, nothing is tracked
        return pow(other, self.val)

    def tanh(self, *, name=None):
        from ..ops.transcendental import tanh
        return tanh(self, name=name)

    def exp(self, *, name=None):
        from ..ops.transcendental import exp
        return exp(self, name=name)

    def backward(self):
        """Run one reverse pass seeded at this Value."""
        from .engine import reverse
        reverse(self)

# aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    Value             : Scalar node of the computation graph.
    Tape              : Arena recording op Nodes in creation order.
    active_tape       : The tape ops are recorded on (None outside use_tape).
    use_tape          : Context manager to temporarily switch the active tape.
    reverse, backward : Run a single reverse pass from a scalar output.
    topological_order : Post-order of every Value reachable from a root.
    zero_grads        : Reset all grads recorded on the active tape.
    grad, grads_list  : Convenience: gradients of plain-number functions.
    value             : Convenience: extract the primal value of a Value.
"""

from .var import Value
from .tape import Tape, use_tape, active_tape
from .engine import reverse, backward, topological_order, zero_grads
from .seeds import grad, grads_list, value

__all__ = [
    "Value",
    "Tape", "use_tape", "active_tape",
    "reverse", "backward", "topological_order", "zero_grads",
    "grad", "grads_list", "value",
]

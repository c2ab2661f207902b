# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.var import Value
from .core.tape import Tape, use_tape, active_tape
from .core.engine import (
    reverse,
    backward,
    topological_order,
    zero_grads,
)
from .core.graph_utils import describe, graph_summary, print_graph_summary
from . import ops
from .ops import tanh, exp, subtract_from

__all__ = [
    # Core
    'Value',
    'Tape',
    'active_tape',
    'use_tape',
    # Engine
    'reverse',
    'backward',
    'topological_order',
    'zero_grads',
    # Inspection
    'describe',
    'graph_summary',
    'print_graph_summary',
    # Ops
    'ops',
    'tanh',
    'exp',
    'subtract_from',
]

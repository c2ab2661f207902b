# aad/core/node.py
from dataclasses import dataclass
from typing import Any, Optional, Tuple

@dataclass
class Node:
    """
    One node on the tape produced by a primitive operation.

    Attributes
    ----------
    op_tag   : str
        Operator kind the engine dispatches on
        ("add", "sub", "subtract_from", "mul", "pow", "tanh", "exp").
    out      : Any
        The Value produced by this op.
    children : Tuple[Any, ...]
        Operand Values, in the operator-defined order.
    saved    : Tuple[float, ...]
        Operand values captured when the op ran. Rules read these, never
        the operands' current `.val`.
    exponent : Optional[float]
        Plain numeric exponent for "pow"; None for every other op.
    """
    op_tag: str
    out: Any
    children: Tuple[Any, ...]
    saved: Tuple[float, ...] = ()
    exponent: Optional[float] = None

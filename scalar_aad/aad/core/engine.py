# aad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import List, Optional
from . import tape as tape_mod
from .node import Node
from .var import Value

def topological_order(root: Value) -> List[Value]:
    """
    All Values reachable from `root` through `children`, post-order.

    Every child appears before each of its parents and `root` comes last.
    Each Value is visited once, keyed on its uid. Iterative, but children
    are visited in operand order exactly as a recursive depth-first walk.
    """
    order: List[Value] = []
    visited = {root.uid}
    stack = [(root, iter(root.children))]
    while stack:
        v, pending = stack[-1]
        for child in pending:
            if child.uid not in visited:
                visited.add(child.uid)
                stack.append((child, iter(child.children)))
                break
        else:
            stack.pop()
            order.append(v)
    return order

def reverse(root: Value) -> None:
    """
    Run a single reverse pass from `root`.

    Seeds root.grad = 1.0 (d root / d root), then applies each node's local
    rule exactly once, root first. Because a Value is only reached after
    every Value that depends on it, its grad is complete before its own
    rule pushes it further down.
    """
    root.grad = np.float64(1.0)
    for v in reversed(topological_order(root)):
        if v.op is not None:
            _propagate(v.op)

def backward(root: Value) -> None:
    reverse(root)

def _propagate(node: Node) -> None:
    """Add ∂out/∂child * out.grad into each child's grad, by op tag."""
    g = node.out.grad
    tag = node.op_tag
    with np.errstate(all="ignore"):
        if tag == "add":
            a, b = node.children
            a.grad += g
            b.grad += g
        elif tag == "sub":
            # out = a - b
            a, b = node.children
            a.grad += g
            b.grad -= g
        elif tag == "subtract_from":
            # out = b - a; same-sign rule kept for reference compatibility
            a, b = node.children
            a.grad += g
            b.grad += g
        elif tag == "mul":
            a, b = node.children
            av, bv = node.saved
            a.grad += bv * g
            b.grad += av * g
        elif tag == "pow":
            (a,) = node.children
            (av,) = node.saved
            p = node.exponent
            a.grad += p * np.power(av, p - 1.0) * g
        elif tag == "tanh":
            (a,) = node.children
            t = node.out.val
            a.grad += (1.0 - t * t) * g
        elif tag == "exp":
            (a,) = node.children
            a.grad += node.out.val * g
        else:
            raise ValueError(f"No backward rule for op tag {tag!r}")

def zero_grads(tape: Optional[tape_mod.Tape] = None) -> None:
    """
    Set grad to zero on every Value recorded on `tape` (default: the
    active tape), outputs and children alike. No-op outside use_tape()
    when no tape is given.
    """
    tape = tape if tape is not None else tape_mod.global_tape
    if tape is None:
        return
    seen = set()
    for node in tape.nodes:
        for v in (node.out,) + node.children:
            if v.uid not in seen:
                v.grad = np.float64(0.0)
                seen.add(v.uid)

# aad/core/tape.py
from __future__ import annotations
from typing import List, Optional
from contextlib import contextmanager
from .node import Node

class Tape:
    """
    Arena of op Nodes in creation order.

    The index returned by `push` is the node's creation index; leaves
    (inputs, parameters, constants) never appear on the tape.
    """
    def __init__(self):
        self.nodes: List[Node] = []

    def __len__(self):
        return len(self.nodes)

    def reset(self):
        self.nodes.clear()

    def push(self, node: Node) -> int:
        """Append `node` and return its index."""
        self.nodes.append(node)
        return len(self.nodes) - 1

# Active tape. None outside use_tape(): ops are not recorded anywhere and a
# graph lives only as long as the Values referencing it.
global_tape: Optional[Tape] = None

@contextmanager
def use_tape(tape: Optional[Tape] = None):
    """
    Context manager to record ops onto a tape (a fresh one by default):
        with use_tape() as t:
            ... build computation ...
            reverse(y)
    The previous tape is restored on exit and the temporary graph is dropped.
    """
    from . import tape as _tape_mod  # local import so callers see the swap
    prev = _tape_mod.global_tape
    try:
        _tape_mod.global_tape = tape if tape is not None else Tape()
        yield _tape_mod.global_tape
    finally:
        _tape_mod.global_tape = prev

def active_tape() -> Optional[Tape]:
    """The tape ops are currently recorded on, or None outside use_tape()."""
    from . import tape as _tape_mod
    return _tape_mod.global_tape

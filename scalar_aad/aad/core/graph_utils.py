"""
Graph inspection helpers.

Used to print and analyse the computation graph recorded on a tape, or
the subgraph hanging off a single Value.
"""

import numpy as np
from typing import Dict
from collections import Counter


def describe(v) -> str:
    """
    Nested text dump of `v` and everything below it:

        (name value: 2.0, grad: 1.0)[(...), (...)]

    Shared subgraphs are printed once per use site. Iterative, so graph
    depth is not bounded by the recursion limit.
    """
    # (value, pending children, rendered children)
    stack = [(v, iter(v.children), [])]
    while True:
        node, pending, parts = stack[-1]
        child = next(pending, None)
        if child is not None:
            stack.append((child, iter(child.children), []))
            continue
        stack.pop()
        text = (f"({node.name or ''} value: {float(node.val)}, "
                f"grad: {float(node.grad)})[{', '.join(parts)}]")
        if not stack:
            return text
        stack[-1][2].append(text)


def graph_summary(tape) -> Dict:
    """
    Node/edge counts, fan-in/fan-out statistics and an op breakdown for
    everything recorded on `tape`.
    """
    n_nodes = len(tape.nodes)
    if n_nodes == 0:
        return {'nodes': 0, 'edges': 0, 'leaves': 0, 'max_fan_in': 0,
                'max_fan_out': 0, 'avg_fan_out': 0.0, 'operations': {}}

    n_edges = sum(len(node.children) for node in tape.nodes)
    fan_ins = [len(node.children) for node in tape.nodes]

    # Fan-out counts uses of each Value as an operand, leaves included
    fan_out = Counter()
    recorded = set()
    for node in tape.nodes:
        recorded.add(node.out.uid)
        for child in node.children:
            fan_out[child.uid] += 1
    leaves = [uid for uid in fan_out if uid not in recorded]
    fan_outs = list(fan_out.values())

    op_counter = Counter(node.op_tag for node in tape.nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': len(leaves),
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_outs) if fan_outs else 0,
        'avg_fan_out': float(np.mean(fan_outs)) if fan_outs else 0.0,
        'operations': dict(op_counter),
    }


def print_graph_summary(tape) -> Dict:
    """
    Print the graph_summary() of `tape` and return it.
    """
    stats = graph_summary(tape)
    if stats['nodes'] == 0:
        print("Empty computation graph")
        return stats

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_type:14s}: {count:6,} ({pct:5.1f}%)")
    print("="*70 + "\n")

    return stats

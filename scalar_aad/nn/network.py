"""
Feed-forward network (multi-layer perceptron) of tanh layers.

    input_count → output_counts[0] → output_counts[1] → ...

The network owns its parameters; `nudge` applies one gradient-descent
step to all of them from the grads left by the latest backward pass.
"""

import numpy as np
from typing import List, Optional, Sequence, Union

from ..aad.core.var import Value
from .init import default_rng
from .layer import Layer


class Network:
    """
    Attributes:
        input_count (int): Width of the raw input vector
        output_counts (List[int]): Width of each layer, in order
        layers (List[Layer]): The layers, chained in order
    """

    def __init__(self, input_count: int, output_counts: Sequence[int],
                 rng: Optional[np.random.Generator] = None):
        """
        Args:
            input_count: Number of raw inputs
            output_counts: Layer widths; the last entry is the output width
            rng: Generator used for every weight and bias (fresh one if None)
        """
        if len(output_counts) == 0:
            raise ValueError("Network needs at least one layer")
        if any(c <= 0 for c in output_counts):
            raise ValueError(f"Layer widths must be positive, got {list(output_counts)}")
        rng = default_rng(rng)
        self.input_count = input_count
        self.output_counts = list(output_counts)
        counts = [input_count] + self.output_counts
        self.layers: List[Layer] = [
            Layer(counts[i], counts[i + 1], rng=rng) for i in range(len(self.output_counts))
        ]

    @property
    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters]

    def forward(self, inputs: Sequence[Union[float, Value]]) -> List[Value]:
        """
        Wrap raw inputs as zero-gradient leaves and feed them through every
        layer; returns the last layer's outputs.
        """
        outs = [x if isinstance(x, Value) else Value(x) for x in inputs]
        for layer in self.layers:
            outs = layer.forward(outs)
        return outs

    __call__ = forward

    def zero_grad(self):
        for p in self.parameters:
            p.grad = np.float64(0.0)

    def nudge(self, learning_rate: float):
        """
        Gradient-descent step on every parameter, then reset its grad:
            value -= learning_rate * grad
        Must follow a backward pass; all parameters are updated from the
        grads of that same pass.
        """
        for p in self.parameters:
            p.val = p.val - learning_rate * p.grad
            p.grad = np.float64(0.0)

    def __repr__(self):
        return f"Network(input_count={self.input_count}, output_counts={self.output_counts})"

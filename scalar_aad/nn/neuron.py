"""
Single tanh neuron over scalar Values.

    out = tanh(b + Σᵢ wᵢ·xᵢ)

Weights and bias are leaf Values that persist across training iterations;
every forward call builds a fresh graph on top of them.
"""

import numpy as np
from typing import List, Optional, Sequence

from ..aad.core.var import Value
from ..aad.ops.transcendental import tanh
from .init import default_rng, uniform_bipolar


class Neuron:
    """
    Attributes:
        weights (List[Value]): One weight per input, drawn from U[-1, 1)
        bias (Value): Bias, drawn from U[-1, 1)
    """

    def __init__(self, input_count: int, rng: Optional[np.random.Generator] = None):
        if input_count < 0:
            raise ValueError(f"input_count must be non-negative, got {input_count}")
        rng = default_rng(rng)
        self.input_count = input_count
        self.weights: List[Value] = [Value(uniform_bipolar(rng)) for _ in range(input_count)]
        self.bias = Value(uniform_bipolar(rng))

    @property
    def parameters(self) -> List[Value]:
        """Weights followed by bias."""
        return self.weights + [self.bias]

    def forward(self, inputs: Sequence[Value]) -> Value:
        if len(inputs) != self.input_count:
            raise ValueError(
                f"Neuron expects {self.input_count} inputs, got {len(inputs)}"
            )
        # Left fold starting from the bias, one weight at a time
        activation = self.bias
        for w, x in zip(self.weights, inputs):
            activation = activation + w * x
        return tanh(activation)

    __call__ = forward

    def __repr__(self):
        return f"Neuron(input_count={self.input_count})"

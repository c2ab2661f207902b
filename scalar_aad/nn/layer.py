"""
Fully connected layer of independent tanh neurons.
"""

import numpy as np
from typing import List, Optional, Sequence

from ..aad.core.var import Value
from .init import default_rng
from .neuron import Neuron


class Layer:
    def __init__(self, input_count: int, output_count: int,
                 rng: Optional[np.random.Generator] = None):
        rng = default_rng(rng)
        self.input_count = input_count
        self.output_count = output_count
        self.neurons: List[Neuron] = [Neuron(input_count, rng=rng) for _ in range(output_count)]

    @property
    def parameters(self) -> List[Value]:
        return [p for n in self.neurons for p in n.parameters]

    def forward(self, inputs: Sequence[Value]) -> List[Value]:
        """One output per neuron, in neuron order."""
        return [n.forward(inputs) for n in self.neurons]

    __call__ = forward

    def __repr__(self):
        return f"Layer(input_count={self.input_count}, output_count={self.output_count})"

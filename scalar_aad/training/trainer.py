"""
Full-batch gradient-descent training of a Network.

Each iteration:

    1. forward every example through the network (fresh graph)
    2. loss = Σᵢ (desiredᵢ - predictionᵢ)²
    3. backward(loss)
    4. network.nudge(learning_rate)

There is no convergence check or early stopping: the loop runs exactly
`config.iterations` times.
"""

import numpy as np
from typing import Dict, List, Optional, Sequence

from ..aad.core.var import Value
from ..aad.core.tape import use_tape
from ..aad.core.engine import reverse
from ..nn.network import Network
from .train_config import TrainingConfig


class Trainer:
    """
    Usage:
        >>> config = TrainingConfig(iterations=50, seed=0, verbose=False)
        >>> result = Trainer(config).train()
        >>> result['loss_history'][-1] < result['loss_history'][0]
        True
    """

    def __init__(self, config: Optional[TrainingConfig] = None,
                 network: Optional[Network] = None):
        """
        Args:
            config: Training configuration (uses defaults if None)
            network: Network to train; built from config.input_count,
                config.layer_sizes and config.seed when None
        """
        self.config = config or TrainingConfig()
        if network is None:
            rng = np.random.default_rng(self.config.seed)
            network = Network(self.config.input_count, self.config.layer_sizes, rng=rng)
        self.network = network

        # Training history
        self.iteration = 0
        self.loss_history: List[float] = []
        self.output_history: List[List[float]] = []

    def loss(self, predictions: Sequence[Sequence[Value]]) -> Value:
        """
        Total squared error against the first output of each prediction,
        summed left to right starting from a zero leaf.
        """
        total = Value(0.0)
        for desired, prediction in zip(self.config.desired_outputs, predictions):
            total = total + (desired - prediction[0]) ** 2
        return total

    def step(self) -> float:
        """One forward/backward/update iteration; returns the loss value."""
        with use_tape():
            predictions = [self.network.forward(x) for x in self.config.examples]
            loss = self.loss(predictions)
            outputs = [float(v.val) for p in predictions for v in p]
            loss_val = float(loss.val)

            if self.config.verbose:
                print(loss_val, outputs)

            reverse(loss)
            self.network.nudge(self.config.learning_rate)

        self.iteration += 1
        self.loss_history.append(loss_val)
        self.output_history.append(outputs)
        return loss_val

    def train(self) -> Dict:
        """
        Run the configured number of iterations.

        Returns:
            Dictionary with:
                - network: The trained Network
                - loss_history: Loss before each update
                - output_history: Flattened raw outputs for each iteration
                - final_loss: Last recorded loss (nan if no iterations ran)
                - n_iterations: Number of iterations run
        """
        self.iteration = 0
        self.loss_history = []
        self.output_history = []

        for _ in range(self.config.iterations):
            self.step()

        return {
            'network': self.network,
            'loss_history': self.loss_history,
            'output_history': self.output_history,
            'final_loss': self.loss_history[-1] if self.loss_history else float('nan'),
            'n_iterations': self.iteration,
        }

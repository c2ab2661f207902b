"""
Training configuration.

All hyperparameters of a run live here so the trainer has no ambient
state; the defaults reproduce the classic 4-example toy problem.
"""

from dataclasses import dataclass, field
from typing import List


def _default_examples() -> List[List[float]]:
    return [
        [2.0, 3.0, -1.0],
        [3.0, -1.0, 0.5],
        [0.5, 1.0, 1.0],
        [1.0, 1.0, -1.0],
    ]


def _default_desired() -> List[float]:
    return [1.0, -1.0, -1.0, 1.0]


@dataclass
class TrainingConfig:
    """Configuration for full-batch gradient-descent training."""
    # Data
    examples: List[List[float]] = field(default_factory=_default_examples)
    desired_outputs: List[float] = field(default_factory=_default_desired)  # target for each example's first output

    # Architecture
    input_count: int = 3
    layer_sizes: List[int] = field(default_factory=lambda: [4, 4, 1])

    # Optimization
    iterations: int = 50
    learning_rate: float = 0.05

    # Reproducibility
    seed: int = 0

    # Logging
    verbose: bool = True

    def __post_init__(self):
        if len(self.examples) != len(self.desired_outputs):
            raise ValueError(
                f"Got {len(self.examples)} examples but "
                f"{len(self.desired_outputs)} desired outputs"
            )
        for i, example in enumerate(self.examples):
            if len(example) != self.input_count:
                raise ValueError(
                    f"Example {i} has {len(example)} inputs, expected {self.input_count}"
                )
        if not self.layer_sizes or any(n <= 0 for n in self.layer_sizes):
            raise ValueError(f"layer_sizes must be non-empty and positive, got {self.layer_sizes}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {self.iterations}")
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")

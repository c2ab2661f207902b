# scalar_aad/__init__.py
# Scalar reverse-mode AD engine and a small tanh MLP trained on top of it

from .aad import Value, use_tape, reverse, backward
from .nn import Neuron, Layer, Network
from .training import Trainer, TrainingConfig

__version__ = "0.1.0"

__all__ = [
    'Value',
    'use_tape',
    'reverse',
    'backward',
    'Neuron',
    'Layer',
    'Network',
    'Trainer',
    'TrainingConfig',
]

"""
Parametric modules built on the scalar AD engine.
"""

from .neuron import Neuron
from .layer import Layer
from .network import Network

__all__ = [
    'Neuron',
    'Layer',
    'Network',
]

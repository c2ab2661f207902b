"""
Training driver for scalar-AD networks.
"""

from .train_config import TrainingConfig
from .trainer import Trainer

__all__ = [
    'TrainingConfig',
    'Trainer',
]

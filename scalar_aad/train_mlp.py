"""
Train the 3 → 4 → 4 → 1 tanh network on the 4 built-in examples.

Prints, once per iteration, the loss followed by the network's raw
outputs for every example:

    python -m scalar_aad.train_mlp
"""

from .training import Trainer, TrainingConfig


def main():
    Trainer(TrainingConfig()).train()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

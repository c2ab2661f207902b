"""
Loss-curve plotting.
"""

from typing import Sequence

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt


def plot_loss_history(loss_history: Sequence[float], path: str, title: str = "Training loss") -> str:
    """
    Save a PNG of the loss per iteration to `path` and return the path.
    """
    fig, ax = plt.subplots(figsize=(8, 5))
    ax.plot(range(1, len(loss_history) + 1), loss_history, marker='o', markersize=3)
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Loss")
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path

"""
Static matplotlib figures for cipher traces.

plot_playfair_square shows the key square with a heat map of how often each
cell was used by the traced pairs. plot_shift_trace shows the shift applied
at every position of a Caesar or Vigenere trace.
"""
import logging
from typing import List, Optional, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np

from .config import SQUARE_SIZE
from .trace import PlayfairTrace, TraceStep

logger = logging.getLogger(__name__)


def square_usage(trace: PlayfairTrace) -> np.ndarray:
    """5x5 array counting how many traced letters landed in each cell."""
    usage = np.zeros((SQUARE_SIZE, SQUARE_SIZE), dtype=int)
    for step in trace.steps:
        for r, c in step.positions:
            if r >= 0:
                usage[r, c] += 1
    return usage


def plot_playfair_square(trace: PlayfairTrace, ax=None):
    if ax is None:
        _, ax = plt.subplots(figsize=(5, 5))
    usage = square_usage(trace)
    ax.imshow(usage, cmap="Greens", vmin=0, vmax=max(int(usage.max()), 1))
    for r, row in enumerate(trace.square):
        for c, letter in enumerate(row):
            ax.text(c, r, letter, ha="center", va="center", fontsize=14, fontweight="bold")
    ax.set_xticks(range(SQUARE_SIZE))
    ax.set_yticks(range(SQUARE_SIZE))
    ax.set_title("Playfair key square")
    if trace.prepared:
        ax.set_xlabel("Pairs: " + " ".join(trace.pairs) + "\nResult: " + trace.result)
    return ax


def plot_shift_trace(steps: Sequence[TraceStep], ax=None, title: str = "Shift per character"):
    if ax is None:
        _, ax = plt.subplots(figsize=(max(6, len(steps) * 0.4), 4))
    positions = np.arange(len(steps))
    shifts = np.array([step.shift if step.shift is not None else 0 for step in steps])
    ax.bar(positions, shifts, color="tab:blue")
    ax.set_xticks(positions)
    ax.set_xticklabels([f"{step.original}\n{step.result}" for step in steps])
    ax.set_ylim(0, 26)
    ax.set_ylabel("shift")
    ax.set_title(title)
    return ax


def save_trace_figure(trace: Union[List[TraceStep], PlayfairTrace], path: str,
                      title: Optional[str] = None) -> None:
    """
    Draws the right plot for the trace type and writes it to path.
    The figure is closed afterwards.
    """
    if isinstance(trace, PlayfairTrace):
        fig, ax = plt.subplots(figsize=(6, 6))
        plot_playfair_square(trace, ax=ax)
    else:
        fig, ax = plt.subplots(figsize=(max(6, len(trace) * 0.4), 4))
        plot_shift_trace(trace, ax=ax)
    if title:
        ax.set_title(title)
    try:
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
    logger.info("Trace figure written to %s", path)

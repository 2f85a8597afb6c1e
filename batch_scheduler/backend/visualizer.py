from __future__ import annotations

from typing import List, Optional
import os
import matplotlib.pyplot as plt

from .core import ProcessRecord


def ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)


def plot_order(records: List[ProcessRecord], title: str = "Order of Processes", out_path: Optional[str] = None) -> None:
    # One bar per slot, first slot at the top
    fig, ax = plt.subplots(figsize=(10, 2 + 0.4 * max(1, len(records))))

    positions = list(range(len(records)))
    bursts = [p.burst_time for p in records]
    ax.barh(positions, bursts, color="#4c78a8", edgecolor="black", alpha=0.9)

    for pos, p in zip(positions, records):
        ax.text(
            p.burst_time,
            pos,
            f" pr={p.priority}",
            va="center",
            ha="left",
            fontsize=8,
        )

    ax.set_yticks(positions)
    ax.set_yticklabels([f"{i + 1}. {p.name} (ID {p.pid})" for i, p in enumerate(records)])
    ax.invert_yaxis()
    ax.set_xlabel("Burst time (ms)")
    ax.set_title(title)
    ax.grid(True, axis="x", linestyle=":", alpha=0.5)
    fig.tight_layout()

    if out_path:
        ensure_dir(out_path)
        fig.savefig(out_path, dpi=150)
        plt.close(fig)
    else:
        plt.show()

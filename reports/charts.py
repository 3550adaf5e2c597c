# reports/charts.py
from __future__ import annotations

from typing import Optional

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from core.calculate import CalculationResult

COLOR_OK = "#2e7d32"
COLOR_FAIL = "#c62828"


def drop_chart(res: CalculationResult, *, title: Optional[str] = None) -> Figure:
    """
    Bar chart of drop (%) per gauge with the threshold as a dashed line.

    Returns the Figure; the caller shows it (st.pyplot) and closes it.
    """
    labels = [r.gauge.label for r in res.results]
    ys = [r.voltage_drop_percent for r in res.results]
    colors = [COLOR_OK if r.meets_threshold else COLOR_FAIL for r in res.results]

    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(labels, ys, color=colors)
    ax.axhline(res.inputs.max_drop_percent, linestyle="--", color="black", label=f"Max {res.inputs.max_drop_percent:g}%")
    ax.set_ylabel("Drop (%)")
    ax.set_xlabel("Wire gauge")
    ax.set_title(title or "Voltage drop per gauge")
    ax.tick_params(axis="x", labelrotation=90)
    ax.legend()
    fig.tight_layout()
    return fig


def close_chart(fig: Figure) -> None:
    plt.close(fig)

# streamlit_app/chart.py
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import MaxNLocator
import pandas as pd

BAR_COLORS = ["#003366", "#1f5baa", "#ffd700", "#ff6f61"]
BORDER_COLORS = ["#002244", "#153d7e", "#e6c200", "#cc5a50"]


def frame(breakdown: dict) -> pd.DataFrame:
    """Breakdown mapping as a two-column table (category, kg CO2)."""
    return pd.DataFrame({"category": list(breakdown.keys()), "kg CO₂": list(breakdown.values())})


class EmissionChart:
    """Explicit handle on the breakdown bar chart.

    The caller keeps the handle (e.g. in session state) and passes new data
    to ``render``. Same categories -> bars are redrawn in place; first use or
    different categories -> the figure is (re)created.
    """

    def __init__(self, figsize=(6, 3.5)):
        self.figsize = figsize
        self.figure = None
        self.ax = None
        self.bars = None
        self.labels = []
        self.created_count = 0
        self.redraw_count = 0

    def needs_create(self, breakdown: dict) -> bool:
        return self.figure is None or list(breakdown.keys()) != self.labels

    def render(self, breakdown: dict) -> bool:
        """Draw ``breakdown``; returns True if a new figure was created."""
        if self.needs_create(breakdown):
            self._create(breakdown)
            return True
        self._redraw(breakdown)
        return False

    def _create(self, breakdown: dict):
        if self.figure is not None:
            plt.close(self.figure)
        self.labels = list(breakdown.keys())
        values = list(breakdown.values())
        colors = [BAR_COLORS[i % len(BAR_COLORS)] for i in range(len(values))]
        edges = [BORDER_COLORS[i % len(BORDER_COLORS)] for i in range(len(values))]

        fig, ax = plt.subplots(figsize=self.figsize)
        self.bars = ax.bar(self.labels, values, color=colors, edgecolor=edges, linewidth=1, label="Emissions (kg CO₂)")
        ax.set_ylabel("kg CO₂")
        ax.yaxis.set_major_locator(MaxNLocator(integer=True))
        ax.axhline(0, color="#666666", linewidth=0.8)
        ax.grid(axis="y", alpha=0.2)
        self.figure, self.ax = fig, ax
        self._fit()
        self.created_count += 1

    def _redraw(self, breakdown: dict):
        for bar, value in zip(self.bars, breakdown.values()):
            bar.set_height(value)
        self._fit()
        self.redraw_count += 1

    def _fit(self):
        # keep zero on the axis even when every bar is negative or positive
        self.ax.relim()
        self.ax.autoscale_view()
        low, high = self.ax.get_ylim()
        self.ax.set_ylim(min(low, 0), max(high, 0))
        self.figure.canvas.draw_idle()

    def values(self):
        return [bar.get_height() for bar in self.bars] if self.bars is not None else []

    def close(self):
        if self.figure is not None:
            plt.close(self.figure)
        self.figure = self.ax = self.bars = None
        self.labels = []

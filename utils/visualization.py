# utils/visualization.py — Charts: allocation bars, capital trajectory fan

import os

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from config import OUTPUT_DIR
from portfolio.allocator import allocation_frame
from portfolio.goals import GOAL_PROFILES
from portfolio.projection import projection_frame

plt.rcParams["figure.facecolor"]  = "#0d1117"
plt.rcParams["axes.facecolor"]    = "#161b22"
plt.rcParams["axes.edgecolor"]    = "#30363d"
plt.rcParams["axes.labelcolor"]   = "#c9d1d9"
plt.rcParams["text.color"]        = "#c9d1d9"
plt.rcParams["xtick.color"]       = "#8b949e"
plt.rcParams["ytick.color"]       = "#8b949e"
plt.rcParams["grid.color"]        = "#21262d"
plt.rcParams["font.family"]       = "monospace"


def _save(fig, save_path: str):
    directory = os.path.dirname(save_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.tight_layout()
    fig.savefig(save_path, dpi=150, bbox_inches="tight", facecolor="#0d1117")
    plt.close(fig)
    print(f"  ✓ Saved: {save_path}")


def plot_allocation(
    plan,
    save_path: str = os.path.join(OUTPUT_DIR, "allocation.png"),
):
    """Horizontal bar chart of slice weights, in canonical order."""
    frame = allocation_frame(list(plan.allocation)).reset_index()

    fig, ax = plt.subplots(figsize=(9, max(3.5, len(frame) * 0.55)))
    sns.barplot(
        data=frame,
        x="percentage",
        y="asset_class",
        color="#4ecdc4",
        edgecolor="#30363d",
        ax=ax,
    )
    for i, pct in enumerate(frame["percentage"]):
        ax.text(pct + 0.5, i, f"{pct}%", va="center", fontsize=8, color="#c9d1d9")

    ax.set_xlabel("Weight (%)")
    ax.set_ylabel("")
    ax.set_xlim(0, max(frame["percentage"].max() + 10, 20))
    ax.set_title(f"{plan.name}  |  Strategic Allocation", fontsize=11, pad=10)
    ax.grid(True, axis="x", alpha=0.3)

    _save(fig, save_path)


def plot_plan_projection(
    plan,
    profile,
    save_path: str = os.path.join(OUTPUT_DIR, "projection.png"),
):
    """
    2-panel trajectory chart:
      Panel 1: Expected / optimistic / stress balances vs amount paid in
      Panel 2: Expected cumulative gain bars
    """
    goal  = GOAL_PROFILES[profile.goal_focus]
    frame = projection_frame(list(plan.projection))
    years = frame.index

    fig, axes = plt.subplots(1, 2, figsize=(15, 5.5), facecolor="#0d1117")

    # Panel 1: Scenario fan
    ax = axes[0]
    ax.fill_between(years, frame["stressed_value"], frame["optimistic_value"],
                    alpha=0.12, color="#00ff88")
    ax.plot(years, frame["optimistic_value"], color="#4ecdc4", lw=1.6, label="Optimistic")
    ax.plot(years, frame["expected_value"],   color="#00ff88", lw=2.5, label="Expected")
    ax.plot(years, frame["stressed_value"],   color="#ff6b35", lw=1.6, label="Stress")
    ax.plot(years, frame["cumulative_contributions"], color="#8b949e", lw=1.4,
            linestyle="--", label="Paid in")
    if profile.target_amount > 0:
        ax.axhline(profile.target_amount, color="#ffe66d", linestyle=":", lw=1.5, label="Target")
    ax.set_title(f"{goal['display_name']}  |  Capital Trajectory", fontsize=11)
    ax.set_xlabel("Year")
    ax.yaxis.set_major_formatter(plt.FuncFormatter(lambda x, _: f"${x/1e3:,.0f}k"))
    ax.legend(fontsize=8)
    ax.grid(True, alpha=0.3)

    # Panel 2: Cumulative gain bars
    ax2 = axes[1]
    gains = frame["expected_gain"]
    bar_colors = ["#00ff88" if g >= 0 else "#ff6b35" for g in gains]
    ax2.bar(years, gains / 1e3, color=bar_colors, alpha=0.85, edgecolor="#21262d")
    ax2.set_title("Expected Cumulative Gain", fontsize=11)
    ax2.set_xlabel("Year")
    ax2.set_ylabel("Gain ($k)")
    ax2.grid(True, axis="y", alpha=0.3)

    fig.suptitle(
        f"{plan.name}  |  {profile.time_horizon}yr  |  "
        f"Exp. CAGR {plan.expected_cagr:.1f}%  |  Stress CAGR {plan.downside_cagr:.1f}%",
        fontsize=12, color="#c9d1d9", y=1.02,
    )
    _save(fig, save_path)

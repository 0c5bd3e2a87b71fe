"""Example: load the Parquet logs of a scenario run and plot a few quick-look metrics.

Run a scenario with logging first, e.g.::

    python -m fuelcalc.run_scenario --config examples/scenario_24_hour.cfg --log-folder logs

What you get:
1) Hours spent in each danger-relevant 1-hr moisture band (24-hour runs)
2) Drying rate of the 1-hr and 10-hr fuels per forecast step (multi-day runs)
"""

from __future__ import annotations

import json
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from fuelcalc.utilities.fire_util import MoistureConstants


# -----------------------------------------------------------------------------
# Paths to your scenario output (edit these)
# -----------------------------------------------------------------------------

session_folder = Path("path/to/your/logs/log_<timestamp>")
run_number = 0

run_folder = session_folder / f"run_{run_number}"
daily_file = run_folder / "daily_logs.parquet"
hourly_file = run_folder / "hourly_logs.parquet"
status_file = run_folder / "status_log.json"


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------

MOISTURE_BANDS = [0.0, MoistureConstants.critical_1hr, 9.0, 12.0, 20.0, np.inf]
BAND_LABELS = ["critical", "very dry", "dry", "moist", "wet"]


def hours_per_band(df: pd.DataFrame) -> pd.Series:
    """Number of hours the 1-hr moisture spends in each band."""
    bands = pd.cut(df["m1"], bins=MOISTURE_BANDS, labels=BAND_LABELS, right=True)
    return bands.value_counts().reindex(BAND_LABELS, fill_value=0)


def drying_rates(df: pd.DataFrame, initial_1hr: float, initial_10hr: float) -> pd.DataFrame:
    """Change in moisture per hour for each forecast step, negative when drying."""
    prev_1 = df["moisture_1hr"].shift(fill_value=initial_1hr)
    prev_10 = df["moisture_10hr"].shift(fill_value=initial_10hr)
    hours = df["hours"].replace(0.0, np.nan)

    return pd.DataFrame({
        "day": df["day"],
        "rate_1hr": (df["moisture_1hr"] - prev_1) / hours,
        "rate_10hr": (df["moisture_10hr"] - prev_10) / hours,
    })


# -----------------------------------------------------------------------------
# Load data
# -----------------------------------------------------------------------------

status = {}
if status_file.exists():
    with open(status_file) as f:
        status = json.load(f)

for message in status.get("messages", []):
    print(message)


# -----------------------------------------------------------------------------
# Plot
# -----------------------------------------------------------------------------

if hourly_file.exists():
    df_hourly = pd.read_parquet(hourly_file)
    counts = hours_per_band(df_hourly)

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.bar(counts.index.astype(str), counts.values, color=["#cc3300", "#ff6600", "#ffc107", "#28a745", "steelblue"])
    ax.set_ylabel("Hours")
    ax.set_title(f"1-hr moisture bands ({df_hourly['fuel'].iloc[0]})")
    ax.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()
    plt.show()

if daily_file.exists():
    df_daily = pd.read_parquet(daily_file)
    results = status.get("results") or {}
    rates = drying_rates(
        df_daily,
        results.get("initial 1hr (%)", df_daily["moisture_1hr"].iloc[0]),
        results.get("initial 10hr (%)", df_daily["moisture_10hr"].iloc[0]),
    )

    x = np.arange(len(rates))
    fig, ax = plt.subplots(figsize=(9, 4))
    ax.bar(x - 0.2, rates["rate_1hr"], width=0.4, color="red", label="1-hr")
    ax.bar(x + 0.2, rates["rate_10hr"], width=0.4, color="darkorange", label="10-hr")
    ax.axhline(0.0, color="black", linewidth=0.8)
    ax.set_xticks(x)
    ax.set_xticklabels(rates["day"], rotation=30)
    ax.set_ylabel("Moisture change (%/h)")
    ax.set_title("Drying rate per forecast step")
    ax.legend()
    ax.grid(True, axis="y", alpha=0.3)
    plt.tight_layout()
    plt.show()

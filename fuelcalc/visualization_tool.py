"""Drying curve plots for simulation results.

Functions:
    - plot_multi_day: 1-hr/10-hr moisture and EMC per forecast day.
    - plot_24_hour: 1/10/100-hr moisture, EMC and rate of spread over a day/night cycle.
"""
import matplotlib.pyplot as plt
import numpy as np

from fuelcalc.utilities.data_classes import DiurnalResults, MultiDayResults
from fuelcalc.utilities.fire_util import MoistureConstants


def plot_multi_day(results: MultiDayResults, title="Dead Fuel Moisture Forecast",
                   save_path=None, show=True):
    """
    Plot 1-hr and 10-hr moisture per forecast step with the critical 1-hr threshold.
    """
    labels = ["Start"] + [d.day for d in results.daily_results]
    m1 = [results.initial_1hr] + [d.moisture_1hr for d in results.daily_results]
    m10 = [results.initial_10hr] + [d.moisture_10hr for d in results.daily_results]
    emc_vals = [np.nan] + [d.emc for d in results.daily_results]
    x = np.arange(len(labels))

    fig, ax = plt.subplots(figsize=(9, 5))

    ax.plot(x, m1, marker='o', color='red', linewidth=2, label='1-hr')
    ax.plot(x, m10, marker='s', color='darkorange', linewidth=2, label='10-hr')
    ax.plot(x, emc_vals, linestyle='--', color='gray', label='EMC')
    ax.axhline(MoistureConstants.critical_1hr, color='black', linestyle=':', alpha=0.6,
               label='Critical 1-hr')

    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=30)
    ax.set_ylabel('Fuel Moisture (%)')
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend(loc='upper right')

    plt.tight_layout()
    if save_path is not None:
        fig.savefig(save_path)
    if show:
        plt.show()

    return fig, ax


def plot_24_hour(results: DiurnalResults, title="24-Hour Drying Cycle", save_path=None,
                 show=True):
    """
    Plot moisture of all three time-lag classes (top) and rate of spread (bottom).
    """
    hours = np.array([h.hour for h in results.hourly])

    fig, (ax1, ax2) = plt.subplots(
        2, 1,
        figsize=(9, 7),
        sharex=True,
        gridspec_kw={'height_ratios': [2, 1]}
    )

    # --- Moisture (top) ---
    ax1.plot(hours, [h.m1 for h in results.hourly], color='red', linewidth=2, label='1-hr')
    ax1.plot(hours, [h.m10 for h in results.hourly], color='darkorange', linewidth=2, label='10-hr')
    ax1.plot(hours, [h.m100 for h in results.hourly], color='brown', linewidth=2, label='100-hr')
    ax1.step(hours, [h.emc for h in results.hourly], where='mid', color='gray', linestyle='--',
             label='EMC')
    ax1.set_ylabel('Fuel Moisture (%)')
    ax1.set_title(title if results.summary is None else f"{title} ({results.summary.fuel_name})")
    ax1.grid(True, alpha=0.3)

    # Shade the night period
    night = [h.hour for h in results.hourly if h.period == 'night']
    if night:
        for ax in (ax1, ax2):
            ax.axvspan(min(night) - 0.5, max(night) + 0.5, color='midnightblue', alpha=0.08)

    # --- Rate of spread (bottom) ---
    ax2.plot(hours, [h.ros_ch_h for h in results.hourly], color='black', linewidth=2, label='ROS')
    ax2.set_ylabel('ROS (ch/h)')
    ax2.set_xlabel('Hour')
    ax2.grid(True, alpha=0.3)

    ax1.legend(loc='upper left')
    ax2.legend(loc='upper left')

    plt.tight_layout()
    if save_path is not None:
        fig.savefig(save_path)
    if show:
        plt.show()

    return fig, (ax1, ax2)

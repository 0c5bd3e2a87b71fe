"""Example: compare fire behavior of the three fuel presets under today's weather.

Prints the danger rating, the 1-hr moisture after a few hours of exposure and
the rate of spread for each preset, then plots rate of spread against wind
speed.
"""

import matplotlib.pyplot as plt
import numpy as np

from fuelcalc import FUEL_PRESETS, calculate_fire_behavior, rate_of_spread


# -----------------------------------------------------------------------------
# Current weather (edit these)
# -----------------------------------------------------------------------------

temp_f = 82.0
rel_humidity = 28.0
wind_mph = 11.0
slope_pct = 15.0

# fuel has been in this weather since late morning
initial_m1 = 12.0
hours_exposed = 4.0


# -----------------------------------------------------------------------------
# Fire behavior per preset
# -----------------------------------------------------------------------------

print(f"{'Fuel':<22}{'EMC %':>8}{'1-hr %':>8}{'ch/h':>8}{'ft/min':>8}  Danger")
for key in FUEL_PRESETS:
    fb = calculate_fire_behavior(temp_f, rel_humidity, wind_mph, fuel=key,
                                 initial_m1=initial_m1, hours=hours_exposed,
                                 slope_pct=slope_pct)
    print(f"{fb.fuel_name:<22}{fb.emc:>8.1f}{fb.m1:>8.1f}{fb.ros_ch_h:>8.1f}"
          f"{fb.ros_ft_min:>8.1f}  {fb.danger.level}")


# -----------------------------------------------------------------------------
# Wind response
# -----------------------------------------------------------------------------

winds = np.linspace(0, 40, 81)
m1 = calculate_fire_behavior(temp_f, rel_humidity, wind_mph, initial_m1=initial_m1,
                             hours=hours_exposed).m1

fig, ax = plt.subplots(figsize=(8, 5))
for key, preset in FUEL_PRESETS.items():
    ax.plot(winds, [rate_of_spread(key, m1, w, slope_pct) for w in winds],
            linewidth=2, label=preset.display_name)

ax.axvline(wind_mph, color="gray", linestyle="--", label="Current wind")
ax.set_xlabel("20-ft wind (mph)")
ax.set_ylabel("Rate of spread (ch/h)")
ax.set_title(f"Rate of spread at {m1:.1f}% 1-hr moisture, {slope_pct:.0f}% slope")
ax.grid(True, alpha=0.3)
ax.legend()
plt.tight_layout()
plt.show()

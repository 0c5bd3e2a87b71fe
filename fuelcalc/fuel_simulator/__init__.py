"""Drying simulation drivers for dead fuel moisture forecasting.

This package steps the moisture model through a sequence of weather periods
and threads the resulting moisture through the spread model. Each step
depends on the previous one, so steps are always processed in order.

Modules:
    - multi_day: Multi-day forecast simulation of 1-hr and 10-hr moisture.
    - diurnal: 24-hour day/night drying cycle with 100-hr moisture and spread.
"""

"""Fuel moisture and fire behavior models for FUELCALC.

This package provides the numerical models behind the dashboard's fuel
moisture calculator and fire behavior estimates.

Modules:
    - moisture_model: Equilibrium moisture content and exponential time-lag response.
    - fuel_models: Fuel presets for the rate of spread approximation.
    - spread_model: Simplified (non-Rothermel) rate of spread estimate.
    - fire_danger: Categorical danger rating and current-conditions fire behavior.
"""

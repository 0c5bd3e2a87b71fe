"""Shared utilities for the FUELCALC framework.

This package provides common utilities used across the models and simulation
drivers, including data structures, logging, scenario input, and unit
conversions.

Modules:
    - fire_util: Model constants, fallbacks and clamping helpers.
    - data_classes: Dataclasses for weather inputs, moisture state and results.
    - logger: Simulation logging with Parquet output.
    - logger_schemas: Data schemas for logged entries.
    - parquet_writer: Parquet file writing utilities.
    - sim_input: Scenario (.cfg) file reader.
    - unit_conversions: Imperial-metric unit conversion functions.
"""

"""Shared utilities for the wildland_fire models.

Modules:
    - unit_conversions: US customary and SI conversion functions.
    - data_classes: Input records and result bundles.
    - ode_solver: Adaptive Runge-Kutta integrator for the moisture ODEs.
    - config: ModelConfig and the .cfg loader.
    - logging_config: Console logging setup.
"""

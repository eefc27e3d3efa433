"""Fire behavior and fire-danger models.

Modules:
    - rothermel: Rothermel (1972) spread model for a single fuel class.
    - rothermel_heterogeneous: Multi-class dead and live fuel beds.
    - spread_relations: Load transfer, live extinction moisture, effective
      wind speed and the wind-speed limit.
    - fire_spread_direction: Wind/slope vector composition and elliptical
      fire shape.
    - fuel_models: NFDRS fuel model catalog.
    - nfdrs_moisture: NFDRS dead and live fuel moisture.
    - nfdrs_danger: NFDRS components (SC, ERC, IC) and indices (BI, MCOI, LOI, FLI).
"""

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital decay lifetime estimate under atmospheric drag.

Exponential-atmosphere decay time scaled by ballistic coefficient:

    T = K * B * exp((h_eff - 200) / H)

with h_eff the perigee altitude for eccentric orbits, H a stepwise scale
height and a (F10.7/120)^0.4 solar-activity correction. The solar-min and
solar-max bracket uses fixed multipliers on the uncorrected estimate.

No external dependencies — only stdlib math/dataclasses.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from spacia.domain.atmosphere import DragConfig, scale_height_km, solar_density_ratio
from spacia.domain.number_format import round_half_up, to_fixed
from spacia.domain.orbital_mechanics import perigee_altitude_km

K_BASE = 0.0012
REFERENCE_ALTITUDE_KM = 200.0
MIN_LIFETIME_YEARS = 0.01
SOLAR_MIN_FACTOR = 1.3
SOLAR_MAX_FACTOR = 0.7
DISPOSAL_GUIDELINE_YEARS = 25.0

# Perigee replaces nominal altitude above this eccentricity.
PERIGEE_ECCENTRICITY_THRESHOLD = 0.01
# Uncertainty warning above this eccentricity.
WARNING_ECCENTRICITY_THRESHOLD = 0.05


@dataclass(frozen=True)
class LifetimeEstimate:
    """Decay lifetime estimate (years).

    ballistic_coefficient: kg/m², 4 dp
    effective_altitude_km: 1 dp
    scale_height_km: km
    median / solar_min / solar_max: years, 3 dp
    complies_25yr_rule: worst case (solar minimum) lifetime <= 25 years
    """
    ballistic_coefficient: float
    effective_altitude_km: float
    scale_height_km: float
    median: float
    solar_min: float
    solar_max: float
    complies_25yr_rule: bool
    eccentricity_warning: str | None


def effective_altitude_km(altitude_km: float, eccentricity: float) -> float:
    """Altitude at which drag is evaluated: perigee when eccentric."""
    if eccentricity > PERIGEE_ECCENTRICITY_THRESHOLD:
        return perigee_altitude_km(altitude_km, eccentricity)
    return altitude_km


def _decay_years(ballistic: float, h_eff: float, h_scale: float) -> float:
    """K * B * exp((h_eff - 200) / H); infinite once either factor overflows."""
    try:
        growth = math.exp((h_eff - REFERENCE_ALTITUDE_KM) / h_scale)
    except OverflowError:
        return math.inf
    if math.isinf(ballistic):
        return math.inf
    return K_BASE * ballistic * growth


def estimate_orbit_lifetime(
    altitude_km: float,
    mass_kg: float,
    area_m2: float,
    cd: float = 2.2,
    solar_flux_81: float = 120.0,
    eccentricity: float = 0.0,
) -> LifetimeEstimate:
    """Estimate natural decay lifetime.

    Args:
        altitude_km: Nominal altitude (km).
        mass_kg: Spacecraft mass (kg, > 0).
        area_m2: Cross-sectional drag area (m², > 0).
        cd: Drag coefficient (> 0).
        solar_flux_81: F10.7 81-day mean (> 0).
        eccentricity: 0 <= e < 1.

    Returns:
        LifetimeEstimate; outputs are rounded, compliance uses full precision.
    """
    ballistic = DragConfig(cd=cd, area_m2=area_m2, mass_kg=mass_kg).ballistic_coefficient
    h_eff = effective_altitude_km(altitude_km, eccentricity)
    h_scale = scale_height_km(h_eff)

    base = _decay_years(ballistic, h_eff, h_scale)
    median = max(MIN_LIFETIME_YEARS, base * solar_density_ratio(solar_flux_81))
    solar_min = max(MIN_LIFETIME_YEARS, base * SOLAR_MIN_FACTOR)
    solar_max = max(MIN_LIFETIME_YEARS, base * SOLAR_MAX_FACTOR)

    warning = None
    if eccentricity > WARNING_ECCENTRICITY_THRESHOLD:
        warning = (
            f"High eccentricity ({to_fixed(eccentricity, 3)}) increases lifetime uncertainty. "
            "Drag effects are dominated by perigee altitude."
        )

    return LifetimeEstimate(
        ballistic_coefficient=round_half_up(ballistic, 4),
        effective_altitude_km=round_half_up(h_eff, 1),
        scale_height_km=h_scale,
        median=round_half_up(median, 3),
        solar_min=round_half_up(solar_min, 3),
        solar_max=round_half_up(solar_max, 3),
        complies_25yr_rule=solar_min <= DISPOSAL_GUIDELINE_YEARS,
        eccentricity_warning=warning,
    )

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Orbital mechanics helpers.

Closed-form approximations used by the feasibility estimator.
No external dependencies — only stdlib math.
"""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class OrbitalConstants:
    """Constants used by the planner approximations (km-based)."""
    R_EARTH_KM: float = 6371.0      # km — mean radius
    V_LEO_KM_S: float = 7.8         # km/s — nominal LEO circular velocity
    LATITUDE_TOLERANCE_DEG: float = 0.1


# Module-level singleton
OrbitalConstants = OrbitalConstants()


def semi_major_axis_km(altitude_km: float) -> float:
    """Semi-major axis of an orbit whose nominal altitude is altitude_km."""
    return OrbitalConstants.R_EARTH_KM + altitude_km


def perigee_altitude_km(altitude_km: float, eccentricity: float) -> float:
    """
    Perigee altitude treating altitude_km as the semi-major axis altitude.

        h_p = a * (1 - e) - R_E

    Args:
        altitude_km: Nominal altitude above Earth surface (km).
        eccentricity: Orbital eccentricity, 0 <= e < 1.

    Returns:
        Perigee altitude in km (may be negative for very eccentric orbits).
    """
    return semi_major_axis_km(altitude_km) * (1 - eccentricity) - OrbitalConstants.R_EARTH_KM


def minimum_inclination_deg(site_lat_deg: float) -> float:
    """Lowest inclination reachable by direct ascent from a given latitude."""
    return abs(site_lat_deg)


def can_reach_inclination(inclination_deg: float, site_lat_deg: float) -> bool:
    """Direct-ascent reachability with a small tolerance for float comparison."""
    return inclination_deg >= minimum_inclination_deg(site_lat_deg) - OrbitalConstants.LATITUDE_TOLERANCE_DEG


def plane_change_delta_v_m_s(delta_inclination_deg: float) -> float:
    """
    Impulsive plane-change delta-V at nominal LEO velocity.

        dv = 2 * v * sin(di / 2)

    Args:
        delta_inclination_deg: Inclination change (degrees, sign ignored).

    Returns:
        Delta-V magnitude in m/s.
    """
    dv_km_s = 2 * OrbitalConstants.V_LEO_KM_S * math.sin(math.radians(delta_inclination_deg) / 2)
    return abs(dv_km_s * 1000)

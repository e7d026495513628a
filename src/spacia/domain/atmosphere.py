# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Simplified exponential atmosphere for decay-time estimates.

Stepwise scale height by altitude band and a power-law correction for
solar activity (F10.7, 81-day mean). This is a planning approximation,
not NRLMSISE-00 or JB2008.

No external dependencies — only stdlib math/dataclasses.
"""
import math
from dataclasses import dataclass

from spacia.domain.step_tables import StepTable


@dataclass(frozen=True)
class DragConfig:
    """Drag configuration for a satellite.

    cd: drag coefficient (dimensionless, typically 2.0-2.5)
    area_m2: cross-sectional area (m²)
    mass_kg: satellite mass (kg)
    """
    cd: float
    area_m2: float
    mass_kg: float

    @property
    def ballistic_coefficient(self) -> float:
        """Ballistic coefficient B = m / (C_d * A) (kg/m²).

        Infinite when C_d * A underflows to zero.
        """
        drag_area = self.cd * self.area_m2
        if drag_area == 0:
            return math.inf
        return self.mass_kg / drag_area


# Scale height by effective altitude: (exclusive_upper_altitude_km, scale_height_km)
SCALE_HEIGHT_TABLE: StepTable[int] = StepTable(
    bands=(
        (200, 40),
        (400, 55),
        (700, 65),
    ),
    fallback=70,
)

SOLAR_FLUX_NOMINAL = 120.0
SOLAR_FLUX_EXPONENT = 0.4


def scale_height_km(altitude_km: float) -> int:
    """Atmospheric scale height for the altitude band containing altitude_km."""
    return SCALE_HEIGHT_TABLE.lookup(altitude_km)


def solar_density_ratio(solar_flux_81: float) -> float:
    """Density scaling relative to nominal solar activity.

    ratio = (F10.7 / 120) ^ 0.4
    """
    return (solar_flux_81 / SOLAR_FLUX_NOMINAL) ** SOLAR_FLUX_EXPONENT

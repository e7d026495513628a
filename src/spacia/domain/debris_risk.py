# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Heuristic debris congestion and conjunction-rate scoring.

Two sub-scores, one by altitude band and one by proximity to crowded
inclinations, are combined into a 1-10 score. 700-900 km carries the
post-collision and ASAT fragment fields; very low orbits clear quickly.
"""
from __future__ import annotations

from dataclasses import dataclass

from spacia.domain.number_format import js_round, round_half_up
from spacia.domain.step_tables import StepTable

ALTITUDE_SCORE_TABLE: StepTable[int] = StepTable(
    bands=(
        (300, 2),
        (450, 4),
        (600, 6),
        (900, 9),
        (1200, 7),
    ),
    fallback=5,
)

# Conjunction-rate multiplier; the 600-900 km band is the most congested.
ALTITUDE_FACTOR_TABLE: StepTable[float] = StepTable(
    bands=(
        (600, 1.5),
        (900, 2.5),
    ),
    fallback=1.2,
)

# (center_deg, half_width_deg, score), checked in order, first hit wins.
INCLINATION_BANDS: tuple[tuple[float, float, int], ...] = (
    (98.0, 3.0, 4),   # sun-synchronous
    (51.6, 5.0, 3),   # ISS / Starlink
    (82.0, 5.0, 3),
)
HIGH_INCLINATION_DEG = 80.0

SSO_INCLINATION_DEG = 98.0
ISS_INCLINATION_DEG = 51.6
BASE_CONJUNCTIONS_PER_YEAR = 15.0
CONJUNCTION_ALERT_PER_YEAR = 20.0

NOTE_HIGH_DENSITY = (
    "High catalog object density in this altitude and inclination range. "
    "Frequent conjunction screening required."
)
NOTE_SSO_BAND = (
    "Orbit near Sun-synchronous band (~98°) which contains many Earth observation "
    "satellites and debris fragments."
)
NOTE_ISS_BAND = "Orbit near ISS inclination (~51.6°) with Starlink and legacy debris presence."
NOTE_CONGESTED_ALTITUDE = (
    "This altitude range (700–900 km) is highly populated due to debris from past "
    "collisions and ASAT tests."
)
NOTE_LOW_ALTITUDE = (
    "Low altitudes experience stronger drag and shorter lifetimes, reducing long-term debris risk."
)
NOTE_FREQUENT_CONJUNCTIONS = (
    "Expected over 20 close approaches per year. Active collision avoidance capability recommended."
)


@dataclass(frozen=True)
class DebrisRisk:
    """Debris environment assessment.

    score: 1-10 composite
    level: "low" | "moderate" | "high"
    catalog_density_proxy: 1-100, rounded to 2 dp
    estimated_conjunctions_per_year: rounded to 1 dp
    """
    score: int
    level: str
    catalog_density_proxy: float
    estimated_conjunctions_per_year: float
    notes: tuple[str, ...]


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def altitude_score(altitude_km: float) -> int:
    return ALTITUDE_SCORE_TABLE.lookup(altitude_km)


def inclination_score(inclination_deg: float) -> int:
    for center, half_width, score in INCLINATION_BANDS:
        if abs(inclination_deg - center) < half_width:
            return score
    if inclination_deg > HIGH_INCLINATION_DEG:
        return 2
    return 1


def risk_level(score: int) -> str:
    if score <= 3:
        return "low"
    if score <= 6:
        return "moderate"
    return "high"


def score_debris_risk(altitude_km: float, inclination_deg: float) -> DebrisRisk:
    """Score congestion and expected close approaches for a circular orbit.

    Args:
        altitude_km: Orbit altitude (km).
        inclination_deg: Orbit inclination (degrees).

    Returns:
        DebrisRisk with composable advisory notes.
    """
    alt_score = altitude_score(altitude_km)
    inc_score = inclination_score(inclination_deg)

    density_proxy = _clamp((alt_score * 12 + inc_score * 25) / 4, 1, 100)
    conjunctions = (
        (density_proxy / 100) * BASE_CONJUNCTIONS_PER_YEAR
        * ALTITUDE_FACTOR_TABLE.lookup(altitude_km)
    )

    score = int(_clamp(js_round((alt_score + inc_score) / 1.3), 1, 10))
    level = risk_level(score)

    notes: list[str] = []
    if level == "high":
        notes.append(NOTE_HIGH_DENSITY)
    if abs(inclination_deg - SSO_INCLINATION_DEG) < 3:
        notes.append(NOTE_SSO_BAND)
    if abs(inclination_deg - ISS_INCLINATION_DEG) < 5:
        notes.append(NOTE_ISS_BAND)
    if 600 <= altitude_km <= 900:
        notes.append(NOTE_CONGESTED_ALTITUDE)
    if altitude_km < 400:
        notes.append(NOTE_LOW_ALTITUDE)
    if conjunctions > CONJUNCTION_ALERT_PER_YEAR:
        notes.append(NOTE_FREQUENT_CONJUNCTIONS)

    return DebrisRisk(
        score=score,
        level=level,
        catalog_density_proxy=round_half_up(density_proxy, 2),
        estimated_conjunctions_per_year=round_half_up(conjunctions, 1),
        notes=tuple(notes),
    )

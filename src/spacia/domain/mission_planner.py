# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Mission feasibility report: site reach, debris risk and decay lifetime.

Runs the three independent estimators and composes their advisory.
Every step is a pure function of the request; reports for equal
requests are equal.
"""
from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

from spacia.domain.debris_risk import DebrisRisk, score_debris_risk
from spacia.domain.launch_sites import SiteAnalysis, analyze_launch_site
from spacia.domain.lifetime import LifetimeEstimate, estimate_orbit_lifetime
from spacia.domain.planner_contracts import MissionRequest
from spacia.domain.recommendations import compose_advisory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ModelAccuracy:
    level: str
    description: str
    limitations: tuple[str, ...]
    citations: tuple[str, ...]


MODEL_ACCURACY = ModelAccuracy(
    level="preliminary",
    description=(
        "This model provides semi-analytical estimates for feasibility and mission planning."
    ),
    limitations=(
        "Atmospheric density uses a simplified exponential model. For accurate results, "
        "use NRLMSISE-00 or JB2008.",
        "Collision risk estimates are statistical approximations based on catalog density.",
        "Lifetime accuracy typically ranges within ±30–50% for LEO due to solar and "
        "eccentricity variations.",
        "Launch constraints are simplified and should be verified with the launch provider.",
    ),
    citations=(
        "ESA Space Debris Office Annual Reports",
        "King-Hele analytical lifetime models, NASA DAS",
        "Vallado, Fundamentals of Astrodynamics and Applications",
        "NASA-STD-8719.14 (Orbital Debris Mitigation Standard Practices)",
    ),
)

PLANNER_NOTES = (
    "This planner includes eccentricity effects, altitude-dependent scale height, "
    "solar activity influence, and catalog-based conjunction estimation. For mission "
    "approval, full numerical simulation and catalog-based risk analysis are required."
)


@dataclass(frozen=True)
class MissionReport:
    request: MissionRequest
    site: SiteAnalysis
    debris: DebrisRisk
    lifetime: LifetimeEstimate
    site_alert: str
    recommendations: tuple[str, ...]
    model_accuracy: ModelAccuracy = MODEL_ACCURACY
    notes: str = PLANNER_NOTES


def plan_mission(request: MissionRequest) -> MissionReport:
    """Compute the full feasibility report for a validated request."""
    site = analyze_launch_site(request.inclination_deg, request.site_lat, request.site_lon)
    debris = score_debris_risk(request.altitude_km, request.inclination_deg)
    lifetime = estimate_orbit_lifetime(
        altitude_km=request.altitude_km,
        mass_kg=request.mass_kg,
        area_m2=request.area_m2,
        cd=request.cd,
        solar_flux_81=request.solar_flux_81,
        eccentricity=request.eccentricity,
    )
    advisory = compose_advisory(
        site, debris, lifetime, request.inclination_deg, request.eccentricity,
    )
    logger.debug(
        "planned site=%s feasible=%s debris=%s lifetime_median=%.3f",
        site.user_site, site.feasible, debris.level, lifetime.median,
    )
    return MissionReport(
        request=request,
        site=site,
        debris=debris,
        lifetime=lifetime,
        site_alert=advisory.site_alert,
        recommendations=advisory.recommendations,
    )


def alternative_site_request(request: MissionRequest, site: SiteAnalysis) -> MissionRequest:
    """Same mission launched from the best alternative catalog site."""
    alt = site.best_alternative
    return dataclasses.replace(request, site_lat=alt.lat, site_lon=alt.lon)

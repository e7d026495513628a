# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Advisory text composed from site, debris and lifetime results.

Recommendation order is fixed; clients present it as a numbered list.
"""
from __future__ import annotations

from dataclasses import dataclass

from spacia.domain.debris_risk import DebrisRisk
from spacia.domain.lifetime import LifetimeEstimate
from spacia.domain.launch_sites import SiteAnalysis
from spacia.domain.number_format import format_number, to_fixed
from spacia.domain.orbital_mechanics import plane_change_delta_v_m_s

HIGH_ECCENTRICITY = 0.1

REC_HIGH_RISK = (
    "High collision risk region. Consider changing altitude or inclination, "
    "or include active collision avoidance systems."
)
REC_MODERATE_RISK = (
    "Moderate debris environment. Regular conjunction monitoring and maneuver "
    "capability are advised."
)
REC_COMPLIANT = "Complies with the 25-year deorbit guideline under worst-case conditions."
REC_NUMERICAL_TOOLS = (
    "Perform detailed analysis using numerical propagation tools such as STK or GMAT "
    "and atmospheric models like NRLMSISE-00 or JB2008."
)
REC_CATALOG_SCREENING = (
    "Integrate catalog-based screening from Space-Track or CelesTrak for accurate "
    "conjunction assessment."
)


@dataclass(frozen=True)
class Advisory:
    site_alert: str
    recommendations: tuple[str, ...]


def site_alert(site: SiteAnalysis, inclination_deg: float) -> str:
    lat = to_fixed(site.user_site_lat, 2)
    incl = format_number(inclination_deg)
    if not site.feasible:
        alt = site.best_alternative
        dv = plane_change_delta_v_m_s(site.min_inclination_required - inclination_deg)
        return "\n".join([
            f"Launch site at {lat}° latitude cannot directly achieve {incl}° inclination.",
            f"Minimum possible inclination: {to_fixed(site.min_inclination_required, 1)}°",
            f"Plane change delta-V required: approximately {to_fixed(dv, 0)} m/s.",
            f"Recommended alternative: {alt.name} ({to_fixed(alt.lat, 2)}°, "
            f"{to_fixed(alt.lon, 2)}°), minimum inclination {to_fixed(alt.min_incl, 1)}°.",
        ])
    margin = inclination_deg - site.min_inclination_required
    az_lo, az_hi = site.azimuth_range
    return "\n".join([
        f"Launch site at {lat}° latitude can achieve {incl}° inclination.",
        f"Margin: {to_fixed(margin, 1)}° above minimum.",
        f"Direct ascent is possible with azimuth range "
        f"{format_number(az_lo)}°–{format_number(az_hi)}°.",
    ])


def compose_advisory(
    site: SiteAnalysis,
    risk: DebrisRisk,
    lifetime: LifetimeEstimate,
    inclination_deg: float,
    eccentricity: float,
) -> Advisory:
    """Site alert and ordered recommendations; each rule triggers independently."""
    recs: list[str] = []

    if risk.level == "high":
        recs.append(REC_HIGH_RISK)
    elif risk.level == "moderate":
        recs.append(REC_MODERATE_RISK)

    if not lifetime.complies_25yr_rule:
        recs.append(
            "Does not meet the 25-year post-mission disposal guideline (worst-case lifetime: "
            f"{format_number(lifetime.solar_min)} years). Consider lowering altitude or "
            "using a deorbit device."
        )
    else:
        recs.append(REC_COMPLIANT)

    if not site.feasible:
        recs.append(
            f"The launch site ({site.user_site}) cannot achieve {format_number(inclination_deg)}° "
            "inclination directly. Plane change maneuvers are costly. Consider using "
            f"{site.best_alternative.name} or adjusting mission inclination to "
            f"{to_fixed(site.min_inclination_required, 1)}° or higher."
        )

    if eccentricity > HIGH_ECCENTRICITY:
        recs.append(
            f"High eccentricity (e={to_fixed(eccentricity, 3)}). "
            "Lifetime prediction uncertainty increases significantly."
        )

    rate = risk.estimated_conjunctions_per_year
    if rate > 20:
        recs.append(
            f"Expected more than {format_number(rate)} close approaches per year. "
            "Plan for collision avoidance maneuvers and sufficient propellant reserves."
        )
    elif rate > 5:
        recs.append(
            f"Expected approximately {to_fixed(rate, 0)} close approaches per year. "
            "Regularly monitor conjunction data messages (CDMs)."
        )

    recs.append(REC_NUMERICAL_TOOLS)
    recs.append(REC_CATALOG_SCREENING)

    return Advisory(site_alert=site_alert(site, inclination_deg), recommendations=tuple(recs))

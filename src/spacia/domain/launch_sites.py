# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Launch site catalog and direct-ascent inclination feasibility.

A vehicle cannot natively reach an inclination lower than its launch
latitude; the catalog is ranked to suggest the closest feasible site.
Azimuth ranges are static range-safety corridors, not computed.
"""
from __future__ import annotations

from dataclasses import dataclass

from spacia.domain.number_format import to_fixed
from spacia.domain.orbital_mechanics import can_reach_inclination, minimum_inclination_deg

SITE_MATCH_TOLERANCE_DEG = 0.5
DEFAULT_AZIMUTH_RANGE: tuple[float, float] = (30, 150)


@dataclass(frozen=True)
class LaunchSite:
    """Catalogued launch site.

    lat/lon: geodetic degrees
    azimuth_range: (min_deg, max_deg) of achievable launch azimuths
    """
    name: str
    lat: float
    lon: float
    azimuth_range: tuple[float, float]


LAUNCH_SITES: tuple[LaunchSite, ...] = (
    LaunchSite("Vandenberg SFB", 34.732, -120.572, (180, 260)),
    LaunchSite("Cape Canaveral SFS", 28.572, -80.649, (35, 120)),
    LaunchSite("Kourou (Guiana)", 5.236, -52.768, (5, 100)),
    LaunchSite("Wallops Flight Facility", 37.94, -75.466, (38, 60)),
    LaunchSite("Satish Dhawan Centre", 13.719, 80.23, (30, 140)),
    LaunchSite("Baikonur Cosmodrome", 45.965, 63.305, (45, 120)),
    LaunchSite("Jiuquan Satellite LC", 40.958, 100.291, (90, 180)),
    LaunchSite("Tanegashima Space Center", 30.391, 130.975, (90, 180)),
    LaunchSite("Rocket Lab (Mahia)", -39.262, 177.864, (30, 150)),
)


@dataclass(frozen=True)
class SiteAlternative:
    """A catalog site evaluated against the requested inclination."""
    name: str
    lat: float
    lon: float
    min_incl: float
    feasible: bool
    azimuth_range: tuple[float, float]
    incl_diff: float


@dataclass(frozen=True)
class SiteAnalysis:
    """Feasibility of the requested inclination from the user's site."""
    user_site: str
    user_site_lat: float
    user_site_lon: float
    min_inclination_required: float
    requested_inclination: float
    feasible: bool
    azimuth_range: tuple[float, float]
    best_alternative: SiteAlternative


def get_launch_site(name: str) -> LaunchSite:
    for site in LAUNCH_SITES:
        if site.name == name:
            return site
    raise ValueError(f"Unknown launch site: {name}")


def find_catalog_site(
    site_lat: float,
    site_lon: float,
    sites: tuple[LaunchSite, ...] = LAUNCH_SITES,
) -> LaunchSite | None:
    """First catalog site within the match tolerance in both lat and lon."""
    for site in sites:
        if (
            abs(site.lat - site_lat) < SITE_MATCH_TOLERANCE_DEG
            and abs(site.lon - site_lon) < SITE_MATCH_TOLERANCE_DEG
        ):
            return site
    return None


def rank_alternatives(
    inclination_deg: float,
    sites: tuple[LaunchSite, ...] = LAUNCH_SITES,
) -> list[SiteAlternative]:
    """Catalog sites ordered feasible-first, then by inclination difference.

    The sort is stable, so equal keys keep catalog order.
    """
    evaluated = []
    for site in sites:
        min_incl = minimum_inclination_deg(site.lat)
        evaluated.append(
            SiteAlternative(
                name=site.name,
                lat=site.lat,
                lon=site.lon,
                min_incl=min_incl,
                feasible=can_reach_inclination(inclination_deg, site.lat),
                azimuth_range=site.azimuth_range,
                incl_diff=abs(inclination_deg - min_incl),
            )
        )
    return sorted(evaluated, key=lambda alt: (not alt.feasible, alt.incl_diff))


def analyze_launch_site(
    inclination_deg: float,
    site_lat: float,
    site_lon: float,
    sites: tuple[LaunchSite, ...] = LAUNCH_SITES,
) -> SiteAnalysis:
    """Direct-ascent feasibility of inclination_deg from (site_lat, site_lon).

    Args:
        inclination_deg: Target inclination (degrees, 0-180).
        site_lat: Site latitude (degrees).
        site_lon: Site longitude (degrees).
        sites: Catalog to match and rank against.

    Returns:
        SiteAnalysis with the resolved site label and the best alternative.
    """
    matched = find_catalog_site(site_lat, site_lon, sites)
    if matched is not None:
        label = matched.name
        azimuth_range = matched.azimuth_range
    else:
        label = f"Custom Site ({to_fixed(site_lat, 3)}°, {to_fixed(site_lon, 3)}°)"
        azimuth_range = DEFAULT_AZIMUTH_RANGE

    return SiteAnalysis(
        user_site=label,
        user_site_lat=site_lat,
        user_site_lon=site_lon,
        min_inclination_required=minimum_inclination_deg(site_lat),
        requested_inclination=inclination_deg,
        feasible=can_reach_inclination(inclination_deg, site_lat),
        azimuth_range=azimuth_range,
        best_alternative=rank_alternatives(inclination_deg, sites)[0],
    )

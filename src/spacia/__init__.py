"""
Spacia Planner

LEO mission feasibility estimation: direct-ascent inclination reach from
a launch site with ranked catalog alternatives, heuristic debris
congestion and conjunction-rate scoring, orbital decay lifetime under
drag with 25-year disposal compliance, and an advisory composed from
all three.
"""

from spacia.domain.orbital_mechanics import (
    OrbitalConstants,
    perigee_altitude_km,
    minimum_inclination_deg,
    can_reach_inclination,
    plane_change_delta_v_m_s,
)
from spacia.domain.atmosphere import (
    DragConfig,
    scale_height_km,
    solar_density_ratio,
)
from spacia.domain.launch_sites import (
    LaunchSite,
    LAUNCH_SITES,
    SiteAlternative,
    SiteAnalysis,
    analyze_launch_site,
    find_catalog_site,
    get_launch_site,
)
from spacia.domain.debris_risk import (
    DebrisRisk,
    score_debris_risk,
)
from spacia.domain.lifetime import (
    LifetimeEstimate,
    estimate_orbit_lifetime,
)
from spacia.domain.recommendations import (
    Advisory,
    compose_advisory,
)
from spacia.domain.planner_contracts import (
    MissionRequest,
    PlannerError,
    InvalidPayloadError,
    InvalidEccentricityError,
    parse_mission_request,
)
from spacia.domain.mission_planner import (
    MissionReport,
    MODEL_ACCURACY,
    plan_mission,
    alternative_site_request,
)
from spacia.domain.serialization import build_report_body
from spacia.service import handle_planner_payload
from spacia.version import __version__

__all__ = [
    "OrbitalConstants",
    "perigee_altitude_km",
    "minimum_inclination_deg",
    "can_reach_inclination",
    "plane_change_delta_v_m_s",
    "DragConfig",
    "scale_height_km",
    "solar_density_ratio",
    "LaunchSite",
    "LAUNCH_SITES",
    "SiteAlternative",
    "SiteAnalysis",
    "analyze_launch_site",
    "find_catalog_site",
    "get_launch_site",
    "DebrisRisk",
    "score_debris_risk",
    "LifetimeEstimate",
    "estimate_orbit_lifetime",
    "Advisory",
    "compose_advisory",
    "MissionRequest",
    "PlannerError",
    "InvalidPayloadError",
    "InvalidEccentricityError",
    "parse_mission_request",
    "MissionReport",
    "MODEL_ACCURACY",
    "plan_mission",
    "alternative_site_request",
    "build_report_body",
    "handle_planner_payload",
    "__version__",
]

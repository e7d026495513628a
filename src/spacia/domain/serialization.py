# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Wire serialization for planner records.

Domain records use snake_case attributes; the JSON contract consumed by
the dashboard uses camelCase keys. Non-finite numbers are written as null
(JSON has no Infinity).
"""
from spacia.domain.debris_risk import DebrisRisk
from spacia.domain.launch_sites import LaunchSite, SiteAlternative, SiteAnalysis
from spacia.domain.lifetime import LifetimeEstimate
from spacia.domain.mission_planner import MissionReport, ModelAccuracy
from spacia.domain.number_format import finite_or_none


def format_launch_site(site: LaunchSite) -> dict:
    return {
        "name": site.name,
        "lat": site.lat,
        "lon": site.lon,
        "azimuthRange": list(site.azimuth_range),
    }


def format_alternative(alt: SiteAlternative) -> dict:
    return {
        "name": alt.name,
        "lat": alt.lat,
        "lon": alt.lon,
        "minIncl": alt.min_incl,
        "feasible": alt.feasible,
        "azimuthRange": list(alt.azimuth_range),
    }


def format_site_analysis(site: SiteAnalysis) -> dict:
    return {
        "userSite": site.user_site,
        "userSiteLat": site.user_site_lat,
        "userSiteLon": site.user_site_lon,
        "minInclinationRequired": site.min_inclination_required,
        "requestedInclination": site.requested_inclination,
        "feasible": site.feasible,
        "azimuthRange": list(site.azimuth_range),
        "bestAlternative": format_alternative(site.best_alternative),
    }


def format_debris_risk(risk: DebrisRisk) -> dict:
    return {
        "score": risk.score,
        "level": risk.level,
        "catalogDensityProxy": risk.catalog_density_proxy,
        "estimatedConjunctionsPerYear": risk.estimated_conjunctions_per_year,
        "notes": list(risk.notes),
    }


def format_lifetime(lifetime: LifetimeEstimate) -> dict:
    return {
        "B": finite_or_none(lifetime.ballistic_coefficient),
        "effectiveAltitude": lifetime.effective_altitude_km,
        "scaleHeight": lifetime.scale_height_km,
        "median": finite_or_none(lifetime.median),
        "solarMin": finite_or_none(lifetime.solar_min),
        "solarMax": finite_or_none(lifetime.solar_max),
        "complies25yrRule": lifetime.complies_25yr_rule,
        "eccentricityWarning": lifetime.eccentricity_warning,
    }


def format_model_accuracy(accuracy: ModelAccuracy) -> dict:
    return {
        "level": accuracy.level,
        "description": accuracy.description,
        "limitations": list(accuracy.limitations),
        "citations": list(accuracy.citations),
    }


def build_report_body(report: MissionReport) -> dict:
    """Full planner response body."""
    req = report.request
    return {
        "launchSiteAnalysis": format_site_analysis(report.site),
        "debrisRisk": format_debris_risk(report.debris),
        "lifetimeYears": format_lifetime(report.lifetime),
        "siteAlert": report.site_alert,
        "inputs": {
            "Cd": req.cd,
            "solarFlux81": req.solar_flux_81,
            "eccentricity": req.eccentricity,
        },
        "recommendations": list(report.recommendations),
        "modelAccuracy": format_model_accuracy(report.model_accuracy),
        "notes": report.notes,
    }

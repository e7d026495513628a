# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Planner request contract: field validation and error taxonomy."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


class PlannerError(Exception):
    """Unexpected failure while computing a mission report."""

    kind = "PlannerError"
    status = 500
    message = "Planner error"


class PlannerValidationError(PlannerError, ValueError):
    """Request rejected before any estimator runs."""

    status = 400


class InvalidPayloadError(PlannerValidationError):
    """Required numeric field missing, non-numeric, non-finite or out of domain."""

    kind = "InvalidPayload"
    message = "Invalid payload"


class InvalidEccentricityError(PlannerValidationError):
    """Eccentricity outside [0, 1)."""

    kind = "InvalidEccentricity"
    message = "Eccentricity must be between 0 and less than 1"


@dataclass(frozen=True)
class RequestDefaults:
    """Defaults for optional request fields."""
    CD: float = 2.2
    SOLAR_FLUX_81: float = 120.0
    ECCENTRICITY: float = 0.0


# Module-level singleton
RequestDefaults = RequestDefaults()


@dataclass(frozen=True)
class MissionRequest:
    """Validated planner input.

    site_lat/site_lon: degrees
    altitude_km: nominal orbit altitude
    inclination_deg: 0-180
    mass_kg, area_m2, cd, solar_flux_81: > 0
    eccentricity: 0 <= e < 1
    """
    site_lat: float
    site_lon: float
    altitude_km: float
    inclination_deg: float
    mass_kg: float
    area_m2: float
    cd: float = RequestDefaults.CD
    solar_flux_81: float = RequestDefaults.SOLAR_FLUX_81
    eccentricity: float = RequestDefaults.ECCENTRICITY


# Wire key -> MissionRequest attribute
REQUIRED_FIELDS: dict[str, str] = {
    "siteLat": "site_lat",
    "siteLon": "site_lon",
    "altitudeKm": "altitude_km",
    "inclinationDeg": "inclination_deg",
    "massKg": "mass_kg",
    "areaM2": "area_m2",
}

OPTIONAL_FIELDS: dict[str, tuple[str, float]] = {
    "Cd": ("cd", RequestDefaults.CD),
    "solarFlux81": ("solar_flux_81", RequestDefaults.SOLAR_FLUX_81),
    "eccentricity": ("eccentricity", RequestDefaults.ECCENTRICITY),
}

_POSITIVE_FIELDS = ("massKg", "areaM2", "Cd", "solarFlux81")


def is_finite_number(value: object) -> bool:
    """True for int/float values that are not bool, NaN or infinite."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def parse_mission_request(payload: Any) -> MissionRequest:
    """Validate a wire payload and build a MissionRequest.

    Raises:
        InvalidPayloadError: payload not an object, required field missing or
            non-numeric, optional field non-numeric, or a positive field <= 0.
        InvalidEccentricityError: eccentricity outside [0, 1).
    """
    if not isinstance(payload, dict):
        raise InvalidPayloadError("payload must be a JSON object")

    invalid = sorted(k for k in REQUIRED_FIELDS if not is_finite_number(payload.get(k)))
    if invalid:
        raise InvalidPayloadError(f"missing or non-numeric fields: {', '.join(invalid)}")
    values: dict[str, float] = {k: payload[k] for k in REQUIRED_FIELDS}

    for key, (attr, default) in OPTIONAL_FIELDS.items():
        raw = payload.get(key)
        if raw is None:
            values[key] = default
        elif is_finite_number(raw):
            values[key] = raw
        else:
            raise InvalidPayloadError(f"field {key} must be a finite number")

    non_positive = [k for k in _POSITIVE_FIELDS if values[k] <= 0]
    if non_positive:
        raise InvalidPayloadError(f"fields must be > 0: {', '.join(non_positive)}")

    ecc = values["eccentricity"]
    if ecc < 0 or ecc >= 1:
        raise InvalidEccentricityError(f"eccentricity {ecc} outside [0, 1)")

    attrs = {**REQUIRED_FIELDS, **{k: a for k, (a, _) in OPTIONAL_FIELDS.items()}}
    return MissionRequest(**{attrs[k]: v for k, v in values.items()})


def request_to_payload(request: MissionRequest) -> dict[str, float]:
    """Wire payload for a MissionRequest; inverse of parse_mission_request."""
    out = {key: getattr(request, attr) for key, attr in REQUIRED_FIELDS.items()}
    for key, (attr, _) in OPTIONAL_FIELDS.items():
        out[key] = getattr(request, attr)
    return out

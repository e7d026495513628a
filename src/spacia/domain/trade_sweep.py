# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Parameter sweeps over mission requests for trade studies."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from itertools import product

from spacia.domain.mission_planner import plan_mission
from spacia.domain.number_format import finite_or_none
from spacia.domain.planner_contracts import (
    OPTIONAL_FIELDS,
    REQUIRED_FIELDS,
    MissionRequest,
    parse_mission_request,
    request_to_payload,
)

SWEEPABLE: tuple[str, ...] = (
    "altitudeKm", "inclinationDeg", "massKg", "areaM2", "Cd", "solarFlux81", "eccentricity",
)

METRIC_KEYS: tuple[str, ...] = (
    "feasible",
    "debris_score",
    "debris_level",
    "conjunctions_per_year",
    "lifetime_median_yr",
    "lifetime_solar_min_yr",
    "lifetime_solar_max_yr",
    "complies_25yr_rule",
)


@dataclass(frozen=True)
class SweepSpec:
    name: str
    lo: float
    hi: float
    step: float

    def values(self) -> list[float]:
        vals: list[float] = []
        v = self.lo
        while v <= self.hi + 1e-9:
            vals.append(round(v, 6))
            v += self.step
        return vals


def parse_sweep_spec(text: str) -> SweepSpec:
    """Parse 'name:min:max:step'."""
    parts = text.split(":")
    if len(parts) != 4:
        raise ValueError(f"--param must be name:min:max:step, got: {text}")
    name = parts[0]
    if name not in SWEEPABLE:
        raise ValueError(f"Unknown sweep parameter {name!r}; choose from {', '.join(SWEEPABLE)}")
    try:
        lo, hi, step = float(parts[1]), float(parts[2]), float(parts[3])
    except ValueError as exc:
        raise ValueError(f"non-numeric values in --param: {text}") from exc
    if step <= 0:
        raise ValueError(f"step must be > 0 in --param: {text}")
    return SweepSpec(name=name, lo=lo, hi=hi, step=step)


def _with_values(base: MissionRequest, overrides: dict[str, float]) -> MissionRequest:
    attrs = {**REQUIRED_FIELDS, **{k: a for k, (a, _) in OPTIONAL_FIELDS.items()}}
    return dataclasses.replace(base, **{attrs[k]: v for k, v in overrides.items()})


def run_sweep(base: MissionRequest, specs: list[SweepSpec]) -> list[dict[str, object]]:
    """Plan every point of the cartesian product of the sweep ranges.

    Each point is re-validated; invalid combinations (e.g. e >= 1) are
    reported with an "error" entry instead of metrics.
    """
    names = [s.name for s in specs]
    results: list[dict[str, object]] = []
    for combo in product(*(s.values() for s in specs)):
        params = dict(zip(names, combo))
        candidate = _with_values(base, params)
        try:
            request = parse_mission_request(request_to_payload(candidate))
        except ValueError as e:
            results.append({"params": params, "error": str(e)})
            continue
        report = plan_mission(request)
        results.append({
            "params": params,
            "metrics": {
                "feasible": report.site.feasible,
                "debris_score": report.debris.score,
                "debris_level": report.debris.level,
                "conjunctions_per_year": report.debris.estimated_conjunctions_per_year,
                "lifetime_median_yr": finite_or_none(report.lifetime.median),
                "lifetime_solar_min_yr": finite_or_none(report.lifetime.solar_min),
                "lifetime_solar_max_yr": finite_or_none(report.lifetime.solar_max),
                "complies_25yr_rule": report.lifetime.complies_25yr_rule,
            },
        })
    return results

#!/usr/bin/env python3
"""CI gate for the planner response schema.

Usage:
    python scripts/check_wire_schema.py          # check against the pin
    python scripts/check_wire_schema.py --write  # re-pin after a documented change
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from spacia.domain.wire_schema import check_response_schema, pin_schema
from spacia.service import handle_planner_payload

ROOT = Path(__file__).resolve().parents[1]
SCHEMA = ROOT / "docs" / "contracts" / "planner_response_schema.json"
MIG = ROOT / "docs" / "contracts" / "API_MIGRATIONS.md"

# Infeasible, eccentric request so every optional branch is populated.
SAMPLE_PAYLOAD = {
    "siteLat": 45.965,
    "siteLon": 63.305,
    "altitudeKm": 750,
    "inclinationDeg": 30,
    "massKg": 150,
    "areaM2": 1.2,
    "eccentricity": 0.12,
}


def sample_body() -> dict:
    status, body = handle_planner_payload(SAMPLE_PAYLOAD)
    if status != 200:
        raise SystemExit(f"Sample planner request failed: {body}")
    return body


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--write", action="store_true", help="Rewrite the pinned schema")
    args = parser.parse_args(argv)

    body = sample_body()
    if args.write:
        SCHEMA.write_text(json.dumps(pin_schema(body), indent=2) + "\n", encoding="utf-8")
        print(f"Pinned {SCHEMA.relative_to(ROOT)}")
        return 0

    pinned = json.loads(SCHEMA.read_text(encoding="utf-8"))
    notes = MIG.read_text(encoding="utf-8") if MIG.exists() else ""
    check = check_response_schema(pinned, body, migration_notes=notes)

    if not check.passed:
        print("Wire schema gate: FAIL")
        print("removed:", ", ".join(check.removed))
        if not check.version_changed:
            print(f"schema version still {check.pinned_version}; bump it and document the change")
        return 1

    if check.added:
        print("added:", ", ".join(check.added))
    print("Wire schema gate: PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

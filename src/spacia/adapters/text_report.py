# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Markdown rendering of a planner response body."""
from __future__ import annotations

from spacia.domain.number_format import format_number


def _years(value: float | None) -> str:
    # null on the wire means the decay time overflowed
    return "unbounded" if value is None else format_number(value)


def build_report_markdown(body: dict) -> str:
    site = body["launchSiteAnalysis"]
    risk = body["debrisRisk"]
    life = body["lifetimeYears"]
    accuracy = body["modelAccuracy"]

    lines: list[str] = []
    lines.append("# Mission Feasibility Report")
    lines.append("")
    lines.append(f"- Launch site: {site['userSite']}")
    lines.append(f"- Direct ascent: **{'FEASIBLE' if site['feasible'] else 'NOT FEASIBLE'}**")
    alt = site["bestAlternative"]
    lines.append(f"- Best alternative: {alt['name']} (min inclination {alt['minIncl']}°)")
    lines.append(
        f"- Debris risk: **{risk['level'].upper()}** (score {risk['score']}/10, "
        f"~{format_number(risk['estimatedConjunctionsPerYear'])} conjunctions/yr)"
    )
    lines.append(
        f"- Lifetime: median {_years(life['median'])} yr "
        f"(solar max {_years(life['solarMax'])}, solar min {_years(life['solarMin'])})"
    )
    lines.append(
        f"- 25-year guideline: {'compliant' if life['complies25yrRule'] else 'non-compliant'}"
    )
    lines.append("")
    lines.append("## Site Alert")
    for line in body["siteAlert"].split("\n"):
        if line.strip():
            lines.append(f"> {line.strip()}")
    lines.append("")

    if risk["notes"]:
        lines.append("## Debris Notes")
        for note in risk["notes"]:
            lines.append(f"- {note}")
        lines.append("")

    if life.get("eccentricityWarning"):
        lines.append(f"**Warning:** {life['eccentricityWarning']}")
        lines.append("")

    lines.append("## Recommendations")
    for idx, rec in enumerate(body["recommendations"], start=1):
        lines.append(f"{idx}. {rec}")
    lines.append("")

    lines.append(f"## Model Accuracy ({accuracy['level']})")
    lines.append(accuracy["description"])
    lines.append("- Limitations:")
    for item in accuracy["limitations"]:
        lines.append(f"  - {item}")
    lines.append("- Citations:")
    for item in accuracy["citations"]:
        lines.append(f"  - {item}")
    lines.append("")
    lines.append(body["notes"])
    return "\n".join(lines) + "\n"

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Markdown report and JSON file adapters."""
import json

from spacia.adapters.json_io import JsonMissionRequestReader, JsonReportWriter, dumps_report
from spacia.adapters.text_report import build_report_markdown
from spacia.service import handle_planner_payload


INFEASIBLE = {
    "siteLat": 45.965,
    "siteLon": 63.305,
    "altitudeKm": 750,
    "inclinationDeg": 30,
    "massKg": 150,
    "areaM2": 1.2,
    "eccentricity": 0.12,
}


def _body(payload=INFEASIBLE):
    status, body = handle_planner_payload(payload)
    assert status == 200
    return body


class TestMarkdownReport:

    def test_headline_sections(self):
        md = build_report_markdown(_body())
        assert md.startswith("# Mission Feasibility Report\n")
        assert "- Launch site: Baikonur Cosmodrome" in md
        assert "- Direct ascent: **NOT FEASIBLE**" in md
        assert "- Best alternative: Cape Canaveral SFS" in md
        assert "- Debris risk: **HIGH**" in md
        assert "## Site Alert" in md
        assert "## Model Accuracy (preliminary)" in md
        assert md.endswith("\n")

    def test_site_alert_quoted(self):
        body = _body()
        md = build_report_markdown(body)
        for line in body["siteAlert"].split("\n"):
            assert f"> {line}" in md

    def test_recommendations_numbered_in_order(self):
        body = _body()
        md = build_report_markdown(body)
        for idx, rec in enumerate(body["recommendations"], start=1):
            assert f"{idx}. {rec}" in md
        positions = [md.index(f"{i}. {rec}") for i, rec in enumerate(body["recommendations"], start=1)]
        assert positions == sorted(positions)

    def test_eccentricity_warning_rendered(self):
        md = build_report_markdown(_body())
        assert "**Warning:** High eccentricity (0.120)" in md

    def test_no_warning_or_notes_for_quiet_orbit(self):
        body = _body({
            "siteLat": 5.0, "siteLon": 0.0, "altitudeKm": 1500, "inclinationDeg": 60,
            "massKg": 100, "areaM2": 1.0,
        })
        md = build_report_markdown(body)
        assert "**Warning:**" not in md
        assert "## Debris Notes" not in md


class TestJsonIo:

    def test_round_trip_files(self, tmp_path):
        src = tmp_path / "request.json"
        src.write_text(json.dumps(INFEASIBLE), encoding="utf-8")
        payload = JsonMissionRequestReader().read_payload(str(src))
        assert payload == INFEASIBLE

        out = tmp_path / "report.json"
        body = _body(payload)
        JsonReportWriter().write_report(body, str(out))
        text = out.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert json.loads(text) == body
        assert text.rstrip("\n") == dumps_report(body)

    def test_non_ascii_preserved(self):
        text = dumps_report(_body())
        assert "°" in text


def test_unbounded_lifetime_rendered():
    body = _body(dict(INFEASIBLE, altitudeKm=60000, eccentricity=0.0))
    md = build_report_markdown(body)
    assert "- Lifetime: median unbounded yr (solar max unbounded, solar min unbounded)" in md
    assert "- 25-year guideline: non-compliant" in md

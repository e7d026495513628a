# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for LEO mission feasibility planning.

Usage:
    spacia plan --site-lat 28.573 --site-lon -80.649 --altitude-km 550 \
        --inclination-deg 53 --mass-kg 200 --area-m2 0.5
    spacia plan -i request.json -o report.json
    spacia plan -i request.json --format text --replan-alternative
    spacia sites
    spacia sweep -i request.json --param altitudeKm:300:900:50 -o sweep.csv
    spacia serve --port 8080
    spacia --version
"""
import argparse
import logging
import sys

from spacia.adapters.json_io import JsonMissionRequestReader, JsonReportWriter, dumps_report
from spacia.adapters.text_report import build_report_markdown
from spacia.domain.launch_sites import LAUNCH_SITES
from spacia.domain.mission_planner import alternative_site_request, plan_mission
from spacia.domain.planner_contracts import (
    InvalidPayloadError,
    PlannerValidationError,
    parse_mission_request,
)
from spacia.domain.serialization import build_report_body
from spacia.domain.trade_sweep import METRIC_KEYS, SWEEPABLE, parse_sweep_spec, run_sweep

# CLI flag dest -> wire key
_REQUEST_FLAGS: tuple[tuple[str, str, str], ...] = (
    ("--site-lat", "site_lat", "siteLat"),
    ("--site-lon", "site_lon", "siteLon"),
    ("--altitude-km", "altitude_km", "altitudeKm"),
    ("--inclination-deg", "inclination_deg", "inclinationDeg"),
    ("--mass-kg", "mass_kg", "massKg"),
    ("--area-m2", "area_m2", "areaM2"),
    ("--cd", "cd", "Cd"),
    ("--solar-flux", "solar_flux", "solarFlux81"),
    ("--eccentricity", "eccentricity", "eccentricity"),
)


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    """Request source: a JSON file, individual flags, or both (flags win)."""
    parser.add_argument(
        '--input', '-i',
        help="Path to request JSON (wire keys: siteLat, siteLon, altitudeKm, ...)"
    )
    for flag, dest, key in _REQUEST_FLAGS:
        parser.add_argument(flag, dest=dest, type=float, help=f"Request field {key}")


def _payload_from_args(args) -> dict:
    payload: dict = {}
    if args.input:
        raw = JsonMissionRequestReader().read_payload(args.input)
        if not isinstance(raw, dict):
            raise InvalidPayloadError(f"{args.input} does not contain a JSON object")
        payload.update(raw)
    for _, dest, key in _REQUEST_FLAGS:
        value = getattr(args, dest)
        if value is not None:
            payload[key] = value
    return payload


def _emit(text: str, output_path: str | None) -> None:
    if output_path:
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"Wrote {output_path}", file=sys.stderr)
    else:
        print(text, end="" if text.endswith("\n") else "\n")


def _run_plan(args) -> int:
    request = parse_mission_request(_payload_from_args(args))
    report = plan_mission(request)

    bodies = [build_report_body(report)]
    if args.replan_alternative and not report.site.feasible:
        alt_request = alternative_site_request(request, report.site)
        bodies.append(build_report_body(plan_mission(alt_request)))

    if args.format == "text":
        _emit("\n".join(build_report_markdown(b) for b in bodies), args.output)
    elif args.output:
        JsonReportWriter().write_report(bodies[0] if len(bodies) == 1 else bodies, args.output)
        print(f"Wrote {args.output}", file=sys.stderr)
    else:
        _emit(dumps_report(bodies[0] if len(bodies) == 1 else bodies), None)
    return 0


def _run_sites() -> int:
    for site in LAUNCH_SITES:
        az_lo, az_hi = site.azimuth_range
        print(
            f"{site.name:<26} lat={site.lat:>8.3f}  lon={site.lon:>9.3f}  "
            f"min_incl={abs(site.lat):5.1f}  azimuth={az_lo}-{az_hi}"
        )
    return 0


def _run_sweep(args) -> int:
    import csv

    try:
        specs = [parse_sweep_spec(p) for p in args.param]
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    payload = _payload_from_args(args)
    # Swept fields need no base value.
    for spec in specs:
        payload.setdefault(spec.name, spec.lo)
    base = parse_mission_request(payload)

    results = run_sweep(base, specs)
    print(f"Swept {len(results)} points", file=sys.stderr)

    if args.format == "json":
        JsonReportWriter().write_report(results, args.output)
    else:
        param_names = [s.name for s in specs]
        fieldnames = param_names + list(METRIC_KEYS) + ["error"]
        with open(args.output, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for r in results:
                row = dict(r["params"])
                row.update(r.get("metrics", {}))
                row["error"] = r.get("error", "")
                writer.writerow(row)

    print(f"Wrote {len(results)} results to {args.output}", file=sys.stderr)
    return 0


def _run_serve(host: str, port: int) -> int:
    from spacia.adapters.planner_server import create_planner_server

    try:
        server = create_planner_server(host=host, port=port)
    except OSError as e:
        if "Address already in use" in str(e) or e.errno == 98:
            print(
                f"Error: Port {port} is already in use.\n"
                f"Try a different port: spacia serve --port {port + 1}",
                file=sys.stderr,
            )
            return 1
        raise

    print(f"Planner API at http://{host}:{server.server_address[1]}/api/planner")
    print("Press Ctrl+C to stop.\n")
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        print("\nServer stopped.")
    finally:
        server.server_close()
    return 0


def _get_version() -> str:
    """Get package version string."""
    from spacia.version import __version__
    return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacia",
        description="LEO mission feasibility — launch site reach, debris risk, orbital lifetime",
    )
    parser.add_argument(
        '--version', action='version',
        version=f"spacia-planner {_get_version()}",
    )
    parser.add_argument(
        '--log-level', default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- plan ---
    plan_parser = subparsers.add_parser(
        "plan",
        help="Compute a mission feasibility report",
    )
    _add_request_arguments(plan_parser)
    plan_parser.add_argument(
        '--output', '-o',
        help="Write the report to this file instead of stdout"
    )
    plan_parser.add_argument(
        '--format', choices=['json', 'text'], default='json',
        help="Report format (default: json)"
    )
    plan_parser.add_argument(
        '--replan-alternative', action='store_true', default=False,
        help="When the site is infeasible, also plan from the best alternative site"
    )

    # --- sites ---
    subparsers.add_parser(
        "sites",
        help="List the launch site catalog",
    )

    # --- sweep ---
    sweep_parser = subparsers.add_parser(
        "sweep",
        help="Run a parameter sweep for trade studies",
    )
    _add_request_arguments(sweep_parser)
    sweep_parser.add_argument(
        '--param', action='append', required=True,
        help=f"Sweep spec name:min:max:step (repeatable); name in {', '.join(SWEEPABLE)}"
    )
    sweep_parser.add_argument(
        '--output', '-o', required=True,
        help="Output file path (.csv or .json)"
    )
    sweep_parser.add_argument(
        '--format', choices=['csv', 'json'], default='csv',
        help="Output format (default: csv)"
    )

    # --- serve ---
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the planner HTTP API",
    )
    serve_parser.add_argument(
        '--host', default="127.0.0.1",
        help="Bind address (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        '--port', type=int, default=8080,
        help="Port for planner server (default: 8080)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "plan":
            return _run_plan(args)
        if args.command == "sites":
            return _run_sites()
        if args.command == "sweep":
            return _run_sweep(args)
        if args.command == "serve":
            return _run_serve(args.host, args.port)
    except FileNotFoundError as e:
        print(f"Error: Input file not found: {e.filename}", file=sys.stderr)
        return 1
    except PlannerValidationError as e:
        print(f"Error: {e.message} ({e.kind}): {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    parser.print_help()
    return 1


if __name__ == '__main__':
    raise SystemExit(main())

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planner request handling for the HTTP server and the schema gate.

Validates a wire payload once, runs the estimators, and maps failures
to (status, body) pairs.
"""
import logging
from typing import Any

from spacia.domain.mission_planner import plan_mission
from spacia.domain.planner_contracts import PlannerError, PlannerValidationError, parse_mission_request
from spacia.domain.serialization import build_report_body

logger = logging.getLogger(__name__)


def error_body(exc: PlannerError) -> dict[str, Any]:
    body: dict[str, Any] = {"error": exc.message, "kind": exc.kind}
    if not isinstance(exc, PlannerValidationError):
        body["detail"] = str(exc)
    return body


def handle_planner_payload(payload: Any) -> tuple[int, dict[str, Any]]:
    """Validate payload and compute the report body.

    Returns:
        (200, report_body) on success, (400, error_body) for validation
        failures, (500, error_body) for unexpected computation failures.
    """
    try:
        request = parse_mission_request(payload)
    except PlannerValidationError as e:
        logger.info("Rejected planner payload (%s): %s", e.kind, e)
        return e.status, error_body(e)

    try:
        return 200, build_report_body(plan_mission(request))
    except Exception as e:
        logger.exception("Planner failed for %s", request)
        err = PlannerError(f"{type(e).__name__}: {e}")
        return err.status, error_body(err)

# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Planner response schema pinning.

A response body is reduced to its set of dotted field paths. The pinned
schema records that set under a version tag; a release may drop a
pinned path only when it moves to a new version tag and documents the
move in the migration notes.
"""
from __future__ import annotations

from dataclasses import dataclass

PLANNER_SCHEMA_VERSION = "planner_response_v1"


@dataclass(frozen=True)
class SchemaCheck:
    """Current response paths compared against the pinned schema."""
    pinned_version: str
    removed: tuple[str, ...]
    added: tuple[str, ...]
    version_changed: bool
    migration_documented: bool

    @property
    def passed(self) -> bool:
        return not self.removed or (self.version_changed and self.migration_documented)


def field_paths(body: object, prefix: str = "") -> set[str]:
    """Dotted key paths of nested objects; list items collapse to '[]'."""
    paths: set[str] = set()
    if isinstance(body, dict):
        for key, value in body.items():
            path = f"{prefix}.{key}" if prefix else key
            paths.add(path)
            paths |= field_paths(value, path)
    elif isinstance(body, list):
        for item in body:
            paths |= field_paths(item, f"{prefix}[]")
    return paths


def pin_schema(body: dict, version: str = PLANNER_SCHEMA_VERSION) -> dict:
    """Pinned-schema document for a response body."""
    return {"schema_version": version, "fields": sorted(field_paths(body))}


def check_response_schema(
    pinned: dict,
    body: dict,
    migration_notes: str = "",
    version: str = PLANNER_SCHEMA_VERSION,
) -> SchemaCheck:
    """Compare a live response body with a pinned-schema document.

    The migration notes count only when they mention the current version.
    """
    previous = set(pinned.get("fields", []))
    current = field_paths(body)
    return SchemaCheck(
        pinned_version=pinned.get("schema_version", ""),
        removed=tuple(sorted(previous - current)),
        added=tuple(sorted(current - previous)),
        version_changed=pinned.get("schema_version") != version,
        migration_documented=version in migration_notes,
    )

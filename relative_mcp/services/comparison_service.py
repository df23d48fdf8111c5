"""Comparison service.

Entry point for the engine: turns a number and a unit into one comparison per
reachable path, and lists every entry a unit could be compared against.
"""

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from relative_mcp.services.discovery_service import discover, reachable_paths
from relative_mcp.services.entry_definitions import ReferenceEntry, get_entries_for_dimension
from relative_mcp.services.formatting_service import (
    choose_icon_scale,
    format_duration,
    format_icon_label,
    format_number,
    render_sentence,
)
from relative_mcp.services.override_service import validate_factor
from relative_mcp.services.rule_definitions import get_rule
from relative_mcp.services.selection_service import Alternative, ConversionResult, group_candidates, select
from relative_mcp.services.unit_definitions import get_unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryContext:
    """Everything that identifies one comparison query.

    Both override maps are validated and frozen on construction, so a context
    can be reused (or cached on ``cache_key()``) without being mutated.
    """

    input_number: float
    unit_id: str
    factor_overrides: Mapping[str, float] = field(default_factory=dict)
    entry_overrides: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        factors = {}
        for rule_id, value in dict(self.factor_overrides).items():
            get_rule(rule_id)
            factors[rule_id] = validate_factor(rule_id, value)
        object.__setattr__(self, "factor_overrides", MappingProxyType(factors))
        object.__setattr__(self, "entry_overrides", MappingProxyType(dict(self.entry_overrides)))

    def cache_key(self) -> tuple:
        return (
            self.input_number,
            self.unit_id,
            tuple(sorted(self.factor_overrides.items())),
            tuple(sorted(self.entry_overrides.items())),
        )

    def __hash__(self) -> int:
        return hash(self.cache_key())


@dataclass(frozen=True)
class ReachableEntry:
    entry: ReferenceEntry
    path_id: str
    path_name: str


def run_query(context: QueryContext) -> list[ConversionResult]:
    """Discover and select comparisons for a query.

    Returns an empty list when the input is zero, negative or not finite.

    Raises:
        UnknownUnitError: If the unit id is not in the unit table.
    """
    unit = get_unit(context.unit_id)
    input_base_value = context.input_number * unit.factor

    if not math.isfinite(input_base_value) or input_base_value <= 0:
        logger.debug("Non-positive input %r %s, no comparisons", context.input_number, unit.id)
        return []

    candidates = discover(input_base_value, unit.dimension, context.factor_overrides)
    groups = group_candidates(candidates)
    results = select(groups, input_base_value, unit.dimension, context.entry_overrides)

    logger.debug(
        "Query %g %s: %d paths, %d results",
        context.input_number, unit.id, len(groups), len(results),
    )
    return results


def discover_and_select(
    input_number: float,
    input_unit_id: str,
    overrides: Mapping[str, float] | None = None,
    entry_overrides_by_path: Mapping[str, str] | None = None,
) -> list[ConversionResult]:
    """Compare a quantity against every reachable reference entry.

    Args:
        input_number: The number the user typed.
        input_unit_id: Unit id (or alias) of the number.
        overrides: Optional ``rule_id -> factor`` overrides for this query.
        entry_overrides_by_path: Optional ``path_id -> entry_id`` forced choices.

    Returns:
        One ConversionResult per path that has an admissible candidate.
    """
    return run_query(QueryContext(
        input_number=input_number,
        unit_id=input_unit_id,
        factor_overrides=overrides or {},
        entry_overrides=entry_overrides_by_path or {},
    ))


def list_reachable_entries(input_unit_id: str) -> list[ReachableEntry]:
    """List every entry any query in this unit could select, grouped by path."""
    unit = get_unit(input_unit_id)
    return [
        ReachableEntry(entry=entry, path_id=path_id, path_name=path_name)
        for path_id, path_name, dimension in reachable_paths(unit.dimension)
        for entry in get_entries_for_dimension(dimension)
    ]


# ---------------------------------------------------------------------------
# Serialization
# ---------------------------------------------------------------------------

def entry_to_dict(entry: ReferenceEntry) -> dict[str, Any]:
    unit = get_unit(entry.unit_id)
    return {
        "id": entry.id,
        "name": entry.name,
        "icon": entry.icon,
        "value": entry.value,
        "unit": unit.id,
        "dimension": unit.dimension.value,
        "category": entry.category,
        "description": entry.description,
    }


def _alternative_to_dict(alt: Alternative) -> dict[str, Any]:
    data = {"entry_id": alt.entry.id, "name": alt.entry.name, "icon": alt.entry.icon, "ratio": alt.ratio}
    if alt.duration_hours is not None:
        data["duration_hours"] = alt.duration_hours
    return data


def result_to_dict(result: ConversionResult, context: QueryContext) -> dict[str, Any]:
    """Serialize a result with its sentence and icon layout."""
    unit = get_unit(context.unit_id)
    icons = choose_icon_scale(result.ratio)

    data: dict[str, Any] = {
        "path_id": result.path_id,
        "path_name": result.path_name,
        "path_kind": result.path_kind.value,
        "output_dimension": result.output_dimension.value,
        "entry": entry_to_dict(result.entry),
        "ratio": result.ratio,
        "count": format_number(result.ratio),
        "sentence": render_sentence(result, context.input_number, unit),
        "icons": {
            "count": icons.count,
            "scale": icons.scale,
            "label": format_icon_label(result.entry, icons.scale),
        },
        "steps": [
            {
                "rule_id": step.rule.id,
                "direction": step.direction.value,
                "factor": step.factor,
                "intermediate_value": step.intermediate_value,
                "description": step.description,
            }
            for step in result.steps
        ],
        "alternatives": [_alternative_to_dict(alt) for alt in result.alternatives],
        "overridden": result.overridden,
    }
    if result.duration_hours is not None:
        data["duration_hours"] = result.duration_hours
        data["duration"] = format_duration(result.duration_hours)
    return data

"""Candidate discovery.

Enumerates every reference entry a query can be compared against: entries of
the input's own dimension, plus entries one conversion rule away. Search
depth is one hop, so every comparison reads as a single sentence.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping

from relative_mcp.services.entry_definitions import REFERENCE_ENTRIES, ReferenceEntry
from relative_mcp.services.override_service import effective_factor
from relative_mcp.services.rule_definitions import CONVERSION_RULES, ConversionRule
from relative_mcp.services.unit_definitions import Dimension

logger = logging.getLogger(__name__)

DIRECT_PATH_ID = "direct"
DIRECT_PATH_NAME = "Direct"


class Direction(str, Enum):
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass(frozen=True)
class RuleStep:
    """One hop through a conversion rule."""

    rule: ConversionRule
    direction: Direction
    factor: float
    intermediate_value: float

    @property
    def description(self) -> str:
        if self.direction is Direction.FORWARD:
            return f"{self.rule.name}: × {self.factor:g}"
        return f"{self.rule.name} (reverse): ÷ {self.factor:g}"


@dataclass(frozen=True)
class Candidate:
    entry: ReferenceEntry
    ratio: float
    steps: tuple[RuleStep, ...]
    output_base_value: float

    @property
    def path_id(self) -> str:
        return self.steps[0].rule.id if self.steps else DIRECT_PATH_ID


def _hop_target(rule: ConversionRule, dimension: Dimension) -> tuple[Dimension, Direction] | None:
    """Return where ``rule`` leads from ``dimension``, or None if it does not apply."""
    if rule.from_dimension == dimension:
        return rule.to_dimension, Direction.FORWARD
    if rule.bidirectional and rule.to_dimension == dimension:
        return rule.from_dimension, Direction.REVERSE
    return None


def _compare_against(
    value: float,
    dimension: Dimension,
    entries: Iterable[ReferenceEntry],
    steps: tuple[RuleStep, ...],
) -> list[Candidate]:
    candidates = []
    for entry in entries:
        if entry.dimension != dimension:
            continue
        entry_base = entry.base_value
        if entry_base <= 0:
            continue
        ratio = value / entry_base
        if not math.isfinite(ratio):
            continue
        candidates.append(Candidate(
            entry=entry,
            ratio=ratio,
            steps=steps,
            output_base_value=value,
        ))
    return candidates


def discover(
    input_base_value: float,
    input_dimension: Dimension,
    overrides: Mapping[str, float] | None = None,
    *,
    entries: Iterable[ReferenceEntry] | None = None,
    rules: Iterable[ConversionRule] | None = None,
) -> list[Candidate]:
    """Find every candidate comparison for an input quantity.

    Args:
        input_base_value: Input converted to its dimension's base unit.
        input_dimension: Dimension of the input.
        overrides: Optional ``rule_id -> factor`` map replacing static factors.
        entries: Reference entries to search (defaults to the static table).
        rules: Conversion rules to follow (defaults to the static table).

    Returns:
        Direct candidates first, then one block per applicable rule in rule
        order; entries keep table order within each block.
    """
    entries = tuple(REFERENCE_ENTRIES if entries is None else entries)
    rules = tuple(CONVERSION_RULES if rules is None else rules)

    candidates = _compare_against(input_base_value, input_dimension, entries, ())

    for rule in rules:
        target = _hop_target(rule, input_dimension)
        if target is None:
            continue
        target_dimension, direction = target

        factor = effective_factor(rule, overrides)
        if direction is Direction.FORWARD:
            converted = input_base_value * factor
        else:
            converted = input_base_value / factor
        if not math.isfinite(converted):
            logger.debug("Skipping %s: converted value overflows", rule.id)
            continue

        step = RuleStep(rule=rule, direction=direction, factor=factor, intermediate_value=converted)
        candidates.extend(_compare_against(converted, target_dimension, entries, (step,)))

    logger.debug(
        "Discovered %d candidates for %g (%s)",
        len(candidates), input_base_value, input_dimension.value,
    )
    return candidates


def reachable_paths(
    input_dimension: Dimension,
    rules: Iterable[ConversionRule] | None = None,
) -> list[tuple[str, str, Dimension]]:
    """List ``(path_id, path_name, target_dimension)`` for a dimension, direct first."""
    paths = [(DIRECT_PATH_ID, DIRECT_PATH_NAME, input_dimension)]
    for rule in CONVERSION_RULES if rules is None else rules:
        target = _hop_target(rule, input_dimension)
        if target is not None:
            paths.append((rule.id, rule.name, target[0]))
    return paths

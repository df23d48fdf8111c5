"""Selection and scoring.

Candidates are grouped by comparison path and each group yields at most one
result. Count paths (direct, or a count rule) take the biggest entry that
still fits at least once into the input. The duration path takes the entry
whose running time is most readable, i.e. closest to ten hours.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Mapping

from relative_mcp.services.discovery_service import (
    DIRECT_PATH_NAME,
    Candidate,
    RuleStep,
)
from relative_mcp.services.entry_definitions import ReferenceEntry
from relative_mcp.services.rule_definitions import RuleKind
from relative_mcp.services.unit_definitions import Dimension

logger = logging.getLogger(__name__)

# Below this many, a count needs scientific notation to be read.
MIN_COUNT = 0.1

IDEAL_DURATION_HOURS = 10.0
MIN_DURATION_HOURS = 1 / 60
MAX_DURATION_HOURS = 100 * 8766

# Out-of-range durations score this, so they can never win.
OUT_OF_RANGE_PENALTY = -math.inf


class PathKind(str, Enum):
    DIRECT = "direct"
    COUNT = "count"
    DURATION = "duration"


@dataclass(frozen=True)
class Alternative:
    entry: ReferenceEntry
    ratio: float
    duration_hours: float | None = None


@dataclass(frozen=True)
class ConversionResult:
    path_id: str
    path_name: str
    path_kind: PathKind
    output_dimension: Dimension
    entry: ReferenceEntry
    ratio: float
    steps: tuple[RuleStep, ...]
    alternatives: tuple[Alternative, ...]
    duration_hours: float | None = None
    overridden: bool = False


def path_kind_of(candidate: Candidate) -> PathKind:
    if not candidate.steps:
        return PathKind.DIRECT
    if candidate.steps[0].rule.kind is RuleKind.DURATION:
        return PathKind.DURATION
    return PathKind.COUNT


def group_candidates(candidates: Iterable[Candidate]) -> dict[str, list[Candidate]]:
    """Group candidates by path id, keeping first-seen path order."""
    groups: dict[str, list[Candidate]] = {}
    for candidate in candidates:
        groups.setdefault(candidate.path_id, []).append(candidate)
    return groups


# ---------------------------------------------------------------------------
# Count paths
# ---------------------------------------------------------------------------

def pick_biggest_fit(candidates: list[Candidate]) -> Candidate | None:
    """Pick the largest entry that still fits at least once.

    Among candidates with ratio >= 1 the one closest to 1 wins. If none fits,
    the candidate closest to fitting from below (largest ratio) is used.
    Candidates are assumed to have passed the ``MIN_COUNT`` filter.
    """
    if not candidates:
        return None
    fitting = [c for c in candidates if c.ratio >= 1]
    if fitting:
        return min(fitting, key=lambda c: c.ratio)
    return max(candidates, key=lambda c: c.ratio)


def _count_admissible(
    group: list[Candidate], input_base_value: float, input_dimension: Dimension,
) -> list[tuple[Candidate, float | None]]:
    return [(c, None) for c in group if c.ratio >= MIN_COUNT]


def _count_choose(admissible: list[tuple[Candidate, float | None]]) -> tuple[Candidate, float | None] | None:
    chosen = pick_biggest_fit([c for c, _ in admissible])
    if chosen is None:
        return None
    return chosen, None


# ---------------------------------------------------------------------------
# Duration path
# ---------------------------------------------------------------------------

def duration_hours(
    input_base_value: float, input_dimension: Dimension, entry: ReferenceEntry,
) -> float | None:
    """Running time in hours pairing the input with a power/energy entry.

    Energy input: how long the input lasts at the entry's power.
    Power input: how long the input takes to deliver the entry's energy.
    """
    entry_base = entry.base_value
    if entry_base <= 0 or input_base_value <= 0:
        return None
    if input_dimension == Dimension.ENERGY:
        return input_base_value / entry_base
    if input_dimension == Dimension.POWER:
        return entry_base / input_base_value
    return None


def score_duration(hours: float) -> float:
    """Closeness of ``hours`` to the ideal in log10 space (0 is best)."""
    if not MIN_DURATION_HOURS <= hours <= MAX_DURATION_HOURS:
        return OUT_OF_RANGE_PENALTY
    return -abs(math.log10(hours) - math.log10(IDEAL_DURATION_HOURS))


def _duration_admissible(
    group: list[Candidate], input_base_value: float, input_dimension: Dimension,
) -> list[tuple[Candidate, float | None]]:
    admissible = []
    for candidate in group:
        hours = duration_hours(input_base_value, input_dimension, candidate.entry)
        if hours is not None and score_duration(hours) > OUT_OF_RANGE_PENALTY:
            admissible.append((candidate, hours))
    return admissible


def _duration_choose(admissible: list[tuple[Candidate, float | None]]) -> tuple[Candidate, float | None] | None:
    best = None
    best_score = OUT_OF_RANGE_PENALTY
    for candidate, hours in admissible:
        score = score_duration(hours)
        if score > best_score:
            best, best_score = (candidate, hours), score
    return best


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

_Admissible = Callable[[list[Candidate], float, Dimension], list[tuple[Candidate, float | None]]]
_Chooser = Callable[[list[tuple[Candidate, float | None]]], tuple[Candidate, float | None] | None]

_STRATEGIES: dict[PathKind, tuple[_Admissible, _Chooser]] = {
    PathKind.DIRECT: (_count_admissible, _count_choose),
    PathKind.COUNT: (_count_admissible, _count_choose),
    PathKind.DURATION: (_duration_admissible, _duration_choose),
}


def select_path(
    group: list[Candidate],
    input_base_value: float,
    input_dimension: Dimension,
    override_entry_id: str | None = None,
) -> ConversionResult | None:
    """Choose one entry for a single comparison path.

    Returns None when the path has no admissible candidate.
    """
    if not group:
        return None

    first = group[0]
    kind = path_kind_of(first)
    admissible_of, choose = _STRATEGIES[kind]
    admissible = admissible_of(group, input_base_value, input_dimension)

    chosen = None
    overridden = False
    if override_entry_id is not None:
        match = next((c for c in group if c.entry.id == override_entry_id), None)
        if match is not None:
            hours = None
            if kind is PathKind.DURATION:
                hours = duration_hours(input_base_value, input_dimension, match.entry)
            chosen = (match, hours)
            overridden = True
        else:
            logger.debug("Entry override %s not on path %s", override_entry_id, first.path_id)

    if chosen is None:
        chosen = choose(admissible)
    if chosen is None:
        logger.debug("No admissible candidate on path %s", first.path_id)
        return None

    candidate, hours = chosen
    ordered = sorted(admissible, key=lambda pair: pair[0].entry.base_value, reverse=True)
    alternatives = tuple(
        Alternative(entry=c.entry, ratio=c.ratio, duration_hours=h) for c, h in ordered
    )

    if first.steps:
        path_name = first.steps[0].rule.name
    else:
        path_name = DIRECT_PATH_NAME

    return ConversionResult(
        path_id=first.path_id,
        path_name=path_name,
        path_kind=kind,
        output_dimension=candidate.entry.dimension,
        entry=candidate.entry,
        ratio=candidate.ratio,
        steps=candidate.steps,
        alternatives=alternatives,
        duration_hours=hours,
        overridden=overridden,
    )


def select(
    groups: Mapping[str, list[Candidate]],
    input_base_value: float,
    input_dimension: Dimension,
    entry_overrides: Mapping[str, str] | None = None,
) -> list[ConversionResult]:
    """Select one result per path, in path order, omitting empty paths."""
    entry_overrides = entry_overrides or {}
    results = []
    for path_id, group in groups.items():
        result = select_path(group, input_base_value, input_dimension, entry_overrides.get(path_id))
        if result is not None:
            results.append(result)
    return results

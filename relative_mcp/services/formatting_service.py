"""Presentation formatting.

Pure functions turning engine results into text: adaptive-precision numbers,
natural-unit durations, best display units, icon scaling and one sentence per
comparison path.
"""

import math
from dataclasses import dataclass

from relative_mcp.services.discovery_service import Direction
from relative_mcp.services.entry_definitions import ReferenceEntry
from relative_mcp.services.selection_service import ConversionResult, PathKind
from relative_mcp.services.unit_definitions import Dimension, Unit, get_unit, get_units_for_dimension

HOURS_PER_DAY = 24
HOURS_PER_MONTH = 730
HOURS_PER_YEAR = 8766

MAX_ICONS = 1000

# (floor, ceiling, decimals) for non-integers below 1000.
_PRECISION_TIERS = ((10, 1000, 1), (1, 10, 2), (0.01, 1, 3))


def format_number(n: float) -> str:
    """Format a number with precision tiered by magnitude.

    Integers get thousands separators. Values too small to show with three
    decimals become "< 0.01" rather than scientific notation.
    """
    if n == 0:
        return "0"
    if not math.isfinite(n):
        return str(n)

    magnitude = abs(n)
    if float(n).is_integer() and magnitude < 1e15:
        return f"{int(n):,}"
    if magnitude >= 1000:
        return f"{round(n):,}"
    for floor, ceiling, digits in _PRECISION_TIERS:
        if magnitude >= floor:
            rounded = round(n, digits)
            # Rounding up into the next tier formats with that tier instead.
            if abs(rounded) >= ceiling:
                return format_number(rounded)
            return f"{n:.{digits}f}"
    return "< 0.01" if n > 0 else "> -0.01"


def _with_unit(value: float, unit: str) -> str:
    text = format_number(value)
    return f"{text} {unit}" if text == "1" else f"{text} {unit}s"


def format_duration(hours: float) -> str:
    """Format a duration given in hours using its most natural unit.

    The unit is chosen on the unrounded value, so 47.99 hours stays in hours
    even though it displays as "48.0".
    """
    if hours < 1 / 60:
        return _with_unit(hours * 3600, "second")
    if hours < 1:
        return _with_unit(hours * 60, "minute")
    if hours < 48:
        return _with_unit(hours, "hour")
    if hours < HOURS_PER_MONTH:
        return _with_unit(hours / HOURS_PER_DAY, "day")
    if hours < HOURS_PER_YEAR:
        return _with_unit(hours / HOURS_PER_MONTH, "month")
    return _with_unit(hours / HOURS_PER_YEAR, "year")


def choose_best_unit(base_value: float, dimension: Dimension) -> Unit:
    """Pick the largest unit that still shows ``base_value`` as >= 1.

    Falls back to the smallest unit of the dimension.
    """
    units = get_units_for_dimension(dimension)
    best = units[0]
    for unit in units:
        if base_value / unit.factor >= 1:
            best = unit
    return best


@dataclass(frozen=True)
class IconScale:
    count: int
    scale: float


def choose_icon_scale(ratio: float) -> IconScale:
    """Choose how many icons to show and how many real units each stands for.

    Counts up to ``MAX_ICONS`` are shown one-to-one. Larger counts are scaled by
    a power of ten that lands them in the hundreds; if rounding still leaves
    too many icons the scale is bumped by the overflow factor.
    """
    if not math.isfinite(ratio) or ratio <= 0:
        return IconScale(count=0, scale=1)
    if ratio <= MAX_ICONS:
        return IconScale(count=max(1, round(ratio)), scale=1)

    power = math.floor(math.log10(ratio)) - 2
    scale = 10 ** max(0, power)
    count = round(ratio / scale)

    if count > MAX_ICONS:
        scale = scale * math.ceil(count / MAX_ICONS)
        count = round(ratio / scale)

    return IconScale(count=count, scale=scale)


def format_icon_label(entry: ReferenceEntry, scale: float) -> str:
    """Describe what one icon represents, e.g. "1 🏠 = 1.20 kW (US household (average))"."""
    unit = get_unit(entry.unit_id)
    if scale == 1:
        return f"1 {entry.icon} = {format_number(entry.value)} {unit.symbol} ({entry.name})"

    scaled_base = entry.base_value * scale
    display_unit = choose_best_unit(scaled_base, unit.dimension)
    display_value = scaled_base / display_unit.factor
    return (
        f"1 {entry.icon} = {format_number(display_value)} {display_unit.symbol} "
        f"({format_number(scale)} × {entry.name})"
    )


# Sentence templates keyed by (rule id, direction). Placeholders: input,
# count, entry, factor.
_SENTENCES: dict[tuple[str, Direction], str] = {
    ("energy-to-money-electricity", Direction.FORWARD):
        "at {factor}, {input} costs the equivalent of {count} × {entry}",
    ("energy-to-money-electricity", Direction.REVERSE):
        "at {factor}, {input} buys enough electricity for {count} × {entry}",
    ("energy-to-distance-tesla", Direction.FORWARD):
        "a Tesla Model 3 at {factor} could drive {count} × {entry} on {input}",
    ("energy-to-distance-tesla", Direction.REVERSE):
        "driving {input} in a Tesla Model 3 at {factor} uses {count} × {entry}",
    ("energy-to-mass-aluminum", Direction.FORWARD):
        "{input} could smelt the aluminum of {count} × {entry} at {factor}",
    ("energy-to-mass-aluminum", Direction.REVERSE):
        "smelting {input} of aluminum at {factor} requires {count} × {entry}",
    ("energy-to-time-household", Direction.FORWARD):
        "at {factor} average household draw, {input} could power a home for {count} × {entry}",
    ("energy-to-time-household", Direction.REVERSE):
        "at {factor} average household draw, {input} of electricity is {count} × {entry}",
}

_DIRECT_SENTENCE = "{input} is {count} × {entry}"
_HOP_SENTENCE = "{input} is {count} × {entry} (at {factor})"


def render_sentence(result: ConversionResult, input_number: float, input_unit: Unit) -> str:
    """Render one comparison as a plain-text sentence."""
    input_text = f"{format_number(input_number)} {input_unit.symbol}"
    entry_text = f"{result.entry.icon} {result.entry.name}"

    if result.path_kind is PathKind.DURATION and result.duration_hours is not None:
        duration = format_duration(result.duration_hours)
        if input_unit.dimension == Dimension.ENERGY:
            return f"{input_text} is the equivalent of running {entry_text} for {duration}"
        return f"{input_text} running for {duration} is the equivalent of {entry_text}"

    values = {
        "input": input_text,
        "count": format_number(result.ratio),
        "entry": entry_text,
    }
    if not result.steps:
        return _DIRECT_SENTENCE.format(**values)

    step = result.steps[0]
    display = step.rule.display
    values["factor"] = f"{format_number(display.to_display(step.factor))} {display.unit}".strip()
    template = _SENTENCES.get((step.rule.id, step.direction), _HOP_SENTENCE)
    return template.format(**values)

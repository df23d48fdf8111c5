"""Cross-dimension conversion rules.

Each rule bridges the base unit of one dimension to the base unit of another:
``base_value(to) = base_value(from) * factor``. Bidirectional rules may also be
walked backwards, dividing by the factor.

Rules come in two kinds. Count rules produce "N of something" comparisons.
The single duration rule pairs power with energy; its natural output is a
running time rather than a count.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from relative_mcp.services.unit_definitions import Dimension


class RuleKind(str, Enum):
    COUNT = "count"
    DURATION = "duration"


class UnknownRuleError(ValueError):
    """Raised when a conversion rule id is not in the table."""

    def __init__(self, rule_id: str):
        super().__init__(f"Unknown conversion rule: {rule_id}")
        self.rule_id = rule_id


def _identity(value: float) -> float:
    return value


@dataclass(frozen=True)
class DisplayFactor:
    """How a rule's raw factor is shown to and edited by people.

    ``to_display`` maps the raw factor to the human value (e.g. $/kWh) and
    ``from_display`` maps it back.
    """

    label: str
    unit: str
    to_display: Callable[[float], float] = _identity
    from_display: Callable[[float], float] = _identity


@dataclass(frozen=True)
class ConversionRule:
    id: str
    name: str
    from_dimension: Dimension
    to_dimension: Dimension
    factor: float
    description: str
    bidirectional: bool = True
    kind: RuleKind = RuleKind.COUNT
    display: DisplayFactor = DisplayFactor(label="factor", unit="")

    @property
    def duration_based(self) -> bool:
        return self.kind is RuleKind.DURATION


CONVERSION_RULES: tuple[ConversionRule, ...] = (
    # 1 W for 1 hour = 1 Wh. The duration itself is worked out per entry.
    ConversionRule(
        id="power-energy-duration",
        name="Running time",
        from_dimension=Dimension.POWER,
        to_dimension=Dimension.ENERGY,
        factor=1.0,
        description="Energy = Power × Time. Duration is computed per appliance.",
        kind=RuleKind.DURATION,
        display=DisplayFactor(label="duration", unit="hours"),
    ),
    # ~150 Wh/km, so 1 Wh drives about 6.7 m.
    ConversionRule(
        id="energy-to-distance-tesla",
        name="Tesla Model 3 driving",
        from_dimension=Dimension.ENERGY,
        to_dimension=Dimension.DISTANCE,
        factor=1000 / 150,
        description="A Tesla Model 3 uses about 150 Wh/km. So 1 Wh drives about 6.7 meters.",
        display=DisplayFactor(
            label="EV efficiency",
            unit="Wh/km",
            to_display=lambda factor: 1000 / factor,
            from_display=lambda value: 1000 / value,
        ),
    ),
    # 15 kWh per kg of aluminum.
    ConversionRule(
        id="energy-to-mass-aluminum",
        name="Aluminum smelting",
        from_dimension=Dimension.ENERGY,
        to_dimension=Dimension.MASS,
        factor=1 / 15000,
        description="Producing aluminum requires ~15 kWh per kg. So 1 Wh produces ~0.067 g of aluminum.",
        display=DisplayFactor(
            label="energy per kg",
            unit="kWh/kg",
            to_display=lambda factor: 1 / (factor * 1000),
            from_display=lambda value: 1 / (value * 1000),
        ),
    ),
    # At a 1.2 kW household draw, 1 Wh lasts 3 seconds.
    ConversionRule(
        id="energy-to-time-household",
        name="US household consumption time",
        from_dimension=Dimension.ENERGY,
        to_dimension=Dimension.TIME,
        factor=3600 / 1200,
        description="At US average household draw (~1.2 kW), 1 Wh lasts 3 seconds.",
        display=DisplayFactor(
            label="household draw",
            unit="kW",
            to_display=lambda factor: 3600 / factor / 1000,
            from_display=lambda value: 3600 / (value * 1000),
        ),
    ),
    # $0.16/kWh = $0.00016/Wh.
    ConversionRule(
        id="energy-to-money-electricity",
        name="US electricity cost",
        from_dimension=Dimension.ENERGY,
        to_dimension=Dimension.MONEY,
        factor=0.16 / 1000,
        description="Average US residential electricity costs ~$0.16 per kWh.",
        display=DisplayFactor(
            label="electricity price",
            unit="$/kWh",
            to_display=lambda factor: factor * 1000,
            from_display=lambda value: value / 1000,
        ),
    ),
)

_RULES_BY_ID: dict[str, ConversionRule] = {rule.id: rule for rule in CONVERSION_RULES}


def get_rule(rule_id: str) -> ConversionRule:
    """Look up a conversion rule by id.

    Raises:
        UnknownRuleError: If the id is not in the table.
    """
    rule = _RULES_BY_ID.get(rule_id)
    if rule is None:
        raise UnknownRuleError(rule_id)
    return rule

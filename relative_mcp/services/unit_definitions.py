"""Unit table.

Every unit belongs to one dimension and carries a multiplicative factor to
that dimension's base unit, so that ``value_in_base = value * factor``.
Dimensions never mix: crossing from one dimension to another goes through a
conversion rule (see ``rule_definitions``).
"""

from dataclasses import dataclass
from enum import Enum


class Dimension(str, Enum):
    """Physical (or financial) dimensions the engine compares within."""

    POWER = "power"  # W
    ENERGY = "energy"  # Wh
    DISTANCE = "distance"  # m
    MASS = "mass"  # kg
    MONEY = "money"  # USD
    TIME = "time"  # s


class UnknownUnitError(ValueError):
    """Raised when a unit id is not in the unit table."""

    def __init__(self, unit_id: str):
        super().__init__(f"Unknown unit: {unit_id}")
        self.unit_id = unit_id


@dataclass(frozen=True)
class Unit:
    id: str
    name: str
    symbol: str
    dimension: Dimension
    factor: float


UNITS: tuple[Unit, ...] = (
    # Power (base: watts)
    Unit("mW", "milliwatts", "mW", Dimension.POWER, 0.001),
    Unit("W", "watts", "W", Dimension.POWER, 1.0),
    Unit("kW", "kilowatts", "kW", Dimension.POWER, 1e3),
    Unit("MW", "megawatts", "MW", Dimension.POWER, 1e6),
    Unit("GW", "gigawatts", "GW", Dimension.POWER, 1e9),
    Unit("TW", "terawatts", "TW", Dimension.POWER, 1e12),
    # Energy (base: watt-hours)
    Unit("mWh", "milliwatt-hours", "mWh", Dimension.ENERGY, 0.001),
    Unit("Wh", "watt-hours", "Wh", Dimension.ENERGY, 1.0),
    Unit("kWh", "kilowatt-hours", "kWh", Dimension.ENERGY, 1e3),
    Unit("MWh", "megawatt-hours", "MWh", Dimension.ENERGY, 1e6),
    Unit("GWh", "gigawatt-hours", "GWh", Dimension.ENERGY, 1e9),
    Unit("TWh", "terawatt-hours", "TWh", Dimension.ENERGY, 1e12),
    # Distance (base: meters)
    Unit("m", "meters", "m", Dimension.DISTANCE, 1.0),
    Unit("km", "kilometers", "km", Dimension.DISTANCE, 1e3),
    Unit("mi", "miles", "mi", Dimension.DISTANCE, 1609.34),
    # Time (base: seconds)
    Unit("s", "seconds", "s", Dimension.TIME, 1.0),
    Unit("min", "minutes", "min", Dimension.TIME, 60.0),
    Unit("hr", "hours", "hr", Dimension.TIME, 3600.0),
    Unit("day", "days", "day", Dimension.TIME, 86400.0),
    Unit("yr", "years", "yr", Dimension.TIME, 31_557_600.0),
    # Mass (base: kilograms)
    Unit("g", "grams", "g", Dimension.MASS, 0.001),
    Unit("kg", "kilograms", "kg", Dimension.MASS, 1.0),
    Unit("ton", "metric tons", "t", Dimension.MASS, 1e3),
    # Money (base: US dollars)
    Unit("cent", "cents", "¢", Dimension.MONEY, 0.01),
    Unit("USD", "US dollars", "$", Dimension.MONEY, 1.0),
    Unit("kUSD", "thousand dollars", "k$", Dimension.MONEY, 1e3),
    Unit("MUSD", "million dollars", "M$", Dimension.MONEY, 1e6),
    Unit("BUSD", "billion dollars", "B$", Dimension.MONEY, 1e9),
)

_UNITS_BY_ID: dict[str, Unit] = {unit.id: unit for unit in UNITS}

# Unit ids are case-sensitive ("mW" vs "MW"), so aliases are matched on the
# lowercased long form only and never on the id itself.
_ALIASES: dict[str, str] = {unit.name.lower(): unit.id for unit in UNITS}
_ALIASES.update({
    "watt": "W",
    "kilowatt": "kW",
    "megawatt": "MW",
    "gigawatt": "GW",
    "terawatt": "TW",
    "watt-hour": "Wh",
    "kilowatt-hour": "kWh",
    "megawatt-hour": "MWh",
    "gigawatt-hour": "GWh",
    "terawatt-hour": "TWh",
    "meter": "m",
    "metre": "m",
    "metres": "m",
    "kilometer": "km",
    "kilometre": "km",
    "kilometres": "km",
    "mile": "mi",
    "second": "s",
    "minute": "min",
    "hour": "hr",
    "h": "hr",
    "year": "yr",
    "gram": "g",
    "kilogram": "kg",
    "tonne": "ton",
    "tonnes": "ton",
    "dollar": "USD",
    "dollars": "USD",
    "$": "USD",
    "cents": "cent",
})


def resolve_unit_id(unit: str) -> str:
    """Map a unit id or alias to its canonical id.

    Exact ids win; otherwise the lowercased, whitespace-trimmed string is
    looked up among the long-form aliases. Unknown strings are returned as-is
    so that the caller's lookup reports them.
    """
    unit = unit.strip()
    if unit in _UNITS_BY_ID:
        return unit
    return _ALIASES.get(unit.lower().replace("_", " "), unit)


def get_unit(unit_id: str) -> Unit:
    """Look up a unit by id or alias.

    Raises:
        UnknownUnitError: If the unit is not in the table.
    """
    unit = _UNITS_BY_ID.get(resolve_unit_id(unit_id))
    if unit is None:
        raise UnknownUnitError(unit_id)
    return unit


def get_units_for_dimension(dimension: Dimension) -> list[Unit]:
    """Return the units of a dimension, smallest factor first."""
    return sorted(
        (unit for unit in UNITS if unit.dimension == dimension),
        key=lambda unit: unit.factor,
    )


def to_base(value: float, unit: Unit) -> float:
    return value * unit.factor


def convert(value: float | int, from_unit: str, to_unit: str) -> float:
    """Convert a value between two units of the same dimension.

    Raises:
        UnknownUnitError: If either unit is unknown.
        ValueError: If the units belong to different dimensions.
    """
    source = get_unit(from_unit)
    target = get_unit(to_unit)

    if source.dimension != target.dimension:
        raise ValueError(
            f"Incompatible units: {from_unit} ({source.dimension.value}) "
            f"and {to_unit} ({target.dimension.value})"
        )

    return value * source.factor / target.factor


def get_supported_units() -> dict[str, list[str]]:
    """Return a dict of dimension -> list of unit ids, smallest first."""
    return {
        dimension.value: [unit.id for unit in get_units_for_dimension(dimension)]
        for dimension in Dimension
    }

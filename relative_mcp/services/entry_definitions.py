"""Reference entry definitions.

Real-world quantities used as the comparison side of every sentence. Each
entry is grouped by category and, within a category, listed roughly from
smallest to largest. The description documents the assumption behind the
number.
"""

from dataclasses import dataclass

from relative_mcp.services.unit_definitions import Dimension, get_unit


class UnknownEntryError(ValueError):
    """Raised when a reference entry id is not in the table."""

    def __init__(self, entry_id: str):
        super().__init__(f"Unknown reference entry: {entry_id}")
        self.entry_id = entry_id


@dataclass(frozen=True)
class ReferenceEntry:
    id: str
    name: str
    icon: str
    value: float
    unit_id: str
    description: str
    category: str = ""

    @property
    def dimension(self) -> Dimension:
        return get_unit(self.unit_id).dimension

    @property
    def base_value(self) -> float:
        """Value converted to the base unit of the entry's dimension."""
        return self.value * get_unit(self.unit_id).factor


REFERENCE_ENTRIES: tuple[ReferenceEntry, ...] = (
    # ------------------------------------------------------------------
    # Power: small electronics
    # ------------------------------------------------------------------
    ReferenceEntry(
        "led-indicator", "LED indicator light", "🔴", 20, "mW",
        "A small indicator LED draws about 20 mW (typical 2V × 10mA).",
        "electronics",
    ),
    ReferenceEntry(
        "smartphone-idle", "Smartphone (idle)", "📱", 0.5, "W",
        "A modern smartphone in standby draws roughly 0.3–0.7 W. Using 0.5 W.",
        "electronics",
    ),
    ReferenceEntry(
        "smartphone-active", "Smartphone (active use)", "📱", 3, "W",
        "Active smartphone use (browsing, video) draws about 2–5 W. Using 3 W.",
        "electronics",
    ),
    ReferenceEntry(
        "wifi-router", "Wi-Fi router", "📡", 10, "W",
        "A home Wi-Fi router draws about 6–15 W. Using 10 W.",
        "electronics",
    ),
    ReferenceEntry(
        "laptop", "Laptop computer", "💻", 50, "W",
        "A typical laptop draws 30–65 W during normal use. Using 50 W.",
        "electronics",
    ),
    ReferenceEntry(
        "tv", "Television (55\")", "📺", 100, "W",
        "A modern 55\" LED TV draws about 80–120 W. Using 100 W.",
        "electronics",
    ),
    ReferenceEntry(
        "gaming-pc", "Gaming PC", "🖥️", 400, "W",
        "A gaming desktop with GPU under load draws 300–500 W. Using 400 W.",
        "electronics",
    ),
    # ------------------------------------------------------------------
    # Power: household appliances
    # ------------------------------------------------------------------
    ReferenceEntry(
        "led-bulb", "LED light bulb", "💡", 10, "W",
        "A standard LED bulb (60W equivalent) draws about 8–12 W. Using 10 W.",
        "appliances",
    ),
    ReferenceEntry(
        "incandescent-bulb", "Incandescent bulb", "💡", 60, "W",
        "A traditional 60W incandescent light bulb.",
        "appliances",
    ),
    ReferenceEntry(
        "ceiling-fan", "Ceiling fan", "🌀", 75, "W",
        "A ceiling fan on medium speed draws about 50–100 W. Using 75 W.",
        "appliances",
    ),
    ReferenceEntry(
        "refrigerator", "Refrigerator", "🧊", 150, "W",
        "A modern refrigerator averages 100–200 W as the compressor cycles. Using 150 W.",
        "appliances",
    ),
    ReferenceEntry(
        "washing-machine", "Washing machine", "👕", 500, "W",
        "A washing machine draws about 400–600 W during a cycle. Using 500 W.",
        "appliances",
    ),
    ReferenceEntry(
        "microwave", "Microwave oven", "🔲", 1.2, "kW",
        "A typical microwave draws about 1.0–1.5 kW. Using 1.2 kW.",
        "appliances",
    ),
    ReferenceEntry(
        "hair-dryer", "Hair dryer", "💨", 1.5, "kW",
        "A hair dryer on high draws about 1.0–1.8 kW. Using 1.5 kW.",
        "appliances",
    ),
    ReferenceEntry(
        "dishwasher", "Dishwasher", "🍽️", 1.8, "kW",
        "A dishwasher draws about 1.2–2.4 kW, mostly for heating. Using 1.8 kW.",
        "appliances",
    ),
    ReferenceEntry(
        "electric-oven", "Electric oven", "🔥", 3, "kW",
        "An electric oven at 350°F draws about 2–5 kW. Using 3 kW.",
        "appliances",
    ),
    ReferenceEntry(
        "ac-unit", "Central air conditioner", "❄️", 3.5, "kW",
        "A 3-ton central AC unit draws about 3–4 kW. Using 3.5 kW.",
        "appliances",
    ),
    ReferenceEntry(
        "ev-charger", "EV charger (Level 2)", "🔌", 7.2, "kW",
        "A Level 2 EV charger (240V, 30A) delivers about 7.2 kW.",
        "appliances",
    ),
    # ------------------------------------------------------------------
    # Power: buildings and communities
    # ------------------------------------------------------------------
    ReferenceEntry(
        "us-household", "US household (average)", "🏠", 1.2, "kW",
        "Average US household uses ~10,500 kWh/year ≈ 1.2 kW continuous draw (EIA 2022).",
        "buildings",
    ),
    ReferenceEntry(
        "school", "School building", "🏫", 100, "kW",
        "A typical K-12 school draws about 50–150 kW on average. Using 100 kW.",
        "buildings",
    ),
    ReferenceEntry(
        "office-building", "Office building", "🏢", 500, "kW",
        "A mid-size office building (100k sqft) draws about 300–700 kW. Using 500 kW.",
        "buildings",
    ),
    ReferenceEntry(
        "hospital", "Hospital", "🏥", 2, "MW",
        "A medium-sized hospital (200 beds) draws about 1.5–3 MW. Using 2 MW.",
        "buildings",
    ),
    ReferenceEntry(
        "shopping-mall", "Shopping mall", "🏬", 3, "MW",
        "A large shopping mall draws about 2–5 MW. Using 3 MW.",
        "buildings",
    ),
    ReferenceEntry(
        "small-town", "Small town (5,000 people)", "🏘️", 5, "MW",
        "A town of ~5,000 people (~2,000 households plus commercial) draws roughly 5 MW.",
        "buildings",
    ),
    ReferenceEntry(
        "small-city", "Small city (100k people)", "🏙️", 100, "MW",
        "A city of 100,000 people draws roughly 100 MW including light industry.",
        "buildings",
    ),
    ReferenceEntry(
        "large-city", "Large city (1M people)", "🌆", 1, "GW",
        "A city of ~1 million people draws roughly 1 GW. New York City peaks near 11 GW.",
        "buildings",
    ),
    # ------------------------------------------------------------------
    # Power: industrial and infrastructure
    # ------------------------------------------------------------------
    ReferenceEntry(
        "electric-kiln", "Electric kiln (pottery)", "🏺", 8, "kW",
        "A medium pottery kiln firing to cone 6 draws about 5–11 kW. Using 8 kW.",
        "industrial",
    ),
    ReferenceEntry(
        "data-center-small", "Small data center", "🖥️", 5, "MW",
        "A small enterprise data center draws about 2–10 MW. Using 5 MW.",
        "industrial",
    ),
    ReferenceEntry(
        "arc-furnace", "Electric arc furnace", "🔩", 50, "MW",
        "A steel electric arc furnace draws about 30–80 MW while melting. Using 50 MW.",
        "industrial",
    ),
    ReferenceEntry(
        "data-center-hyperscale", "Hyperscale data center", "🏗️", 100, "MW",
        "A modern hyperscale data center draws about 50–150 MW. Using 100 MW.",
        "industrial",
    ),
    ReferenceEntry(
        "aluminum-smelter", "Aluminum smelter", "🪙", 300, "MW",
        "A large aluminum smelter draws about 200–500 MW continuously. Using 300 MW.",
        "industrial",
    ),
    ReferenceEntry(
        "gw-data-center", "Gigawatt data center campus", "⚡", 1, "GW",
        "A proposed next-generation data center campus at gigawatt scale.",
        "industrial",
    ),
    # ------------------------------------------------------------------
    # Power: generation
    # ------------------------------------------------------------------
    ReferenceEntry(
        "solar-panel", "Solar panel (residential)", "☀️", 400, "W",
        "A residential solar panel is rated ~400 W peak; average output is ~20% of that.",
        "generation",
    ),
    ReferenceEntry(
        "wind-turbine", "Wind turbine (onshore)", "🌬️", 3, "MW",
        "A modern onshore wind turbine is rated at 2–4 MW peak. Using 3 MW.",
        "generation",
    ),
    ReferenceEntry(
        "nuclear-reactor", "Nuclear reactor", "☢️", 1, "GW",
        "A typical nuclear reactor produces about 1 GW electric (e.g. Westinghouse AP1000).",
        "generation",
    ),
    # ------------------------------------------------------------------
    # Energy: batteries and stored energy
    # ------------------------------------------------------------------
    ReferenceEntry(
        "aaa-battery", "AAA battery", "🔋", 1.8, "Wh",
        "A AAA alkaline battery stores about 1.8 Wh (1.5V × 1200mAh).",
        "batteries",
    ),
    ReferenceEntry(
        "aa-battery", "AA battery", "🔋", 3.9, "Wh",
        "A AA alkaline battery stores about 3.9 Wh (1.5V × 2600mAh).",
        "batteries",
    ),
    ReferenceEntry(
        "phone-battery", "Smartphone battery", "📱", 15, "Wh",
        "A modern smartphone battery is about 4000 mAh at 3.8V ≈ 15 Wh.",
        "batteries",
    ),
    ReferenceEntry(
        "laptop-battery", "Laptop battery", "💻", 60, "Wh",
        "A typical laptop battery holds about 50–70 Wh. Using 60 Wh.",
        "batteries",
    ),
    ReferenceEntry(
        "powerwall", "Tesla Powerwall", "🔋", 13.5, "kWh",
        "A Tesla Powerwall home battery stores 13.5 kWh usable.",
        "batteries",
    ),
    ReferenceEntry(
        "tesla-battery", "Tesla Model 3 battery", "🚗", 60, "kWh",
        "A Tesla Model 3 Standard Range has a ~60 kWh battery pack.",
        "batteries",
    ),
    # ------------------------------------------------------------------
    # Energy: consumption events
    # ------------------------------------------------------------------
    ReferenceEntry(
        "charge-phone", "Charge a smartphone", "🔌", 15, "Wh",
        "Fully charging a smartphone uses about 15 Wh including charging losses.",
        "energy-events",
    ),
    ReferenceEntry(
        "load-laundry", "Load of laundry", "👕", 0.5, "kWh",
        "One front-load washer cycle uses about 0.3–0.8 kWh. Using 0.5 kWh (cold wash).",
        "energy-events",
    ),
    ReferenceEntry(
        "smelt-aluminum-kg", "Smelt 1 kg of aluminum", "🪙", 15, "kWh",
        "Producing 1 kg of aluminum via electrolysis takes about 13–17 kWh. Using 15 kWh.",
        "energy-events",
    ),
    ReferenceEntry(
        "household-daily", "US household daily use", "🏠", 29, "kWh",
        "Average US household uses ~29 kWh per day (10,500 kWh/year ÷ 365).",
        "energy-events",
    ),
    ReferenceEntry(
        "kiln-firing", "Fire a kiln load (pottery)", "🏺", 80, "kWh",
        "Firing an electric kiln (8 kW for ~10 hours to cone 6) uses about 80 kWh.",
        "energy-events",
    ),
    ReferenceEntry(
        "lightning-bolt", "Lightning bolt", "🌩️", 280, "kWh",
        "A typical lightning strike releases about 1 GJ ≈ 280 kWh.",
        "energy-events",
    ),
    ReferenceEntry(
        "household-yearly", "US household yearly use", "🏡", 10.5, "MWh",
        "Average US household uses ~10,500 kWh per year (EIA 2022).",
        "energy-events",
    ),
    ReferenceEntry(
        "hoover-dam-daily", "Hoover Dam output (one day)", "🌊", 11, "GWh",
        "Hoover Dam generates about 4 TWh per year ≈ 11 GWh per day.",
        "energy-events",
    ),
    ReferenceEntry(
        "nyc-daily", "New York City electricity (one day)", "🗽", 140, "GWh",
        "New York City uses about 50 TWh per year ≈ 140 GWh per day.",
        "energy-events",
    ),
    ReferenceEntry(
        "us-electricity-yearly", "US electricity (one year)", "🇺🇸", 4000, "TWh",
        "The United States consumes about 4,000 TWh of electricity per year.",
        "energy-events",
    ),
    # ------------------------------------------------------------------
    # Distance
    # ------------------------------------------------------------------
    ReferenceEntry(
        "city-block", "City block", "🧱", 100, "m",
        "A typical city block is about 80–120 m. Using 100 m.",
        "distance",
    ),
    ReferenceEntry(
        "marathon", "Marathon", "🏃", 42.195, "km",
        "A marathon is 42.195 km (26.2 miles).",
        "distance",
    ),
    ReferenceEntry(
        "cross-country-us", "Cross-country US trip", "🗺️", 4500, "km",
        "New York to Los Angeles is about 4,500 km (2,800 miles) by road.",
        "distance",
    ),
    ReferenceEntry(
        "earth-circumference", "Around the Earth", "🌍", 40075, "km",
        "Earth's circumference at the equator is 40,075 km.",
        "distance",
    ),
    ReferenceEntry(
        "earth-to-moon", "Earth to Moon", "🌙", 384400, "km",
        "Average Earth-Moon distance is 384,400 km.",
        "distance",
    ),
    # ------------------------------------------------------------------
    # Mass (aluminum)
    # ------------------------------------------------------------------
    ReferenceEntry(
        "aluminum-can", "Aluminum soda can", "🥫", 15, "g",
        "An empty 12 oz aluminum can weighs about 13–15 g. Using 15 g.",
        "mass",
    ),
    ReferenceEntry(
        "bike-frame", "Aluminum bike frame", "🚲", 1.5, "kg",
        "An aluminum road bike frame weighs about 1.2–1.8 kg. Using 1.5 kg.",
        "mass",
    ),
    ReferenceEntry(
        "car-aluminum", "Aluminum in a car", "🚙", 200, "kg",
        "A modern passenger car contains about 200 kg of aluminum.",
        "mass",
    ),
    ReferenceEntry(
        "airliner-aluminum", "Aluminum in an airliner", "✈️", 60, "ton",
        "A wide-body airliner airframe contains roughly 60 t of aluminum alloys.",
        "mass",
    ),
    # ------------------------------------------------------------------
    # Money
    # ------------------------------------------------------------------
    ReferenceEntry(
        "coffee", "Cup of coffee", "☕", 5, "USD",
        "A café coffee costs about $4–6. Using $5.",
        "money",
    ),
    ReferenceEntry(
        "electric-bill", "Monthly electric bill", "🧾", 140, "USD",
        "An average US household pays about $140 per month for electricity.",
        "money",
    ),
    ReferenceEntry(
        "new-car", "New car", "🚘", 48, "kUSD",
        "The average new car in the US sells for about $48,000.",
        "money",
    ),
    ReferenceEntry(
        "median-home", "Median US home", "🏠", 420, "kUSD",
        "The median US home sells for about $420,000.",
        "money",
    ),
    ReferenceEntry(
        "nuclear-plant-cost", "New nuclear plant", "☢️", 15, "BUSD",
        "Building a new large nuclear reactor in the US costs on the order of $15 billion.",
        "money",
    ),
    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------
    ReferenceEntry(
        "song", "Pop song", "🎵", 3.5, "min",
        "A typical pop song runs about 3–4 minutes. Using 3.5 minutes.",
        "time",
    ),
    ReferenceEntry(
        "movie", "Feature film", "🎬", 2, "hr",
        "A feature film runs about 2 hours.",
        "time",
    ),
    ReferenceEntry(
        "workday", "Work day", "💼", 8, "hr",
        "A standard work day is 8 hours.",
        "time",
    ),
    ReferenceEntry(
        "week", "Week", "📅", 7, "day",
        "Seven days.",
        "time",
    ),
    ReferenceEntry(
        "lifetime", "Human lifetime", "🧓", 79, "yr",
        "US life expectancy at birth is about 79 years.",
        "time",
    ),
)

_ENTRIES_BY_ID: dict[str, ReferenceEntry] = {entry.id: entry for entry in REFERENCE_ENTRIES}


def get_entry(entry_id: str) -> ReferenceEntry:
    """Look up a reference entry by id.

    Raises:
        UnknownEntryError: If the id is not in the table.
    """
    entry = _ENTRIES_BY_ID.get(entry_id)
    if entry is None:
        raise UnknownEntryError(entry_id)
    return entry


def get_entries_for_dimension(dimension: Dimension) -> list[ReferenceEntry]:
    """Return the entries of a dimension in table order."""
    return [entry for entry in REFERENCE_ENTRIES if entry.dimension == dimension]

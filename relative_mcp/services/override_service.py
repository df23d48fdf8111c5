"""Factor override layer.

Lets a caller replace the static factor of any conversion rule without
touching the rule table. Overrides are plain ``rule_id -> factor`` mappings;
``FactorOverrides`` wraps one with validation, and a session-wide instance
backs the MCP ``factors`` tools.
"""

import logging
import math
from types import MappingProxyType
from typing import Mapping

from relative_mcp.services.rule_definitions import ConversionRule, get_rule

logger = logging.getLogger(__name__)


class InvalidOverrideFactorError(ValueError):
    """Raised for non-positive or non-finite override factors."""

    def __init__(self, rule_id: str, value: object):
        super().__init__(
            f"Invalid factor for {rule_id}: {value!r} (must be a positive finite number)"
        )
        self.rule_id = rule_id
        self.value = value


def validate_factor(rule_id: str, value: object) -> float:
    """Return ``value`` as a float or raise ``InvalidOverrideFactorError``."""
    if isinstance(value, bool):
        raise InvalidOverrideFactorError(rule_id, value)
    try:
        factor = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise InvalidOverrideFactorError(rule_id, value) from None
    if not math.isfinite(factor) or factor <= 0:
        raise InvalidOverrideFactorError(rule_id, value)
    return factor


class FactorOverrides:
    """Mutable set of rule factor overrides.

    Rule ids are checked against the rule table and factors must be positive
    and finite. A rejected value leaves any previous override in place.
    """

    def __init__(self, initial: Mapping[str, float] | None = None):
        self._factors: dict[str, float] = {}
        for rule_id, value in (initial or {}).items():
            self.apply_override(rule_id, value)

    def apply_override(self, rule_id: str, value: float | None) -> None:
        """Set (or, with ``None``, remove) the override for a rule.

        Raises:
            UnknownRuleError: If the rule id is not in the table.
            InvalidOverrideFactorError: If the value is not a positive finite number.
        """
        get_rule(rule_id)

        if value is None:
            if self._factors.pop(rule_id, None) is not None:
                logger.info("Cleared factor override for %s", rule_id)
            return

        self._factors[rule_id] = validate_factor(rule_id, value)
        logger.info("Set factor override %s = %s", rule_id, self._factors[rule_id])

    def apply_display_value(self, rule_id: str, display_value: float) -> float:
        """Set an override from a human display value (e.g. 0.20 $/kWh).

        Returns the raw factor that was stored.
        """
        rule = get_rule(rule_id)
        display_value = validate_factor(rule_id, display_value)
        factor = rule.display.from_display(display_value)
        self.apply_override(rule_id, factor)
        return factor

    def get(self, rule_id: str) -> float | None:
        return self._factors.get(rule_id)

    def factor_for(self, rule: ConversionRule) -> float:
        return self._factors.get(rule.id, rule.factor)

    def clear(self) -> None:
        self._factors.clear()

    def snapshot(self) -> Mapping[str, float]:
        """Return a read-only copy for use in a single query."""
        return MappingProxyType(dict(self._factors))

    def __len__(self) -> int:
        return len(self._factors)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._factors


def effective_factor(rule: ConversionRule, overrides: Mapping[str, float] | None = None) -> float:
    """Return the override for ``rule`` if one is given, else its static factor."""
    if overrides and rule.id in overrides:
        return overrides[rule.id]
    return rule.factor


def display_factor(rule: ConversionRule, overrides: Mapping[str, float] | None = None) -> dict:
    """Describe a rule's current factor in human terms."""
    factor = effective_factor(rule, overrides)
    return {
        "rule_id": rule.id,
        "name": rule.name,
        "label": rule.display.label,
        "display_value": rule.display.to_display(factor),
        "display_unit": rule.display.unit,
        "factor": factor,
        "default_factor": rule.factor,
        "overridden": bool(overrides) and rule.id in overrides,
    }


# Global session store
_session_overrides: FactorOverrides | None = None


def get_session_overrides() -> FactorOverrides:
    """Get the session-wide FactorOverrides instance."""
    global _session_overrides
    if _session_overrides is None:
        _session_overrides = FactorOverrides()
    return _session_overrides


def reset_session_overrides() -> None:
    """Reset the session override store (for testing)."""
    global _session_overrides
    _session_overrides = None

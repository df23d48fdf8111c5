"""Shareable query state.

A query is identified by its number, unit, entry overrides and factor
overrides. This module encodes that tuple as a URL query string and back:

    v=1&u=GW&e=direct:nuclear-reactor&f=energy-to-money-electricity:0.0002

Decoding is lenient because links are user input: bad pairs are dropped with
a warning and missing parts fall back to defaults.
"""

import logging
import math
from urllib.parse import parse_qs, urlencode

from relative_mcp.services.comparison_service import QueryContext
from relative_mcp.services.override_service import validate_factor
from relative_mcp.services.rule_definitions import get_rule
from relative_mcp.services.unit_definitions import UnknownUnitError, get_unit

logger = logging.getLogger(__name__)


def _encode_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def _encode_pairs(pairs: dict) -> str:
    for key, value in pairs.items():
        for part in (str(key), str(value)):
            if "," in part or ":" in part:
                raise ValueError(f"Cannot share an id containing ',' or ':': {part!r}")
    return ",".join(f"{key}:{value}" for key, value in sorted(pairs.items()))


def _split_pairs(encoded: str) -> list[tuple[str, str]]:
    pairs = []
    for pair in encoded.split(","):
        key, sep, value = pair.partition(":")
        if not sep or not key or not value:
            if pair:
                logger.warning("Dropping malformed share pair: %r", pair)
            continue
        pairs.append((key, value))
    return pairs


def encode_share_state(context: QueryContext) -> str:
    """Encode a query as a URL query string.

    The unit is written as its canonical id, so aliases decode unchanged.

    Raises:
        UnknownUnitError: If the unit is not in the unit table.
        ValueError: If an entry override id contains ',' or ':'.
    """
    params = {
        "v": _encode_number(context.input_number),
        "u": get_unit(context.unit_id).id,
    }
    if context.entry_overrides:
        params["e"] = _encode_pairs(dict(context.entry_overrides))
    if context.factor_overrides:
        params["f"] = _encode_pairs({
            rule_id: _encode_number(factor)
            for rule_id, factor in context.factor_overrides.items()
        })
    return urlencode(params, safe=":,")


def _decode_factors(encoded: str) -> dict[str, float]:
    factors = {}
    for rule_id, raw in _split_pairs(encoded):
        try:
            get_rule(rule_id)
            factors[rule_id] = validate_factor(rule_id, raw)
        except ValueError as e:
            logger.warning("Dropping factor override from share state: %s", e)
    return factors


def decode_share_state(
    query: str,
    default_value: float = 1.0,
    default_unit: str = "GW",
) -> QueryContext:
    """Decode a URL query string into a QueryContext.

    Args:
        query: Query string, with or without a leading "?".
        default_value: Number used when "v" is missing or not a finite number.
        default_unit: Unit used when "u" is missing or unknown.
    """
    params = parse_qs(query.lstrip("?"))

    def first(key: str) -> str | None:
        values = params.get(key)
        return values[0] if values else None

    input_number = default_value
    raw_value = first("v")
    if raw_value is not None:
        try:
            input_number = float(raw_value)
        except ValueError:
            logger.warning("Invalid share value %r, using %s", raw_value, default_value)
        else:
            if not math.isfinite(input_number):
                logger.warning("Non-finite share value %r, using %s", raw_value, default_value)
                input_number = default_value

    unit_id = first("u") or default_unit
    try:
        unit_id = get_unit(unit_id).id
    except UnknownUnitError:
        logger.warning("Unknown share unit %r, using %s", unit_id, default_unit)
        unit_id = default_unit

    entry_overrides = dict(_split_pairs(first("e") or ""))
    factor_overrides = _decode_factors(first("f") or "")

    return QueryContext(
        input_number=input_number,
        unit_id=unit_id,
        factor_overrides=factor_overrides,
        entry_overrides=entry_overrides,
    )

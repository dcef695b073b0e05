# SPDX-License-Identifier: MIT
# Copyright (c) 2025 EcoFlowJS contributors

"""Parsing of human readable token lifetimes such as ``"1hr"`` or ``"2 days"``."""

import re

# Milliseconds per unit.
_UNITS = {
    "ms": 1, "msec": 1, "msecs": 1, "millisecond": 1, "milliseconds": 1,
    "s": 1000, "sec": 1000, "secs": 1000, "second": 1000, "seconds": 1000,
    "m": 60_000, "min": 60_000, "mins": 60_000, "minute": 60_000, "minutes": 60_000,
    "h": 3_600_000, "hr": 3_600_000, "hrs": 3_600_000, "hour": 3_600_000, "hours": 3_600_000,
    "d": 86_400_000, "day": 86_400_000, "days": 86_400_000,
    "w": 604_800_000, "week": 604_800_000, "weeks": 604_800_000,
    "y": 31_557_600_000, "yr": 31_557_600_000, "yrs": 31_557_600_000,
    "year": 31_557_600_000, "years": 31_557_600_000,
}

_TIMESPAN_RE = re.compile(r"^(?P<value>-?\d*\.?\d+)\s*(?P<unit>[a-z]*)$", re.IGNORECASE)


def parse_timespan(value: int | float | str) -> int:
    """Convert a lifetime to whole seconds.

    Numbers are seconds. Strings carry a unit (``ms``, ``s``, ``m``,
    ``h``/``hr``, ``d``, ``w``, ``y`` and their long forms), e.g. ``"90m"``,
    ``"1hr"``, ``"2 days"``. A unit-less string is milliseconds, so ``"120"``
    is 0 seconds after truncation.

    Raises:
        ValueError: If the value cannot be interpreted
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid timespan: {value!r}")
    if isinstance(value, (int, float)):
        return int(value)

    match = _TIMESPAN_RE.match(str(value).strip())
    if not match:
        raise ValueError(f"Invalid timespan: {value!r}")

    unit = match.group("unit").lower() or "ms"
    if unit not in _UNITS:
        raise ValueError(f"Unknown timespan unit: {unit!r}")

    return int(float(match.group("value")) * _UNITS[unit] / 1000)

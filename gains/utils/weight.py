"""Body and lift weight display strings.

Examples::

    from gains.utils.weight import WeightUnit, format_weight

    format_weight(185.0)                        # '185 lbs'
    format_weight(185.5)                        # '185.5 lbs'
    format_weight(72, WeightUnit.KILOGRAMS)     # '72 kg'
    format_weight(1234.5, locale="de_DE")       # '1.234,5 lbs'
"""

from __future__ import annotations

import logging
from enum import Enum

from babel.numbers import format_decimal

from gains.settings import resolve_locale

logger = logging.getLogger(__name__)

LBS_PER_KG = 2.20462

# Grouped integer part, zero or one fractional digit
_WEIGHT_PATTERN = "#,##0.#"


class WeightUnit(str, Enum):
    POUNDS = "lbs"
    KILOGRAMS = "kg"

    @property
    def abbreviation(self) -> str:
        return self.value

    @classmethod
    def for_system(cls, use_metric: bool) -> WeightUnit:
        """Unit for the profile's metric/imperial preference."""
        return cls.KILOGRAMS if use_metric else cls.POUNDS


def format_weight(
    weight: float,
    unit: WeightUnit = WeightUnit.POUNDS,
    *,
    locale: str | None = None,
) -> str:
    """Render *weight* as ``"<number> <abbreviation>"``.

    The number carries at most one fractional digit and uses the locale's
    grouping and decimal separator. Never raises: if the number cannot be
    formatted, ``str(weight)`` is used as-is.
    """
    try:
        number = format_decimal(
            weight, format=_WEIGHT_PATTERN, locale=resolve_locale(locale, "LC_NUMERIC"),
        )
    except Exception:
        logger.debug("Falling back to str() for weight %r", weight, exc_info=True)
        number = str(weight)
    return f"{number} {WeightUnit(unit).abbreviation}"


def convert_weight(weight: float, from_unit: WeightUnit, to_unit: WeightUnit) -> float:
    """Convert between pounds and kilograms."""
    if from_unit == to_unit:
        return weight
    if to_unit == WeightUnit.POUNDS:
        return weight * LBS_PER_KG
    return weight / LBS_PER_KG

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

GRAMS_PER_THOUSAND_M3 = 16
GRAMS_PER_DROP = 0.02
SECONDS_PER_MINUTE = 60

_LABEL_ODORANT = "Количество одоранта"
_LABEL_DROPS = "Количество капель"
_LABEL_DROPS_PER_MINUTE = "Капель в минуту"
_INVALID_HINT = "Введите числовое значение расхода газа (м³)"


class ResultKind(Enum):
    EMPTY = "empty"
    VALUE = "value"
    INVALID = "invalid"


@dataclass(frozen=True)
class CalculationResult:
    odorant_amount: float = 0.0
    drops: float = 0.0
    drops_per_minute: float = 0.0
    kind: ResultKind = ResultKind.EMPTY

    @property
    def has_value(self) -> bool:
        return self.kind is ResultKind.VALUE and self.odorant_amount > 0

    @property
    def is_invalid(self) -> bool:
        return self.kind is ResultKind.INVALID


EMPTY_RESULT = CalculationResult()
INVALID_RESULT = CalculationResult(kind=ResultKind.INVALID)


def odorant_amount(consumption: float) -> float:
    return (consumption / 1000) * GRAMS_PER_THOUSAND_M3


def drops_for(odorant_grams: float) -> float:
    return odorant_grams / GRAMS_PER_DROP


def drops_per_minute(drops: float) -> float:
    return drops / SECONDS_PER_MINUTE


def _parse(raw_input: str) -> float | None:
    try:
        value = float(raw_input)
    except ValueError:
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def compute(raw_input: str | None) -> CalculationResult:
    """Derive the odorant dose for a gas consumption volume in m³.

    Empty input resets to the all-zero result. Input that does not parse as a
    finite number yields the all-zero INVALID result instead of raising.
    """
    if raw_input is None or not raw_input.strip():
        return EMPTY_RESULT

    consumption = _parse(raw_input.strip())
    if consumption is None:
        return INVALID_RESULT

    grams = odorant_amount(consumption)
    drops = drops_for(grams)
    return CalculationResult(
        odorant_amount=grams,
        drops=drops,
        drops_per_minute=drops_per_minute(drops),
        kind=ResultKind.VALUE,
    )


def format_result(result: CalculationResult) -> list[str]:
    if result.is_invalid:
        return [_INVALID_HINT]
    if not result.has_value:
        return []
    return [
        f"{_LABEL_ODORANT}: {result.odorant_amount:.2f} г",
        f"{_LABEL_DROPS}: {result.drops:.2f}",
        f"{_LABEL_DROPS_PER_MINUTE}: {result.drops_per_minute:.2f}",
    ]

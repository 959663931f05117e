"""Performance figures derived from purchases and current prices.

A :class:`Performance` holds the summed components (invested value, latest
value, quantity) of some set of purchases. ``gain`` and ``gain_perc`` are
always derived from those totals, so adding two records never averages
percentages.

Zero invested value
-------------------
``gain_perc`` divides by ``invested_value``. When that is zero the result is
left non-finite: ``nan`` for 0/0 and a signed ``inf`` otherwise. Callers that
render figures check :attr:`Performance.has_investment` or ``math.isfinite``
and show a placeholder.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import reduce
from typing import Iterable


def _ratio_perc(numerator: float, denominator: float) -> float:
    """``numerator / denominator * 100`` with IEEE semantics for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator * 100.0


@dataclass(frozen=True)
class Performance:
    """Aggregate performance over a set of purchases."""

    invested_value: float = 0.0
    latest_value: float = 0.0
    quantity: int = 0

    @classmethod
    def from_purchase(
        cls, quantity: int, buying_price: float, current_price: float
    ) -> Performance:
        """Performance of ``quantity`` units bought at ``buying_price``."""
        return cls(
            invested_value=quantity * buying_price,
            latest_value=quantity * current_price,
            quantity=quantity,
        )

    @property
    def gain(self) -> float:
        return self.latest_value - self.invested_value

    @property
    def gain_perc(self) -> float:
        return _ratio_perc(self.gain, self.invested_value)

    @property
    def has_investment(self) -> bool:
        return self.invested_value != 0

    def __add__(self, other: Performance) -> Performance:
        if not isinstance(other, Performance):
            return NotImplemented
        return Performance(
            invested_value=self.invested_value + other.invested_value,
            latest_value=self.latest_value + other.latest_value,
            quantity=self.quantity + other.quantity,
        )


def combine(performances: Iterable[Performance]) -> Performance:
    """Fold performances into one; the empty fold is ``Performance()``."""
    return reduce(lambda acc, p: acc + p, performances, Performance())


def portfolio_weight(asset: Performance, portfolio: Performance) -> float:
    """Share of the portfolio's latest value held in *asset*, in percent.

    ``nan`` when the portfolio's latest value is zero.
    """
    if portfolio.latest_value == 0:
        return math.nan
    return asset.latest_value / portfolio.latest_value * 100.0

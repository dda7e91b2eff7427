"""
Aggregation of per-service cost/revenue lines.

Sums use math.fsum so totals do not depend on input order. Nothing here
rounds; rounding happens only when values are formatted for output.
"""

import math
from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class CostLine:
    """Cost and revenue for one service."""
    name: str
    category: str
    cost: float
    revenue: float = 0.0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost


@dataclass(frozen=True)
class Totals:
    """Summed cost and revenue."""
    cost: float = 0.0
    revenue: float = 0.0

    @property
    def profit(self) -> float:
        return self.revenue - self.cost

    @property
    def margin(self) -> float:
        """Profit as a fraction of revenue, 0.0 when there is no revenue."""
        if self.revenue == 0:
            return 0.0
        return self.profit / self.revenue


def sum_values(values: Iterable[float]) -> float:
    """Order-independent float total; empty input sums to 0.0."""
    return math.fsum(values)


def sum_lines(lines: Iterable[CostLine]) -> Totals:
    """Grand total of cost and revenue over all lines."""
    lines = list(lines)
    return Totals(
        cost=sum_values(line.cost for line in lines),
        revenue=sum_values(line.revenue for line in lines),
    )


def subtotals_by_category(lines: Iterable[CostLine]) -> dict[str, Totals]:
    """Cost and revenue subtotals keyed by category."""
    grouped: dict[str, list[CostLine]] = {}
    for line in lines:
        grouped.setdefault(line.category, []).append(line)

    return {category: sum_lines(group) for category, group in grouped.items()}

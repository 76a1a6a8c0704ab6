"""Core business logic and interfaces."""

from lab_budget.core.interfaces import CostCalculator
from lab_budget.core.cost import (
    CostBreakdown,
    CostModel,
    CostResult,
    compute_cost,
    should_show_optimization_tip,
)

__all__ = [
    "CostCalculator",
    "CostModel",
    "CostResult",
    "CostBreakdown",
    "compute_cost",
    "should_show_optimization_tip",
]

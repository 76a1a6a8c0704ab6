"""
Cost modelling for lab deployments.

Provides the daily cost model and its derived figures:
- Instance (compute) and storage cost per day, USD and INR
- Required budget for a number of days
- Affordable days within a budget
- Per-person breakdown
"""

from lab_budget.core.cost.model import (
    OPTIMIZATION_TIP,
    CostModel,
    CostResult,
    compute_cost,
    should_show_optimization_tip,
)
from lab_budget.core.cost.breakdown import CostBreakdown

__all__ = [
    "CostModel",
    "CostResult",
    "CostBreakdown",
    "compute_cost",
    "should_show_optimization_tip",
    "OPTIMIZATION_TIP",
]

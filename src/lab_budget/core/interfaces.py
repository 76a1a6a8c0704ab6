"""
Protocol interfaces for core components.

Using Protocol (PEP 544) for structural subtyping, allowing flexible
implementations without forcing inheritance.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from lab_budget.domain import Configuration

if TYPE_CHECKING:
    from lab_budget.core.cost.model import CostResult


@runtime_checkable
class CostCalculator(Protocol):
    """
    Protocol for lab cost calculations.

    Implementations turn a configuration into a cost result with no side
    effects, so callers may recompute on every change.
    """

    def compute(self, config: Configuration) -> "CostResult":
        """
        Compute costs for a configuration.

        Args:
            config: Lab configuration

        Returns:
            CostResult for config.mode
        """
        ...

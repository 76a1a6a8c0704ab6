"""Per-person and line-item breakdown of a cost result."""

from dataclasses import dataclass

from lab_budget.core.cost.model import CostResult, float_divide
from lab_budget.domain import DEFAULT_PRICING, Configuration, PricingRates


@dataclass(frozen=True)
class CostBreakdown:
    """
    Daily cost line items, totals and per-person shares (INR).

    Attributes:
        number_of_users: Users the totals are shared between
        total_instances: Instances across all users
        instance_cost_inr: Compute line item
        storage_cost_inr: Storage line item
        maintenance_cost_inr: Maintenance line item (0 when disabled)
        daily_cost_inr: Total daily cost
        required_budget_inr: Total required budget (Days -> Budget)
        affordable_whole_days: Whole days covered (Budget -> Days)
        remaining_budget_inr: Budget left after the whole days (Budget -> Days, else 0)
    """

    number_of_users: float
    total_instances: float
    instance_cost_inr: float
    storage_cost_inr: float
    maintenance_cost_inr: float
    daily_cost_inr: float
    required_budget_inr: float
    affordable_whole_days: float
    remaining_budget_inr: float = 0.0

    @classmethod
    def from_result(
        cls,
        config: Configuration,
        result: CostResult,
        pricing: PricingRates | None = None,
    ) -> "CostBreakdown":
        """
        Build the breakdown shown alongside a result.

        The maintenance line is taken on the component costs as reported,
        which already carry the surcharge.

        Args:
            config: Configuration the result was computed from
            result: Cost model output
            pricing: Pricing used for the maintenance rate (defaults if None)

        Returns:
            CostBreakdown
        """
        pricing = pricing or DEFAULT_PRICING

        maintenance_cost_inr = 0.0
        if config.maintenance_enabled:
            maintenance_cost_inr = (
                result.instance_cost_inr + result.storage_cost_inr
            ) * pricing.maintenance_rate

        remaining_budget_inr = 0.0
        if config.is_budget_to_days:
            remaining_budget_inr = config.budget - result.total_budget_used

        return cls(
            number_of_users=config.number_of_users,
            total_instances=config.total_instances,
            instance_cost_inr=result.instance_cost_inr,
            storage_cost_inr=result.storage_cost_inr,
            maintenance_cost_inr=maintenance_cost_inr,
            daily_cost_inr=result.daily_cost_inr,
            required_budget_inr=result.required_budget_inr,
            affordable_whole_days=result.affordable_whole_days,
            remaining_budget_inr=remaining_budget_inr,
        )

    @property
    def show_per_person(self) -> bool:
        """Per-person figures are only meaningful with more than one user."""
        return self.number_of_users > 1

    def per_person(self, amount: float) -> float:
        """Share of an amount for one user."""
        return float_divide(amount, self.number_of_users)

    @property
    def daily_cost_per_person(self) -> float:
        return self.per_person(self.daily_cost_inr)

    @property
    def instance_cost_per_person(self) -> float:
        return self.per_person(self.instance_cost_inr)

    @property
    def storage_cost_per_person(self) -> float:
        return self.per_person(self.storage_cost_inr)

    @property
    def maintenance_cost_per_person(self) -> float:
        return self.per_person(self.maintenance_cost_inr)

    @property
    def required_budget_per_person(self) -> float:
        return self.per_person(self.required_budget_inr)

    @property
    def runtime_days_per_person(self) -> float:
        """Every user runs for the same number of days as the whole lab."""
        return self.affordable_whole_days

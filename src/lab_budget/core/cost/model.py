"""
Cost model for lab deployments.

Turns a Configuration into daily instance and storage costs (USD and INR)
and then into either a required budget or an affordable number of days.

Pricing reference (AWS on-demand):
- EC2 t2.medium: $0.0464/hr per instance
- EBS gp3: $0.08/GB-month, spread over a 30-day month
- Maintenance: flat +25% on every cost figure when enabled
"""

import logging
import math
from dataclasses import dataclass

from lab_budget.domain import (
    DEFAULT_PRICING,
    CalculationMode,
    Configuration,
    InvalidInputError,
    PricingRates,
)

OPTIMIZATION_TIP_THRESHOLD_INR = 250.0
OPTIMIZATION_TIP_MIN_DAYS = 10
OPTIMIZATION_TIP = (
    "Try reducing runtime hours or number of instances for longer usage "
    "within your budget."
)


def float_divide(numerator: float, denominator: float) -> float:
    """Float division with IEEE semantics (x/0 -> +/-inf, 0/0 -> nan)."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def whole_days(days: float) -> float:
    """Floor a day count, passing inf/nan through unchanged."""
    if not math.isfinite(days):
        return days
    return float(math.floor(days))


@dataclass(frozen=True)
class CostResult:
    """
    Cost model output.

    Component costs already include the maintenance surcharge when enabled.
    Only the fields belonging to `mode` are populated; the others are 0.

    Attributes:
        mode: Calculation mode that produced this result
        daily_cost_usd: Total cost per day (USD)
        daily_cost_inr: Total cost per day (INR)
        instance_cost_usd: Compute cost per day (USD)
        instance_cost_inr: Compute cost per day (INR)
        storage_cost_usd: Storage cost per day (USD)
        storage_cost_inr: Storage cost per day (INR)
        affordable_days: Fractional days the budget covers (Budget -> Days)
        total_budget_used: Whole affordable days x daily cost in INR (Budget -> Days)
        required_budget_inr: Budget for the desired days in INR (Days -> Budget)
        required_budget_usd: required_budget_inr / exchange_rate (Days -> Budget)
    """

    mode: CalculationMode
    daily_cost_usd: float
    daily_cost_inr: float
    instance_cost_usd: float
    instance_cost_inr: float
    storage_cost_usd: float
    storage_cost_inr: float
    affordable_days: float = 0.0
    total_budget_used: float = 0.0
    required_budget_inr: float = 0.0
    required_budget_usd: float = 0.0

    @property
    def affordable_whole_days(self) -> float:
        """Affordable days rounded down (inf/nan passed through)."""
        return whole_days(self.affordable_days)


class CostModel:
    """
    Computes lab costs from a Configuration.

    compute() is a pure function of its input: no caching, no state beyond
    the pricing table. Inputs are not range-checked unless strict=True, so
    zero or negative values yield inf/nan results rather than errors.

    Attributes:
        pricing: Reference pricing (DEFAULT_PRICING if None)
        strict: Validate inputs before computing
    """

    def __init__(
        self,
        pricing: PricingRates | None = None,
        strict: bool = False,
    ):
        """
        Initialize CostModel.

        Args:
            pricing: Custom pricing (uses defaults if None)
            strict: Reject inputs that would produce non-finite results
        """
        self._pricing = pricing or DEFAULT_PRICING
        self._strict = strict
        self._logger = logging.getLogger(__name__)

    @property
    def pricing(self) -> PricingRates:
        """Pricing used by this model."""
        return self._pricing

    @property
    def strict(self) -> bool:
        """Whether inputs are validated before computing."""
        return self._strict

    def compute(self, config: Configuration) -> CostResult:
        """
        Compute daily costs and the figure selected by config.mode.

        Args:
            config: Lab configuration

        Returns:
            CostResult

        Raises:
            InvalidInputError: Only in strict mode, if inputs are out of range
                or the daily cost is zero in Budget -> Days mode
        """
        if self._strict:
            config.validate()

        pricing = self._pricing
        rate = config.exchange_rate

        # Compute: instance-hours at the on-demand rate
        instance_cost_usd = (
            pricing.ec2_rate_usd
            * config.runtime_per_day
            * config.instances_per_person
            * config.number_of_users
        )
        instance_cost_inr = instance_cost_usd * rate

        # Storage: monthly volume cost spread over a 30-day month
        storage_cost_monthly_usd = (
            pricing.storage_rate_usd
            * config.storage_per_instance
            * config.instances_per_person
            * config.number_of_users
        )
        storage_cost_usd = storage_cost_monthly_usd / pricing.days_per_month
        storage_cost_inr = storage_cost_usd * rate

        base_daily_cost_usd = instance_cost_usd + storage_cost_usd
        base_daily_cost_inr = base_daily_cost_usd * rate

        multiplier = pricing.maintenance_multiplier if config.maintenance_enabled else 1.0
        daily_cost_usd = base_daily_cost_usd * multiplier
        daily_cost_inr = base_daily_cost_inr * multiplier

        costs = dict(
            mode=config.mode,
            daily_cost_usd=daily_cost_usd,
            daily_cost_inr=daily_cost_inr,
            instance_cost_usd=instance_cost_usd * multiplier,
            instance_cost_inr=instance_cost_inr * multiplier,
            storage_cost_usd=storage_cost_usd * multiplier,
            storage_cost_inr=storage_cost_inr * multiplier,
        )

        if config.mode is CalculationMode.BUDGET_TO_DAYS:
            if self._strict and daily_cost_inr == 0:
                raise InvalidInputError(
                    "daily cost is zero; affordable days would be unbounded"
                )

            affordable_days = float_divide(config.budget, daily_cost_inr)
            total_budget_used = whole_days(affordable_days) * daily_cost_inr

            result = CostResult(
                **costs,
                affordable_days=affordable_days,
                total_budget_used=total_budget_used,
            )

            self._logger.debug(
                f"Cost: ₹{daily_cost_inr:.2f}/day, ₹{config.budget} covers "
                f"{affordable_days:.2f} days"
            )
        else:
            required_budget_inr = config.desired_days * daily_cost_inr
            # Converted back from INR rather than forward from USD
            required_budget_usd = float_divide(required_budget_inr, rate)

            result = CostResult(
                **costs,
                required_budget_inr=required_budget_inr,
                required_budget_usd=required_budget_usd,
            )

            self._logger.debug(
                f"Cost: ₹{daily_cost_inr:.2f}/day, {config.desired_days} days "
                f"need ₹{required_budget_inr:.2f}"
            )

        return result


def compute_cost(config: Configuration, pricing: PricingRates | None = None) -> CostResult:
    """
    Compute costs with a default (non-strict) CostModel.

    Args:
        config: Lab configuration
        pricing: Custom pricing (uses defaults if None)

    Returns:
        CostResult
    """
    return CostModel(pricing=pricing).compute(config)


def should_show_optimization_tip(config: Configuration, result: CostResult) -> bool:
    """
    Check whether the cost-reduction advisory applies.

    Shown when the daily cost exceeds ₹250, or when the budget covers
    fewer than 10 days in Budget -> Days mode. Informational only.
    """
    if result.daily_cost_inr > OPTIMIZATION_TIP_THRESHOLD_INR:
        return True
    return config.is_budget_to_days and result.affordable_days < OPTIMIZATION_TIP_MIN_DAYS

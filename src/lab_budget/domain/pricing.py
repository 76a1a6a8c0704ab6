"""
Reference pricing value object.

Based on AWS on-demand pricing:
- EC2 t2.medium: $0.0464/hr
- EBS gp3: $0.08/GB-month
"""

from dataclasses import dataclass

EC2_RATE_USD = 0.0464
STORAGE_RATE_USD = 0.08
MAINTENANCE_MULTIPLIER = 1.25
DAYS_PER_MONTH = 30


@dataclass(frozen=True)
class PricingRates:
    """
    Pricing used by the cost model.

    Attributes:
        ec2_rate_usd: Cost per instance-hour (USD)
        storage_rate_usd: Cost per GB per month (USD)
        maintenance_multiplier: Factor applied when maintenance is enabled
        days_per_month: Days used to spread monthly storage cost over a day
        instance_type: Instance type the compute rate refers to
        volume_type: Volume type the storage rate refers to
    """

    ec2_rate_usd: float = EC2_RATE_USD
    storage_rate_usd: float = STORAGE_RATE_USD
    maintenance_multiplier: float = MAINTENANCE_MULTIPLIER
    days_per_month: int = DAYS_PER_MONTH
    instance_type: str = "t2.medium"
    volume_type: str = "gp3"

    @property
    def maintenance_rate(self) -> float:
        """Surcharge as a fraction (0.25 for a 1.25 multiplier)."""
        return self.maintenance_multiplier - 1.0


DEFAULT_PRICING = PricingRates()

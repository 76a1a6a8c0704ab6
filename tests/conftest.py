"""Pytest configuration and fixtures."""

import pytest

from lab_budget.core.cost import CostModel
from lab_budget.domain import CalculationMode, Configuration, PricingRates


@pytest.fixture
def model() -> CostModel:
    """Cost model with default pricing."""
    return CostModel()


@pytest.fixture
def clustered_lab() -> Configuration:
    """Single-user clustered lab: 9 instances, 5h/day, 30GB, ₹84/USD, 10 days."""
    return Configuration(
        runtime_per_day=5,
        instances_per_person=9,
        storage_per_instance=30,
        number_of_users=1,
        exchange_rate=84,
        desired_days=10,
        deployment_type="clustered",
        maintenance_enabled=False,
        mode=CalculationMode.DAYS_TO_BUDGET,
    )


@pytest.fixture
def clustered_lab_maintained(clustered_lab: Configuration) -> Configuration:
    """Clustered lab with the maintenance surcharge."""
    return Configuration(**{**clustered_lab.to_dict(), "maintenance_enabled": True})


@pytest.fixture
def budget_lab(clustered_lab: Configuration) -> Configuration:
    """Clustered lab asking how long ₹3000 lasts."""
    return Configuration(
        **{**clustered_lab.to_dict(), "budget": 3000, "mode": CalculationMode.BUDGET_TO_DAYS}
    )


@pytest.fixture
def training_batch() -> Configuration:
    """Non-clustered lab shared by 3 trainees."""
    return Configuration(
        runtime_per_day=8,
        instances_per_person=4,
        storage_per_instance=20,
        number_of_users=3,
        exchange_rate=83.5,
        desired_days=15,
        deployment_type="non-clustered",
    )


@pytest.fixture
def double_pricing() -> PricingRates:
    """Pricing at twice the reference rates."""
    return PricingRates(ec2_rate_usd=0.0928, storage_rate_usd=0.16)

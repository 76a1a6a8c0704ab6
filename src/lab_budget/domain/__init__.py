"""Domain models following Domain-Driven Design principles."""

from lab_budget.domain.exceptions import (
    InvalidConfigurationError,
    InvalidInputError,
    LabBudgetError,
)
from lab_budget.domain.configuration import (
    DEPLOYMENT_DESCRIPTIONS,
    DEPLOYMENT_PRESETS,
    DEPLOYMENT_TYPES,
    CalculationMode,
    Configuration,
    DeploymentType,
    deployment_label,
)
from lab_budget.domain.pricing import DEFAULT_PRICING, PricingRates

__all__ = [
    "LabBudgetError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "CalculationMode",
    "Configuration",
    "DeploymentType",
    "DEPLOYMENT_DESCRIPTIONS",
    "DEPLOYMENT_PRESETS",
    "DEPLOYMENT_TYPES",
    "deployment_label",
    "PricingRates",
    "DEFAULT_PRICING",
]

"""
Interactive budget session.

Holds one Configuration and the CostResult computed from it. Every change
to the configuration recomputes the result synchronously, so the pair is
never out of date.
"""

import json
import logging
from dataclasses import replace
from pathlib import Path
from typing import Any

import yaml

from lab_budget.core.cost import (
    CostBreakdown,
    CostModel,
    CostResult,
    should_show_optimization_tip,
)
from lab_budget.core.interfaces import CostCalculator
from lab_budget.domain import (
    CalculationMode,
    Configuration,
    DeploymentType,
    InvalidConfigurationError,
)


def load_configuration(path: str | Path) -> Configuration:
    """
    Load a Configuration from a JSON or YAML file.

    Args:
        path: File path (.json, .yaml or .yml)

    Returns:
        Configuration

    Raises:
        InvalidConfigurationError: If the file is missing, has an unsupported
            extension, or does not contain a mapping of configuration fields
    """
    path = Path(path)
    if not path.exists():
        raise InvalidConfigurationError(f"Configuration file not found: {path}")

    if path.suffix not in [".json", ".yaml", ".yml"]:
        raise InvalidConfigurationError(
            f"Unsupported configuration file format: {path.suffix}"
        )

    with open(path, "r") as f:
        try:
            if path.suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise InvalidConfigurationError(
                f"Cannot parse configuration file {path}: {e}"
            ) from e

    if not isinstance(data, dict):
        raise InvalidConfigurationError(
            f"Configuration file must contain a mapping, got {type(data).__name__}"
        )

    logging.getLogger(__name__).debug(f"Loaded configuration from {path}")
    return Configuration.from_dict(data)


class BudgetSession:
    """
    Mutable session around an immutable Configuration.

    Usage:
        session = BudgetSession()
        session.set_deployment_type("standalone")
        session.update(number_of_users=5, maintenance_enabled=True)
        print(session.result.daily_cost_inr)
    """

    def __init__(
        self,
        configuration: Configuration | None = None,
        cost_model: CostCalculator | None = None,
    ):
        """
        Initialize BudgetSession.

        Args:
            configuration: Starting configuration (defaults if None)
            cost_model: Cost calculator (creates default CostModel if None)
        """
        self._model = cost_model or CostModel()
        self._logger = logging.getLogger(__name__)
        self._configuration = configuration or Configuration()
        self._result = self._model.compute(self._configuration)

    @property
    def configuration(self) -> Configuration:
        """Current configuration."""
        return self._configuration

    @property
    def result(self) -> CostResult:
        """Result for the current configuration."""
        return self._result

    @property
    def show_optimization_tip(self) -> bool:
        """Whether the cost-reduction advisory applies to the current result."""
        return should_show_optimization_tip(self._configuration, self._result)

    @property
    def breakdown(self) -> CostBreakdown:
        """Line items and per-person shares for the current result."""
        pricing = getattr(self._model, "pricing", None)
        return CostBreakdown.from_result(self._configuration, self._result, pricing)

    def set_configuration(self, configuration: Configuration) -> CostResult:
        """
        Replace the configuration and recompute.

        Args:
            configuration: New configuration

        Returns:
            The new CostResult
        """
        result = self._model.compute(configuration)
        self._configuration = configuration
        self._result = result

        self._logger.debug(f"Recomputed {configuration!r}: ₹{result.daily_cost_inr:.2f}/day")
        return result

    def update(self, **changes: Any) -> CostResult:
        """
        Change individual fields and recompute.

        A new deployment_type seeds instances_per_person from its preset,
        unless instances_per_person is given in the same call.

        Args:
            **changes: Configuration field values

        Returns:
            The new CostResult

        Raises:
            InvalidConfigurationError: If a field name or value is invalid
        """
        configuration = self._configuration

        deployment_type = changes.pop("deployment_type", None)
        if deployment_type is not None:
            configuration = configuration.with_deployment_type(deployment_type)

        if "mode" in changes:
            changes["mode"] = CalculationMode.parse(changes["mode"])

        try:
            configuration = replace(configuration, **changes)
        except TypeError as e:
            raise InvalidConfigurationError(str(e)) from e

        return self.set_configuration(configuration)

    def set_deployment_type(self, deployment_type: DeploymentType) -> CostResult:
        """
        Switch deployment type, overwriting instances_per_person with its preset.

        Args:
            deployment_type: One of "standalone", "non-clustered", "clustered"

        Returns:
            The new CostResult
        """
        configuration = self._configuration.with_deployment_type(deployment_type)
        self._logger.info(
            f"Deployment type {deployment_type}: "
            f"{configuration.instances_per_person} instances per person"
        )
        return self.set_configuration(configuration)

    def set_mode(self, mode: CalculationMode | str) -> CostResult:
        """
        Select which figure is computed.

        Args:
            mode: CalculationMode or its string value

        Returns:
            The new CostResult
        """
        return self.set_configuration(
            replace(self._configuration, mode=CalculationMode.parse(mode))
        )

    def toggle_mode(self) -> CostResult:
        """Flip between Days -> Budget and Budget -> Days."""
        if self._configuration.is_budget_to_days:
            return self.set_mode(CalculationMode.DAYS_TO_BUDGET)
        return self.set_mode(CalculationMode.BUDGET_TO_DAYS)

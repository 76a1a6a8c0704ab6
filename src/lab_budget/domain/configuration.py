"""Lab configuration value object."""

import math
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum
from typing import Any, Literal, Mapping, get_args

from lab_budget.domain.exceptions import InvalidConfigurationError, InvalidInputError


# Type aliases for semantic clarity
DeploymentType = Literal["standalone", "non-clustered", "clustered"]

DEPLOYMENT_TYPES: tuple[str, ...] = get_args(DeploymentType)

# Default instances per person seeded by each deployment type
DEPLOYMENT_PRESETS: dict[str, int] = {
    "standalone": 1,
    "non-clustered": 4,
    "clustered": 9,
}

DEPLOYMENT_DESCRIPTIONS: dict[str, str] = {
    "standalone": "Single instance deployment for basic testing",
    "non-clustered": "Multiple instances without clustering for medium workloads",
    "clustered": "Full clustered deployment for production-like environments",
}

NUMERIC_FIELDS: tuple[str, ...] = (
    "budget",
    "runtime_per_day",
    "instances_per_person",
    "storage_per_instance",
    "number_of_users",
    "exchange_rate",
    "desired_days",
)


class CalculationMode(str, Enum):
    """Which derived figure a computation produces."""

    DAYS_TO_BUDGET = "days-to-budget"
    BUDGET_TO_DAYS = "budget-to-days"

    @classmethod
    def parse(cls, value: "CalculationMode | str") -> "CalculationMode":
        """Accept an enum member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(m.value for m in cls)
            raise InvalidConfigurationError(
                f"Unknown calculation mode {value!r} (expected one of: {valid})"
            ) from None


def deployment_label(deployment_type: DeploymentType) -> str:
    """Display label for a deployment type ("non-clustered" -> "Non clustered")."""
    return deployment_type[:1].upper() + deployment_type[1:].replace("-", " ", 1)


def _check_deployment_type(deployment_type: str) -> None:
    if deployment_type not in DEPLOYMENT_PRESETS:
        raise InvalidConfigurationError(
            f"Unknown deployment type {deployment_type!r} "
            f"(expected one of: {', '.join(DEPLOYMENT_TYPES)})"
        )


@dataclass(frozen=True)
class Configuration:
    """
    Immutable lab sizing configuration.

    Numeric fields are taken as given: construction does not check ranges,
    so zero or negative values flow through the cost model unchanged.
    Call validate() to opt into range checks.

    Attributes:
        budget: Spendable budget in INR (Budget -> Days mode only)
        runtime_per_day: Hours per day each instance runs
        instances_per_person: Instances per user
        storage_per_instance: Persistent volume per instance in GB
        number_of_users: Number of users sharing the lab
        exchange_rate: INR per USD
        desired_days: Target run length (Days -> Budget mode only)
        deployment_type: Preset that seeded instances_per_person
        maintenance_enabled: Whether the 25% maintenance surcharge applies
        mode: Which figure to compute
    """

    budget: float = 3000
    runtime_per_day: float = 5
    instances_per_person: float = 9
    storage_per_instance: float = 30
    number_of_users: float = 1
    exchange_rate: float = 84
    desired_days: float = 10
    deployment_type: DeploymentType = "clustered"
    maintenance_enabled: bool = False
    mode: CalculationMode = CalculationMode.DAYS_TO_BUDGET

    def __post_init__(self) -> None:
        """Normalise mode and reject unknown deployment types."""
        _check_deployment_type(self.deployment_type)
        # Use object.__setattr__ for frozen dataclass normalisation
        object.__setattr__(self, "mode", CalculationMode.parse(self.mode))

    @property
    def is_budget_to_days(self) -> bool:
        """Check if the configuration asks for affordable days."""
        return self.mode is CalculationMode.BUDGET_TO_DAYS

    @property
    def total_instances(self) -> float:
        """Instances across all users."""
        return self.instances_per_person * self.number_of_users

    def with_deployment_type(self, deployment_type: DeploymentType) -> "Configuration":
        """
        Switch deployment type, seeding instances_per_person from its preset.

        The preset always overwrites the current instance count; it is a
        default, not a constraint, so later edits are kept.

        Args:
            deployment_type: One of "standalone", "non-clustered", "clustered"

        Returns:
            New Configuration

        Raises:
            InvalidConfigurationError: If deployment_type is unknown
        """
        _check_deployment_type(deployment_type)
        return replace(
            self,
            deployment_type=deployment_type,
            instances_per_person=DEPLOYMENT_PRESETS[deployment_type],
        )

    def validate(self) -> None:
        """
        Check ranges (opt-in).

        Raises:
            InvalidInputError: If exchange_rate is not positive, or any other
                numeric field is negative or not finite
        """
        for name in NUMERIC_FIELDS:
            value = getattr(self, name)
            if not math.isfinite(value):
                raise InvalidInputError(f"{name} must be finite, got {value}")
            if value < 0:
                raise InvalidInputError(f"{name} must be non-negative, got {value}")

        if self.exchange_rate <= 0:
            raise InvalidInputError(
                f"exchange_rate must be positive, got {self.exchange_rate}"
            )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary (mode as its string value)."""
        data = asdict(self)
        data["mode"] = self.mode.value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Configuration":
        """
        Build a Configuration from a mapping of field names.

        Missing fields take their defaults.

        Args:
            data: Mapping loaded from JSON/YAML or built by hand

        Returns:
            Configuration

        Raises:
            InvalidConfigurationError: If data has unknown keys or bad values
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown configuration keys: {', '.join(unknown)}"
            )

        for name in NUMERIC_FIELDS:
            if name not in data:
                continue
            value = data[name]
            # bool is an int subclass
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidConfigurationError(
                    f"{name} must be a number, got {value!r}"
                )

        for name in ("deployment_type", "mode"):
            if name in data and not isinstance(data[name], str):
                raise InvalidConfigurationError(
                    f"{name} must be a string, got {data[name]!r}"
                )

        if "maintenance_enabled" in data and not isinstance(data["maintenance_enabled"], bool):
            raise InvalidConfigurationError(
                f"maintenance_enabled must be true or false, got {data['maintenance_enabled']!r}"
            )

        return cls(**dict(data))

    def __repr__(self) -> str:
        """Human-readable representation."""
        return (
            f"Configuration(deployment='{self.deployment_type}', "
            f"instances={self.instances_per_person}x{self.number_of_users}, "
            f"runtime={self.runtime_per_day}h, "
            f"mode={self.mode.value})"
        )

"""Domain-specific exceptions."""


class LabBudgetError(Exception):
    """Base exception for lab-budget."""

    pass


class InvalidConfigurationError(LabBudgetError):
    """Raised when configuration data is malformed or cannot be loaded."""

    pass


class InvalidInputError(LabBudgetError):
    """Raised by strict validation when an input would produce a non-finite result."""

    pass

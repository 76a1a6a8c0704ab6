"""
Application layer - session and export interface.

Provides high-level API around the cost model:
- BudgetSession - configuration + result kept in step
- load_configuration - JSON/YAML configuration files
- Export utilities - JSON, YAML, Markdown
"""

from lab_budget.application.session import BudgetSession, load_configuration
from lab_budget.application import export

__all__ = [
    "BudgetSession",
    "load_configuration",
    "export",
]

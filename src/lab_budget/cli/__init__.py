"""
Command-line interface for lab-budget.

Provides commands for estimating lab costs and listing deployment presets.
"""

from lab_budget.cli.main import main

__all__ = ["main"]
